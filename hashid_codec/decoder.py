import re
from typing import Iterator

from .alphabet import AlphabetPartition
from .shuffle import shuffle


def split(text: str, splitters: str) -> list:
    """
    Split on any of the splitter characters, keeping empty parts.

    >>> split('aXbYc', 'XY')
    ['a', 'b', 'c']
    >>> split('Xab', 'XY')
    ['', 'ab']
    """
    if not splitters:
        return [text]
    return re.split('[%s]' % re.escape(splitters), text)


def unhash_chunk(chunk: str, alphabet: str) -> int:
    """Reverse of the positional base conversion, ValueError on unknown characters"""
    base = len(alphabet)
    number = 0
    for char in chunk:
        number = number * base + alphabet.index(char)
    return number


def decode(hashid: str, salt: str, partition: AlphabetPartition) -> Iterator[int]:
    """
    Yield the candidate numbers of a hashid. The result is unverified, caller
    must encode it again and compare with the input.
    """
    parts = split(hashid, partition.guards)
    body = parts[1] if 2 <= len(parts) <= 3 else parts[0]
    if not body:
        return
    lottery, body = body[0], body[1:]
    alphabet = partition.alphabet
    for chunk in split(body, partition.separators):
        alphabet_salt = (lottery + salt + alphabet)[:len(alphabet)]
        alphabet = shuffle(alphabet, alphabet_salt)
        yield unhash_chunk(chunk, alphabet)
