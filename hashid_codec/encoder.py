from typing import Sequence

from .alphabet import AlphabetPartition
from .shuffle import shuffle


def values_hash(numbers: Sequence[int]) -> int:
    return sum(number % (i + 100) for i, number in enumerate(numbers))


def hash_number(number: int, alphabet: str) -> str:
    """
    Positional base conversion, most significant digit first.

    >>> hash_number(500, 'abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ1234567890')
    'ie'
    >>> hash_number(0, 'abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ1234567890')
    'a'
    """
    base = len(alphabet)
    digits = []
    while True:
        number, rem = divmod(number, base)
        digits.append(alphabet[rem])
        if not number:
            break
    return ''.join(reversed(digits))


def _ensure_min_length(
    hashid: str, min_length: int, alphabet: str, guards: str, lottery_hash: int,
) -> str:
    num_guards = len(guards)
    guard_index = (lottery_hash + ord(hashid[0])) % num_guards
    hashid = guards[guard_index] + hashid
    if len(hashid) < min_length:
        guard_index = (lottery_hash + ord(hashid[2])) % num_guards
        hashid += guards[guard_index]

    half = len(alphabet) // 2
    while len(hashid) < min_length:
        alphabet = shuffle(alphabet, alphabet)
        hashid = alphabet[half:] + hashid + alphabet[:half]
        excess = len(hashid) - min_length
        if excess > 0:
            start = excess // 2
            hashid = hashid[start:start + min_length]
    return hashid


def encode(numbers: Sequence[int], salt: str, min_length: int, partition: AlphabetPartition) -> str:
    """
    Encode already validated non-negative integers. The first character is
    the lottery, it seeds the alphabet shuffle of every number chunk.
    """
    alphabet = partition.alphabet
    separators = partition.separators
    lottery_hash = values_hash(numbers)
    lottery = alphabet[lottery_hash % len(alphabet)]
    parts = [lottery]
    last_index = len(numbers) - 1
    for i, number in enumerate(numbers):
        alphabet_salt = (lottery + salt + alphabet)[:len(alphabet)]
        alphabet = shuffle(alphabet, alphabet_salt)
        chunk = hash_number(number, alphabet)
        parts.append(chunk)
        if i < last_index:
            separator_index = number % (ord(chunk[0]) + i) % len(separators)
            parts.append(separators[separator_index])
    hashid = ''.join(parts)
    if len(hashid) >= min_length:
        return hashid
    return _ensure_min_length(hashid, min_length, alphabet, partition.guards, lottery_hash)
