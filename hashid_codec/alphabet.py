"""
Alphabet validation and partition.

The configured alphabet is split into three disjoint groups:

    +------------+------------------------------------------------+
    | separators | between the digit chunks of consecutive numbers |
    | guards     | at both ends of hashids shorter than min_length |
    | alphabet   | digit symbols of the per-number base conversion |
    +------------+------------------------------------------------+

The ratios below must not change, other implementations of the same
scheme rely on them to decode each other's hashids.
"""
import math
from typing import NamedTuple

from .errors import InvalidAlphabetError
from .shuffle import shuffle

DEFAULT_ALPHABET = 'abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ1234567890'
# letters kept apart from each other, so common curse words never show up
DEFAULT_SEPARATORS = 'cfhistuCFHISTU'
SEPARATOR_RATIO = 3.5
GUARD_RATIO = 12
MIN_ALPHABET_LENGTH = 16


def _ceil_ratio(dividend: int, divisor: float) -> int:
    return int(math.ceil(dividend / divisor))


def unique_alphabet(alphabet: str) -> str:
    """
    >>> unique_alphabet('aabcbd')
    'abcd'
    """
    return ''.join(dict.fromkeys(alphabet))


def validate_alphabet(alphabet: str) -> str:
    if not isinstance(alphabet, str):
        raise InvalidAlphabetError('alphabet must be a string')
    alphabet = unique_alphabet(alphabet)
    if any(char.isspace() for char in alphabet):
        raise InvalidAlphabetError('alphabet must not contain whitespace')
    if len(alphabet) < MIN_ALPHABET_LENGTH:
        raise InvalidAlphabetError(
            f'alphabet must contain at least {MIN_ALPHABET_LENGTH} unique characters')
    return alphabet


class AlphabetPartition(NamedTuple):
    alphabet: str
    separators: str
    guards: str

    @classmethod
    def from_alphabet(cls, alphabet: str, salt: str) -> 'AlphabetPartition':
        """Partition an already validated alphabet, deterministic for a given salt"""
        separators = ''.join(x for x in DEFAULT_SEPARATORS if x in alphabet)
        alphabet = ''.join(x for x in alphabet if x not in separators)
        separators = shuffle(separators, salt)

        min_separators = _ceil_ratio(len(alphabet), SEPARATOR_RATIO)
        if not separators or len(separators) < min_separators:
            if min_separators == 1:
                min_separators = 2
            missing = min_separators - len(separators)
            if missing > 0:
                separators += alphabet[:missing]
                alphabet = alphabet[missing:]

        alphabet = shuffle(alphabet, salt)
        num_guards = _ceil_ratio(len(alphabet), GUARD_RATIO)
        if len(alphabet) < 3:
            guards = separators[:num_guards]
            separators = separators[num_guards:]
        else:
            guards = alphabet[:num_guards]
            alphabet = alphabet[num_guards:]
        return cls(alphabet=alphabet, separators=separators, guards=guards)

    def __repr__(self):
        return '<{} alphabet={} separators={} guards={}>'.format(
            type(self).__name__, len(self.alphabet), len(self.separators), len(self.guards))
