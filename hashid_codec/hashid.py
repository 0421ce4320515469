"""
>>> HASH_ID = Hashid(salt='this is my salt')
>>> HASH_ID.encode(12345)
'NkK9'
>>> HASH_ID.decode('NkK9')
(12345,)
>>> Hashid(salt='not the same salt').decode('NkK9')
()
"""
import logging
import os
import re
from typing import Tuple

from .alphabet import DEFAULT_ALPHABET, AlphabetPartition, validate_alphabet
from .decoder import decode as _decode
from .encoder import encode as _encode
from .errors import (
    HashidDecodeError,
    HashidEncodeError,
    InvalidMinLengthError,
    MissingSaltError,
)

LOG = logging.getLogger(__name__)

SALT_ENV_KEY = 'HASHID_SALT'
HEX_CHUNK_SIZE = 12
RE_HEX = re.compile(r"[0-9a-fA-F]+")


def _is_uint(number) -> bool:
    return isinstance(number, int) and not isinstance(number, bool) and number >= 0


def _resolve_salt(salt: str, salt_env: str) -> str:
    if salt is None and salt_env:
        salt = os.environ.get(salt_env)
    if not salt:
        raise MissingSaltError(
            f'salt is required, pass it explicitly or set the {salt_env} environment variable')
    if not isinstance(salt, str):
        raise MissingSaltError('salt must be a string')
    return salt


def _validate_min_length(min_length) -> int:
    if not isinstance(min_length, int) or isinstance(min_length, bool):
        raise InvalidMinLengthError('min_length must be an integer')
    if min_length < 0:
        raise InvalidMinLengthError('min_length must not be negative')
    return min_length


class Hashid:
    """
    Encode non-negative integers into short salted strings and back.

    Configuration is validated and the alphabet partition is computed once,
    instances are immutable afterwards and can be shared between threads.
    Encode returns '' and decode returns () on bad input, unless strict
    is set, then HashidEncodeError and HashidDecodeError are raised.
    """

    __slots__ = ('_salt', '_min_length', '_partition', '_strict')

    def __init__(
        self,
        salt: str = None,
        min_length: int = 0,
        alphabet: str = DEFAULT_ALPHABET,
        *,
        salt_env: str = SALT_ENV_KEY,
        strict: bool = False,
    ):
        salt = _resolve_salt(salt, salt_env)
        min_length = _validate_min_length(min_length)
        alphabet = validate_alphabet(alphabet)
        partition = AlphabetPartition.from_alphabet(alphabet, salt)
        object.__setattr__(self, '_salt', salt)
        object.__setattr__(self, '_min_length', min_length)
        object.__setattr__(self, '_partition', partition)
        object.__setattr__(self, '_strict', bool(strict))
        LOG.debug('hashid codec ready: %r min_length=%d', partition, min_length)

    @classmethod
    def from_config(cls, config, **kwargs) -> 'Hashid':
        """Build from hashid_config.EnvConfig, kwargs override config values"""
        params = dict(
            salt=config.salt or None,
            min_length=config.min_length,
            alphabet=config.alphabet or DEFAULT_ALPHABET,
        )
        params.update(kwargs)
        return cls(**params)

    def __setattr__(self, name, value):
        raise AttributeError(f'{type(self).__name__!r} object is immutable')

    def __repr__(self):
        return '<{} min_length={} alphabet={} strict={}>'.format(
            type(self).__name__, self._min_length,
            len(self._partition.alphabet), self._strict)

    @property
    def min_length(self) -> int:
        return self._min_length

    @property
    def partition(self) -> AlphabetPartition:
        return self._partition

    @property
    def strict(self) -> bool:
        return self._strict

    def _encode_error(self, message: str) -> str:
        if self._strict:
            raise HashidEncodeError(message)
        return ''

    def _decode_error(self, message: str) -> tuple:
        LOG.debug('hashid decode rejected: %s', message)
        if self._strict:
            raise HashidDecodeError(message)
        return ()

    def encode(self, *numbers) -> str:
        """
        Accept numbers as positional arguments or as a single iterable:

        >>> h = Hashid(salt='this is my salt')
        >>> h.encode(683, 94108, 123, 5) == h.encode([683, 94108, 123, 5])
        True
        """
        if len(numbers) == 1 and not isinstance(numbers[0], int):
            try:
                numbers = tuple(numbers[0])
            except TypeError:
                return self._encode_error('numbers must be integers')
        if not numbers:
            return self._encode_error('no numbers to encode')
        if not all(_is_uint(x) for x in numbers):
            return self._encode_error('numbers must be non-negative integers')
        return _encode(numbers, self._salt, self._min_length, self._partition)

    def decode(self, hashid: str) -> Tuple[int, ...]:
        if not hashid or not isinstance(hashid, str):
            return self._decode_error('hashid must be a non-empty string')
        try:
            numbers = tuple(_decode(hashid, self._salt, self._partition))
        except ValueError:
            return self._decode_error(f'invalid character in hashid {hashid!r}')
        if not numbers or _encode(numbers, self._salt, self._min_length, self._partition) != hashid:
            return self._decode_error(f'hashid {hashid!r} does not match configuration')
        return numbers

    def encode_hex(self, hex_str: str) -> str:
        """
        Encode a hex string, in chunks of 12 digits each prefixed with 1 so
        leading zeros survive.
        """
        if not isinstance(hex_str, str) or not RE_HEX.fullmatch(hex_str):
            return self._encode_error(f'invalid hex string {hex_str!r}')
        numbers = [
            int('1' + hex_str[i:i + HEX_CHUNK_SIZE], 16)
            for i in range(0, len(hex_str), HEX_CHUNK_SIZE)
        ]
        return self.encode(numbers)

    def decode_hex(self, hashid: str) -> str:
        return ''.join('{:x}'.format(x)[1:] for x in self.decode(hashid))

