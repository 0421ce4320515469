"""
Hashid Errors

Construction errors are raised eagerly, encode and decode errors only
when the codec runs in strict mode.
"""


class HashidError(ValueError):
    """Hashid Error"""


class MissingSaltError(HashidError):
    """Missing Salt Error"""


class InvalidAlphabetError(HashidError):
    """Invalid Alphabet Error"""


class InvalidMinLengthError(HashidError):
    """Invalid MinLength Error"""


class HashidEncodeError(HashidError):
    """Hashid Encode Error"""


class HashidDecodeError(HashidError):
    """Hashid Decode Error"""
