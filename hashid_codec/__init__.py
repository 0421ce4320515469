from .alphabet import DEFAULT_ALPHABET, AlphabetPartition
from .errors import (
    HashidError,
    MissingSaltError,
    InvalidAlphabetError,
    InvalidMinLengthError,
    HashidEncodeError,
    HashidDecodeError,
)
from .hashid import Hashid, SALT_ENV_KEY
from .shuffle import shuffle
