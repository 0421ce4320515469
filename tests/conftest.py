import pytest

from hashid_codec import Hashid


SALT = 'this is my salt'

ENV_KEYS = [
    'HASHID_CONFIG',
    'HASHID_SALT',
    'HASHID_ALPHABET',
    'HASHID_MIN_LENGTH',
    'HASHID_LOG_LEVEL',
    'HASHID_DEBUG',
]


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so monkeypatch also undoes variables set later by dotenv
    for key in ENV_KEYS:
        monkeypatch.setenv(key, '')
        monkeypatch.delenv(key)
    return monkeypatch


@pytest.fixture
def hashid():
    return Hashid(salt=SALT)
