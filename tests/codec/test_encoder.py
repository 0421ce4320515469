import pytest

from hashid_codec.alphabet import DEFAULT_ALPHABET, AlphabetPartition
from hashid_codec.decoder import decode, split, unhash_chunk
from hashid_codec.encoder import encode, hash_number, values_hash


SALT = 'this is my salt'


def test_hash_number():
    assert hash_number(500, DEFAULT_ALPHABET) == 'ie'
    assert hash_number(12546843121, DEFAULT_ALPHABET) == 'nRhrdB'
    assert hash_number(0, DEFAULT_ALPHABET) == 'a'
    assert hash_number(255, '0123456789abcdef') == 'ff'
    assert hash_number(16, '0123456789abcdef') == '10'


@pytest.mark.parametrize('number', [0, 1, 61, 62, 500, 2**31, 2**64 + 7])
def test_unhash_chunk(number):
    assert unhash_chunk(hash_number(number, DEFAULT_ALPHABET), DEFAULT_ALPHABET) == number


def test_unhash_chunk_invalid():
    with pytest.raises(ValueError):
        unhash_chunk('a-b', DEFAULT_ALPHABET)


def test_split():
    assert split('abc', 'x') == ['abc']
    assert split('xabcx', 'x') == ['', 'abc', '']
    assert split('axbyc', 'xy') == ['a', 'b', 'c']
    assert split('', 'x') == ['']


def test_split_special_characters():
    assert split('a]b^c-d\\e', ']^-\\') == ['a', 'b', 'c', 'd', 'e']
    assert split('abc', '') == ['abc']


def test_values_hash():
    assert values_hash([12345]) == 45
    assert values_hash([683, 94108, 123, 5]) == 683 % 100 + 94108 % 101 + 123 % 102 + 5 % 103


def test_encode_decode_functions():
    partition = AlphabetPartition.from_alphabet(DEFAULT_ALPHABET, SALT)
    assert encode((12345,), SALT, 0, partition) == 'NkK9'
    assert tuple(decode('NkK9', SALT, partition)) == (12345,)
    assert tuple(decode('', SALT, partition)) == ()


def test_lottery_is_first_char():
    partition = AlphabetPartition.from_alphabet(DEFAULT_ALPHABET, SALT)
    for numbers in [(1,), (99, 100), (2**40, 3, 3)]:
        value = encode(numbers, SALT, 0, partition)
        index = values_hash(numbers) % len(partition.alphabet)
        assert value[0] == partition.alphabet[index]
