"""
Salt driven consistent shuffle, the one primitive behind every alphabet
permutation of the codec.

>>> shuffle('anything really goes', 'this is my salt')
' eagnrlityas oelygnh'
>>> shuffle('abc', '')
'abc'
"""


def shuffle(sequence: str, salt: str) -> str:
    if not salt:
        return sequence
    salt_length = len(salt)
    chars = list(sequence)
    index = 0
    total = 0
    for i in range(len(chars) - 1, 0, -1):
        code = ord(salt[index])
        total += code
        j = (code + index + total) % i
        chars[i], chars[j] = chars[j], chars[i]
        index = (index + 1) % salt_length
    return ''.join(chars)
