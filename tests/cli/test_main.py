from click.testing import CliRunner

from hashid_cli.main import main


SALT = 'this is my salt'


def _invoke(*args):
    runner = CliRunner()
    return runner.invoke(main, ['--log-level', 'ERROR', *args])


def test_encode():
    result = _invoke('--salt', SALT, 'encode', '12345')
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == 'NkK9'


def test_encode_multiple_min_length():
    result = _invoke('--salt', SALT, 'encode', '683', '94108', '123', '5')
    assert result.stdout.strip() == 'aBMswoO2UB3Sj'
    result = _invoke('--salt', SALT, '--min-length', '8', 'encode', '1')
    assert result.stdout.strip() == 'gB0NV05e'


def test_encode_negative():
    result = _invoke('--salt', SALT, 'encode', '--', '-1')
    assert result.exit_code == 2


def test_decode():
    result = _invoke('--salt', SALT, 'decode', 'aBMswoO2UB3Sj')
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == '683,94108,123,5'


def test_decode_wrong_salt():
    result = _invoke('--salt', 'not the same salt', 'decode', 'NkK9')
    assert result.exit_code == 1
    assert result.stdout.strip() == ''


def test_salt_from_env(clean_env):
    clean_env.setenv('HASHID_SALT', SALT)
    result = _invoke('encode', '12345')
    assert result.stdout.strip() == 'NkK9'


def test_missing_salt(clean_env):
    result = _invoke('encode', '12345')
    assert result.exit_code == 2
    assert 'HASHID_SALT' in result.output


def test_invalid_alphabet():
    result = _invoke('--salt', SALT, '--alphabet', 'abc', 'encode', '1')
    assert result.exit_code == 2
    assert 'alphabet' in result.output


def test_hex():
    result = _invoke('--salt', SALT, 'encode-hex', 'deadbeef')
    assert result.exit_code == 0, result.output
    value = result.stdout.strip()
    result = _invoke('--salt', SALT, 'decode-hex', value)
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == 'deadbeef'


def test_hex_invalid():
    result = _invoke('--salt', SALT, 'encode-hex', 'xyz')
    assert result.exit_code == 2
    result = _invoke('--salt', SALT, 'decode-hex', 'NkK8')
    assert result.exit_code == 1


def test_inspect():
    result = _invoke('--salt', SALT, 'inspect')
    assert result.exit_code == 0, result.output
    assert 'separators: CFHISTUcfhistu' in result.stdout
    assert 'alphabet:   44 characters' in result.stdout
    assert SALT not in result.output
