import os.path
import sys

from dotenv import load_dotenv
from validr import Compiler, Invalid, T, fields, modelclass

from hashid_codec.alphabet import validate_alphabet
from hashid_codec.errors import InvalidAlphabetError

ENV_PREFIX = 'HASHID_'
ENV_CONFIG_FILE = 'HASHID_CONFIG'


compiler = Compiler()


@modelclass(compiler=compiler)
class ConfigModel:
    pass


class EnvConfig(ConfigModel):
    debug: bool = T.bool.default(False).desc('debug')
    log_level: str = T.enum('DEBUG,INFO,WARNING,ERROR').default('INFO')
    salt: str = T.str.optional.desc('hashid salt, keep it secret')
    alphabet: str = T.str.optional.desc('default alphanumeric alphabet if empty')
    min_length: int = T.int.min(0).default(0).desc('minimum hashid length')

    def __post_init__(self):
        if self.alphabet:
            try:
                validate_alphabet(self.alphabet)
            except InvalidAlphabetError as ex:
                raise Invalid(str(ex)) from ex
        if self.debug:
            self.log_level = 'DEBUG'

    @property
    def has_salt(self) -> bool:
        return bool(self.salt)


def load_env_config() -> EnvConfig:
    envfile_path = os.getenv(ENV_CONFIG_FILE)
    if envfile_path:
        envfile_path = os.path.abspath(os.path.expanduser(envfile_path))
        print(f'* Load envfile at {envfile_path}', file=sys.stderr)
        load_dotenv(envfile_path)
    configs = {}
    for name in fields(EnvConfig):
        key = (ENV_PREFIX + name).upper()
        configs[name] = os.environ.get(key, None)
    return EnvConfig(configs)


CONFIG = load_env_config()
