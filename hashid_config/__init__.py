from .env import CONFIG, EnvConfig, load_env_config
