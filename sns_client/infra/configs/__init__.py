"""Configuration loading."""
from sns_client.infra.configs.app_config_loader import load_app_config
from sns_client.infra.configs.env_loader import load_env_file

__all__ = ["load_app_config", "load_env_file"]
