"""Client configuration loader."""
import importlib
import os
import sys
from typing import Optional

from sns_client.domain.entities.client_config import ClientConfig
from sns_client.infra.common.errors import ConfigError
from sns_client.infra.configs.env_loader import load_env_file

ENVIRONMENTS = ("local", "staging", "production")


def load_app_config(env: Optional[str] = None) -> ClientConfig:
    """
    Load client configuration for environment.
    
    Args:
        env: Environment name (local, staging, production).
             If None, reads from ENV environment variable.
        
    Returns:
        ClientConfig instance
        
    Raises:
        ConfigError: If environment is unknown, the config module is missing,
            or credentials are not set
    """
    load_env_file()
    
    if env is None:
        env = os.getenv("ENV", "local")
    
    if env not in ENVIRONMENTS:
        raise ConfigError(f"Invalid environment: {env}. Must be one of: {', '.join(ENVIRONMENTS)}")
    
    module_name = f"config.appconfig.{env}"
    try:
        if module_name in sys.modules:
            config_module = importlib.reload(sys.modules[module_name])
        else:
            config_module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigError(f"Config module not found: {module_name}") from e
    except ValueError as e:
        raise ConfigError(f"Invalid client config in {module_name}: {e}") from e
    
    config: ClientConfig = config_module.config
    if not config.access_key or not config.secret_key:
        raise ConfigError(f"Missing AWS credentials for environment: {env}")
    return config
