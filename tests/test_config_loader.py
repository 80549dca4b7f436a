"""Tests for client configuration loading."""
import os

import pytest
from pydantic import ValidationError

from sns_client.domain.entities.client_config import ClientConfig
from sns_client.infra.common.errors import ConfigError
from sns_client.infra.configs.app_config_loader import load_app_config


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch):
    """Keep .env files out of the tests."""
    monkeypatch.setattr("sns_client.infra.configs.app_config_loader.load_env_file", lambda: None)


def test_load_local_config(monkeypatch):
    """Test local config points at LocalStack."""
    monkeypatch.delenv("AWS_ACCESS_KEY_ID", raising=False)
    monkeypatch.delenv("AWS_SECRET_ACCESS_KEY", raising=False)
    monkeypatch.delenv("SNS_ENDPOINT", raising=False)
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    
    config = load_app_config("local")
    
    assert config.access_key == "test"
    assert config.protocol == "http://"
    assert config.region_endpoints == {"us-east-1": "localhost:4566"}
    assert config.verify_ssl is False


def test_env_variable_selects_environment(monkeypatch):
    """Test ENV is used when no environment is passed."""
    monkeypatch.setenv("ENV", "production")
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "AKIDPROD")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "prod-secret")
    monkeypatch.setenv("AWS_REGION", "eu-west-1")
    monkeypatch.setenv("SNS_TIMEOUT", "10")
    
    config = load_app_config()
    
    assert config.access_key == "AKIDPROD"
    assert config.region == "eu-west-1"
    assert config.timeout == 10.0
    assert config.protocol == "https://"


def test_missing_credentials_rejected(monkeypatch):
    """Test staging without credentials fails."""
    monkeypatch.delenv("AWS_ACCESS_KEY_ID", raising=False)
    monkeypatch.delenv("AWS_SECRET_ACCESS_KEY", raising=False)
    
    with pytest.raises(ConfigError):
        load_app_config("staging")


def test_invalid_value_rejected(monkeypatch):
    """Test malformed numeric settings surface as ConfigError."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "ak")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "sk")
    monkeypatch.setenv("SNS_TIMEOUT", "soon")
    
    with pytest.raises(ConfigError):
        load_app_config("production")


def test_invalid_environment():
    """Test unknown environment names."""
    with pytest.raises(ConfigError):
        load_app_config("qa")


def test_client_config_hides_secret():
    """Test the secret key is not part of the repr."""
    config = ClientConfig(access_key="ak", secret_key="super-secret")
    
    assert "super-secret" not in repr(config)
    assert config.region == "us-east-1"


def test_client_config_requires_access_key():
    """Test required fields."""
    with pytest.raises(ValidationError):
        ClientConfig(secret_key="sk")


def test_env_file_values_do_not_override_environment(tmp_path, monkeypatch):
    """Test .env loading keeps existing variables."""
    from sns_client.infra.configs.env_loader import load_env_file
    
    env_file = tmp_path / ".env"
    env_file.write_text("SNS_TEST_ONLY_VALUE=from-file\nSNS_TEST_ONLY_OTHER=file-only\n")
    monkeypatch.delenv("AWS_LAMBDA_FUNCTION_NAME", raising=False)
    monkeypatch.delenv("ECS_CONTAINER_METADATA_URI", raising=False)
    monkeypatch.setenv("SNS_TEST_ONLY_VALUE", "from-env")
    monkeypatch.setenv("SNS_TEST_ONLY_OTHER", "")
    monkeypatch.delenv("SNS_TEST_ONLY_OTHER")
    
    assert load_env_file(env_file) is True
    
    assert os.environ["SNS_TEST_ONLY_VALUE"] == "from-env"
    assert os.environ["SNS_TEST_ONLY_OTHER"] == "file-only"


def test_env_file_skipped_in_lambda(tmp_path, monkeypatch):
    """Test .env files are ignored inside Lambda."""
    from sns_client.infra.configs.env_loader import load_env_file
    
    env_file = tmp_path / ".env"
    env_file.write_text("SNS_TEST_ONLY_LAMBDA=1\n")
    monkeypatch.setenv("AWS_LAMBDA_FUNCTION_NAME", "fn")
    
    assert load_env_file(env_file) is False
