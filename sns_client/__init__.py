"""Signed query API client for Amazon SNS."""
from sns_client.domain.clients.base import SnsClient, ExtendedSnsClient
from sns_client.domain.entities.client_config import ClientConfig
from sns_client.domain.entities.member_page import MemberPage
from sns_client.domain.entities.permission import Permission
from sns_client.infra.common.errors import (
    SnsClientError,
    ConfigError,
    InvalidArgumentError,
    SnsRequestError,
    SnsServiceError,
    SnsApiError,
)
from sns_client.infra.common.logger import setup_logging
from sns_client.infra.configs.app_config_loader import load_app_config
from sns_client.infra.sns.client_factory import ClientFactory
from sns_client.infra.sns.default_client import DefaultSnsClient
from sns_client.infra.sns.extended_client import DefaultExtendedSnsClient

__all__ = [
    "SnsClient",
    "ExtendedSnsClient",
    "ClientConfig",
    "MemberPage",
    "Permission",
    "SnsClientError",
    "ConfigError",
    "InvalidArgumentError",
    "SnsRequestError",
    "SnsServiceError",
    "SnsApiError",
    "setup_logging",
    "load_app_config",
    "ClientFactory",
    "DefaultSnsClient",
    "DefaultExtendedSnsClient",
]
