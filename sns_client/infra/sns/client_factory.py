"""SNS client factory."""
from typing import Optional

from sns_client.domain.entities.client_config import ClientConfig
from sns_client.infra.common import Clock
from sns_client.infra.http.query_transport import QueryTransport
from sns_client.infra.sns.default_client import DefaultSnsClient
from sns_client.infra.sns.extended_client import DefaultExtendedSnsClient

DEFAULT_PROTOCOL = "https://"

DEFAULT_REGION_ENDPOINTS = {
    "cn-north-1": "sns.cn-north-1.amazonaws.com.cn",
    "cn-northwest-1": "sns.cn-northwest-1.amazonaws.com.cn",
}


class ClientFactory:
    """Builds SNS clients from credentials and a region."""
    
    def __init__(self, region_endpoints: Optional[dict[str, str]] = None, clock: Optional[Clock] = None):
        """
        Initialize factory.
        
        Args:
            region_endpoints: Region -> endpoint host overrides. None uses the built-in table.
            clock: Timestamp source handed to created clients
        """
        self.region_endpoints = dict(DEFAULT_REGION_ENDPOINTS if region_endpoints is None else region_endpoints)
        self.clock = clock
    
    def endpoint_for_region(self, region: str) -> str:
        """Endpoint host for a region, falling back to sns.<region>.amazonaws.com."""
        if region in self.region_endpoints:
            return self.region_endpoints[region]
        return f"sns.{region}.amazonaws.com"
    
    def from_aws_credentials(
        self,
        access_key: str,
        secret_key: str,
        region: str,
        transport: Optional[QueryTransport] = None,
    ) -> DefaultSnsClient:
        """Build a client for a region."""
        return DefaultSnsClient(
            access_key,
            secret_key,
            DEFAULT_PROTOCOL,
            self.endpoint_for_region(region),
            transport=transport,
            clock=self.clock,
        )
    
    def extended_from_aws_credentials(
        self,
        access_key: str,
        secret_key: str,
        region: str,
        transport: Optional[QueryTransport] = None,
    ) -> DefaultExtendedSnsClient:
        """Build a client for a region with publish-and-create-topic support."""
        return DefaultExtendedSnsClient(self.from_aws_credentials(access_key, secret_key, region, transport))
    
    @classmethod
    def from_app_config(cls, config: ClientConfig, clock: Optional[Clock] = None) -> DefaultSnsClient:
        """Build a client from a ClientConfig, honouring its endpoint table, protocol, and transport settings."""
        factory = cls(config.region_endpoints, clock=clock)
        return DefaultSnsClient(
            config.access_key,
            config.secret_key,
            config.protocol,
            factory.endpoint_for_region(config.region),
            transport=QueryTransport(timeout=config.timeout, verify_ssl=config.verify_ssl),
            clock=clock,
        )
    
    @classmethod
    def extended_from_app_config(cls, config: ClientConfig, clock: Optional[Clock] = None) -> DefaultExtendedSnsClient:
        """Build an extended client from a ClientConfig."""
        return DefaultExtendedSnsClient(cls.from_app_config(config, clock=clock))
