"""Tests for the SNS client factory."""
from sns_client.domain.entities.client_config import ClientConfig
from sns_client.infra.sns.client_factory import ClientFactory
from sns_client.infra.sns.default_client import DefaultSnsClient
from sns_client.infra.sns.extended_client import DefaultExtendedSnsClient


def test_constructs_with_endpoint_from_override_table():
    """Test custom region table."""
    factory = ClientFactory({"test-region": "test-endpoint"})
    
    client = factory.from_aws_credentials("access-key", "secret-key", "test-region")
    
    assert client.endpoint == "test-endpoint"


def test_constructs_with_fallback_endpoint_for_unknown_region():
    """Test unmapped region pattern."""
    client = ClientFactory().from_aws_credentials("access-key", "secret-key", "us-west-2")
    
    assert isinstance(client, DefaultSnsClient)
    assert client.endpoint == "sns.us-west-2.amazonaws.com"
    assert client.protocol == "https://"
    assert client.access_key == "access-key"
    assert client.secret_key == "secret-key"


def test_china_regions_have_own_endpoints():
    """Test the built-in China region overrides."""
    factory = ClientFactory()
    
    assert factory.endpoint_for_region("cn-north-1") == "sns.cn-north-1.amazonaws.com.cn"
    assert factory.endpoint_for_region("cn-northwest-1") == "sns.cn-northwest-1.amazonaws.com.cn"


def test_extended_from_aws_credentials():
    """Test extended client wraps a default client."""
    client = ClientFactory().extended_from_aws_credentials("ak", "sk", "eu-west-1")
    
    assert isinstance(client, DefaultExtendedSnsClient)
    assert isinstance(client.client, DefaultSnsClient)
    assert client.endpoint == "sns.eu-west-1.amazonaws.com"


def test_from_app_config():
    """Test client built from configuration."""
    config = ClientConfig(
        access_key="ak",
        secret_key="sk",
        region="local",
        protocol="http://",
        timeout=5,
        verify_ssl=False,
        region_endpoints={"local": "localhost:4566"},
    )
    
    client = ClientFactory.from_app_config(config)
    
    assert client.endpoint == "localhost:4566"
    assert client.protocol == "http://"
    assert client.transport.timeout == 5
    assert client.transport.verify_ssl is False


def test_extended_from_app_config():
    """Test extended client from configuration."""
    config = ClientConfig(access_key="ak", secret_key="sk", region="cn-north-1")
    
    client = ClientFactory.extended_from_app_config(config)
    
    assert isinstance(client, DefaultExtendedSnsClient)
    assert client.endpoint == "sns.cn-north-1.amazonaws.com.cn"
