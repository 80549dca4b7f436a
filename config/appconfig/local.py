"""Local environment configuration (LocalStack)."""
import os
from sns_client.domain.entities.client_config import ClientConfig

config = ClientConfig(
    access_key=os.getenv("AWS_ACCESS_KEY_ID", "test"),
    secret_key=os.getenv("AWS_SECRET_ACCESS_KEY", "test"),
    region=os.getenv("AWS_DEFAULT_REGION", "us-east-1"),
    protocol="http://",
    region_endpoints={
        os.getenv("AWS_DEFAULT_REGION", "us-east-1"): os.getenv("SNS_ENDPOINT", "localhost:4566"),
    },
    verify_ssl=False,
)
