"""Production environment configuration."""
import os
from sns_client.domain.entities.client_config import ClientConfig

config = ClientConfig(
    access_key=os.getenv("AWS_ACCESS_KEY_ID", ""),
    secret_key=os.getenv("AWS_SECRET_ACCESS_KEY", ""),
    region=os.getenv("AWS_REGION") or os.getenv("AWS_DEFAULT_REGION", "us-east-1"),
    timeout=float(os.getenv("SNS_TIMEOUT", "30")),
)
