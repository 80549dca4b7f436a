"""Client configuration entity."""
from pydantic import BaseModel, Field


class ClientConfig(BaseModel):
    """Configuration for building an SNS client."""
    access_key: str
    secret_key: str = Field(repr=False)
    region: str = "us-east-1"
    protocol: str = "https://"
    timeout: float = 30.0
    """Seconds to wait for SNS before giving up on a request."""
    verify_ssl: bool = True
    region_endpoints: dict[str, str] | None = None
    """Overrides for the region -> endpoint host table. None uses the built-in table."""
