"""HTTP response entity."""
from pydantic import BaseModel


class HttpResponse(BaseModel):
    """Status and raw body of a query API response."""
    status_code: int
    body: bytes = b""
    
    @property
    def ok(self) -> bool:
        """Whether the status is in the 2xx range."""
        return self.status_code // 100 == 2
