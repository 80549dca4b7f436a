"""HTTP transport for signed query requests."""
import logging
import os
from pathlib import Path

import requests

from sns_client.domain.entities.http_response import HttpResponse
from sns_client.infra.common.errors import SnsApiError

logger = logging.getLogger(__name__)


def _get_cert_path() -> str | None:
    """
    Get path to custom certificate bundle if available.
    
    Returns:
        Path to certificate bundle or None if not found
    """
    cert_path = Path("/var/task/certs/cacert.pem")
    if cert_path.exists():
        return str(cert_path)
    
    cert_path_env = os.getenv("SSL_CERT_FILE")
    if cert_path_env and Path(cert_path_env).exists():
        return cert_path_env
    
    return None


class QueryTransport:
    """Sends signed GET requests and hands back status and body."""
    
    def __init__(self, timeout: float = 30.0, verify_ssl: bool = True):
        """
        Initialize transport.
        
        Args:
            timeout: Request timeout in seconds
            verify_ssl: Whether to verify SSL certificates
        """
        self.timeout = timeout
        self.verify_ssl = verify_ssl
    
    def _verify(self) -> bool | str:
        if not self.verify_ssl:
            import urllib3
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
            return False
        cert_path = _get_cert_path()
        if cert_path:
            logger.debug("Using custom certificate bundle: %s", cert_path)
            return cert_path
        return True
    
    def get(self, url: str) -> HttpResponse:
        """
        Issue a GET and read the full body.
        
        Raises:
            SnsApiError: If no response was received
        """
        try:
            with requests.get(url, timeout=self.timeout, verify=self._verify()) as response:
                return HttpResponse(status_code=response.status_code, body=response.content)
        except requests.RequestException as e:
            logger.warning("Request failed before a response arrived: %s", type(e).__name__)
            raise SnsApiError(None, f"Transport error: {type(e).__name__}") from e
