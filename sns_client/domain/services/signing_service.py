"""AWS Signature Version 2 signing service."""
import base64
import hashlib
import hmac
import re
from typing import Mapping, Optional
from urllib.parse import quote

from sns_client.infra.common.clock import Clock, get_clock

SIGNATURE_VERSION = "2"
SIGNATURE_METHOD = "HmacSHA256"
HTTP_METHOD = "GET"

_DIGITS = re.compile(r"(\d+)")


def natural_sort_key(value: str) -> list:
    """
    Sort key ordering digit runs by numeric value.
    
    Text and number chunks alternate from index 0, so two keys never
    compare a str against an int.
    """
    return [int(chunk) if index % 2 else chunk for index, chunk in enumerate(_DIGITS.split(value))]


def rfc3986_encode(value: str) -> str:
    """Percent-encode everything except RFC 3986 unreserved characters."""
    return quote(value, safe="-_.~")


def canonical_query_string(params: Mapping[str, str]) -> str:
    """Build the sorted, encoded query string that gets signed."""
    return "&".join(
        f"{key}={rfc3986_encode(str(params[key]))}"
        for key in sorted(params, key=natural_sort_key)
    )


def string_to_sign(host: str, canonical_query: str, uri: str = "") -> str:
    """Build the request description the signature is computed over."""
    return f"{HTTP_METHOD}\n{host}\n{uri}/\n{canonical_query}"


def compute_signature(secret_key: str, message: str) -> str:
    """Base64 of the raw HMAC-SHA256 digest."""
    digest = hmac.new(secret_key.encode("utf-8"), message.encode("utf-8"), hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


class RequestSigner:
    """Turns an action and its parameters into a signed query URL."""
    
    def __init__(
        self,
        access_key: str,
        secret_key: str,
        host: str,
        protocol: str = "https://",
        clock: Optional[Clock] = None,
    ):
        """
        Initialize request signer.
        
        Args:
            access_key: AWS access key ID
            secret_key: AWS secret access key
            host: Endpoint host, e.g. sns.us-east-1.amazonaws.com
            protocol: URL scheme including "://"
            clock: Timestamp source (defaults to the shared clock)
        """
        self.access_key = access_key
        self.secret_key = secret_key
        self.host = host
        self.protocol = protocol
        self._clock = clock
    
    @property
    def clock(self) -> Clock:
        return self._clock or get_clock()
    
    def signed_params(self, action: str, params: Optional[Mapping[str, str]] = None) -> dict[str, str]:
        """
        Add auth parameters and the signature to a parameter set.
        
        Args:
            action: SNS action name, e.g. Publish
            params: Operation specific parameters
            
        Returns:
            New dict in canonical order with Signature as the last entry
        """
        payload = {key: str(value) for key, value in (params or {}).items()}
        payload["Action"] = action
        payload["AWSAccessKeyId"] = self.access_key
        payload["Timestamp"] = self.clock.aws_timestamp()
        payload["SignatureVersion"] = SIGNATURE_VERSION
        payload["SignatureMethod"] = SIGNATURE_METHOD
        
        ordered = {key: payload[key] for key in sorted(payload, key=natural_sort_key)}
        ordered["Signature"] = compute_signature(
            self.secret_key,
            string_to_sign(self.host, canonical_query_string(ordered)),
        )
        return ordered
    
    def sign(self, action: str, params: Optional[Mapping[str, str]] = None) -> str:
        """
        Build the signed URL for an action.
        
        The transmitted query uses the same encoding and order as the signed
        string, with the signature appended last.
        """
        signed = self.signed_params(action, params)
        signature = signed.pop("Signature")
        query = canonical_query_string(signed)
        return f"{self.protocol}{self.host}/?{query}&Signature={rfc3986_encode(signature)}"
