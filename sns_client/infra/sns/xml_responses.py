"""Query API XML response parsing."""
from typing import Optional
from xml.etree import ElementTree as ET

from sns_client.domain.entities.http_response import HttpResponse
from sns_client.domain.entities.member_page import MemberPage
from sns_client.infra.common.errors import SnsApiError, SnsServiceError


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def parse_xml(body: bytes) -> Optional[ET.Element]:
    """
    Parse a response body, dropping XML namespaces from every tag.
    
    Returns:
        Root element, or None if the body is empty or not XML
    """
    if not body or not body.strip():
        return None
    try:
        root = ET.fromstring(body)
    except ET.ParseError:
        return None
    for element in root.iter():
        element.tag = _local_name(element.tag)
    return root


def find_error(root: Optional[ET.Element]) -> Optional[ET.Element]:
    """Locate the Error element of an error document (root, child, or Errors/Error)."""
    if root is None:
        return None
    if root.tag == "Error":
        return root
    error = root.find("Error")
    if error is not None:
        return error
    return root.find("Errors/Error")


def raise_for_error(response: HttpResponse) -> None:
    """
    Raise the matching error for a non-2xx response.
    
    Raises:
        SnsServiceError: Body carries an AWS error element
        SnsApiError: Body is empty, malformed, or has no error element
    """
    if response.ok:
        return
    error = find_error(parse_xml(response.body))
    if error is None:
        raise SnsApiError(response.status_code)
    raise SnsServiceError(
        code=(error.findtext("Code") or "").strip(),
        error_message=(error.findtext("Message") or "").strip(),
        status_code=response.status_code,
    )


def parse_success(response: HttpResponse) -> ET.Element:
    """Parse a 2xx body, raising SnsApiError if it is not XML."""
    root = parse_xml(response.body)
    if root is None:
        raise SnsApiError(response.status_code, "Malformed response body")
    return root


def extract_text(root: ET.Element, path: str, status_code: Optional[int] = None) -> str:
    """Read a required scalar field, e.g. PublishResult/MessageId."""
    element = root.find(path)
    if element is None:
        raise SnsApiError(status_code, f"Response has no {path}")
    return (element.text or "").strip()


def flatten_members(container: Optional[ET.Element]) -> list[dict[str, str]]:
    """Turn <member><Key>value</Key>...</member> children into plain dicts."""
    if container is None:
        return []
    return [
        {child.tag: (child.text or "").strip() for child in member}
        for member in container.findall("member")
    ]


def extract_member_page(root: ET.Element, result_tag: str, list_tag: str) -> MemberPage:
    """Read a list result with its optional NextToken."""
    result = root.find(result_tag)
    if result is None:
        return MemberPage()
    next_token = result.findtext("NextToken")
    return MemberPage(
        members=flatten_members(result.find(list_tag)),
        next_token=next_token.strip() if next_token and next_token.strip() else None,
    )


def extract_attributes(root: ET.Element, path: str) -> dict[str, str]:
    """Read an Attributes/entry key/value list into a dict."""
    return {
        (entry.findtext("key") or ""): (entry.findtext("value") or "")
        for entry in root.findall(f"{path}/entry")
    }
