"""Tests for query API XML response parsing."""
import pytest

from sns_client.domain.entities.http_response import HttpResponse
from sns_client.infra.common.errors import SnsApiError, SnsServiceError
from sns_client.infra.sns.xml_responses import (
    extract_attributes,
    extract_member_page,
    extract_text,
    flatten_members,
    parse_success,
    parse_xml,
    raise_for_error,
)


NS = 'xmlns="http://sns.amazonaws.com/doc/2010-03-31/"'


def test_parse_xml_strips_namespace():
    """Test namespaced documents are addressable by local names."""
    root = parse_xml(
        f"<CreateTopicResponse {NS}><CreateTopicResult><TopicArn>arn:aws:sns:us-east-1:1:t</TopicArn>"
        "</CreateTopicResult></CreateTopicResponse>".encode()
    )
    
    assert root.tag == "CreateTopicResponse"
    assert extract_text(root, "CreateTopicResult/TopicArn") == "arn:aws:sns:us-east-1:1:t"


@pytest.mark.parametrize("body", [b"", b"   ", b"not xml", b"<unclosed>"])
def test_parse_xml_returns_none_for_unparseable(body):
    """Test empty or malformed bodies."""
    assert parse_xml(body) is None


def test_raise_for_error_passes_2xx():
    """Test success responses raise nothing."""
    raise_for_error(HttpResponse(status_code=200, body=b""))
    raise_for_error(HttpResponse(status_code=204, body=b""))


def test_raise_for_error_root_error_element():
    """Test a bare Error document."""
    body = b"<Error><Code>NotFound</Code><Message>Topic does not exist</Message></Error>"
    
    with pytest.raises(SnsServiceError) as exc_info:
        raise_for_error(HttpResponse(status_code=404, body=body))
    
    error = exc_info.value
    assert error.code == "NotFound"
    assert error.error_message == "Topic does not exist"
    assert error.status_code == 404
    assert error.is_not_found is True
    assert str(error) == "NotFound: Topic does not exist"


def test_raise_for_error_error_response_document():
    """Test the standard ErrorResponse/Error layout."""
    body = (
        f"<ErrorResponse {NS}><Error><Type>Sender</Type><Code>InvalidParameter</Code>"
        "<Message>Invalid parameter: TopicArn</Message></Error>"
        "<RequestId>abc</RequestId></ErrorResponse>"
    ).encode()
    
    with pytest.raises(SnsServiceError) as exc_info:
        raise_for_error(HttpResponse(status_code=400, body=body))
    
    assert exc_info.value.code == "InvalidParameter"
    assert exc_info.value.status_code == 400
    assert exc_info.value.is_not_found is False


def test_raise_for_error_nested_errors_element():
    """Test the Response/Errors/Error layout."""
    body = b"<Response><Errors><Error><Code>AuthFailure</Code><Message>Bad signature</Message></Error></Errors></Response>"
    
    with pytest.raises(SnsServiceError) as exc_info:
        raise_for_error(HttpResponse(status_code=403, body=body))
    
    assert exc_info.value.code == "AuthFailure"
    assert exc_info.value.error_message == "Bad signature"


@pytest.mark.parametrize("body", [b"", b"<html>oops", b"<Response><Other/></Response>"])
def test_raise_for_error_without_error_element(body):
    """Test non-2xx without an error element raises an API error with status only."""
    with pytest.raises(SnsApiError) as exc_info:
        raise_for_error(HttpResponse(status_code=502, body=body))
    
    assert exc_info.value.status_code == 502
    assert not isinstance(exc_info.value, SnsServiceError)


def test_parse_success_rejects_malformed_body():
    """Test a 2xx with garbage body."""
    with pytest.raises(SnsApiError):
        parse_success(HttpResponse(status_code=200, body=b"garbage"))


def test_extract_text_missing_field():
    """Test a missing scalar is reported."""
    root = parse_xml(b"<PublishResponse><PublishResult/></PublishResponse>")
    
    with pytest.raises(SnsApiError):
        extract_text(root, "PublishResult/MessageId")


def test_flatten_members():
    """Test member elements become dicts."""
    root = parse_xml(
        b"<Topics><member><TopicArn>arn:1</TopicArn></member>"
        b"<member><TopicArn>arn:2</TopicArn></member></Topics>"
    )
    
    assert flatten_members(root) == [{"TopicArn": "arn:1"}, {"TopicArn": "arn:2"}]
    assert flatten_members(None) == []


def test_extract_member_page_with_next_token():
    """Test list result with pagination token."""
    root = parse_xml(
        f"<ListSubscriptionsResponse {NS}><ListSubscriptionsResult><Subscriptions>"
        "<member><TopicArn>arn:t</TopicArn><Protocol>email</Protocol>"
        "<SubscriptionArn>arn:s</SubscriptionArn><Owner>123</Owner><Endpoint>a@b.c</Endpoint></member>"
        "</Subscriptions><NextToken>tok</NextToken></ListSubscriptionsResult></ListSubscriptionsResponse>".encode()
    )
    
    page = extract_member_page(root, "ListSubscriptionsResult", "Subscriptions")
    
    assert page.next_token == "tok"
    assert page.members == [{
        "TopicArn": "arn:t",
        "Protocol": "email",
        "SubscriptionArn": "arn:s",
        "Owner": "123",
        "Endpoint": "a@b.c",
    }]


def test_extract_member_page_without_next_token():
    """Test the last page has no token."""
    root = parse_xml(b"<R><ListTopicsResult><Topics/></ListTopicsResult></R>")
    
    page = extract_member_page(root, "ListTopicsResult", "Topics")
    
    assert page.members == []
    assert page.next_token is None


def test_extract_attributes():
    """Test attribute entries become a dict."""
    root = parse_xml(
        f"<GetTopicAttributesResponse {NS}><GetTopicAttributesResult><Attributes>"
        "<entry><key>Owner</key><value>123456789012</value></entry>"
        "<entry><key>DisplayName</key><value>My Topic</value></entry>"
        "</Attributes></GetTopicAttributesResult></GetTopicAttributesResponse>".encode()
    )
    
    assert extract_attributes(root, "GetTopicAttributesResult/Attributes") == {
        "Owner": "123456789012",
        "DisplayName": "My Topic",
    }
