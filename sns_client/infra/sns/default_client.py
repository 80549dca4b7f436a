"""SNS query API client."""
import json
from typing import Any, Optional
from xml.etree import ElementTree as ET

from sns_client.domain.clients.base import SnsClient
from sns_client.domain.entities.http_response import HttpResponse
from sns_client.domain.entities.member_page import MemberPage
from sns_client.domain.services.permission_service import (
    PermissionInput,
    flatten_permissions,
    permission_params,
)
from sns_client.domain.services.signing_service import RequestSigner
from sns_client.infra.common import Clock, InvalidArgumentError, get_logger
from sns_client.infra.http.query_transport import QueryTransport
from sns_client.infra.sns.xml_responses import (
    extract_attributes,
    extract_member_page,
    extract_text,
    parse_success,
    raise_for_error,
)

logger = get_logger(__name__)


def _require(message: str, *values: Any) -> None:
    """Raise InvalidArgumentError unless every value is non-empty."""
    for value in values:
        if value is None or (isinstance(value, (str, bytes, list, tuple, dict)) and len(value) == 0):
            raise InvalidArgumentError(message)


def _bool_param(value: bool) -> str:
    return "true" if value else "false"


def _attribute_value(value: Any) -> str:
    """Render an attribute value; policies and other documents go out as JSON."""
    if isinstance(value, bool):
        return _bool_param(value)
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return str(value)


class DefaultSnsClient(SnsClient):
    """
    SnsClient speaking the SNS query API over signed GET requests.

    Each call validates its arguments, signs the request with Signature
    Version 2, sends it, and turns the XML response into plain values.
    """

    def __init__(
        self,
        access_key: str,
        secret_key: str,
        protocol: str,
        endpoint: str,
        transport: Optional[QueryTransport] = None,
        clock: Optional[Clock] = None,
    ):
        """
        Initialize SNS client.

        Args:
            access_key: AWS access key ID
            secret_key: AWS secret access key
            protocol: URL scheme including "://"
            endpoint: Endpoint host, e.g. sns.eu-west-1.amazonaws.com
            transport: HTTP transport (defaults to QueryTransport())
            clock: Timestamp source for signing (defaults to the shared clock)
        """
        self._access_key = access_key
        self._secret_key = secret_key
        self._protocol = protocol
        self._endpoint = endpoint
        self.transport = transport or QueryTransport()
        self.signer = RequestSigner(access_key, secret_key, endpoint, protocol, clock=clock)

    @property
    def access_key(self) -> str:
        return self._access_key

    @property
    def secret_key(self) -> str:
        return self._secret_key

    @property
    def protocol(self) -> str:
        return self._protocol

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def __repr__(self) -> str:
        return f"{type(self).__name__}(endpoint={self._endpoint!r}, access_key={self._access_key!r})"

    def _send(self, action: str, params: Optional[dict[str, str]] = None) -> tuple[HttpResponse, ET.Element]:
        """
        Sign and send an action, returning the response and its parsed success document.

        Raises:
            SnsServiceError: SNS returned an error document
            SnsApiError: Non-2xx without error document, malformed body, or transport failure
        """
        url = self.signer.sign(action, params)
        logger.info("Sending %s to %s", action, self._endpoint)
        response = self.transport.get(url)
        if not response.ok:
            logger.warning("%s failed with HTTP %s", action, response.status_code)
        raise_for_error(response)
        return response, parse_success(response)

    def _request(self, action: str, params: Optional[dict[str, str]] = None) -> ET.Element:
        return self._send(action, params)[1]

    def _request_field(self, action: str, params: dict[str, str], path: str) -> str:
        """Send an action and read one required field from its result."""
        response, root = self._send(action, params)
        return extract_text(root, path, response.status_code)

    def add_permission(self, topic_arn: str, label: str, permissions: Optional[PermissionInput] = None) -> bool:
        _require("Must supply TopicARN and a Label for this permission", topic_arn, label)
        params = {
            "TopicArn": topic_arn,
            "Label": label,
        }
        params.update(permission_params(flatten_permissions(permissions or {})))
        self._request("AddPermission", params)
        return True

    def confirm_subscription(
        self,
        topic_arn: str,
        token: str,
        authenticate_on_unsubscribe: Optional[bool] = None,
    ) -> str:
        _require("Must supply a TopicARN and a Token to confirm subscription", topic_arn, token)
        params = {
            "TopicArn": topic_arn,
            "Token": token,
        }
        if authenticate_on_unsubscribe is not None:
            params["AuthenticateOnUnsubscribe"] = _bool_param(authenticate_on_unsubscribe)
        return self._request_field("ConfirmSubscription", params, "ConfirmSubscriptionResult/SubscriptionArn")

    def create_topic(self, name: str) -> str:
        _require("Must supply a Name to create topic", name)
        return self._request_field("CreateTopic", {"Name": name}, "CreateTopicResult/TopicArn")

    def delete_topic(self, topic_arn: str) -> bool:
        _require("Must supply a TopicARN to delete a topic", topic_arn)
        self._request("DeleteTopic", {"TopicArn": topic_arn})
        return True

    def get_topic_attributes(self, topic_arn: str) -> dict[str, str]:
        _require("Must supply a TopicARN to get topic attributes", topic_arn)
        root = self._request("GetTopicAttributes", {"TopicArn": topic_arn})
        return extract_attributes(root, "GetTopicAttributesResult/Attributes")

    def list_subscriptions(self, next_token: Optional[str] = None) -> MemberPage:
        params = {}
        if next_token is not None:
            params["NextToken"] = next_token
        root = self._request("ListSubscriptions", params)
        return extract_member_page(root, "ListSubscriptionsResult", "Subscriptions")

    def list_subscriptions_by_topic(self, topic_arn: str, next_token: Optional[str] = None) -> MemberPage:
        _require("Must supply a TopicARN to show subscriptions to a topic", topic_arn)
        params = {"TopicArn": topic_arn}
        if next_token is not None:
            params["NextToken"] = next_token
        root = self._request("ListSubscriptionsByTopic", params)
        return extract_member_page(root, "ListSubscriptionsByTopicResult", "Subscriptions")

    def list_topics(self, next_token: Optional[str] = None) -> MemberPage:
        params = {}
        if next_token is not None:
            params["NextToken"] = next_token
        root = self._request("ListTopics", params)
        return extract_member_page(root, "ListTopicsResult", "Topics")

    def publish(
        self,
        topic_arn: str,
        message: str,
        subject: str = "",
        message_structure: str = "",
        message_group_id: Optional[str] = None,
        message_deduplication_id: Optional[str] = None,
    ) -> str:
        _require("Must supply a TopicARN and Message to publish to a topic", topic_arn, message)
        params = {
            "TopicArn": topic_arn,
            "Message": message,
        }
        if subject:
            params["Subject"] = subject
        if message_structure:
            params["MessageStructure"] = message_structure
        if message_group_id is not None:
            params["MessageGroupId"] = message_group_id
        if message_deduplication_id is not None:
            params["MessageDeduplicationId"] = message_deduplication_id
        return self._request_field("Publish", params, "PublishResult/MessageId")

    def remove_permission(self, topic_arn: str, label: str) -> bool:
        _require("Must supply a TopicARN and Label to remove a permission", topic_arn, label)
        self._request("RemovePermission", {"TopicArn": topic_arn, "Label": label})
        return True

    def set_topic_attributes(self, topic_arn: str, attr_name: str, attr_value: Any) -> bool:
        _require(
            "Must supply a TopicARN, AttributeName and AttributeValue to set a topic attribute",
            topic_arn,
            attr_name,
            attr_value,
        )
        self._request("SetTopicAttributes", {
            "TopicArn": topic_arn,
            "AttributeName": attr_name,
            "AttributeValue": _attribute_value(attr_value),
        })
        return True

    def subscribe(self, topic_arn: str, protocol: str, endpoint: str) -> str:
        _require("Must supply a TopicARN, Protocol and Endpoint to subscribe to a topic", topic_arn, protocol, endpoint)
        return self._request_field("Subscribe", {
            "TopicArn": topic_arn,
            "Protocol": protocol,
            "Endpoint": endpoint,
        }, "SubscribeResult/SubscriptionArn")

    def unsubscribe(self, subscription_arn: str) -> bool:
        _require("Must supply a SubscriptionARN to unsubscribe from a topic", subscription_arn)
        self._request("Unsubscribe", {"SubscriptionArn": subscription_arn})
        return True

    def create_platform_endpoint(
        self,
        platform_application_arn: str,
        token: str,
        user_data: Optional[str] = None,
    ) -> str:
        _require("Must supply a PlatformApplicationArn & Token to create platform endpoint", platform_application_arn, token)
        params = {
            "PlatformApplicationArn": platform_application_arn,
            "Token": token,
        }
        if user_data:
            params["CustomUserData"] = user_data
        return self._request_field("CreatePlatformEndpoint", params, "CreatePlatformEndpointResult/EndpointArn")

    def delete_endpoint(self, device_arn: str) -> bool:
        _require("Must supply a DeviceARN to remove platform endpoint", device_arn)
        self._request("DeleteEndpoint", {"EndpointArn": device_arn})
        return True

    def publish_to_endpoint(self, device_arn: str, message: str) -> str:
        _require("Must supply DeviceArn and Message", device_arn, message)
        return self._request_field("Publish", {
            "TargetArn": device_arn,
            "Message": message,
        }, "PublishResult/MessageId")
