"""SNS client decorator that creates missing topics on publish."""
from typing import Any, Optional

from sns_client.domain.clients.base import ExtendedSnsClient, SnsClient
from sns_client.domain.entities.member_page import MemberPage
from sns_client.domain.services.permission_service import PermissionInput
from sns_client.infra.common import SnsServiceError, get_logger

logger = get_logger(__name__)


def topic_name_from_arn(arn: str) -> str:
    """Last colon-separated segment of an ARN."""
    return arn.split(":")[-1]


class DefaultExtendedSnsClient(ExtendedSnsClient):
    """Wraps any SnsClient and delegates every operation to it."""
    
    def __init__(self, client: SnsClient):
        self.client = client
    
    def publish_and_create_topic_if_needed(
        self,
        topic_arn: str,
        message: str,
        subject: str = "",
        message_structure: str = "",
    ) -> str:
        """
        Publish to a topic, creating it when SNS reports it missing.
        
        Creation is attempted at most once; any error other than a
        not-found service error propagates unchanged.
        
        Args:
            topic_arn: Topic ARN; its last segment names the topic to create
            message: Message body
            subject: Subject line (optional)
            message_structure: "json" for per-protocol messages (optional)
            
        Returns:
            Message ID
        """
        try:
            return self.publish(topic_arn, message, subject, message_structure)
        except SnsServiceError as e:
            if not e.is_not_found:
                raise
            name = topic_name_from_arn(topic_arn)
            logger.info("Topic %s not found, creating it before publishing", name)
            arn = self.create_topic(name)
            return self.publish(arn, message, subject, message_structure)
    
    @property
    def access_key(self) -> str:
        return self.client.access_key
    
    @property
    def secret_key(self) -> str:
        return self.client.secret_key
    
    @property
    def protocol(self) -> str:
        return self.client.protocol
    
    @property
    def endpoint(self) -> str:
        return self.client.endpoint
    
    def add_permission(self, topic_arn: str, label: str, permissions: Optional[PermissionInput] = None) -> bool:
        return self.client.add_permission(topic_arn, label, permissions)
    
    def confirm_subscription(
        self,
        topic_arn: str,
        token: str,
        authenticate_on_unsubscribe: Optional[bool] = None,
    ) -> str:
        return self.client.confirm_subscription(topic_arn, token, authenticate_on_unsubscribe)
    
    def create_topic(self, name: str) -> str:
        return self.client.create_topic(name)
    
    def delete_topic(self, topic_arn: str) -> bool:
        return self.client.delete_topic(topic_arn)
    
    def get_topic_attributes(self, topic_arn: str) -> dict[str, str]:
        return self.client.get_topic_attributes(topic_arn)
    
    def list_subscriptions(self, next_token: Optional[str] = None) -> MemberPage:
        return self.client.list_subscriptions(next_token)
    
    def list_subscriptions_by_topic(self, topic_arn: str, next_token: Optional[str] = None) -> MemberPage:
        return self.client.list_subscriptions_by_topic(topic_arn, next_token)
    
    def list_topics(self, next_token: Optional[str] = None) -> MemberPage:
        return self.client.list_topics(next_token)
    
    def publish(
        self,
        topic_arn: str,
        message: str,
        subject: str = "",
        message_structure: str = "",
        message_group_id: Optional[str] = None,
        message_deduplication_id: Optional[str] = None,
    ) -> str:
        return self.client.publish(
            topic_arn,
            message,
            subject,
            message_structure,
            message_group_id=message_group_id,
            message_deduplication_id=message_deduplication_id,
        )
    
    def remove_permission(self, topic_arn: str, label: str) -> bool:
        return self.client.remove_permission(topic_arn, label)
    
    def set_topic_attributes(self, topic_arn: str, attr_name: str, attr_value: Any) -> bool:
        return self.client.set_topic_attributes(topic_arn, attr_name, attr_value)
    
    def subscribe(self, topic_arn: str, protocol: str, endpoint: str) -> str:
        return self.client.subscribe(topic_arn, protocol, endpoint)
    
    def unsubscribe(self, subscription_arn: str) -> bool:
        return self.client.unsubscribe(subscription_arn)
    
    def create_platform_endpoint(
        self,
        platform_application_arn: str,
        token: str,
        user_data: Optional[str] = None,
    ) -> str:
        return self.client.create_platform_endpoint(platform_application_arn, token, user_data)
    
    def delete_endpoint(self, device_arn: str) -> bool:
        return self.client.delete_endpoint(device_arn)
    
    def publish_to_endpoint(self, device_arn: str, message: str) -> str:
        return self.client.publish_to_endpoint(device_arn, message)
