"""SNS client interfaces."""
from abc import ABC, abstractmethod
from typing import Any, Optional

from sns_client.domain.entities.member_page import MemberPage
from sns_client.domain.services.permission_service import PermissionInput


class SnsClient(ABC):
    """Operations of the SNS query API."""

    @property
    @abstractmethod
    def access_key(self) -> str:
        raise NotImplementedError

    @property
    @abstractmethod
    def secret_key(self) -> str:
        raise NotImplementedError

    @property
    @abstractmethod
    def protocol(self) -> str:
        raise NotImplementedError

    @property
    @abstractmethod
    def endpoint(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def add_permission(self, topic_arn: str, label: str, permissions: Optional[PermissionInput] = None) -> bool:
        """
        Add permissions to a topic.

        Args:
            topic_arn: Topic ARN
            label: Unique name of the permission statement
            permissions: Account ID -> action name or list of action names

        Returns:
            True
        """
        raise NotImplementedError

    @abstractmethod
    def confirm_subscription(
        self,
        topic_arn: str,
        token: str,
        authenticate_on_unsubscribe: Optional[bool] = None,
    ) -> str:
        """
        Confirm a subscription to a topic.

        Returns:
            Subscription ARN
        """
        raise NotImplementedError

    @abstractmethod
    def create_topic(self, name: str) -> str:
        """
        Create a topic (idempotent on the service side).

        Returns:
            Topic ARN
        """
        raise NotImplementedError

    @abstractmethod
    def delete_topic(self, topic_arn: str) -> bool:
        """Delete a topic."""
        raise NotImplementedError

    @abstractmethod
    def get_topic_attributes(self, topic_arn: str) -> dict[str, str]:
        """Get the attributes of a topic like owner, policy, display name."""
        raise NotImplementedError

    @abstractmethod
    def list_subscriptions(self, next_token: Optional[str] = None) -> MemberPage:
        """List the caller's subscriptions, one page at a time."""
        raise NotImplementedError

    @abstractmethod
    def list_subscriptions_by_topic(self, topic_arn: str, next_token: Optional[str] = None) -> MemberPage:
        """List subscriptions to one topic, one page at a time."""
        raise NotImplementedError

    @abstractmethod
    def list_topics(self, next_token: Optional[str] = None) -> MemberPage:
        """List topics, one page at a time."""
        raise NotImplementedError

    @abstractmethod
    def publish(
        self,
        topic_arn: str,
        message: str,
        subject: str = "",
        message_structure: str = "",
        message_group_id: Optional[str] = None,
        message_deduplication_id: Optional[str] = None,
    ) -> str:
        """
        Publish a message to a topic.

        Args:
            topic_arn: Topic ARN
            message: Message body
            subject: Subject line, used by email subscriptions (optional)
            message_structure: "json" to send a different message per protocol (optional)
            message_group_id: Message group ID for FIFO topics (optional)
            message_deduplication_id: Message deduplication ID for FIFO topics (optional)

        Returns:
            Message ID
        """
        raise NotImplementedError

    @abstractmethod
    def remove_permission(self, topic_arn: str, label: str) -> bool:
        """Remove the permission statement identified by label."""
        raise NotImplementedError

    @abstractmethod
    def set_topic_attributes(self, topic_arn: str, attr_name: str, attr_value: Any) -> bool:
        """Set a single attribute on a topic."""
        raise NotImplementedError

    @abstractmethod
    def subscribe(self, topic_arn: str, protocol: str, endpoint: str) -> str:
        """
        Subscribe an endpoint to a topic.

        Args:
            topic_arn: Topic ARN
            protocol: http, https, email, email-json, sms, sqs, application, lambda
            endpoint: Where messages are delivered

        Returns:
            Subscription ARN (or "pending confirmation")
        """
        raise NotImplementedError

    @abstractmethod
    def unsubscribe(self, subscription_arn: str) -> bool:
        """Delete a subscription."""
        raise NotImplementedError

    @abstractmethod
    def create_platform_endpoint(
        self,
        platform_application_arn: str,
        token: str,
        user_data: Optional[str] = None,
    ) -> str:
        """
        Register a device with a push platform application.

        Returns:
            Endpoint ARN
        """
        raise NotImplementedError

    @abstractmethod
    def delete_endpoint(self, device_arn: str) -> bool:
        """Delete a platform endpoint."""
        raise NotImplementedError

    @abstractmethod
    def publish_to_endpoint(self, device_arn: str, message: str) -> str:
        """
        Publish a message directly to a platform endpoint.

        Returns:
            Message ID
        """
        raise NotImplementedError


class ExtendedSnsClient(SnsClient):
    """SnsClient with publish-and-create-topic support."""

    @abstractmethod
    def publish_and_create_topic_if_needed(
        self,
        topic_arn: str,
        message: str,
        subject: str = "",
        message_structure: str = "",
    ) -> str:
        """
        Publish to a topic, creating the topic first if SNS reports it missing.

        Returns:
            Message ID
        """
        raise NotImplementedError
