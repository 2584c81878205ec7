"""
Module: request.py
Description: Request models for publishing a single event to SQS.

Key Components:
- DynamicAttributes: FIFO group and deduplication IDs resolved per event
- PublishRequest: message body plus delivery options, rendered into
  boto3 send_message keyword arguments

Dependencies: pydantic, typing
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class DynamicAttributes(BaseModel):
    """
    Per-event attributes for FIFO queues.

    Both fields are ignored when the target queue is not FIFO.

    Attributes:
        message_group_id: Group the message is ordered within
        deduplication_id: Token SQS uses to drop duplicates
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    message_group_id: Optional[str] = Field(
        default=None,
        alias="messageGroupID",
        description="FIFO message group ID"
    )
    deduplication_id: Optional[str] = Field(
        default=None,
        alias="deduplicationID",
        description="FIFO message deduplication ID"
    )


class PublishRequest(BaseModel):
    """
    One message on its way to SQS.

    Built fresh for each publish call and dropped once sent.
    """

    model_config = ConfigDict(frozen=True)

    body: str = Field(..., description="Message body")
    group_id: Optional[str] = Field(default=None, description="FIFO message group ID")
    dedup_id: Optional[str] = Field(default=None, description="FIFO deduplication ID")
    delay_seconds: int = Field(default=0, ge=0, description="Delivery delay in seconds")

    def to_send_kwargs(self, queue_url: str) -> Dict[str, Any]:
        """
        Render boto3 send_message keyword arguments.

        FIFO fields are only included when set. FIFO queues only accept
        a delay at queue level, so a zero delay is left out for them.

        Args:
            queue_url: URL of the target queue

        Returns:
            Keyword arguments for SQS.Client.send_message
        """
        params: Dict[str, Any] = {
            'QueueUrl': queue_url,
            'MessageBody': self.body,
        }
        if self.delay_seconds or self.group_id is None:
            params['DelaySeconds'] = self.delay_seconds
        if self.group_id is not None:
            params['MessageGroupId'] = self.group_id
        if self.dedup_id is not None:
            params['MessageDeduplicationId'] = self.dedup_id
        return params
