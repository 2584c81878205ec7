"""
Module: models
Description: Pydantic models for per-event publishing.

- DynamicAttributes: per-event FIFO identifiers
- PublishRequest: a single send_message call
"""

from .request import DynamicAttributes, PublishRequest

__all__ = [
    "DynamicAttributes",
    "PublishRequest",
]
