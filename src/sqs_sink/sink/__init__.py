"""
Package: sink
Description: Sink lifecycle contract and its SQS variant.
"""

from .base import Sink
from .sqs import SQSSink

__all__ = [
    "Sink",
    "SQSSink",
]
