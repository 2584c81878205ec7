"""
Package: delivery
Description: Failure reporting for SQS delivery.

Classifies send failures as transient or fatal and surfaces them to the
host engine, which owns the retry policy. Also provides the tenacity
reconnect helper a host can use around connect().
"""

from .retry import FailureKind, classify_failure, connect_with_retry, report_send_failures

__all__ = [
    "FailureKind",
    "classify_failure",
    "connect_with_retry",
    "report_send_failures",
]
