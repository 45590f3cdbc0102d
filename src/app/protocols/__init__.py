"""Protocolos e contratos do core da aplicação."""

from .normalizer import SubmissionExtractorProtocol
from .subscriber_client import SubscriberClientProtocol

__all__ = [
    "SubmissionExtractorProtocol",
    "SubscriberClientProtocol",
]
