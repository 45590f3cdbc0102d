"""Coordinator Tally — pipeline pós-verificação."""

from .handler import SubscriberClientFactory, WebhookOutcome, process_submission

__all__ = ["SubscriberClientFactory", "WebhookOutcome", "process_submission"]
