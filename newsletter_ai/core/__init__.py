"""Core package exports."""
from newsletter_ai.core.types import NewsletterDraft, Section, OperationResult
from newsletter_ai.core.constants import (
    STATUS_OK,
    STATUS_FAILED,
    DEFAULT_TITLE,
    DEFAULT_TAG,
    DomainType
)
from newsletter_ai.core.results import success_result, failure_result, is_success

__all__ = [
    'NewsletterDraft',
    'Section',
    'OperationResult',
    'STATUS_OK',
    'STATUS_FAILED',
    'DEFAULT_TITLE',
    'DEFAULT_TAG',
    'DomainType',
    'success_result',
    'failure_result',
    'is_success'
]
