"""Helpers for building and inspecting operation results."""
from typing import Any, Mapping

from newsletter_ai.core.constants import STATUS_OK, STATUS_FAILED
from newsletter_ai.core.types import OperationResult


def success_result(message: str, **payload: Any) -> OperationResult:
    """Build a success result carrying an optional payload (e.g. ``link``)."""
    result = {'status': STATUS_OK, 'message': message}
    result.update(payload)
    return result


def failure_result(message: str, reason: Any) -> OperationResult:
    """Build a failure result.

    Args:
        message: Human readable summary of what failed
        reason: Underlying error or detail; exceptions are stored as their message

    Returns:
        OperationResult with a failure status
    """
    if isinstance(reason, BaseException):
        reason = str(reason)
    return {'status': STATUS_FAILED, 'message': message, 'reason': reason}


def is_success(result: Mapping[str, Any]) -> bool:
    """Check whether a result is a success.

    A newsletter draft carries no status and counts as a success.
    """
    return result.get('status', STATUS_OK) == STATUS_OK
