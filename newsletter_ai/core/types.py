"""Type definitions for newsletter drafts and operation results."""
from typing import TypedDict, List


class Section(TypedDict):
    subtitle: str
    paragraph: str


class NewsletterDraft(TypedDict):
    title: str
    tag: str  # Comma-separated, never split
    category: str
    date: str  # YYYY-MM-DD, UTC
    content: List[Section]


class _ResultBase(TypedDict):
    status: int
    message: str


class OperationResult(_ResultBase, total=False):
    """Uniform success/failure shape returned by every fallible operation."""
    reason: str
    link: str
    content: str
