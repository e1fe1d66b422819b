"""URL builder for hosted newsletter pages."""
from urllib.parse import urlencode
from newsletter_ai.core.constants import (
    DomainType,
    DOMAIN_SCHEMES,
    MSG_LINK_GENERATED,
    MSG_LINK_FAILED,
    REASON_DOMAIN_TYPE
)
from newsletter_ai.core.results import success_result, failure_result
from newsletter_ai.core.types import OperationResult


def create_blog_page(title: str, domain_type: str, domain_name: str) -> OperationResult:
    """Build the shareable link to a newsletter page.

    Args:
        title: Newsletter title, sent form-encoded as the ``title`` parameter
        domain_type: "local" (http) or "live" (https); matched exactly
        domain_name: Host, optionally with a port

    Returns:
        OperationResult with the URL under ``link``, or a failure when the
        domain type is anything else
    """
    try:
        scheme = DOMAIN_SCHEMES[DomainType(domain_type)]
    except ValueError:
        return failure_result(MSG_LINK_FAILED, REASON_DOMAIN_TYPE)

    query = urlencode({'title': title})
    return success_result(MSG_LINK_GENERATED, link=f"{scheme}://{domain_name}/?{query}")
