"""Formatting package exports."""
from newsletter_ai.formatting.template_renderer import (
    render_email_body,
    get_template_environment
)
from newsletter_ai.formatting.text_utils import strip_html

__all__ = [
    'render_email_body',
    'get_template_environment',
    'strip_html'
]
