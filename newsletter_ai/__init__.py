"""Root package exports."""
from newsletter_ai.core.types import NewsletterDraft, Section, OperationResult
from newsletter_ai.core.results import is_success
from newsletter_ai.web import scrape_paragraph_content
from newsletter_ai.llm import generate_content, parse_content
from newsletter_ai.email.sender import send_email
from newsletter_ai.deploy.url_builder import create_blog_page

__all__ = [
    'NewsletterDraft',
    'Section',
    'OperationResult',
    'is_success',
    'scrape_paragraph_content',
    'generate_content',
    'parse_content',
    'send_email',
    'create_blog_page'
]
