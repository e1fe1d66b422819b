"""Web integration package exports."""
from newsletter_ai.web.scraper import (
    scrape_paragraph_content,
    extract_paragraph_text
)

__all__ = [
    'scrape_paragraph_content',
    'extract_paragraph_text'
]
