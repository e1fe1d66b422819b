"""Reference content scraping for newsletter generation."""
import requests
import certifi
from bs4 import BeautifulSoup, UnicodeDammit
from newsletter_ai.logging_cfg.logger import setup_logger
from newsletter_ai.config.settings import SCRAPER_SETTINGS
from newsletter_ai.core.constants import MSG_CONTENT_SCRAPED, MSG_CONTENT_NOT_SCRAPED
from newsletter_ai.core.results import success_result, failure_result
from newsletter_ai.core.types import OperationResult

# Set up logger
logger = setup_logger()


def create_session():
    """Create a requests session verified against certifi's CA bundle.

    No retry adapter is mounted: every scrape is a single attempt.
    """
    session = requests.Session()
    session.verify = certifi.where()
    return session


def decode_html(response) -> str:
    """Decode a page body.

    A charset in the Content-Type header is trusted. Otherwise the bytes are
    sniffed: a <meta> charset wins, then UTF-8, then detection.
    """
    content_type = response.headers.get('Content-Type', '')
    if 'charset=' in content_type.lower():
        return response.text

    dammit = UnicodeDammit(response.content, user_encodings=['utf-8'], is_html=True)
    if dammit.unicode_markup is None:
        return response.text
    return dammit.unicode_markup


def extract_paragraph_text(html: str) -> str:
    """Join the trimmed text of every paragraph element, one per line, in document order."""
    soup = BeautifulSoup(html, 'html.parser')
    paragraphs = soup.select(SCRAPER_SETTINGS['paragraph_selector'])
    return ''.join(f"{p.get_text().strip()}\n" for p in paragraphs)


def scrape_paragraph_content(url: str) -> OperationResult:
    """Fetch a page and extract all of its paragraph text.

    Args:
        url: Page to scrape. Not validated before the request.

    Returns:
        OperationResult: success carries the text under ``content``; failure
        carries ``"An error occurred: <message>"`` as ``reason``
    """
    try:
        with create_session() as session:
            response = session.get(url, timeout=SCRAPER_SETTINGS['http_timeout'])
            response.raise_for_status()
        content = extract_paragraph_text(decode_html(response))
    except Exception as e:
        logger.error(f"Failed to scrape {url}: {str(e)}")
        return failure_result(MSG_CONTENT_NOT_SCRAPED, f"An error occurred: {str(e)}")

    logger.info(f"Scraped {len(content)} characters of paragraph text from {url}")
    return success_result(MSG_CONTENT_SCRAPED, content=content)
