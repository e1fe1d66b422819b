"""Newsletter generation using the OpenAI API."""
from typing import Union
from openai import OpenAI
from newsletter_ai.logging_cfg.logger import setup_logger
from newsletter_ai.config.settings import LLM_SETTINGS
from newsletter_ai.core.constants import MSG_CONTENT_NOT_GENERATED
from newsletter_ai.core.results import failure_result, is_success
from newsletter_ai.core.types import NewsletterDraft, OperationResult
from newsletter_ai.llm.parser import parse_content
from newsletter_ai.llm.prompts import build_system_prompt
from newsletter_ai.web.scraper import scrape_paragraph_content

# Set up logger
logger = setup_logger()


class EmptyCompletionError(Exception):
    """Raised when the model returns no text."""
    pass


def request_completion(client: OpenAI, system_prompt: str, prompt: str) -> str:
    """Send one system + user message pair and return the raw response text."""
    response = client.chat.completions.create(
        model=LLM_SETTINGS['model'],
        messages=[
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": prompt}
        ],
        max_tokens=LLM_SETTINGS['max_output_tokens'],
        temperature=LLM_SETTINGS['temperature']
    )

    text = response.choices[0].message.content if response.choices else None
    if not text:
        raise EmptyCompletionError("Model returned an empty response")
    return text


def generate_content(title: str, category: str, link: str, api_key: str) -> Union[NewsletterDraft, OperationResult]:
    """Generate a newsletter draft from a reference page.

    Args:
        title: Prompt sent to the model as the user message
        category: Category label for the draft
        link: Reference page scraped for context
        api_key: OpenAI API key

    Returns:
        NewsletterDraft on success. A failure OperationResult when scraping
        or the model call fails; the parser is not run in that case.
    """
    scraped = scrape_paragraph_content(link)
    if not is_success(scraped):
        logger.warning(f"Skipping generation for '{title}': reference page could not be scraped")
        return scraped

    try:
        client = OpenAI(api_key=api_key)
        system_prompt = build_system_prompt(scraped['content'], category)
        raw_text = request_completion(client, system_prompt, title)
    except Exception as e:
        logger.error(f"Failed to generate content for '{title}': {str(e)}")
        return failure_result(MSG_CONTENT_NOT_GENERATED, e)

    draft = parse_content(raw_text, category)
    logger.info(f"Generated newsletter '{draft['title']}' with {len(draft['content'])} sections")
    return draft
