"""
NewsletterAI Command Line Interface.

Thin wrapper over the library functions:
1. generate - scrape a reference page and draft a newsletter with the LLM
2. link     - build the shareable link to a newsletter page
3. send     - email the newsletter notification
4. settings - show the effective configuration

Each command prints its result as JSON and exits with status 1 when the
result is a failure.

Example Usage:
    python -m newsletter_ai generate "AI in healthcare" --category tech --link https://example.com/post
    python -m newsletter_ai link "AI in healthcare" --domain-type live --domain news.example.com

Environment Variables:
    OPENAI_API_KEY: API key for OpenAI
    SENDER_EMAIL: Sender address and SMTP username
    EMAIL_APP_PASSWORD: App password for the sender account

For SMTP and model settings, see config/settings.py
"""
# Standard library imports
import json

# Third-party imports
import click
from dotenv import load_dotenv

# Local imports
from newsletter_ai.config.settings import get_settings
from newsletter_ai.core.constants import DomainType
from newsletter_ai.core.results import is_success
from newsletter_ai.llm import generate_content
from newsletter_ai.deploy.url_builder import create_blog_page
from newsletter_ai.email.sender import send_email
from newsletter_ai.logging_cfg.logger import setup_logger

# Load environment variables
load_dotenv()

# Set up logger
logger = setup_logger()


def emit_result(result) -> None:
    """Print a result as JSON and exit non-zero on failure."""
    click.echo(json.dumps(result, indent=2, ensure_ascii=False))
    if not is_success(result):
        raise SystemExit(1)


@click.group()
def cli():
    """Generate, link and send AI-written newsletters."""


@cli.command()
@click.argument('title')
@click.option('--category', required=True, help='Category label for the newsletter')
@click.option('--link', 'reference_link', required=True, help='Reference page to scrape')
@click.option('--api-key', envvar='OPENAI_API_KEY', required=True, help='OpenAI API key')
def generate(title, category, reference_link, api_key):
    """Draft a newsletter about TITLE."""
    logger.info(f"Generating newsletter '{title}' from {reference_link}")
    emit_result(generate_content(title, category, reference_link, api_key))


@cli.command()
@click.argument('title')
@click.option('--domain-type', required=True,
              type=click.Choice([d.value for d in DomainType]),
              help='local builds an http link, live an https link')
@click.option('--domain', 'domain_name', required=True, help='Domain hosting the newsletter page')
def link(title, domain_type, domain_name):
    """Build the shareable link for TITLE."""
    emit_result(create_blog_page(title, domain_type, domain_name))


@cli.command()
@click.option('--to', 'receiver_email', required=True, help='Recipient address')
@click.option('--link', 'newsletter_link', required=True, help='Link to the newsletter page')
@click.option('--title', required=True, help='Newsletter title')
@click.option('--description', required=True, help='Short description of the newsletter')
@click.option('--subject', required=True, help='Email subject line')
@click.option('--sender', 'sender_email', envvar='SENDER_EMAIL', required=True, help='Sender address')
@click.option('--app-password', envvar='EMAIL_APP_PASSWORD', required=True, help='App password for the sender')
def send(receiver_email, newsletter_link, title, description, subject, sender_email, app_password):
    """Email the newsletter notification."""
    logger.info(f"Sending newsletter '{title}' to {receiver_email}")
    emit_result(send_email(
        receiver_email,
        sender_email,
        app_password,
        newsletter_link,
        title,
        description,
        subject
    ))


@cli.command()
def settings():
    """Show the effective configuration."""
    click.echo(json.dumps(get_settings(), indent=2))


if __name__ == "__main__":
    cli()
