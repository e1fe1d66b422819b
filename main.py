"""
NewsletterAI - scrape a reference page, draft a newsletter with an LLM,
build its shareable link and deliver it by email.

This module serves as the main entry point for the command line interface.
For library use, import generate_content, create_blog_page and send_email
from the newsletter_ai package.

MIT License - See LICENSE for details
"""
from newsletter_ai.cli import cli

if __name__ == "__main__":
    cli()
