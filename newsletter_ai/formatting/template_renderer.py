"""Jinja2 template rendering for notification emails."""
from pathlib import Path
from jinja2 import Environment, FileSystemLoader, select_autoescape
from newsletter_ai.config.settings import SMTP_SETTINGS

TEMPLATE_DIR = Path(__file__).parent.parent / 'templates'
EMAIL_TEMPLATE = 'email.html'


def get_template_environment() -> Environment:
    """Create and configure Jinja2 environment with HTML autoescaping."""
    return Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        autoescape=select_autoescape(['html', 'xml'])
    )


def render_email_body(link: str, title: str, description: str) -> str:
    """Render the notification email.

    Args:
        link: Target of the title link
        title: Newsletter title
        description: Short description shown under the title

    Returns:
        str: The rendered HTML, with every value escaped
    """
    env = get_template_environment()
    template = env.get_template(EMAIL_TEMPLATE)

    return template.render(
        brand=SMTP_SETTINGS['sender_name'],
        link=link,
        title=title,
        description=description
    )
