import smtplib
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from email.utils import formataddr, formatdate
import ssl
import certifi
from newsletter_ai.logging_cfg.logger import setup_logger
from newsletter_ai.config.settings import SMTP_SETTINGS
from newsletter_ai.core.constants import MSG_EMAIL_SENT, MSG_EMAIL_FAILED
from newsletter_ai.core.results import success_result, failure_result
from newsletter_ai.core.types import OperationResult
from newsletter_ai.formatting.template_renderer import render_email_body
from newsletter_ai.formatting.text_utils import strip_html

# Set up logger
logger = setup_logger()


def create_secure_smtp_context():
    """Create a secure SSL context for SMTP"""
    context = ssl.create_default_context(
        purpose=ssl.Purpose.SERVER_AUTH,
        cafile=certifi.where()
    )
    context.verify_mode = ssl.CERT_REQUIRED
    return context


def create_smtp_connection(username: str, password: str):
    """Open a submission connection, upgrade it with STARTTLS and log in."""
    kwargs = {}
    if SMTP_SETTINGS['smtp_timeout'] is not None:
        kwargs['timeout'] = SMTP_SETTINGS['smtp_timeout']

    server = smtplib.SMTP(SMTP_SETTINGS['smtp_server'], SMTP_SETTINGS['smtp_port'], **kwargs)
    try:
        server.starttls(context=create_secure_smtp_context())
        server.login(username, password)
    except Exception:
        close_smtp_connection(server)
        raise
    return server


def close_smtp_connection(server) -> None:
    try:
        server.quit()
    except (smtplib.SMTPException, OSError) as e:
        logger.debug(f"SMTP connection already closed: {str(e)}")


def build_message(receiver_email: str, sender_email: str, subject: str, html_body: str) -> MIMEMultipart:
    """Build the multipart message with HTML and plain text versions."""
    msg = MIMEMultipart('alternative')
    msg['Subject'] = subject
    msg['From'] = formataddr((SMTP_SETTINGS['sender_name'], sender_email))
    msg['To'] = receiver_email
    msg['Date'] = formatdate(localtime=True)

    # Plain text first so clients prefer the HTML part
    msg.attach(MIMEText(strip_html(html_body), 'plain', 'utf-8'))
    msg.attach(MIMEText(html_body, 'html', 'utf-8'))
    return msg


def send_email(receiver_email: str, sender_email: str, email_app_password: str,
               link: str, title: str, description: str, subject: str) -> OperationResult:
    """Send the newsletter notification email.

    Args:
        receiver_email: Single recipient address
        sender_email: Sender address, also the SMTP username
        email_app_password: Application-specific password for the sender account
        link: Link to the hosted newsletter
        title: Newsletter title
        description: Short description shown under the title
        subject: Email subject line

    Returns:
        OperationResult: success, or failure carrying the transport error message
    """
    server = None
    try:
        html_body = render_email_body(link, title, description)
        msg = build_message(receiver_email, sender_email, subject, html_body)

        server = create_smtp_connection(sender_email, email_app_password)
        server.send_message(msg)
        logger.info(f"Email sent successfully to {receiver_email}")

    except Exception as e:
        logger.error(f"Failed to send email: {str(e)}")
        return failure_result(MSG_EMAIL_FAILED, e)

    finally:
        if server is not None:
            close_smtp_connection(server)

    return success_result(MSG_EMAIL_SENT)


# Expose these functions as the public API
__all__ = ['send_email', 'build_message', 'create_smtp_connection']
