from newsletter_ai.email.sender import send_email, build_message
from newsletter_ai.formatting.template_renderer import render_email_body
from unittest.mock import MagicMock, patch
import smtplib

SEND_ARGS = dict(
    receiver_email='reader@example.com',
    sender_email='sender@gmail.com',
    email_app_password='abcd efgh ijkl mnop',
    link='https://news.example.com/?title=Robots+Weekly',
    title='Robots Weekly',
    description='Automation keeps growing.',
    subject='Your weekly newsletter'
)


def create_mock_smtp():
    """Create a properly configured SMTP mock."""
    mock = MagicMock()
    mock.local_hostname = "localhost"
    mock.ehlo_resp = "250 localhost"
    mock.noop.return_value = (250, b'250 OK')
    mock.login.return_value = None
    mock.starttls.return_value = None
    mock.send_message.return_value = {}
    mock.__enter__.return_value = mock
    mock.__exit__.return_value = None
    return mock


def test_send_email_success():
    """Test sending over STARTTLS with proper SMTP mocking."""
    mock_smtp = create_mock_smtp()

    with patch('smtplib.SMTP', return_value=mock_smtp) as smtp_class, \
         patch('ssl.create_default_context'):
        result = send_email(**SEND_ARGS)

    assert result == {'status': 200, 'message': 'Email sent successfully'}
    assert smtp_class.call_args[0] == ('smtp.gmail.com', 587)
    assert mock_smtp.starttls.called
    mock_smtp.login.assert_called_once_with('sender@gmail.com', 'abcd efgh ijkl mnop')
    mock_smtp.send_message.assert_called_once()
    mock_smtp.quit.assert_called_once()

    msg = mock_smtp.send_message.call_args[0][0]
    assert msg['To'] == 'reader@example.com'
    assert 'sender@gmail.com' in msg['From']
    assert msg['Subject'] == 'Your weekly newsletter'


def test_send_email_auth_failure():
    """Authentication errors come back as a failure result."""
    mock_smtp = create_mock_smtp()
    mock_smtp.login.side_effect = smtplib.SMTPAuthenticationError(535, b'Username and Password not accepted')

    with patch('smtplib.SMTP', return_value=mock_smtp), \
         patch('ssl.create_default_context'):
        result = send_email(**SEND_ARGS)

    assert result['status'] == 203
    assert result['message'] == 'Error in sending mail'
    assert 'Username and Password not accepted' in result['reason']
    mock_smtp.send_message.assert_not_called()
    mock_smtp.quit.assert_called_once()


def test_send_email_connection_failure():
    with patch('smtplib.SMTP', side_effect=ConnectionRefusedError('Connection refused')):
        result = send_email(**SEND_ARGS)

    assert result == {
        'status': 203,
        'message': 'Error in sending mail',
        'reason': 'Connection refused'
    }


def test_quit_failure_does_not_raise():
    mock_smtp = create_mock_smtp()
    mock_smtp.quit.side_effect = smtplib.SMTPServerDisconnected('already closed')

    with patch('smtplib.SMTP', return_value=mock_smtp), \
         patch('ssl.create_default_context'):
        result = send_email(**SEND_ARGS)

    assert result['status'] == 200


def test_render_email_body_escapes_values():
    html = render_email_body(
        link='https://example.com/?a=1&b="2"',
        title='<script>alert(1)</script>',
        description='Fish & Chips'
    )

    assert '<script>' not in html
    assert '&lt;script&gt;alert(1)&lt;/script&gt;' in html
    assert 'Fish &amp; Chips' in html
    assert 'href="https://example.com/?a=1&amp;b=&#34;2&#34;"' in html
    assert 'NewsletterAI' in html


def test_build_message_has_html_and_plain_parts():
    html = render_email_body(SEND_ARGS['link'], SEND_ARGS['title'], SEND_ARGS['description'])
    msg = build_message('reader@example.com', 'sender@gmail.com', 'Subject', html)

    content_types = [part.get_content_type() for part in msg.get_payload()]
    assert content_types == ['text/plain', 'text/html']

    plain = msg.get_payload()[0].get_payload(decode=True).decode('utf-8')
    assert 'Robots Weekly' in plain
    assert SEND_ARGS['link'] in plain
