"""Constants and configuration values."""
from enum import Enum

# Result status codes
STATUS_OK = 200
STATUS_FAILED = 203

# Result messages
MSG_CONTENT_SCRAPED = "Content scraped"
MSG_CONTENT_NOT_SCRAPED = "Content not scraped"
MSG_CONTENT_NOT_GENERATED = "Content not generated"
MSG_EMAIL_SENT = "Email sent successfully"
MSG_EMAIL_FAILED = "Error in sending mail"
MSG_LINK_GENERATED = "Link generated"
MSG_LINK_FAILED = "Error generating link"
REASON_DOMAIN_TYPE = "Domain type not specified"

# Parser placeholders
DEFAULT_TITLE = "Untitled"
DEFAULT_TAG = "No tags formed"

# Delimiter convention, expressed as the length of each `*` run
DELIMITER_CHAR = "*"
TITLE_RUN = 1
SUBTITLE_RUN = 2
PARAGRAPH_RUN = 3
TAG_RUN = 4


class DomainType(str, Enum):
    LOCAL = 'local'
    LIVE = 'live'


# URL scheme per deployment domain type
DOMAIN_SCHEMES = {
    DomainType.LOCAL: 'http',
    DomainType.LIVE: 'https',
}
