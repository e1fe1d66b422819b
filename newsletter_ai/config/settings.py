# Configuration file for NewsletterAI
# This file contains configurable settings for the newsletter system

import os
from typing import Dict, Any, Optional
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _optional_float(name: str) -> Optional[float]:
    """Read an optional numeric setting; unset or empty means library default."""
    value = os.getenv(name)
    if not value:
        return None
    return float(value)


# --- Email Settings ---
# Credentials are passed per call, only the transport is configured here
SMTP_SETTINGS = {
    'smtp_server': os.getenv('SMTP_SERVER', 'smtp.gmail.com'),
    'smtp_port': int(os.getenv('SMTP_PORT', '587')),
    'smtp_timeout': _optional_float('SMTP_TIMEOUT'),   # None leaves smtplib's default
    'sender_name': os.getenv('EMAIL_SENDER_NAME', 'NewsletterAI'),
}

# --- LLM Settings ---
# Low temperature and a length cap keep the delimiter markup predictable
LLM_SETTINGS = {
    'model': os.getenv('NEWSLETTER_AI_MODEL', 'gpt-4o-mini'),
    'max_output_tokens': 1000,
    'temperature': 0.1,
}

# --- Scraper Settings ---
SCRAPER_SETTINGS = {
    'http_timeout': _optional_float('SCRAPER_HTTP_TIMEOUT'),   # None leaves requests' default
    'paragraph_selector': 'p',
}

# --- System Settings ---
SYSTEM_SETTINGS = {
    'log_level': os.getenv('LOG_LEVEL', 'INFO'),            # Options: DEBUG, INFO, WARNING, ERROR, CRITICAL
    'log_dir': os.getenv('NEWSLETTER_AI_LOG_DIR', 'logs'),
    'log_timezone': os.getenv('LOG_TIMEZONE', 'UTC'),
}


def get_settings() -> Dict[str, Any]:
    """Returns all settings as a dictionary."""
    return {
        'system': SYSTEM_SETTINGS,
        'smtp': SMTP_SETTINGS,
        'llm': LLM_SETTINGS,
        'scraper': SCRAPER_SETTINGS,
    }
