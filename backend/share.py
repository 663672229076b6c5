"""Messaging deep link for the session summary."""

import urllib.parse

from .config import settings as default_settings

# Same unescaped set as JavaScript's encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_message(message: str) -> str:
    return urllib.parse.quote(message, safe=_URI_COMPONENT_SAFE)


def build_share_url(message: str, settings=None) -> str:
    """
    Returns e.g. 'https://wa.me/?text=%F0%9F%8F%B8%20*Badminton...'.
    The caller decides whether to open it.
    """
    settings = settings or default_settings
    return f"{settings.SHARE_BASE_URL}?text={encode_message(message)}"
