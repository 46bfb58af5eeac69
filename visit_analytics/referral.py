"""
Referral Source Classification

Maps a referrer URL to a traffic source label. Known engines and social
networks get a fixed label, anything else is reported by hostname, and an
absent or unparsable referrer counts as direct traffic.
"""

import re
from typing import List, Mapping, Optional, Pattern, Tuple
from urllib.parse import urlparse

from .models import DIRECT_SOURCE


# Matched against the hostname with any leading "www." removed
SOURCE_RULES: List[Tuple[Pattern[str], str]] = [
    (re.compile(r"google"), "google"),
    (re.compile(r"bing"), "bing"),
    (re.compile(r"duckduckgo"), "duckduckgo"),
    (re.compile(r"twitter|x\.com"), "twitter"),
    (re.compile(r"facebook"), "facebook"),
    (re.compile(r"instagram"), "instagram"),
    (re.compile(r"reddit"), "reddit"),
]


def _hostname(referrer: str) -> str:
    try:
        host = urlparse(referrer.strip()).hostname
    except ValueError:
        return ""
    return host or ""


def source_from_referrer(referrer: Optional[str]) -> str:
    """Derive a source label from a referrer URL.

    Args:
        referrer: Raw Referer header value, possibly empty or None

    Returns:
        A known-engine label, the referring hostname, or "direct"
    """
    if not referrer:
        return DIRECT_SOURCE

    host = _hostname(referrer)
    if host.startswith("www."):
        host = host[len("www."):]
    if not host:
        return DIRECT_SOURCE

    for pattern, label in SOURCE_RULES:
        if pattern.search(host):
            return label
    return host


def referrer_from_headers(headers: Mapping[str, str]) -> str:
    """Read the referrer from request headers, accepting both spellings."""
    return headers.get("Referer") or headers.get("Referrer") or ""
