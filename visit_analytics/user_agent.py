"""
User Agent Classification

Pure functions that derive device type, browser, operating system and bot
status from a raw user-agent string. Browser, OS and device rules are ordered
(pattern, label) pairs evaluated first-match-wins: engines embed each other's
tokens, so reordering a list changes the result for ambiguous strings.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Pattern, Tuple

from .models import Browser, DeviceType, OperatingSystem


BOT_SIGNATURES = (
    "googlebot", "bingbot", "yandex", "baidu", "semrush", "ahrefsbot",
    "curl", "wget", "python-requests", "scrapy",
    "slackbot", "pinterest", "whatsapp", "facebookexternalhit", "twitterbot",
    "linkedinbot", "discordbot", "telegrambot", "applebot", "duckduckbot",
    "ia_archiver", "mj12bot", "dotbot", "petalbot", "bytespider",
)

BOT_PATTERN = re.compile("|".join(re.escape(s) for s in BOT_SIGNATURES), re.IGNORECASE)

# Desktop is the fallback, never a positive match
DEVICE_RULES: List[Tuple[Pattern[str], DeviceType]] = [
    (re.compile(r"mobile|android|iphone|ipod", re.IGNORECASE), DeviceType.MOBILE),
    (re.compile(r"ipad|tablet", re.IGNORECASE), DeviceType.TABLET),
]

BROWSER_RULES: List[Tuple[Pattern[str], Browser]] = [
    (re.compile(r"edg/", re.IGNORECASE), Browser.EDGE),
    (re.compile(r"opr/", re.IGNORECASE), Browser.OPERA),
    (re.compile(r"chrome", re.IGNORECASE), Browser.CHROME),
    (re.compile(r"safari", re.IGNORECASE), Browser.SAFARI),
    (re.compile(r"firefox", re.IGNORECASE), Browser.FIREFOX),
    (re.compile(r"msie|trident", re.IGNORECASE), Browser.IE),
]

OS_RULES: List[Tuple[Pattern[str], OperatingSystem]] = [
    (re.compile(r"windows", re.IGNORECASE), OperatingSystem.WINDOWS),
    (re.compile(r"mac os x", re.IGNORECASE), OperatingSystem.MACOS),
    (re.compile(r"iphone|ipad", re.IGNORECASE), OperatingSystem.IOS),
    (re.compile(r"android", re.IGNORECASE), OperatingSystem.ANDROID),
    (re.compile(r"linux", re.IGNORECASE), OperatingSystem.LINUX),
]


@dataclass
class UserAgentInfo:
    """Classification result for a single user agent."""
    device: DeviceType
    browser: Browser
    os: OperatingSystem


def _first_match(ua: str, rules, default):
    for pattern, label in rules:
        if pattern.search(ua):
            return label
    return default


def is_bot(ua: Optional[str]) -> bool:
    """Return True if the user agent matches a known crawler or HTTP client."""
    if not ua:
        return False
    return BOT_PATTERN.search(ua) is not None


def device_type(ua: Optional[str]) -> DeviceType:
    return _first_match(ua or "", DEVICE_RULES, DeviceType.DESKTOP)


def browser(ua: Optional[str]) -> Browser:
    return _first_match(ua or "", BROWSER_RULES, Browser.OTHER)


def operating_system(ua: Optional[str]) -> OperatingSystem:
    return _first_match(ua or "", OS_RULES, OperatingSystem.OTHER)


def classify(ua: Optional[str]) -> UserAgentInfo:
    """Classify device, browser and OS in one call."""
    return UserAgentInfo(
        device=device_type(ua),
        browser=browser(ua),
        os=operating_system(ua)
    )
