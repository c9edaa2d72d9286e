"""
Device Detection — Classifies the visitor's device from its User-Agent.
"""

from __future__ import annotations

import re

from riskcheck.models.lead_models import DeviceInfo

_MOBILE = re.compile(r"Android|webOS|iPhone|iPad|iPod|BlackBerry|IEMobile|Opera Mini", re.I)
_LEGACY_MAC = re.compile(r"Mac OS X 10[._](\d+)")


def classify_user_agent(user_agent: str) -> str:
    """Return a human-readable device type for a User-Agent string."""
    ua = user_agent or ""

    if _MOBILE.search(ua):
        if re.search(r"iPad", ua, re.I):
            return "iPad"
        if re.search(r"iPhone", ua, re.I):
            return "iPhone"
        if re.search(r"Android", ua, re.I):
            return "Android Mobile"
        return "Mobile"

    if re.search(r"Macintosh", ua, re.I):
        return "MacBook" if _LEGACY_MAC.search(ua) else "Mac Desktop"
    if re.search(r"Windows", ua, re.I):
        return "Windows Desktop"
    if re.search(r"Linux", ua, re.I):
        return "Linux Desktop"

    return "Desktop"


def detect_device_type(
    user_agent: str,
    screen_width: int = 0,
    screen_height: int = 0,
    platform: str = "",
) -> DeviceInfo:
    return DeviceInfo(
        device_type=classify_user_agent(user_agent),
        user_agent=user_agent or "",
        screen_width=screen_width,
        screen_height=screen_height,
        platform=platform,
    )
