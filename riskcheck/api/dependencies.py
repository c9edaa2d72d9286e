"""
FastAPI Dependencies — Shared singletons injected via Depends().
"""

from __future__ import annotations

from functools import lru_cache

from riskcheck.audit.logger import LeadLog
from riskcheck.geo.geocoding import GeoClient
from riskcheck.notify.notifier import LeadNotifier


@lru_cache
def get_lead_log() -> LeadLog:
    """Shared lead log singleton."""
    return LeadLog()


@lru_cache
def get_geo_client() -> GeoClient:
    """Shared geocoding client singleton."""
    return GeoClient()


@lru_cache
def get_notifier() -> LeadNotifier:
    """Shared lead notifier singleton."""
    return LeadNotifier()


async def close_http_clients() -> None:
    """Close the outbound HTTP clients that were created, then drop the singletons."""
    if get_geo_client.cache_info().currsize:
        await get_geo_client().close()
    if get_notifier.cache_info().currsize:
        await get_notifier().close()
    get_geo_client.cache_clear()
    get_notifier.cache_clear()
