"""
Lead Route — POST /leads

Accepts contact data from the result page or the satellite-scan modal,
notifies the sales inbox and records the lead. Notification problems are
reported in the response but never fail the request.
"""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends, Request

from riskcheck.api.dependencies import get_lead_log, get_notifier
from riskcheck.audit.logger import LeadLog
from riskcheck.core.device import detect_device_type
from riskcheck.models.lead_models import LeadEntry, LeadResponse, LeadSubmission
from riskcheck.notify.notifier import LeadNotifier

logger = logging.getLogger("riskcheck.api.leads")

router = APIRouter()


@router.post("/leads", response_model=LeadResponse)
async def submit_lead(
    lead: LeadSubmission,
    request: Request,
    notifier: LeadNotifier = Depends(get_notifier),
    lead_log: LeadLog = Depends(get_lead_log),
):
    device = detect_device_type(
        request.headers.get("user-agent", ""),
        screen_width=lead.screen_width,
        screen_height=lead.screen_height,
        platform=lead.platform,
    )
    ip_address = _client_ip(request)

    result = await notifier.send(lead, device, ip_address)

    persisted = await asyncio.to_thread(lead_log.append, LeadEntry(
        form_type=lead.form_type,
        name=lead.display_name,
        plz=lead.plz,
        device_type=device.device_type,
        notification=result,
    ))
    logger.info(
        f"Lead received ({lead.form_type}), notification {result.status} via {result.channel}, "
        f"persisted={persisted}"
    )

    return LeadResponse(status=result.status, channel=result.channel)


def _client_ip(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for", "")
    if forwarded:
        return forwarded.split(",")[0].strip()
    if request.client:
        return request.client.host
    return "Unknown"
