"""
Lead Notifier — Delivers lead notifications to the sales inbox.

Channel order:
  1. EmailJS REST API   (when service, template and public key are set)
  2. Webhook            (Zapier, Make.com, n8n, ...) when EmailJS is
                        unconfigured or fails
  3. Log                when no webhook is configured

A failed notification never fails the submission: send() always returns
a NotificationResult.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

import httpx

from riskcheck.config import Settings, settings as default_settings
from riskcheck.models.lead_models import DeviceInfo, LeadSubmission, NotificationResult
from riskcheck.notify.email_formatter import build_subject, form_label, format_email_body

logger = logging.getLogger("riskcheck.notify")


class NotificationError(Exception):
    """A delivery channel rejected or could not accept the notification."""


class LeadNotifier:
    def __init__(
        self,
        config: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or default_settings
        self._http = httpx.AsyncClient(
            timeout=self.config.http_timeout,
            transport=transport,
        )

    async def close(self) -> None:
        await self._http.aclose()

    async def send(
        self,
        lead: LeadSubmission,
        device: DeviceInfo,
        ip_address: str = "Unknown",
    ) -> NotificationResult:
        """Deliver a lead notification through the first working channel."""
        body = format_email_body(lead, device, ip_address)
        subject = build_subject(lead)

        if self.config.emailjs_configured:
            try:
                await self._send_emailjs(lead, device, ip_address, subject, body)
                logger.info("Lead notification sent via EmailJS")
                return NotificationResult(status="sent", channel="emailjs")
            except NotificationError as e:
                logger.warning(f"EmailJS delivery failed, falling back to webhook: {e}")

        return await self._send_fallback(lead, device, ip_address, subject, body)

    async def _send_fallback(
        self,
        lead: LeadSubmission,
        device: DeviceInfo,
        ip_address: str,
        subject: str,
        body: str,
    ) -> NotificationResult:
        if not self.config.webhook_url:
            logger.warning(
                "Email service not configured; lead notification logged only. "
                f"to={self.config.notification_recipient} subject={subject!r}\n{body}"
            )
            return NotificationResult(status="logged", channel="log")

        try:
            await self._send_webhook(lead, device, ip_address, subject, body)
        except NotificationError as e:
            logger.error(f"Webhook delivery failed: {e}")
            return NotificationResult(status="failed", channel="webhook", error=str(e))

        logger.info("Lead notification sent via webhook")
        return NotificationResult(status="sent", channel="webhook")

    async def _send_emailjs(
        self,
        lead: LeadSubmission,
        device: DeviceInfo,
        ip_address: str,
        subject: str,
        body: str,
    ) -> None:
        template_params = {
            "to_email": self.config.notification_recipient,
            "subject": subject,
            "message": body,
            "form_type": form_label(lead, short=True),
            "name": lead.display_name,
            "email": lead.email,
            "phone": lead.phone,
            "address": lead.address or "",
            "plz": lead.plz or "",
            "device_type": device.device_type,
            "platform": device.platform,
            "screen_size": f"{device.screen_width}x{device.screen_height}",
            "ip_address": ip_address,
            "user_agent": device.user_agent,
            "additional_data": json.dumps(lead.additional_data, indent=2, ensure_ascii=False),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        await self._post(self.config.emailjs_endpoint, {
            "service_id": self.config.emailjs_service_id,
            "template_id": self.config.emailjs_template_id,
            "user_id": self.config.emailjs_public_key,
            "template_params": template_params,
        })

    async def _send_webhook(
        self,
        lead: LeadSubmission,
        device: DeviceInfo,
        ip_address: str,
        subject: str,
        body: str,
    ) -> None:
        await self._post(self.config.webhook_url, {
            "to": self.config.notification_recipient,
            "subject": subject,
            "body": body,
            "formData": lead.model_dump(),
            "deviceInfo": device.model_dump(),
            "ipAddress": ip_address,
        })

    async def _post(self, url: str, payload: dict) -> None:
        try:
            resp = await self._http.post(url, json=payload)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise NotificationError(f"{type(e).__name__}: {e}") from e
        if resp.status_code >= 400:
            raise NotificationError(f"HTTP {resp.status_code} from {url}")
