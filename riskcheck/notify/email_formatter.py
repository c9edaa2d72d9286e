"""
Lead Email Formatter — Plain-text notification body and subject lines.

Plain, sectioned text keeps the message away from spam filters.
"""

from __future__ import annotations

import json
from datetime import datetime
from zoneinfo import ZoneInfo

from riskcheck.models.lead_models import DeviceInfo, LeadSubmission

BERLIN = ZoneInfo("Europe/Berlin")

_HEAVY = "═" * 59
_LIGHT = "─" * 59

_FORM_LABELS = {
    "satellite-scan": "Echtzeit-Scan (Satelliten-Scan)",
    "contact-form": "Kontaktformular (Analyse-Anfrage)",
}

_SHORT_FORM_LABELS = {
    "satellite-scan": "Echtzeit-Scan",
    "contact-form": "Kontaktformular",
}


def form_label(lead: LeadSubmission, short: bool = False) -> str:
    labels = _SHORT_FORM_LABELS if short else _FORM_LABELS
    return labels[lead.form_type]


def build_subject(lead: LeadSubmission) -> str:
    if lead.form_type == "satellite-scan":
        name = lead.first_name or lead.name or "Unbekannt"
        return f"[Blockalarm] Neue Echtzeit-Scan Anfrage - {name}"
    return f"[Blockalarm] Neue Analyse-Anfrage - {lead.name or 'Unbekannt'}"


_WEEKDAYS = ("Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag", "Sonntag")
_MONTHS = (
    "Januar", "Februar", "März", "April", "Mai", "Juni",
    "Juli", "August", "September", "Oktober", "November", "Dezember",
)
_ZONE_NAMES = {"CET": "MEZ", "CEST": "MESZ"}


def format_timestamp(moment: datetime | None = None) -> str:
    """
    Long German date in Berlin time, independent of the process locale.

    Example: "Sonntag, 1. März 2026 um 12:30:00 MEZ"
    """
    moment = (moment or datetime.now(BERLIN)).astimezone(BERLIN)
    zone = moment.tzname() or ""
    return (
        f"{_WEEKDAYS[moment.weekday()]}, {moment.day}. {_MONTHS[moment.month - 1]} {moment.year} "
        f"um {moment:%H:%M:%S} {_ZONE_NAMES.get(zone, zone)}"
    )


def format_email_body(
    lead: LeadSubmission,
    device: DeviceInfo,
    ip_address: str,
    timestamp: datetime | None = None,
) -> str:
    """Render the lead notification as a sectioned plain-text email."""
    lines = [
        "Guten Tag,",
        "",
        "Sie haben eine neue Formular-Einreichung über das Blockalarm "
        "Einbruchschutz-Check System erhalten.",
        "",
        _HEAVY,
        "FORMULAR-EINREICHUNG",
        _HEAVY,
        "",
        f"Formular-Typ: {form_label(lead)}",
        f"Zeitstempel: {format_timestamp(timestamp)}",
        "",
        _LIGHT,
        "KONTAKTDATEN",
        _LIGHT,
    ]

    if lead.first_name:
        lines.append(f"Vorname: {lead.first_name}")
    if lead.last_name:
        lines.append(f"Nachname: {lead.last_name}")
    if lead.name:
        lines.append(f"Name: {lead.name}")
    lines.append(f"E-Mail: {lead.email}")
    lines.append(f"Telefon: {lead.phone}")
    if lead.address:
        lines.append(f"Adresse: {lead.address}")
    if lead.plz:
        lines.append(f"PLZ: {lead.plz}")

    lines += [
        "",
        _LIGHT,
        "TECHNISCHE INFORMATIONEN",
        _LIGHT,
        f"Gerätetyp: {device.device_type}",
        f"Plattform: {device.platform}",
        f"Bildschirmgröße: {device.screen_width}x{device.screen_height}px",
        f"IP-Adresse: {ip_address}",
    ]

    if lead.additional_data:
        lines += ["", _LIGHT, "ZUSÄTZLICHE DATEN", _LIGHT]
        for key, value in lead.additional_data.items():
            lines.append(f"{key}: {json.dumps(value, ensure_ascii=False)}")

    lines += [
        "",
        _HEAVY,
        "Diese E-Mail wurde automatisch vom Blockalarm Einbruchschutz-Check System generiert.",
        "Blockalarm GmbH - https://www.blockalarm.de",
        _HEAVY,
    ]
    return "\n".join(lines) + "\n"
