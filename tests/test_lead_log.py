"""
Tests for the JSON-lines lead log.
"""

import json
from datetime import timedelta

from riskcheck.audit.logger import LeadLog
from riskcheck.models.lead_models import LeadEntry, NotificationResult


def _entry(i, status="sent"):
    return LeadEntry(
        form_type="satellite-scan",
        name=f"Lead {i}",
        plz="80331",
        notification=NotificationResult(status=status, channel="webhook"),
    )


def test_read_recent_missing_file(tmp_path):
    assert LeadLog(tmp_path / "none.jsonl").read_recent() == []


def test_append_and_read_recent(tmp_path):
    log = LeadLog(tmp_path / "leads.jsonl")
    for i in range(5):
        assert log.append(_entry(i)) is True

    recent = log.read_recent(count=2)
    assert [e.name for e in recent] == ["Lead 3", "Lead 4"]
    assert recent[0].notification.channel == "webhook"


def test_record_shape_on_disk(tmp_path):
    path = tmp_path / "leads.jsonl"
    LeadLog(path).append(_entry(1, status="failed"))

    record = json.loads(path.read_text(encoding="utf-8"))
    assert record["notification"] == {"status": "failed", "channel": "webhook", "error": None}
    assert record["received_at"].endswith("Z") or record["received_at"].endswith("+00:00")
    assert "timestamp" not in record


def test_received_at_round_trips_as_aware_utc(tmp_path):
    log = LeadLog(tmp_path / "leads.jsonl")
    log.append(_entry(1))
    (entry,) = log.read_recent()
    assert entry.received_at.tzinfo is not None
    assert entry.received_at.utcoffset() == timedelta(0)


def test_corrupt_lines_are_skipped(tmp_path):
    path = tmp_path / "leads.jsonl"
    log = LeadLog(path)
    log.append(_entry(1))
    with open(path, "a", encoding="utf-8") as f:
        f.write("{not json\n\n")
        f.write('{"name": "missing fields"}\n')
    log.append(_entry(2))
    assert [e.name for e in log.read_recent()] == ["Lead 1", "Lead 2"]


def test_unwritable_path_reports_failure(tmp_path):
    log = LeadLog(tmp_path / "missing_dir" / "leads.jsonl")
    assert log.append(_entry(1)) is False
    assert log.read_recent() == []
