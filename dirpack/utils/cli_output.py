"""Machine-readable archive reports for ``--json`` CLI output."""

from __future__ import annotations

import json
from datetime import UTC, datetime

from dirpack import __version__
from dirpack.app.ports import ArchiveReport

REPORT_SCHEMA_ID = "archive_report"
REPORT_SCHEMA_VERSION = 1


def report_json(report: ArchiveReport, *, produced_at: str | None = None) -> str:
    """Serialize ``report`` with schema metadata and its derived entry count.

    The stamp fields lead the payload so consumers can dispatch on
    ``schema_id``/``schema_version`` before reading the report body.
    """
    payload = {
        "schema_id": REPORT_SCHEMA_ID,
        "schema_version": REPORT_SCHEMA_VERSION,
        "producer": f"dirpack-{__version__}",
        "produced_at": produced_at or datetime.now(UTC).isoformat(),
        **report.model_dump(mode="json"),
        "entry_count": report.entry_count,
    }
    return json.dumps(payload, indent=2)
