"""Audit event sinks for the workspace scanner.

This module provides the AuditSink abstract interface for recording scanner
events, along with implementations writing JSON lines to a file or stdout.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path

from workspace_scanner.models import AuditEvent


class AuditSink(ABC):
    """Abstract interface for audit logging.

    The scanner reports every discovered project ("discover"), BSN collisions
    ("collision") and the end of the search space ("exhausted") to its sink.
    """

    @abstractmethod
    def log(self, event: AuditEvent) -> None:
        """Record an audit event.

        Args:
            event: The AuditEvent to record

        Raises:
            Implementation-specific exceptions for logging failures.
        """
        pass


class JSONLAuditSink(AuditSink):
    """Appends audit events to a JSONL (JSON Lines) file.

    Example log file content:
        {"ts":"2024-01-01T12:00:00","kind":"discover","project":"P1",...}
        {"ts":"2024-01-01T12:00:01","kind":"exhausted","project":null,...}
    """

    def __init__(self, log_path: Path):
        """Initialize JSONLAuditSink with log file path.

        Args:
            log_path: Path to the JSONL log file. Parent directories are
                      created if they don't exist.
        """
        self.log_path = Path(log_path)
        self.log_path.parent.mkdir(parents=True, exist_ok=True)

    def log(self, event: AuditEvent) -> None:
        json_line = json.dumps(event.to_dict(), separators=(',', ':'))
        with open(self.log_path, 'a', encoding='utf-8') as f:
            f.write(json_line + '\n')


class StdoutAuditSink(AuditSink):
    """Writes audit events to stdout, one JSON object per line."""

    def log(self, event: AuditEvent) -> None:
        print(json.dumps(event.to_dict(), separators=(',', ':')))
