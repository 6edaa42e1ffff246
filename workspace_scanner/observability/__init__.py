"""Observability module for audit logging."""

from workspace_scanner.observability.audit import AuditSink, JSONLAuditSink, StdoutAuditSink

__all__ = ["AuditSink", "JSONLAuditSink", "StdoutAuditSink"]
