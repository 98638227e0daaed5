"""Shared cross-cutting utilities (telemetry)."""
