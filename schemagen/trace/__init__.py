"""Trace logging helpers for generation runs."""

from schemagen.trace.event import EVENT_KINDS, new_event
from schemagen.trace.logger import TraceLogger, read_events

__all__ = ["EVENT_KINDS", "TraceLogger", "new_event", "read_events"]
