"""Observability module: events."""

from uniqueid_sdk.observability.event_bus import Event, EventBus, InMemoryEventBus

__all__ = ["Event", "EventBus", "InMemoryEventBus"]
