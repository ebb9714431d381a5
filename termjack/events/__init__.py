"""
Event system for termjack.

This package provides the emitter the game publishes its progress on.
"""

from termjack.events.emitter import EventEmitter, EventBus, EngineEventType

__all__ = ["EventEmitter", "EventBus", "EngineEventType"]
