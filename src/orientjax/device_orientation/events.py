"""Minimal synchronous event dispatch.

:class:`EventDispatcher` keeps a list of listeners per event type and
calls them in registration order when an event of that type is
dispatched.  Listeners receive an :class:`Event` whose ``target`` is the
dispatcher; they read any state they need from it directly.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any

CHANGE_EVENT = "change"


@dataclass(frozen=True)
class Event:
    """A dispatched event.

    Args:
        type: Event type, e.g. ``"change"``.
        target: Dispatcher that emitted the event. Filled in by
            :meth:`EventDispatcher.dispatch_event`.
    """

    type: str
    target: Any = None


Listener = Callable[[Event], Any]


class EventDispatcher:
    """Registry of event listeners with synchronous fan-out."""

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = {}

    def add_event_listener(self, event_type: str, listener: Listener) -> None:
        """Register ``listener`` for ``event_type``.

        Registering the same listener twice for one type has no effect.
        """
        listeners = self._listeners.setdefault(event_type, [])
        if listener not in listeners:
            listeners.append(listener)

    def has_event_listener(self, event_type: str, listener: Listener) -> bool:
        """Return whether ``listener`` is registered for ``event_type``."""
        return listener in self._listeners.get(event_type, ())

    def remove_event_listener(self, event_type: str, listener: Listener) -> None:
        """Unregister ``listener``; unknown listeners are ignored."""
        listeners = self._listeners.get(event_type)
        if listeners and listener in listeners:
            listeners.remove(listener)

    def dispatch_event(self, event: Event) -> None:
        """Call every listener registered for ``event.type``.

        Listeners are called on a snapshot of the registry, so a listener
        may add or remove listeners without affecting this dispatch.
        Exceptions raised by a listener propagate to the caller.

        Args:
            event: Event to dispatch; its ``target`` is set to ``self``.
        """
        listeners = self._listeners.get(event.type)
        if not listeners:
            return
        event = replace(event, target=self)
        for listener in list(listeners):
            listener(event)
