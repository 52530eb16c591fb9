"""Registration surface shared by events and restricted listen handles."""

from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any
from typing import Generic
from typing import TypeVar

from mono_event.core.registry import ListenerRegistry

if TYPE_CHECKING:
    from mono_event.core.registry import Unsubscribe

T = TypeVar("T")


class Listenable(Generic[T]):
    """Exposes ``add``/``remove``/``remove_all`` over a listener registry.

    Usage::

        unsubscribe = event.add(handler)
        event.add(receiver, Receiver.on_value, once=True)
        event.remove(handler)
    """

    def __init__(self, registry: ListenerRegistry[T] | None = None) -> None:
        self._registry: ListenerRegistry[T] = registry if registry is not None else ListenerRegistry()

    def add(self, *args: Any, once: bool = False) -> Unsubscribe:
        """Register ``handler`` or ``(caller, handler)``; returns an unsubscribe callable."""
        return self._registry.add(*args, once=once)

    def remove(self, *args: Any) -> bool:
        """Remove the first matching registration; ``False`` when nothing matched."""
        return self._registry.remove(*args)

    def remove_all(self) -> None:
        self._registry.remove_all()

    @property
    def listener_count(self) -> int:
        return len(self._registry)

    @property
    def has_listeners(self) -> bool:
        return bool(self._registry)

    def __len__(self) -> int:
        return len(self._registry)

    def __bool__(self) -> bool:
        # An event with no listeners is still a usable event.
        return True
