"""Listener registry shared by every event flavour.

The registry keeps two ordered collections, persistent and once listeners.
Registration order is invocation order. Dispatchers never iterate the live
lists; they take snapshots (``snapshot`` / ``snapshot_once``) so handlers may add
or remove listeners while a pass is running.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
import inspect
import logging
import threading
import types
from typing import Any
from typing import Callable
from typing import Generic
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
Handler = Callable[..., Any]
Unsubscribe = Callable[[], None]


def describe_handler(handler: Any) -> str:
    """Best-effort readable name for a handler, used in log context."""
    name = getattr(handler, "__qualname__", None) or getattr(handler, "__name__", None)
    return name or repr(handler)


@dataclass(eq=False)
class Listener(Generic[T]):
    """One registration. Identity, not value equality, distinguishes entries."""

    handler: Handler
    caller: object | None = None
    once: bool = False
    _target: Handler = field(init=False, repr=False)

    def __post_init__(self) -> None:
        # A bound method already carries its receiver.
        if self.caller is None or inspect.ismethod(self.handler):
            self._target = self.handler
        else:
            self._target = types.MethodType(self.handler, self.caller)

    def matches(self, caller: object | None, handler: Handler) -> bool:
        return self.caller is caller and self.handler == handler

    def invoke(self, value: T) -> Any:
        return self._target(value)

    @property
    def name(self) -> str:
        return describe_handler(self.handler)


class ListenerRegistry(Generic[T]):
    """Ordered storage of persistent and once listeners for one event."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._listeners: list[Listener[T]] = []
        self._once_listeners: list[Listener[T]] = []

    def add(self, *args: Any, once: bool = False) -> Unsubscribe:
        """Register ``handler`` or ``(caller, handler)``.

        Returns a zero-argument callable removing exactly this registration.
        Calling it more than once, or after the listener was removed by other
        means, does nothing.
        """
        caller, handler = _split_target(args, "add")
        if not callable(handler):
            raise TypeError(f"handler must be callable, got {type(handler).__name__}")

        listener: Listener[T] = Listener(handler, caller, bool(once))
        with self._lock:
            (self._once_listeners if listener.once else self._listeners).append(listener)
        logger.debug("Registered listener %s (once=%s)", listener.name, listener.once)

        def unsubscribe() -> None:
            self.discard(listener)

        return unsubscribe

    def remove(self, *args: Any) -> bool:
        """Remove the first listener matching ``handler`` or ``(caller, handler)``."""
        caller, handler = _split_target(args, "remove")
        with self._lock:
            for storage in (self._listeners, self._once_listeners):
                for index, listener in enumerate(storage):
                    if listener.matches(caller, handler):
                        del storage[index]
                        return True
        return False

    def discard(self, listener: Listener[T]) -> bool:
        """Remove ``listener`` by identity if it is still registered."""
        with self._lock:
            storage = self._once_listeners if listener.once else self._listeners
            for index, candidate in enumerate(storage):
                if candidate is listener:
                    del storage[index]
                    return True
        return False

    def remove_all(self) -> None:
        """Drop every listener. Snapshots already taken are unaffected."""
        with self._lock:
            self._listeners.clear()
            self._once_listeners.clear()

    def snapshot(self) -> tuple[Listener[T], ...]:
        """Ordered copy of the persistent listeners."""
        with self._lock:
            return tuple(self._listeners)

    def snapshot_once(self) -> tuple[Listener[T], ...]:
        """Ordered copy of the once listeners; live storage is left untouched."""
        with self._lock:
            return tuple(self._once_listeners)

    def claim_once(self, listeners: tuple[Listener[T], ...]) -> tuple[Listener[T], ...]:
        """Remove ``listeners`` from once storage by identity.

        Returns, in the given order, only the listeners that were still
        registered. A once listener already consumed by a reentrant pass, or
        removed since the snapshot, is not returned, so it never runs twice.
        """
        with self._lock:
            wanted = {id(listener) for listener in listeners}
            claimed = {id(listener) for listener in self._once_listeners if id(listener) in wanted}
            self._once_listeners[:] = [
                listener for listener in self._once_listeners if id(listener) not in claimed
            ]
            return tuple(listener for listener in listeners if id(listener) in claimed)

    def has_once(self) -> bool:
        return bool(self._once_listeners)

    def __len__(self) -> int:
        with self._lock:
            return len(self._listeners) + len(self._once_listeners)

    def __bool__(self) -> bool:
        return bool(self._listeners or self._once_listeners)


def _split_target(args: tuple[Any, ...], operation: str) -> tuple[object | None, Handler]:
    if len(args) == 1:
        return None, args[0]
    if len(args) == 2:
        return args[0], args[1]
    raise TypeError(f"{operation}() takes a handler or a (caller, handler) pair, got {len(args)} arguments")
