"""
External signal observation.

A signal source is anything that can tell listeners "something changed" and
answer "what is the current value". WindowSource plays the part of a browser
window emitting resize events; any object with the same three methods can be
injected instead.

Two ways to observe a source:
- SignalObserver: explicit activate()/deactivate() lifecycle for plain code
- use_window_size(): the same lifecycle driven by a component's mount/unmount
"""
from typing import Callable, Generic, List, Optional, Protocol, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from ripple.errors import ListenerError, ObserverStateError
from ripple.hooks import use_effect, use_state
from ripple.log import get_logger

__all__ = [
    'Dimensions',
    'SignalSource',
    'WindowSource',
    'SignalObserver',
    'dimensions_of',
    'use_window_size',
    'use_logger',
]

logger = get_logger(__name__)

T = TypeVar('T')

Listener = Callable[[], None]


class Dimensions(BaseModel):
    """Width and height of a window, in pixels."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(ge=0)
    height: int = Field(ge=0)

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


class SignalSource(Protocol):
    """Event source an observer can attach to."""

    def subscribe(self, listener: Listener) -> None: ...

    def unsubscribe(self, listener: Listener) -> None: ...

    def current(self) -> Dimensions: ...


class WindowSource:
    """
    In-memory window that emits resize events.

    Listeners are called with no arguments after the dimensions change and are
    expected to query current() themselves.
    """

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self._dimensions = Dimensions(width=width, height=height)
        self._listeners: List[Listener] = []

    def __repr__(self) -> str:
        return f"<WindowSource {self._dimensions} listeners={len(self._listeners)}>"

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            raise ListenerError(f"Listener {listener!r} is already subscribed")
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            raise ListenerError(f"Listener {listener!r} is not subscribed") from None

    def current(self) -> Dimensions:
        return self._dimensions

    def resize(self, width: int, height: int) -> None:
        """Change the dimensions and notify every listener."""
        self._dimensions = Dimensions(width=width, height=height)
        logger.debug("resize", width=width, height=height, listeners=len(self._listeners))
        # Listeners may unsubscribe while being notified
        for listener in list(self._listeners):
            listener()


def dimensions_of(source: SignalSource) -> Dimensions:
    """Default mapper: read the source's current dimensions."""
    return source.current()


class SignalObserver(Generic[T]):
    """
    Mirrors the latest value of a signal source.

    Each activation registers exactly one private listener; deactivation removes
    that same listener. The stored value starts unset (None) on every activation
    and is replaced on each source event.
    """

    def __init__(
        self,
        source: SignalSource,
        mapper: Callable[[SignalSource], T] = dimensions_of,
    ) -> None:
        self.source = source
        self.mapper = mapper
        self._value: Optional[T] = None
        self._listener: Optional[Listener] = None
        self._callbacks: List[Callable[[T], None]] = []

    @property
    def active(self) -> bool:
        return self._listener is not None

    @property
    def value(self) -> Optional[T]:
        """Latest observed value, or None before the first event."""
        return self._value

    def on_change(self, callback: Callable[[T], None]) -> Callable[[T], None]:
        """Register callback for value updates. Usable as a decorator."""
        if callback not in self._callbacks:
            self._callbacks.append(callback)
        return callback

    def activate(self) -> None:
        if self._listener is not None:
            raise ObserverStateError("Observer is already active")

        # A fresh closure per activation: the source can never see it twice
        def listener() -> None:
            self._update()

        self._value = None
        self.source.subscribe(listener)
        self._listener = listener
        logger.debug("observer activated", source=repr(self.source))

    def deactivate(self) -> None:
        if self._listener is None:
            raise ObserverStateError("Observer is not active")
        listener, self._listener = self._listener, None
        self.source.unsubscribe(listener)
        logger.debug("observer deactivated", source=repr(self.source))

    def __enter__(self) -> "SignalObserver[T]":
        self.activate()
        return self

    def __exit__(self, *args) -> None:
        self.deactivate()

    def _update(self) -> None:
        value = self.mapper(self.source)
        self._value = value
        for callback in self._callbacks:
            callback(value)


def use_window_size(source: SignalSource) -> Optional[Dimensions]:
    """
    Hook returning the latest dimensions reported by source.

    Returns None until the first resize event after mount. The listener is
    registered when the component mounts (or the source changes) and removed
    by the effect cleanup, which the runtime runs exactly once.
    """
    size, set_size = use_state(None)

    def subscribe():
        observer = SignalObserver(source)
        observer.on_change(set_size)
        observer.activate()
        return observer.deactivate

    use_effect(subscribe, (source,))
    return size


def use_logger(value, label: str = 'value') -> None:
    """Hook that logs value every time it changes."""

    def log_value():
        logger.info("value changed", label=label, value=value)

    use_effect(log_value, (value,))
