"""Synchronous render runtime.

A Root mounts one component tree and owns every piece of hook state created
while rendering it. Hooks are matched to their slots by call order, so a
component must call the same hooks in the same order on every render.

    root = Root(ClickCounter)
    root.mount()                 # first render, effects run
    root.dispatch("click")       # handler updates state, tree re-renders
    root.html                    # latest output
    root.unmount()               # every effect cleanup runs once

State updates re-render immediately unless they happen while the root is
already busy (rendering or running effects) or inside `with root.batch():`, in
which case a single re-render happens once the root is idle again.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Callable

from ripple.config import get_settings
from ripple.errors import (
    HookError,
    HookOrderError,
    RenderLoopError,
    RippleError,
    UnknownHandlerError,
)
from ripple.log import get_logger

__all__ = ["Root", "current_root"]

logger = get_logger(__name__)

_current_root: ContextVar["Root | None"] = ContextVar("ripple_current_root", default=None)

_UNSET = object()


def current_root() -> "Root":
    """Return the Root that is rendering right now."""
    root = _current_root.get()
    if root is None:
        raise HookError("Hooks can only be called while a component is rendered by a Root")
    return root


class _StateSlot:
    kind = "use_state"
    __slots__ = ("root", "value", "set")

    def __init__(self, root: "Root", initial):
        self.root = root
        self.value = initial() if callable(initial) else initial
        self.set = self._set

    def _set(self, value) -> None:
        # Functions are treated as updaters and applied to the latest value
        root = self.root
        if not root.mounted:
            logger.warning("state update ignored after unmount", component=root.name)
            return
        new_value = value(self.value) if callable(value) else value
        if new_value == self.value:
            return
        self.value = new_value
        root._schedule()


class _EffectSlot:
    kind = "use_effect"
    __slots__ = ("deps", "pending", "cleanup")

    def __init__(self):
        self.deps = _UNSET
        self.pending = None
        self.cleanup = None


class Ref:
    """Mutable box that survives re-renders."""

    kind = "use_ref"
    __slots__ = ("current",)

    def __init__(self, current=None):
        self.current = current

    def __repr__(self):
        return f"Ref({self.current!r})"


class Root:
    """Mount point for a component tree."""

    def __init__(self, component: Callable, /, **props):
        self.component = component
        self.props = props
        self.name = getattr(component, "__name__", repr(component))
        self.max_render_passes = get_settings().max_render_passes
        self.render_count = 0

        self._slots: list = []
        # Number of hooks seen on the first render since mount
        self._slot_count: int | None = None
        self._cursor = 0
        self._handlers: dict[str, Callable] = {}
        self._next_handlers: dict[str, Callable] = {}
        self._html = ""
        self._mounted = False
        self._busy = False
        self._dirty = False
        self._batch_depth = 0

    def __repr__(self):
        return f"<Root {self.name} mounted={self._mounted} renders={self.render_count}>"

    @property
    def mounted(self) -> bool:
        return self._mounted

    @property
    def html(self) -> str:
        """Output of the latest render."""
        return self._html

    @property
    def handlers(self) -> tuple[str, ...]:
        """Names of the handlers registered by the latest render."""
        return tuple(sorted(self._handlers))

    # Lifecycle

    def mount(self) -> str:
        if self._mounted:
            raise RippleError("Root is already mounted", self.name)
        self._mounted = True
        logger.debug("mount", component=self.name)
        self._flush()
        return self._html

    def render(self) -> str:
        """Re-render with the current props and state."""
        self._require_mounted()
        self._flush()
        return self._html

    def update(self, **props) -> str:
        """Merge new props into the root component's props and re-render."""
        self._require_mounted()
        self.props = {**self.props, **props}
        self._flush()
        return self._html

    def unmount(self) -> None:
        """Run every effect cleanup once, in reverse hook order, and drop state."""
        self._require_mounted()
        self._mounted = False
        error = None
        for slot in reversed(self._slots):
            if isinstance(slot, _EffectSlot):
                failed = self._run_cleanup(slot)
                if error is None:
                    error = failed
        self._slots.clear()
        self._slot_count = None
        self._handlers = {}
        logger.debug("unmount", component=self.name, renders=self.render_count)
        if error is not None:
            raise error

    def __enter__(self):
        self.mount()
        return self

    def __exit__(self, *args):
        if self._mounted:
            self.unmount()

    @contextmanager
    def batch(self):
        """Defer re-rendering until the outermost batch exits."""
        self._batch_depth += 1
        try:
            yield self
        finally:
            self._batch_depth -= 1
        if self._batch_depth == 0 and self._dirty and self._mounted and not self._busy:
            self._flush()

    # Events

    def dispatch(self, name: str, *args, **kwargs) -> Any:
        """Invoke the handler registered under name by the latest render."""
        self._require_mounted()
        try:
            handler = self._handlers[name]
        except KeyError:
            raise UnknownHandlerError(name, list(self._handlers)) from None
        logger.debug("dispatch", component=self.name, handler=name)
        return handler(*args, **kwargs)

    # Hook plumbing, used by ripple.hooks

    def _claim(self, kind: str, factory: Callable):
        index = self._cursor
        self._cursor += 1
        if index < len(self._slots):
            slot = self._slots[index]
            if slot.kind != kind:
                raise HookOrderError(
                    "Hook order changed between renders",
                    self.name,
                    index=index,
                    expected=slot.kind,
                    found=kind,
                )
            return slot
        if self._slot_count is not None:
            raise HookOrderError("Rendered more hooks than during the previous render", self.name)
        slot = factory()
        self._slots.append(slot)
        return slot

    def _register_handler(self, name: str, handler: Callable) -> None:
        if name in self._next_handlers:
            raise HookError(f"Handler {name!r} registered twice in one render", self.name)
        self._next_handlers[name] = handler

    def _schedule(self) -> None:
        self._dirty = True
        if self._busy or self._batch_depth:
            return
        self._flush()

    # Rendering

    def _require_mounted(self) -> None:
        if not self._mounted:
            raise RippleError("Root is not mounted", self.name)

    def _flush(self) -> None:
        self._busy = True
        self._dirty = True
        passes = 0
        try:
            while self._dirty and self._mounted:
                passes += 1
                if passes > self.max_render_passes:
                    raise RenderLoopError(
                        f"Component kept updating after {self.max_render_passes} render passes",
                        self.name,
                    )
                self._dirty = False
                self._render_once()
                self._run_effects()
        finally:
            self._busy = False

    def _render_once(self) -> None:
        self._cursor = 0
        self._next_handlers = {}
        token = _current_root.set(self)
        try:
            html = "".join(self._instantiate())
        finally:
            _current_root.reset(token)

        if self._slot_count is not None and self._cursor != self._slot_count:
            raise HookOrderError("Rendered fewer hooks than during the previous render", self.name)
        self._slot_count = len(self._slots)

        self._handlers = self._next_handlers
        self._html = html
        self.render_count += 1

    def _instantiate(self):
        output = self.component(**self.props)
        if isinstance(output, str):
            return (output,)
        return output

    def _run_cleanup(self, slot: _EffectSlot) -> Exception | None:
        """Run and forget the slot's cleanup, returning what it raised."""
        if slot.cleanup is None:
            return None
        cleanup, slot.cleanup = slot.cleanup, None
        try:
            cleanup()
        except Exception as exc:
            logger.warning("effect cleanup failed", component=self.name, error=repr(exc))
            return exc
        return None

    def _run_effects(self) -> None:
        # A failing cleanup is re-raised once every due effect has re-run
        error = None
        for slot in self._slots:
            if isinstance(slot, _EffectSlot) and slot.pending is not None:
                failed = self._run_cleanup(slot)
                if error is None:
                    error = failed

        for slot in self._slots:
            if not isinstance(slot, _EffectSlot) or slot.pending is None:
                continue
            effect, slot.pending = slot.pending, None
            result = effect()
            if result is not None and not callable(result):
                raise HookError(
                    f"Effect must return None or a cleanup function, got {type(result).__name__}",
                    self.name,
                )
            slot.cleanup = result
        if error is not None:
            raise error
