"""Hooks for components rendered by a ripple Root.

Every hook must be called unconditionally from a component body, in the same
order on each render:

    @component
    def Clicker(*, label="Click"):
        count, set_count = use_state(0)
        use_handler("click", lambda: set_count(lambda prev: prev + 1))
        yield f'<button data-on-click="click">{escape(label)}</button> {count}'
"""

from typing import Any, Callable, Hashable, Iterable, TypeVar

from ripple.runtime import Ref, _EffectSlot, _StateSlot, current_root

__all__ = ["use_state", "use_effect", "use_ref", "use_handler"]

T = TypeVar("T")

Cleanup = Callable[[], None]


def use_state(initial: T | Callable[[], T]) -> tuple[T, Callable[[Any], None]]:
    """Declare a piece of state owned by the rendering Root.

    Args:
        initial: Initial value, or a zero-argument function producing it. Only
            used on the first render.

    Returns:
        (value, set_value). set_value takes either a new value or a function of
        the previous value. Functions are applied when the update happens, so
        they always see the latest state even when called from an old render.
    """
    root = current_root()
    slot = root._claim(_StateSlot.kind, lambda: _StateSlot(root, initial))
    return slot.value, slot.set


def use_effect(effect: Callable[[], Cleanup | None], deps: Iterable[Hashable] | None = None) -> None:
    """Run effect after the render is committed.

    Args:
        effect: Called with no arguments. May return a cleanup function, which
            runs before the effect runs again and when the Root unmounts.
        deps: Values the effect depends on. None runs the effect after every
            render; an empty sequence runs it once after mount.
    """
    root = current_root()
    slot = root._claim(_EffectSlot.kind, _EffectSlot)
    deps = None if deps is None else tuple(deps)
    if deps is None or slot.deps != deps:
        slot.pending = effect
    slot.deps = deps


def use_ref(initial: Any = None) -> Ref:
    """Return a Ref whose .current persists across renders."""
    root = current_root()
    return root._claim(Ref.kind, lambda: Ref(initial))


def use_handler(name: str, handler: Callable) -> Callable:
    """Expose handler to Root.dispatch(name) until the next render."""
    current_root()._register_handler(name, handler)
    return handler
