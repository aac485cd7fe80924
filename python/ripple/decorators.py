"""Decorators for ripple components.

The @component decorator turns a generator function into a component class:
- Yield mode: `yield from Component(**props)` inside another component
- String mode: `str(Component(**props))` or `"".join(Component(**props))`

Components with children (accepts _content as first parameter):
    @component
    def Section(_content=None, *, title=""):
        yield f'<section><h1>{escape(title)}</h1>'
        if _content:
            yield from _content
        yield '</section>'

    html = str(Section(["<p>body</p>"], title="Hello"))

Components without children:
    @component
    def Badge(*, text="", color="blue"):
        yield f'<span style="color: {color}">{escape(text)}</span>'

Hooks from ripple.hooks may be called in the body of a component as long as it
is rendered by a ripple.runtime.Root. Hooks run while the generator is being
consumed, so a component instance must be iterated exactly once per render.
"""

import inspect

__all__ = ["component", "is_component"]


def component(fn):
    """Decorator that wraps a generator function into a renderable component.

    Args:
        fn: A generator function that yields HTML chunks.

    Returns:
        A wrapper class whose instances are iterable and convertible to str.
    """
    if not inspect.isgeneratorfunction(fn):
        raise TypeError(f"@component expects a generator function, got {fn!r}")

    # Check if the function accepts _content as its first parameter
    sig = inspect.signature(fn)
    params = list(sig.parameters.keys())
    has_content_param = bool(params) and params[0] == "_content"

    class ComponentWrapper:
        __slots__ = ("_content", "_props")

        def __init__(self, _content=None, **props):
            self._content = _content
            self._props = props

        @property
        def props(self) -> dict:
            return dict(self._props)

        def _call_fn(self):
            """Call the wrapped function with appropriate arguments."""
            if has_content_param:
                return fn(self._content, **self._props)
            return fn(**self._props)

        def __iter__(self):
            return iter(self._call_fn())

        def __str__(self):
            return "".join(self._call_fn())

        def __repr__(self):
            return f"<{fn.__name__} props={self._props!r}>"

    ComponentWrapper.__name__ = fn.__name__
    ComponentWrapper.__qualname__ = fn.__qualname__
    ComponentWrapper.__doc__ = fn.__doc__
    ComponentWrapper.__module__ = fn.__module__
    ComponentWrapper.__wrapped__ = fn
    ComponentWrapper.__ripple_component__ = True

    return ComponentWrapper


def is_component(obj) -> bool:
    """Return True if obj was produced by @component."""
    return isinstance(obj, type) and getattr(obj, "__ripple_component__", False)
