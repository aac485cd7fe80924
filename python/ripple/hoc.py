"""Higher-order components.

with_counter() adds counter state to a presentational component without the
component knowing where the state lives:

    @component
    def ClickCounter(*, count, on_increment):
        use_handler("click", on_increment)
        yield f'<button data-on-click="click">Click</button><div>Count is {count}</div>'

    TenStepClicker = with_counter(ClickCounter, step=10)
    Root(TenStepClicker).mount()
"""

from ripple.decorators import component
from ripple.errors import InvalidStepError
from ripple.hooks import use_state

__all__ = ["with_counter", "increment"]


def increment(prev: int, step: int) -> int:
    """Counter reducer: the next count given the previous one."""
    return prev + step


def _check_step(step, component_name: str) -> int:
    # bool is an int subclass but never a meaningful step
    if isinstance(step, bool) or not isinstance(step, int):
        raise InvalidStepError(step, component_name)
    if step < 0:
        raise InvalidStepError(step, component_name)
    return step


def with_counter(inner, step: int = 1):
    """Wrap inner so each rendered instance carries its own counter.

    Args:
        inner: Component (or any callable returning HTML chunks) accepting the
            keyword props `count` and `on_increment`.
        step: Amount added per increment. Must be an int >= 0. Defaults to 1.

    Returns:
        A new component. It forwards every prop it receives to inner and adds
        `count` (starting at 0) and `on_increment`, a zero-argument callable
        that advances the counter by step.

    Each rendered instance keeps its own count, but handler names registered
    by inner through use_handler are shared by the whole Root. Two instances
    in one tree need distinct names, e.g. a `handler` prop forwarded to inner:

        yield from ClickCounter(handler="left")
        yield from ClickCounter(handler="right")

    Raises:
        InvalidStepError: step is not a non-negative int.
    """
    name = getattr(inner, "__name__", type(inner).__name__)
    step = _check_step(step, name)

    def counter(**props):
        count, set_count = use_state(0)

        def on_increment():
            set_count(lambda prev: increment(prev, step))

        output = inner(**{**props, "count": count, "on_increment": on_increment})
        if isinstance(output, str):
            yield output
        else:
            yield from output

    counter.__name__ = counter.__qualname__ = f"withCounter({name})"
    counter.__doc__ = getattr(inner, "__doc__", None)

    wrapped = component(counter)
    wrapped.__wrapped__ = inner
    wrapped.step = step
    return wrapped
