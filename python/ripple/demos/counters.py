"""
Two counters, one behavior.

ClickButton and HoverButton only know how to display a count and which event
should advance it. with_counter() supplies the state: 10 per click, 5 per hover.
"""
from ripple.decorators import component
from ripple.hoc import with_counter
from ripple.hooks import use_handler
from ripple.html import escape_html as escape


@component
def ClickButton(*, count: int, on_increment, handler: str = "click", label: str = "Click"):
    use_handler(handler, on_increment)
    yield f"""\
<button data-on-click="{escape(handler)}">{escape(label)}</button>
<div>Count is {count}</div>"""


@component
def HoverButton(*, count: int, on_increment, handler: str = "hover", label: str = "Hover"):
    use_handler(handler, on_increment)
    yield f"""\
<button data-on-mouseover="{escape(handler)}">{escape(label)}</button>
<div>Count is {count}</div>"""


ClickCounter = with_counter(ClickButton, step=10)
HoverCounter = with_counter(HoverButton, step=5)


@component
def CounterApp():
    yield from ClickCounter()
    yield "\n"
    yield from HoverCounter()
