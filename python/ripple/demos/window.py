"""Live window size display."""
from ripple.decorators import component
from ripple.html import escape_html as escape
from ripple.signals import SignalSource, use_logger, use_window_size


@component
def WindowSizeApp(*, source: SignalSource, title: str = "Window size"):
    size = use_window_size(source)
    use_logger(size, label="window size")

    yield f'<div class="App">\n<h1>{escape(title)}</h1>'
    if size is not None:
        yield f'\n<h2>window width, height = {size.width}, {size.height}</h2>'
    yield '\n</div>'
