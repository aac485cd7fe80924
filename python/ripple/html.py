"""HTML escaping and rendering helpers for ripple components.

Components build their markup with f-strings; any value that did not come from
component code itself (props, state, form input) goes through escape().
"""

from markupsafe import Markup, escape as _escape

__all__ = [
    'Safe',
    'safe',
    'escape_html',
    'render_attr',
    'render_style',
    'spread_attrs',
]

Safe = Markup


def safe(value) -> Markup:
    """Mark a value as safe HTML that should not be escaped.

    Example:
        >>> safe("<b>bold</b>")
        Markup('<b>bold</b>')
        >>> safe(None)
        Markup('')
    """
    if value is None:
        return Markup('')
    if hasattr(value, '__html__'):
        return Markup(value.__html__())
    return Markup(str(value))


def escape_html(value) -> Markup:
    """Escape a value for safe HTML output.

    None renders as an empty string. Values with an __html__ method (Markup,
    other components' output marked safe) are passed through unchanged.

    Example:
        >>> escape_html("<script>alert('XSS')</script>")
        Markup('&lt;script&gt;alert(&#39;XSS&#39;)&lt;/script&gt;')
    """
    if value is None:
        return Markup('')
    return _escape(value)


def render_attr(name: str, value) -> str:
    """Render a single HTML attribute.

    - True: renders just the attribute name (e.g., "disabled")
    - False/None: renders nothing
    - Other values: renders name="escaped_value"

    Example:
        >>> render_attr("disabled", True)
        ' disabled'
        >>> render_attr("id", "main")
        ' id="main"'
    """
    if value is True:
        return f' {name}'
    if value is False or value is None:
        return ''
    return f' {name}="{escape_html(value)}"'


def render_style(value) -> str:
    """Render a style attribute value.

    Accepts a str (passed through) or a dict of CSS properties. Keys may be
    written in camelCase; they are converted to kebab-case.

    Example:
        >>> render_style({"borderCollapse": "collapse", "padding": "5px 10px"})
        'border-collapse:collapse;padding:5px 10px'
    """
    if value is None:
        return ''
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        return ';'.join(f'{_css_name(k)}:{v}' for k, v in value.items() if v is not None)
    return str(value) if value else ''


def spread_attrs(attrs: dict) -> str:
    """Spread a dictionary as HTML attributes, in insertion order.

    Dict-valued "style" entries are rendered with render_style().

    Example:
        >>> spread_attrs({"name": "phone", "type": "text", "required": True})
        ' name="phone" type="text" required'
    """
    if not attrs:
        return ''
    parts = []
    for k, v in attrs.items():
        if k == 'style' and isinstance(v, dict):
            v = render_style(v)
        parts.append(render_attr(k, v))
    return ''.join(parts)


def _css_name(key: str) -> str:
    if '-' in key:
        return key
    return ''.join(f'-{c.lower()}' if c.isupper() else c for c in key)
