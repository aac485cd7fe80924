"""Test HTML helpers."""

from ripple import Safe, escape_html, render_attr, render_style, safe, spread_attrs


class TestEscaping:
    def test_escapes_special_characters(self):
        assert escape_html("<a href='x'>&</a>") == "&lt;a href=&#39;x&#39;&gt;&amp;&lt;/a&gt;"

    def test_none_is_empty(self):
        assert escape_html(None) == ""

    def test_safe_passes_through(self):
        assert escape_html(safe("<b>bold</b>")) == "<b>bold</b>"
        assert isinstance(safe("x"), Safe)

    def test_safe_none(self):
        assert safe(None) == ""


class TestAttributes:
    def test_boolean_attributes(self):
        assert render_attr("disabled", True) == " disabled"
        assert render_attr("disabled", False) == ""
        assert render_attr("disabled", None) == ""

    def test_value_escaped(self):
        assert render_attr("value", '"quoted"') == ' value="&#34;quoted&#34;"'

    def test_empty_string_kept(self):
        assert render_attr("value", "") == ' value=""'

    def test_spread_keeps_order(self):
        attrs = spread_attrs({"name": "phone", "type": "text", "required": True, "hidden": False})

        assert attrs == ' name="phone" type="text" required'

    def test_spread_renders_style_dict(self):
        assert spread_attrs({"style": {"marginBottom": "5px"}}) == ' style="margin-bottom:5px"'

    def test_spread_empty(self):
        assert spread_attrs({}) == ""


class TestStyle:
    def test_camel_case_converted(self):
        style = render_style({"borderCollapse": "collapse", "minWidth": "150px"})

        assert style == "border-collapse:collapse;min-width:150px"

    def test_kebab_case_kept(self):
        assert render_style({"font-size": "14px"}) == "font-size:14px"

    def test_none_values_skipped(self):
        assert render_style({"color": None, "margin": 0}) == "margin:0"

    def test_string_passthrough(self):
        assert render_style("color: red") == "color: red"
        assert render_style(None) == ""
