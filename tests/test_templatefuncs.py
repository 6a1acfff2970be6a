from markupsafe import Markup

from lightexplorer.format import format_amount, format_graffiti
from lightexplorer.templatefuncs import (
    format_graffiti_string,
    graffiti_to_string,
    include_html,
    template_funcs,
)


def test_include_html_reads_file(tmp_path):
    path = tmp_path / "banner.html"
    path.write_text("<b>hi</b>")
    result = include_html(str(path))
    assert isinstance(result, Markup)
    assert str(result) == "<b>hi</b>"


def test_include_html_missing_file(tmp_path):
    assert include_html(str(tmp_path / "absent.html")) == ""


def test_graffiti_strips_padding():
    assert graffiti_to_string(b"\x00\x00gm\x00\x00") == "gm"


def test_graffiti_drops_invalid_bytes_and_inner_nul():
    assert graffiti_to_string(b"g\xffm") == "gm"
    assert graffiti_to_string(b"a\x00b") == "ab"


def test_graffiti_keeps_valid_unicode():
    text = "hello \u00e9"
    assert graffiti_to_string(text.encode("utf-8")) == text


def test_format_graffiti_string_escapes():
    assert format_graffiti_string('<a href="x">') == "&lt;a href=&#34;x&#34;&gt;"
    assert format_graffiti_string("plain\ufffd") == "plain"


def test_template_funcs_table_contains_formatters():
    funcs = template_funcs()
    assert {"includeHTML", "formatAmount", "formatGraffiti", "round", "contains"} <= set(funcs)
    assert funcs["formatGraffiti"] is format_graffiti
    assert funcs["formatAmount"] is format_amount


def test_template_arithmetic_invariants():
    funcs = template_funcs()
    assert funcs["add"](2, 3) == funcs["addUI64"](3, 2)
    assert funcs["sub"](funcs["add"](7, 4), 4) == 7
    assert funcs["bigIntCmp"](10, 3) == -funcs["bigIntCmp"](3, 10)
    assert funcs["bigIntCmp"](5, 5) == 0
    assert funcs["mod"](9, 3) is True
    assert funcs["mod"](9, 4) is False


def test_template_round_half_away_from_zero():
    funcs = template_funcs()
    assert funcs["round"](2.5, 0) == 3.0
    assert funcs["round"](-2.5, 0) == -funcs["round"](2.5, 0)


def test_template_contains_and_comparisons():
    funcs = template_funcs()
    assert funcs["contains"]("graffiti", "raf") is True
    assert funcs["contains"]("graffiti", "xyz") is False
    assert funcs["gtf"](2.0, 1.0) is True
    assert funcs["ltf"](2.0, 1.0) is False
    assert funcs["div"](funcs["mul"](3.0, 4.0), 4.0) == 3.0