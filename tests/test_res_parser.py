import pytest
from deeplink_inspector.analysis.static.res_parser import parse_string_table, load_string_table
from deeplink_inspector.core.errors import InputReadError
from pathlib import Path

SAMPLE_STRINGS = Path(__file__).parent / "sample" / "decompiled" / "res" / "values" / "strings.xml"


def test_every_named_string_is_loaded():
    content = b"""<?xml version="1.0" encoding="utf-8"?>
<resources>
    <string name="app_scheme">myapp</string>
    <string name="host">open</string>
    <string name="greeting">Hello World</string>
</resources>"""
    table = parse_string_table(content)
    assert dict(table) == {"app_scheme": "myapp", "host": "open", "greeting": "Hello World"}


def test_duplicate_name_keeps_last_declaration():
    content = b"""<resources>
    <string name="scheme">first</string>
    <string name="scheme">second</string>
</resources>"""
    table = parse_string_table(content)
    assert len(table) == 1
    assert table["scheme"] == "second"


def test_entries_without_name_are_skipped():
    content = b"""<resources>
    <string>orphan</string>
    <string name="">empty</string>
    <string name="ok">kept</string>
</resources>"""
    assert dict(parse_string_table(content)) == {"ok": "kept"}


def test_non_string_children_are_ignored():
    content = b"""<resources>
    <color name="accent">#ff0000</color>
    <string name="ok">kept</string>
    <plurals name="items"><item quantity="one">item</item></plurals>
</resources>"""
    assert dict(parse_string_table(content)) == {"ok": "kept"}


def test_empty_string_value_is_kept():
    table = parse_string_table(b'<resources><string name="blank"/></resources>')
    assert table["blank"] == ""


def test_inline_markup_keeps_direct_text_only():
    content = b'<resources><string name="styled">Hi <b>bold</b> there</string></resources>'
    assert parse_string_table(content)["styled"] == "Hi  there"


@pytest.mark.parametrize("content", [
    b"",
    b"not xml at all",
    b"<manifest><string name='x'>wrong root</string></manifest>",
])
def test_malformed_content_gives_empty_table(content):
    assert len(parse_string_table(content)) == 0


def test_table_is_read_only():
    table = parse_string_table(b'<resources><string name="a">b</string></resources>')
    with pytest.raises(TypeError):
        table["a"] = "changed"


def test_load_string_table_from_sample():
    table = load_string_table(SAMPLE_STRINGS)
    assert table["app_scheme"] == "myapp"
    assert table["web_host"] == "shop.example.com"


def test_load_string_table_missing_file(tmp_path):
    with pytest.raises(InputReadError) as excinfo:
        load_string_table(tmp_path / "missing.xml")
    assert excinfo.value.stage == "strings-read"
    assert "strings file" in str(excinfo.value)


def test_broken_entry_keeps_earlier_entries():
    content = b"""<resources>
    <string name="app_scheme">myapp</string>
    <string name="bad">Tom & Jerry</string>
</resources>"""
    table = parse_string_table(content)
    assert table["app_scheme"] == "myapp"


def test_unclosed_entry_keeps_earlier_entries():
    content = b"<resources><string name='host'>open</string><string name='x'>unclosed</resources>"
    assert parse_string_table(content)["host"] == "open"
