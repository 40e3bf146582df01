from __future__ import annotations

from pathlib import Path

import pytest

from jar_tools.properties import escape, load_properties, unescape, write_properties


def test_write_properties_plain_values(tmp_path: Path):
    out = tmp_path / "out" / "lib.properties"
    write_properties(out, {"packages": "com.example,org.acme"}, comment="Jar analysis")

    assert out.read_text(encoding="latin-1") == "#Jar analysis\npackages=com.example,org.acme\n"


def test_write_properties_leaves_no_temp_files(tmp_path: Path):
    out = tmp_path / "lib.properties"
    write_properties(out, {"packages": ""})

    assert [p.name for p in tmp_path.iterdir()] == ["lib.properties"]
    assert out.read_text(encoding="latin-1") == "packages=\n"


@pytest.mark.parametrize(
    "raw,is_key,expected",
    [
        ("my key", True, "my\\ key"),
        (" lead and inner", False, "\\ lead and inner"),
        ("a=b:c#d!e", False, "a\\=b\\:c\\#d\\!e"),
        ("tab\there\nnl", False, "tab\\there\\nnl"),
        ("C:\\dir", False, "C\\:\\\\dir"),
        ("caf\u00e9", False, "caf\\u00E9"),
        ("\U0001F600", False, "\\uD83D\\uDE00"),
    ],
)
def test_escape(raw: str, is_key: bool, expected: str):
    assert escape(raw, is_key=is_key) == expected


def test_unescape_recombines_surrogate_pairs():
    assert unescape("\\uD83D\\uDE00") == "\U0001F600"


def test_unescape_rejects_short_unicode_escape():
    with pytest.raises(ValueError):
        unescape("\\u12")


def test_load_properties_handles_separators_comments_and_continuations(tmp_path: Path):
    src = tmp_path / "in.properties"
    src.write_text(
        "# comment\n"
        "! also a comment\n"
        "\n"
        "a = 1\n"
        "b:2\n"
        "c 3\n"
        "long = first,\\\n"
        "       second\n"
        "empty\n"
        "path=C\\:\\\\dir\n",
        encoding="latin-1",
    )

    assert load_properties(src) == {
        "a": "1",
        "b": "2",
        "c": "3",
        "long": "first,second",
        "empty": "",
        "path": "C:\\dir",
    }


def test_written_properties_load_back(tmp_path: Path):
    values = {"packages": "com.example,org.acme", "odd key": " =:#!\tcaf\u00e9"}
    out = tmp_path / "x.properties"
    write_properties(out, values, comment="first line\nsecond line")

    assert load_properties(out) == values
