from __future__ import annotations

import os
import re
import tempfile
from pathlib import Path
from typing import Mapping

_SPECIAL_ESCAPES = {
    "\\": "\\\\",
    "\t": "\\t",
    "\n": "\\n",
    "\r": "\\r",
    "\f": "\\f",
    "=": "\\=",
    ":": "\\:",
    "#": "\\#",
    "!": "\\!",
}

_UNESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}

_WHITESPACE = " \t\f"

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _unicode_escape(ch: str) -> str:
    code = ord(ch)
    if code > 0xFFFF:
        # written as a UTF-16 surrogate pair, like the Java format
        code -= 0x10000
        return f"\\u{0xD800 + (code >> 10):04X}\\u{0xDC00 + (code & 0x3FF):04X}"
    return f"\\u{code:04X}"


def escape(s: str, *, is_key: bool) -> str:
    out: list[str] = []
    for i, ch in enumerate(s):
        if ch == " ":
            out.append("\\ " if (is_key or i == 0) else " ")
        elif ch in _SPECIAL_ESCAPES:
            out.append(_SPECIAL_ESCAPES[ch])
        elif ord(ch) < 0x20 or ord(ch) > 0x7E:
            out.append(_unicode_escape(ch))
        else:
            out.append(ch)
    return "".join(out)


def _comment_lines(comment: str) -> list[str]:
    return ["#" + line for line in comment.splitlines() or [""]]


def write_properties(path: Path, values: Mapping[str, str], *, comment: str | None = None) -> None:
    """Write ``values`` as a properties file at ``path``.

    The file appears atomically: it is written next to its destination and
    moved into place, so a failed write never leaves a partial file behind.
    """
    lines: list[str] = []
    if comment is not None:
        lines.extend(_comment_lines(comment))
    for key, value in values.items():
        lines.append(f"{escape(key, is_key=True)}={escape(value, is_key=False)}")
    payload = "\n".join(lines) + "\n"

    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding="latin-1", newline="\n") as fh:
            fh.write(payload)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def _logical_lines(text: str) -> list[str]:
    out: list[str] = []
    pending: str | None = None
    for raw in _LINE_BREAK.split(text):
        line = raw.lstrip(_WHITESPACE)
        if pending is None:
            if not line or line[0] in "#!":
                continue
        # an odd number of trailing backslashes continues the line
        trailing = len(line) - len(line.rstrip("\\"))
        continued = trailing % 2 == 1
        if continued:
            line = line[:-1]
        pending = line if pending is None else pending + line
        if not continued:
            out.append(pending)
            pending = None
    if pending is not None:
        out.append(pending)
    return out


def unescape(s: str) -> str:
    out: list[str] = []
    i = 0
    n = len(s)
    while i < n:
        ch = s[i]
        if ch != "\\" or i + 1 >= n:
            out.append(ch)
            i += 1
            continue
        nxt = s[i + 1]
        if nxt == "u":
            digits = s[i + 2 : i + 6]
            if len(digits) != 4:
                raise ValueError(f"malformed \\uXXXX escape: {s[i:i + 6]!r}")
            out.append(chr(int(digits, 16)))
            i += 6
            continue
        out.append(_UNESCAPES.get(nxt, nxt))
        i += 2
    # recombine surrogate pairs produced by _unicode_escape
    return "".join(out).encode("utf-16", "surrogatepass").decode("utf-16", "surrogatepass")


def _split_key_value(line: str) -> tuple[str, str]:
    i = 0
    n = len(line)
    while i < n:
        ch = line[i]
        if ch == "\\":
            i += 2
            continue
        if ch in "=:" or ch in _WHITESPACE:
            break
        i += 1
    key = line[:i]
    rest = line[i:].lstrip(_WHITESPACE)
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip(_WHITESPACE)
    return key, rest


def load_properties(path: Path) -> dict[str, str]:
    text = path.read_text(encoding="latin-1")
    values: dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split_key_value(line)
        values[unescape(key)] = unescape(value)
    return values
