"""Small helpers: CSV line reading, string splitting and console control."""

from __future__ import annotations

import subprocess
from itertools import groupby
from typing import List, Optional, TextIO

MAX_LINE_LENGTH = 1024
MAX_FIELDS = 300
PRESS_KEY_PROMPT = "Presione una tecla para continuar..."


def _cstring(buf: List[str], start: int) -> str:
    chars = []
    for ch in buf[start:]:
        if ch == "\0":
            break
        chars.append(ch)
    return "".join(chars)


def read_csv_line(stream: TextIO, separator: str) -> Optional[List[str]]:
    """Read one line from stream and split it into fields.

    Fields may be wrapped in double quotes so that they can hold the
    separator. Returns None when the stream is exhausted.
    """
    line = stream.readline(MAX_LINE_LENGTH - 1)
    if not line:
        return None
    line = line.split("\n", 1)[0]

    buf = list(line)
    size = len(buf)
    starts: List[int] = []
    ptr = 0

    def at(index: int) -> str:
        return buf[index] if index < size else "\0"

    while at(ptr) != "\0":
        if len(starts) >= MAX_FIELDS - 1:
            break
        if buf[ptr] == '"':
            ptr += 1
            start = ptr
            while at(ptr) != "\0" and not (at(ptr) == '"' and at(ptr + 1) == separator):
                ptr += 1
        else:
            start = ptr
            while at(ptr) != "\0" and at(ptr) != separator:
                ptr += 1

        if at(ptr) != "\0":
            buf[ptr] = "\0"
            ptr += 1
            if at(ptr) == separator:
                ptr += 1

        if ptr >= 2 and buf[ptr - 2] == '"':
            buf[ptr - 2] = "\0"

        starts.append(start)

    return [_cstring(buf, start) for start in starts]


def split_string(text: str, delim: str) -> List[str]:
    """Split text on any character of delim, trimming spaces from each token."""
    tokens = [
        "".join(group)
        for is_delim, group in groupby(text, key=lambda ch: ch in delim)
        if not is_delim
    ]
    return [token.strip(" ") for token in tokens]


def clear_screen() -> None:
    """Clear the terminal."""
    try:
        subprocess.run(["clear"], check=False)
    except FileNotFoundError:
        pass


def wait_for_key(stream: TextIO) -> str:
    """Block until the user sends a line on stream; return what was read."""
    return stream.readline()