"""
Line input
==========
Shows a prompt and reads one line of typed text. The cipher core only
needs "a line of text for a prompt"; this is the terminal version of it.
"""

import sys
from typing import Optional, TextIO


def read_line(prompt: str, stream: Optional[TextIO] = None,
              out: Optional[TextIO] = None) -> str:
    """
    Write `prompt` to `out` (default stdout), then read up to the next
    newline from `stream` (default stdin). The newline is not returned.
    Raises EOFError if the stream is already exhausted.
    """
    if prompt is None:
        raise ValueError("prompt was None")
    stream = stream if stream is not None else sys.stdin
    out    = out if out is not None else sys.stdout

    out.write(prompt)
    out.flush()

    line = stream.readline()
    if not line:
        raise EOFError("no input")
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line
