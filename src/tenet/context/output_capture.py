"""Capture region for a single invocation.

Replaces ``sys.stdout``/``sys.stderr`` for the duration of one call and
restores them on exit. Python-level writes only (print, sys.stdout.write);
output written straight to fd 1/2 by subprocesses or C extensions is not seen.
"""

from __future__ import annotations

import contextlib
import io
import sys
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TextIO


@dataclass
class OutputBuffer:
    """Text written to stdout/stderr inside one capture region."""

    stdout: io.StringIO = field(default_factory=io.StringIO)
    stderr: io.StringIO = field(default_factory=io.StringIO)

    def getvalue(self) -> tuple[str, str]:
        return self.stdout.getvalue(), self.stderr.getvalue()


class _CaptureStream(io.TextIOBase):
    """Stand-in for a sys stream that records writes into a buffer."""

    def __init__(self, original: TextIO, sink: io.StringIO, swallow: bool) -> None:
        self._original = original
        self._sink = sink
        self._swallow = swallow

    def write(self, s: str) -> int:
        self._sink.write(s)
        if not self._swallow:
            self._original.write(s)
        return len(s)

    def writable(self) -> bool:
        return True

    def flush(self) -> None:
        if self._swallow:
            return
        # the real stream may already be closed by whoever owns it
        with contextlib.suppress(OSError, ValueError):
            self._original.flush()

    @property
    def encoding(self) -> str:
        return getattr(self._original, "encoding", None) or "utf-8"


@contextlib.contextmanager
def capture_output(swallow: bool = True) -> Iterator[OutputBuffer]:
    """Record everything written to stdout/stderr inside the ``with`` block.

    Args:
        swallow: If True, output is captured only. If False, output is
                 captured and also passed through to the streams it replaced.

    The original streams are restored on exit whether the body completed or
    raised; the yielded buffer keeps its text after the region closes.
    Regions nest: an inner region sees only its own output, and with
    ``swallow=True`` the outer region does not see it at all.
    """
    buf = OutputBuffer()
    original_stdout, original_stderr = sys.stdout, sys.stderr
    sys.stdout = _CaptureStream(original_stdout, buf.stdout, swallow)
    sys.stderr = _CaptureStream(original_stderr, buf.stderr, swallow)
    try:
        yield buf
    finally:
        sys.stdout, sys.stderr = original_stdout, original_stderr
