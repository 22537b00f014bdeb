"""Indentation-aware diagnostic logger.

A tiny debugging aid for code that walks nested structures: messages are
printed to stdout behind an indentation prefix that the caller grows and
shrinks around nested work. When disabled, every operation is a no-op, so a
logger can be left in place and switched off at construction.
"""
from __future__ import annotations

import traceback
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional

from .config import EXDENT_UNDERFLOW_MESSAGE, INDENT_UNIT, TRACE_FRAME_PREFIX, TRACE_SKIP_FRAMES
from .logutil import get_logger


class IndentingLogger:
    """Togglable stdout logger with an indentation depth.

    Not thread-safe; callers sharing one instance across threads must
    serialize access themselves.
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._indent_level = 0
        # _indent_cache[i] is the indentation string for depth i; grows, never shrinks
        self._indent_cache: List[str] = [""]
        # None means "recompute from _indent_cache"
        self._current_indent: Optional[str] = None

    def is_enabled(self) -> bool:
        return self.enabled

    @property
    def indent_level(self) -> int:
        return self._indent_level

    def log(self, fmt: str, *args: Any) -> None:
        """Print ``fmt % args`` to stdout behind the current indentation.

        No newline is appended; include one in ``fmt`` when wanted. Only the
        first line of the message is indented. Formatting errors propagate.
        """
        if self.enabled:
            print(self._indent_string(), end="")
            print(fmt % args, end="")

    def log_stack_trace(self) -> None:
        """Print the call stack, innermost first, one frame per line.

        The frame of this method and that of its immediate caller are left
        out so the trace starts where the logger was driven from.
        """
        if self.enabled:
            frames = traceback.extract_stack()[:-TRACE_SKIP_FRAMES]
            prefix = self._indent_string() + TRACE_FRAME_PREFIX
            for frame in reversed(frames):
                print(f"{prefix}{frame.name} ({frame.filename}:{frame.lineno})")

    def indent(self) -> None:
        """Increase indentation by one level."""
        if self.enabled:
            self._indent_level += 1
            self._current_indent = None

    def exdent(self) -> None:
        """Decrease indentation by one level.

        At depth 0 this reports the misuse (message plus stack trace) and
        leaves the depth alone instead of raising.
        """
        if self.enabled:
            if self._indent_level == 0:
                get_logger().debug("exdent called at indentation level 0")
                self.log(EXDENT_UNDERFLOW_MESSAGE)
                self.log_stack_trace()
            else:
                self._indent_level -= 1
                self._current_indent = None

    def reset_indent(self) -> None:
        """Reset indentation to none. Has no effect if logging is disabled."""
        if self.enabled:
            self._indent_level = 0
            self._current_indent = ""

    @contextmanager
    def indented(self) -> Iterator["IndentingLogger"]:
        """Indent for the duration of a ``with`` block."""
        self.indent()
        try:
            yield self
        finally:
            self.exdent()

    def _indent_string(self) -> str:
        if self._current_indent is None:
            cache = self._indent_cache
            while len(cache) <= self._indent_level:
                cache.append(cache[-1] + INDENT_UNIT)
            self._current_indent = cache[self._indent_level]
        return self._current_indent


__all__ = ["IndentingLogger"]
