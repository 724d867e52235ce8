#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdreflow/renderers/_emitter.py
"""Column-aware text emitter used by the CommonMark renderer.

The emitter appends text spans to a growable byte buffer while tracking the
output column. It is responsible for:

- writing the current block prefix (``"> "``, list indentation, ...) at the
  start of every output line;
- collapsing runs of breakable spaces and remembering the last one on the
  current line;
- wrapping lazily: text is written past the width limit and, once a
  breakable space is known, the overflow is moved onto a fresh line;
- escaping characters that would otherwise be read as markup;
- coalescing requested line breaks so that blocks are separated by at most
  one blank line.

Line breaks are never written directly by the dispatcher. It requests them
with :meth:`Emitter.request_single_break` or
:meth:`Emitter.request_blank_line`, and the emitter discharges the highest
outstanding request right before the next span is written.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from mdreflow.constants import (
    AFTER_DIGIT_ESCAPED,
    ALWAYS_ESCAPED,
    DEFAULT_WIDTH,
    ESCAPE_MARKER,
    LINE_START_ESCAPED,
)
from mdreflow.exceptions import PrefixImbalanceError

_NEWLINE = ord("\n")
_ESCAPE = ESCAPE_MARKER.encode("ascii")


@dataclass
class RenderState:
    """Mutable state of one render call.

    Attributes
    ----------
    buffer : bytearray
        Accumulated UTF-8 output; only ever appended to, or truncated while
        rewinding for a wrap
    prefix : bytes
        Concatenation of the prefix segments currently pushed
    column : int
        Horizontal position on the current output line, in codepoints
    width : int
        Soft wrap width; 0 disables wrapping
    pending_newline_level : int
        Line breaks owed before the next span: 0 none, 1 end the line, 2 end
        the line and leave a blank line
    last_breakable : int or None
        Buffer offset of the most recent breakable space on the current line
    remainder_escapable : bool or None
        Whether the span that wrote the first character after
        ``last_breakable`` allowed escaping; None until that character exists
    begin_of_line : bool
        True while nothing but the prefix has been written on the current line
    suppress_wrap : bool
        Forces wrapping off, e.g. inside a heading

    """

    width: int = DEFAULT_WIDTH
    buffer: bytearray = field(default_factory=bytearray)
    prefix: bytes = b""
    column: int = 0
    pending_newline_level: int = 0
    last_breakable: Optional[int] = None
    remainder_escapable: Optional[bool] = None
    begin_of_line: bool = True
    suppress_wrap: bool = False
    line_prefixed: bool = False
    prefix_segments: list[str] = field(default_factory=list)

    def push_prefix(self, segment: str) -> None:
        """Push a prefix segment applied to every following line."""
        self.prefix_segments.append(segment)
        self.prefix += segment.encode("utf-8")

    def pop_prefix(self, expected: Optional[str] = None) -> str:
        """Pop the innermost prefix segment.

        Parameters
        ----------
        expected : str, optional
            The segment the caller pushed. A mismatch means enter and exit
            events were not paired.

        Returns
        -------
        str
            The removed segment

        Raises
        ------
        PrefixImbalanceError
            If the stack is empty or the top segment is not ``expected``

        """
        if not self.prefix_segments:
            raise PrefixImbalanceError("Prefix popped with no matching push", depth=0)
        top = self.prefix_segments[-1]
        if expected is not None and top != expected:
            raise PrefixImbalanceError(
                f"Prefix pop expected {expected!r} but found {top!r}", depth=len(self.prefix_segments)
            )
        self.prefix_segments.pop()
        self.prefix = self.prefix[: len(self.prefix) - len(top.encode("utf-8"))]
        return top

    @property
    def prefix_depth(self) -> int:
        """Number of prefix segments currently pushed."""
        return len(self.prefix_segments)

    def start_line(self) -> None:
        """Reset per-line bookkeeping after a hard line break."""
        self.column = 0
        self.begin_of_line = True
        self.line_prefixed = False
        self.last_breakable = None
        self.remainder_escapable = None


class Emitter:
    """Append text spans to a :class:`RenderState` under wrap and escape policy.

    Parameters
    ----------
    state : RenderState
        State to write into

    """

    def __init__(self, state: RenderState):
        """Initialize the emitter around an existing state."""
        self.state = state

    # Line break requests ---------------------------------------------
    def request_single_break(self) -> None:
        """Ensure the next span starts on a new line."""
        if self.state.pending_newline_level < 1:
            self.state.pending_newline_level = 1

    def request_blank_line(self) -> None:
        """Ensure a blank line separates the next span from what came before."""
        if self.state.pending_newline_level < 2:
            self.state.pending_newline_level = 2

    def flush_pending_breaks(self) -> None:
        """Write the line breaks owed by earlier requests.

        Breaks already at the end of the buffer count toward the request, so
        repeated requests never stack. The start of the output counts as an
        unlimited supply of breaks.
        """
        state = self.state
        level = state.pending_newline_level
        if level == 0:
            return

        buffer = state.buffer
        trailing = 0
        while trailing < level and trailing < len(buffer) and buffer[len(buffer) - 1 - trailing] == _NEWLINE:
            trailing += 1

        if trailing < level and trailing < len(buffer):
            if trailing == 0:
                buffer.append(_NEWLINE)
            if level == 2:
                # the blank line still carries the enclosing block prefix
                buffer += state.prefix
                buffer.append(_NEWLINE)

        state.start_line()
        state.pending_newline_level = 0

    # Span output -----------------------------------------------------
    def literal(self, text: str, wrap: bool = False) -> None:
        """Emit markup text; never escaped."""
        self.emit(text, wrap=wrap, escape=False)

    def emit(self, span: str, wrap: bool, escape: bool) -> None:
        """Append ``span`` to the buffer.

        Parameters
        ----------
        span : str
            Text to write
        wrap : bool
            Whether spaces in the span are breakable (and collapsible).
            Ignored while ``suppress_wrap`` is set.
        escape : bool
            Whether characters that could be read as markup get a backslash

        """
        state = self.state
        wrap = wrap and not state.suppress_wrap
        self.flush_pending_breaks()

        length = len(span)
        i = 0
        while i < length:
            char = span[i]
            next_char = span[i + 1] if i + 1 < length else ""

            if state.begin_of_line and not state.line_prefixed:
                state.buffer += state.prefix
                state.column = len(state.prefix)
                state.line_prefixed = True

            if char == " " and wrap:
                # no leading spaces after a prefix
                if not state.begin_of_line:
                    state.buffer.append(ord(" "))
                    state.column += 1
                    state.last_breakable = len(state.buffer) - 1
                    state.remainder_escapable = None
                    while i + 1 < length and span[i + 1] == " ":
                        i += 1
            elif char == "\n":
                state.buffer.append(_NEWLINE)
                state.start_line()
            else:
                if state.last_breakable is not None and state.remainder_escapable is None:
                    state.remainder_escapable = escape
                if escape and self.needs_escaping(char, next_char):
                    state.buffer += _ESCAPE
                    state.buffer += char.encode("utf-8")
                    state.column += 2
                else:
                    state.buffer += char.encode("utf-8")
                    state.column += 1
                state.begin_of_line = False

            if (
                state.width > 0
                and state.column > state.width
                and not state.begin_of_line
                and state.last_breakable is not None
            ):
                self._rewind_to_last_breakable()

            i += 1

    def needs_escaping(self, char: str, next_char: str) -> bool:
        """Decide whether ``char`` must be backslash-escaped.

        Only the character itself, the byte written just before it and the
        character following it in the input are consulted.

        Parameters
        ----------
        char : str
            Character about to be written
        next_char : str
            Following character of the input span, or "" at its end

        Returns
        -------
        bool
            True if the character needs an escape marker

        """
        if char in ALWAYS_ESCAPED:
            return True
        if char == "&":
            return next_char.isascii() and next_char.isalpha()
        if char == "!":
            return next_char == "["
        if char in LINE_START_ESCAPED:
            return self.state.begin_of_line
        if char in AFTER_DIGIT_ESCAPED:
            buffer = self.state.buffer
            return bool(buffer) and 0x30 <= buffer[-1] <= 0x39
        return False

    def _rewind_to_last_breakable(self) -> None:
        """Move everything after the last breakable space onto a new line."""
        state = self.state
        assert state.last_breakable is not None
        remainder = bytes(state.buffer[state.last_breakable + 1 :])
        del state.buffer[state.last_breakable :]
        state.buffer.append(_NEWLINE)
        state.buffer += state.prefix
        state.column = len(state.prefix)
        # the moved text now opens a line, where it could start a block
        if remainder and state.remainder_escapable and chr(remainder[0]) in LINE_START_ESCAPED:
            state.buffer += _ESCAPE
            state.column += 1
        state.buffer += remainder
        state.column += len(remainder.decode("utf-8"))
        state.last_breakable = None
        state.remainder_escapable = None
        state.begin_of_line = not remainder
        state.line_prefixed = True

    # Finalization ----------------------------------------------------
    def detach(self) -> bytes:
        """Hand over the finished buffer and reset the state.

        Returns
        -------
        bytes
            The rendered UTF-8 output

        Raises
        ------
        PrefixImbalanceError
            If prefix segments are still pushed

        """
        state = self.state
        if state.prefix_segments:
            raise PrefixImbalanceError(
                f"{state.prefix_depth} prefix segment(s) left open at end of render", depth=state.prefix_depth
            )
        result = bytes(state.buffer)
        state.buffer = bytearray()
        return result
