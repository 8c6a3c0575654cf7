"""
Single-pass rewriter from lenient JSON to strict JSON.

Scans the input once, left to right, copying verbatim spans to the output and
only deleting or inserting the bytes needed to drop comments, drop trailing
commas and quote bare object keys. Whitespace, line breaks and literal text
are preserved as written.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from laxjson._profile import ProfileContext

logger = logging.getLogger(__name__)

BytesLike: TypeAlias = bytes | bytearray | memoryview
Position: TypeAlias = int

WHITESPACE = frozenset(b" \t\n\r")
# Bytes that end a bare key, in addition to whitespace
BARE_KEY_TERMINATORS = frozenset(b":}/")

_QUOTE = ord('"')
_BACKSLASH = ord("\\")
_SLASH = ord("/")
_STAR = ord("*")
_COMMA = ord(",")
_LF = ord("\n")
_CR = ord("\r")
_OPEN_OBJECT = ord("{")
_CLOSE_OBJECT = ord("}")
_OPEN_ARRAY = ord("[")
_CLOSE_ARRAY = ord("]")

_NO_COMMA: Position = -1


class RewriteState(Enum):
    """
    Scan states of the rewriter.

    Exactly one state is active at any scan position.
    """

    NORMAL = "normal"
    IN_STRING = "in_string"
    IN_STRING_ESCAPED = "in_string_escaped"
    IN_LINE_COMMENT = "in_line_comment"
    IN_BLOCK_COMMENT = "in_block_comment"
    IN_BARE_KEY = "in_bare_key"


class Container(Enum):
    """Markers kept on the container stack."""

    OBJECT = "object"
    ARRAY = "array"


@dataclass(frozen=True)
class RewriteStats:
    """Summary of the edits made by one rewrite call."""

    input_size: int
    output_size: int
    comments_removed: int
    trailing_commas_removed: int
    bare_keys_quoted: int


class Rewriter:
    """
    Streaming state machine that normalizes one lenient JSON document.

    Holds only per-call state: the scan state, the container stack, the
    pending comma and the bare-key flag. A rewriter instance is used for a
    single document and then discarded.
    """

    def __init__(self, data: bytes):
        self.data = data
        self.length = len(data)
        self.output = bytearray()
        self.state = RewriteState.NORMAL
        # Copy cursor: start of the next unflushed verbatim span
        self.start: Position = 0
        self.containers: list[Container] = []
        # Output index of the comma whose trailing status is undecided
        self.pending_comma: Position = _NO_COMMA
        self.expect_key = False
        self.comments_removed = 0
        self.trailing_commas_removed = 0
        self.bare_keys_quoted = 0

    def flush(self, end: Position) -> None:
        """Copies input[start:end] to the output and moves the cursor."""
        self.output += self.data[self.start : end]
        self.start = end

    def run(self) -> bytes:
        """Rewrites the whole input and returns the strict JSON bytes."""
        data = self.data
        length = self.length
        i = 0

        while i < length:
            byte = data[i]
            state = self.state

            if state is RewriteState.NORMAL:
                i = self._step_normal(i, byte)
                continue

            if state is RewriteState.IN_STRING:
                if byte == _QUOTE:
                    self.state = RewriteState.NORMAL
                elif byte == _BACKSLASH:
                    self.state = RewriteState.IN_STRING_ESCAPED
            elif state is RewriteState.IN_STRING_ESCAPED:
                self.state = RewriteState.IN_STRING
            elif state is RewriteState.IN_LINE_COMMENT:
                if byte in (_LF, _CR):
                    # The line break itself is kept
                    self.start = i
                    self.state = RewriteState.NORMAL
            elif state is RewriteState.IN_BLOCK_COMMENT:
                if byte == _STAR and i + 1 < length and data[i + 1] == _SLASH:
                    self.start = i + 2
                    self.state = RewriteState.NORMAL
                    i += 2
                    continue
            elif byte in WHITESPACE or byte in BARE_KEY_TERMINATORS:
                # Bare key ends; the terminator is handled again in NORMAL
                self._close_bare_key(i)
                continue

            i += 1

        if self.state not in (
            RewriteState.IN_LINE_COMMENT,
            RewriteState.IN_BLOCK_COMMENT,
        ):
            self.flush(length)

        return bytes(self.output)

    def _step_normal(self, i: Position, byte: int) -> Position:
        """Handles one byte outside strings and comments."""
        if byte in WHITESPACE:
            return i + 1

        if byte == _SLASH and i + 1 < self.length:
            follower = self.data[i + 1]
            if follower == _SLASH:
                self._open_comment(i, RewriteState.IN_LINE_COMMENT)
                return i + 2
            if follower == _STAR:
                self._open_comment(i, RewriteState.IN_BLOCK_COMMENT)
                return i + 2

        self._resolve_pending_comma(byte)

        if byte == _QUOTE:
            self.state = RewriteState.IN_STRING
            self.expect_key = False
        elif byte == _COMMA:
            self.flush(i + 1)
            self.pending_comma = len(self.output) - 1
            # Commas re-arm key expectancy only inside objects
            self.expect_key = bool(self.containers) and (
                self.containers[-1] is Container.OBJECT
            )
        elif byte == _OPEN_OBJECT:
            self.containers.append(Container.OBJECT)
            self.expect_key = True
        elif byte == _OPEN_ARRAY:
            self.containers.append(Container.ARRAY)
            self.expect_key = False
        elif byte == _CLOSE_OBJECT:
            self._close_container(Container.OBJECT)
        elif byte == _CLOSE_ARRAY:
            self._close_container(Container.ARRAY)
        elif self.expect_key:
            # The first key byte is checked again against the terminators
            self._open_bare_key(i)
            return i

        return i + 1

    def _resolve_pending_comma(self, byte: int) -> None:
        """Drops the pending comma if the next significant byte closes."""
        if self.pending_comma == _NO_COMMA:
            return

        if byte in (_CLOSE_OBJECT, _CLOSE_ARRAY):
            del self.output[self.pending_comma]
            self.trailing_commas_removed += 1
        self.pending_comma = _NO_COMMA

    def _close_container(self, kind: Container) -> None:
        # Unbalanced input leaves the stack untouched
        if self.containers and self.containers[-1] is kind:
            self.containers.pop()
        self.expect_key = False

    def _open_comment(self, i: Position, state: RewriteState) -> None:
        self.flush(i)
        self.state = state
        self.comments_removed += 1

    def _open_bare_key(self, i: Position) -> None:
        self.flush(i)
        self.output += b'"'
        self.state = RewriteState.IN_BARE_KEY
        self.expect_key = False
        self.bare_keys_quoted += 1

    def _close_bare_key(self, i: Position) -> None:
        self.flush(i)
        self.output += b'"'
        self.state = RewriteState.NORMAL

    def stats(self) -> RewriteStats:
        """Returns the edit summary of the last run."""
        return RewriteStats(
            input_size=self.length,
            output_size=len(self.output),
            comments_removed=self.comments_removed,
            trailing_commas_removed=self.trailing_commas_removed,
            bare_keys_quoted=self.bare_keys_quoted,
        )


def rewrite(data: BytesLike) -> bytes:
    """
    Rewrites lenient JSON bytes into strict JSON bytes.

    Removes line and block comments, drops trailing commas before a closing
    bracket and quotes bare object keys, leaving every other byte in place.
    Never fails on bytes-like input: malformed documents produce best-effort
    output that a strict decoder may still reject.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(
            "the JSON object must be bytes, bytearray or memoryview, "
            f"not {type(data).__name__}"
        )

    source = bytes(data)
    with ProfileContext("rewrite") as profile:
        rewriter = Rewriter(source)
        result = rewriter.run()
        profile.record(rewriter)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("rewrite: %s", rewriter.stats())

    return result


def rewrite_text(text: str) -> str:
    """
    Rewrites lenient JSON text into strict JSON text.

    The text goes through UTF-8; edits only touch ASCII bytes so the round
    trip never splits a character.
    """
    if not isinstance(text, str):
        raise TypeError(
            f"the JSON object must be str, not {type(text).__name__}"
        )

    # Includes the UTF-8 round trip
    with ProfileContext("rewrite_text"):
        encoded = text.encode("utf-8", "surrogatepass")
        return rewrite(encoded).decode("utf-8", "surrogatepass")
