from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

ENCODING = "latin-1"        # DATASUS ships ISO-8859-1
TERMINATOR = ";\r\n"        # every physical record ends with this exact sequence
FIELD_SEPARATOR = ";"       # bare, never quoted or escaped

# Ordered, terminator-stripped lines extracted in one assembly step.
RowBatch = tuple[str, ...]


class LineAssembler:
    """
    Turns arbitrarily split text chunks into batches of complete lines.

    Each `feed()` looks for the *last* terminator in the buffer: everything before it
    becomes one batch, everything after it (at most one partial line) is kept for the
    next chunk. A terminator split across two chunks is found once the second arrives.

    After every `feed()` the buffer holds no complete terminator.
    """

    def __init__(self) -> None:
        self._buffer = ""
        self.ended = False

    @property
    def pending(self) -> str:
        """Partial line retained since the last complete terminator."""
        return self._buffer

    def feed(self, chunk: str) -> RowBatch | None:
        """
        Absorb `chunk`. Returns the batch of lines it completed, or `None` when it
        completed nothing.
        """
        if self.ended:
            raise RuntimeError("feed() called after finish()")

        self._buffer += chunk
        end = self._buffer.rfind(TERMINATOR)
        if end < 0:
            return None

        complete = self._buffer[:end]
        self._buffer = self._buffer[end + len(TERMINATOR):]
        return tuple(complete.split(TERMINATOR))

    def finish(self) -> str:
        """
        Mark the end of the stream and return the leftover partial line.

        The leftover is never turned into a row: a last line lacking its terminator
        is dropped.
        """
        self.ended = True
        leftover, self._buffer = self._buffer, ""
        if leftover:
            logger.debug("dropping %d trailing chars with no terminator", len(leftover))
        return leftover
