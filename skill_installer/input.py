"""Raw terminal input for the selector.

``decode_chunk`` maps one raw read to a normalized key token. ``KeyStream``
delivers those reads asynchronously through the event loop's reader
callbacks, so awaiting a key never blocks the thread.
"""

from __future__ import annotations

import asyncio
import enum
import os

READ_CHUNK_SIZE = 64


class Key(enum.Enum):
    """Named keys decoded from control bytes and escape sequences."""

    UP = "up"
    DOWN = "down"
    ENTER_CR = "enter_cr"
    ENTER_LF = "enter_lf"
    CTRL_C = "ctrl_c"


_CHUNK_TOKENS: dict[bytes, Key] = {
    b"\x1b[A": Key.UP,
    b"\x1bOA": Key.UP,
    b"\x1b[B": Key.DOWN,
    b"\x1bOB": Key.DOWN,
    b"\r": Key.ENTER_CR,
    b"\n": Key.ENTER_LF,
    b"\x03": Key.CTRL_C,
}


def decode_chunk(chunk: bytes) -> Key | str:
    """Translate one input chunk into a key.

    Arrow sequences (normal and application cursor mode), CR, LF and ETX map
    to ``Key`` members. Anything else is returned as text, so digits come back
    as ``"1"`` through ``"9"`` and pasted words never alias a named key.
    """
    token = _CHUNK_TOKENS.get(chunk)
    if token is not None:
        return token
    return chunk.decode("utf-8", errors="replace")


class KeyStream:
    """Async iterator over raw chunks read from ``fd``.

    The reader callback is registered on ``__enter__`` and removed on
    ``__exit__``; outside that window the descriptor is not watched. An empty
    read (EOF) ends iteration.
    """

    def __init__(self, fd: int, *, chunk_size: int = READ_CHUNK_SIZE) -> None:
        self.fd = fd
        self.chunk_size = chunk_size
        self._queue: asyncio.Queue[bytes] = asyncio.Queue()
        self._loop: asyncio.AbstractEventLoop | None = None
        self._eof = False

    def __enter__(self) -> KeyStream:
        self._loop = asyncio.get_running_loop()
        self._loop.add_reader(self.fd, self._on_readable)
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if self._loop is not None:
            self._loop.remove_reader(self.fd)
            self._loop = None

    @property
    def listening(self) -> bool:
        return self._loop is not None

    def _on_readable(self) -> None:
        chunk = os.read(self.fd, self.chunk_size)
        if not chunk:
            # Stop watching a closed descriptor; it would stay readable forever.
            self.close()
        self._queue.put_nowait(chunk)

    def __aiter__(self) -> KeyStream:
        return self

    async def __anext__(self) -> bytes:
        if self._eof:
            raise StopAsyncIteration
        chunk = await self._queue.get()
        if not chunk:
            self._eof = True
            raise StopAsyncIteration
        return chunk
