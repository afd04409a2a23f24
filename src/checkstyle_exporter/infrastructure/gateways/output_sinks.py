"""Output sinks - Infrastructure implementations of OutputSinkProtocol."""

import logging
import os
import shutil
import tempfile
from pathlib import Path
from types import TracebackType
from typing import Optional, TextIO

from checkstyle_exporter.domain.protocols import OutputSinkProtocol

logger = logging.getLogger(__name__)


class ScopedSink(OutputSinkProtocol):
    """Context manager behaviour shared by all sinks: close on every exit path."""

    _closed: bool = False

    def __enter__(self) -> "ScopedSink":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if exc_type is not None:
            self.discard()
        self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    def _check_open(self) -> None:
        if self._closed:
            raise ValueError("append to a closed sink")

    def discard(self) -> None:
        """Called when the export failed. Drops whatever was written, where possible."""


class StringSink(ScopedSink):
    """Collects the document in memory."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, text: str) -> None:
        self._check_open()
        self._parts.append(text)

    def getvalue(self) -> str:
        return "".join(self._parts)

    def discard(self) -> None:
        self._parts.clear()

    def close(self) -> None:
        self._closed = True


class StreamSink(ScopedSink):
    """
    Writes into a text stream such as sys.stdout.

    The stream is flushed on close, and closed only when ``owns_stream`` is set.
    A stream that was already closed underneath the sink is left alone.
    """

    def __init__(self, stream: TextIO, owns_stream: bool = False) -> None:
        self._stream = stream
        self._owns_stream = owns_stream

    def append(self, text: str) -> None:
        self._check_open()
        self._stream.write(text)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._stream.closed:
            return
        try:
            self._stream.flush()
        finally:
            if self._owns_stream:
                self._stream.close()


class FileSink(StreamSink):
    """
    Writes the document to a UTF-8 file.

    Text goes to a temporary file next to the target, which replaces the target
    only when the sink closes without a failure. A failed export leaves an
    existing target untouched.
    """

    def __init__(self, path: str) -> None:
        self._path = Path(path)
        self._discarded = False
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self._path.name}.", suffix=".tmp", dir=self._path.parent
        )
        self._tmp_path = Path(tmp_name)
        super().__init__(os.fdopen(fd, "w", encoding="utf-8"), owns_stream=True)

    @property
    def path(self) -> Path:
        return self._path

    def close(self) -> None:
        if self._closed:
            return
        try:
            super().close()
            if not self._discarded:
                self._copy_target_mode()
                os.replace(self._tmp_path, self._path)
        except Exception:
            self._tmp_path.unlink(missing_ok=True)
            raise

    def discard(self) -> None:
        self._discarded = True
        try:
            super().close()
        finally:
            self._tmp_path.unlink(missing_ok=True)
            logger.debug("Dropped partial output for %s", self._path)

    def _copy_target_mode(self) -> None:
        # mkstemp creates 0600; keep the target's mode, or the umask default for new files
        if self._path.exists():
            shutil.copymode(self._path, self._tmp_path)
        else:
            umask = os.umask(0)
            os.umask(umask)
            os.chmod(self._tmp_path, 0o666 & ~umask)
