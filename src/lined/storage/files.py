"""Line-oriented file persistence.

Bytes pass through untouched: decoding uses ``surrogateescape`` so any
non-UTF-8 byte survives a load/save round trip.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import List, Sequence

from lined.runtime import telemetry

ENCODING = "utf-8"
ERRORS = "surrogateescape"


class StorageError(OSError):
    """Raised when the backing file cannot be written."""

    def __init__(self, message: str, *, path: str | os.PathLike[str]) -> None:
        super().__init__(message)
        self.path = str(path)


class LineFile:
    """Reads a file into ordered lines and writes them back one per record."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        self.is_new = False

    @property
    def name(self) -> str:
        return str(self.path)

    def load(self) -> List[str]:
        """Return the file's lines; a missing or unreadable file is a new file."""

        with telemetry.span(
            "storage::load", component="storage", metadata={"path": self.name}
        ):
            try:
                raw = self.path.read_bytes()
            except OSError as exc:
                self.is_new = True
                telemetry.record_event(
                    "storage.new_file",
                    data={"path": self.name, "reason": exc.strerror or str(exc)},
                )
                return [""]

        self.is_new = False
        text = raw.decode(ENCODING, errors=ERRORS)
        if not text:
            return [""]
        lines = text.split("\n")
        if text.endswith("\n"):
            lines.pop()
        return lines

    def save(self, lines: Sequence[str]) -> int:
        """Write ``lines`` atomically, each followed by a newline.

        Returns the number of bytes written.
        """

        payload = "".join(f"{line}\n" for line in lines).encode(ENCODING, errors=ERRORS)
        directory = self.path.parent if str(self.path.parent) else Path(".")
        temp_name: str | None = None
        with telemetry.span(
            "storage::save", component="storage", metadata={"path": self.name}
        ):
            try:
                with tempfile.NamedTemporaryFile(
                    mode="wb", dir=directory, suffix=self.path.suffix, delete=False
                ) as handle:
                    temp_name = handle.name
                    handle.write(payload)
                    handle.flush()
                    os.fsync(handle.fileno())
                os.replace(temp_name, self.path)
            except OSError as exc:
                if temp_name and os.path.exists(temp_name):
                    os.remove(temp_name)
                telemetry.record_event(
                    "storage.save_failed",
                    level="error",
                    data={"path": self.name, "reason": exc.strerror or str(exc)},
                )
                raise StorageError(
                    f"cannot write {self.name}: {exc.strerror or exc}", path=self.path
                ) from exc

        self.is_new = False
        telemetry.record_event(
            "storage.saved", data={"path": self.name, "bytes": len(payload)}
        )
        return len(payload)


__all__ = ["LineFile", "StorageError"]
