"""Local temporary storage for uploaded recordings."""

from __future__ import annotations

import logging
import time
from pathlib import Path

logger = logging.getLogger(__name__)


class StorageError(RuntimeError):
    """Raised when an uploaded recording cannot be written to disk."""


class AudioArtifact:
    """A recording on disk that must be deleted exactly once.

    Use as a context manager; leaving the block releases the file whether the
    block succeeded or raised.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> bool:
        """Delete the file; returns True only when this call removed it."""

        if self._released:
            return False
        self._released = True

        try:
            if self.path.exists():
                self.path.unlink()
                logger.info("Audio file deleted: %s", self.path.name)
                return True
        except OSError:
            logger.exception("Error deleting audio file %s", self.path)
        return False

    def __enter__(self) -> "AudioArtifact":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()


def prepare_upload_dir(upload_dir: str | Path) -> int:
    """Create the uploads directory if needed and purge leftovers from earlier runs."""

    directory = Path(upload_dir)
    directory.mkdir(parents=True, exist_ok=True)

    removed = 0
    for entry in directory.iterdir():
        if entry.is_file():
            entry.unlink()
            removed += 1

    if removed:
        logger.info("Cleaned up %s old audio file(s) in %s", removed, directory)
    return removed


def _artifact_name(extension: str) -> str:
    return f"audio_{time.time_ns() // 1_000_000}.{extension.lstrip('.')}"


def store_audio(
    upload_dir: str | Path,
    audio_bytes: bytes,
    *,
    extension: str = ".webm",
) -> AudioArtifact:
    """Write the recording under a timestamp-derived name and hand back its artifact."""

    directory = Path(upload_dir)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / _artifact_name(extension)

    artifact = AudioArtifact(path)
    try:
        path.write_bytes(audio_bytes)
    except OSError as exc:
        # A partial write may still have left a file behind.
        artifact.release()
        raise StorageError(f"Failed to store uploaded audio: {exc}") from exc

    return artifact


__all__ = ["AudioArtifact", "StorageError", "prepare_upload_dir", "store_audio"]
