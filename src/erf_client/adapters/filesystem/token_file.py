from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from ...domain.exceptions import TokenStorageError
from ...domain.ports import TokenStore

logger = logging.getLogger(__name__)


class TokenFile(TokenStore):
    """
    Adapter implementing TokenStore on a single local file.

    The file holds exactly one encoded record and is replaced in full on
    every rotation: the new record goes to a sibling temp file which is
    then renamed over the old one, so readers see either the old or the
    new record, never a partial one. The result is owner read/write
    only. The parent directory must already exist and be writable.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # ------------------------------------------------------------------ #
    # Port implementation
    # ------------------------------------------------------------------ #

    def read(self) -> bytes | None:
        try:
            return self._path.read_bytes()
        except FileNotFoundError:
            logger.debug("Token file %s does not exist yet", self._path)
            return None
        except OSError as exc:
            raise TokenStorageError(f"Failed to read token file {self._path}: {exc}") from exc

    def write(self, data: bytes) -> None:
        try:
            # mkstemp creates the file with mode 0600
            fd, tmp_name = tempfile.mkstemp(
                dir=self._path.parent,
                prefix=f".{self._path.name}.",
                suffix=".tmp",
            )
        except OSError as exc:
            raise TokenStorageError(f"Failed to write token file {self._path}: {exc}") from exc

        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(data)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self._path)
        except OSError as exc:
            _discard(tmp_name)
            raise TokenStorageError(f"Failed to write token file {self._path}: {exc}") from exc


def _discard(name: str) -> None:
    try:
        os.unlink(name)
    except FileNotFoundError:
        pass
