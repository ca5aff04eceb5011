"""Filesystem implementation of ConfigWriterPort."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from galera_init.adapters.ports import ConfigWriterPort
from galera_init.domain.exceptions import ConfigWriteError

logger = logging.getLogger(__name__)


class FilesystemConfigWriter:
    """Writes config files into a directory atomically.

    Each file is written to a temporary file in the target directory and
    moved into place with os.replace(), so MariaDB never reads a partially
    written config.
    """

    def __init__(self, config_dir: Path) -> None:
        """Initialize the writer.

        Args:
            config_dir: Directory receiving the files. Created on first write.
        """
        self._config_dir = Path(config_dir)

    @property
    def config_dir(self) -> Path:
        """Return the target directory."""
        return self._config_dir

    def write(self, file_name: str, data: bytes) -> Path:
        """Atomically write ``data`` to ``config_dir / file_name``.

        Raises:
            ConfigWriteError: If the directory or file cannot be written.
        """
        if not file_name or Path(file_name).name != file_name:
            raise ConfigWriteError(f"Invalid config file name: {file_name!r}")

        target = self._config_dir / file_name
        try:
            self._config_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{file_name}.", dir=self._config_dir
            )
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(data)
                    f.flush()
                    os.fsync(f.fileno())
                os.chmod(tmp_name, 0o644)
                os.replace(tmp_name, target)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise ConfigWriteError(f"Error writing {target}: {e}") from e
        logger.debug("Wrote %s (%d bytes)", target, len(data))
        return target


# Runtime protocol check
assert isinstance(FilesystemConfigWriter(Path(".")), ConfigWriterPort)
