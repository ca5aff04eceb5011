"""Fake config writer for testing."""

from __future__ import annotations

from pathlib import Path

from galera_init.domain.exceptions import ConfigWriteError


class FakeConfigWriter:
    """Fake implementation of ConfigWriterPort that keeps files in memory.

    Records every write in order so tests can assert both contents and the
    sequence of writes.

    Example:
        >>> writer = FakeConfigWriter()
        >>> writer.write("0-galera.cnf", b"[mariadb]")
        PosixPath('/fake/config/0-galera.cnf')
        >>> writer.files["0-galera.cnf"]
        b'[mariadb]'
    """

    def __init__(self, config_dir: Path = Path("/fake/config")) -> None:
        """Initialize with an empty file store.

        Args:
            config_dir: Directory reported in returned paths.
        """
        self._config_dir = config_dir
        self._files: dict[str, bytes] = {}
        self._writes: list[str] = []
        self._fail_on: set[str] = set()

    def fail_on(self, file_name: str) -> None:
        """Make writes of ``file_name`` raise ConfigWriteError."""
        self._fail_on.add(file_name)

    def write(self, file_name: str, data: bytes) -> Path:
        """Store ``data`` under ``file_name``.

        Raises:
            ConfigWriteError: If configured to fail for this file.
        """
        if file_name in self._fail_on:
            raise ConfigWriteError(f"Error writing {file_name}: simulated failure")
        self._files[file_name] = data
        self._writes.append(file_name)
        return self._config_dir / file_name

    @property
    def files(self) -> dict[str, bytes]:
        """Get a copy of the stored files."""
        return dict(self._files)

    @property
    def writes(self) -> list[str]:
        """Get the file names written, in order."""
        return list(self._writes)
