"""Unit tests for FilesystemConfigWriter adapter."""

import os
import stat
from pathlib import Path
from unittest.mock import patch

import pytest

from galera_init.adapters.filesystem_config_writer import FilesystemConfigWriter
from galera_init.adapters.ports import ConfigWriterPort
from galera_init.domain.exceptions import ConfigWriteError


@pytest.mark.tier(1)
@pytest.mark.tra("Adapter.FilesystemConfigWriter")
class TestFilesystemConfigWriter:
    """Test FilesystemConfigWriter adapter."""

    def test_writes_file(self, tmp_path: Path):
        writer = FilesystemConfigWriter(tmp_path)

        path = writer.write("0-galera.cnf", b"[mariadb]\n")

        assert path == tmp_path / "0-galera.cnf"
        assert path.read_bytes() == b"[mariadb]\n"

    def test_creates_missing_directory(self, tmp_path: Path):
        writer = FilesystemConfigWriter(tmp_path / "conf.d" / "nested")

        path = writer.write("0-galera.cnf", b"x")

        assert path.read_bytes() == b"x"

    def test_overwrites_existing_file(self, tmp_path: Path):
        (tmp_path / "0-galera.cnf").write_bytes(b"old contents that are longer")
        writer = FilesystemConfigWriter(tmp_path)

        writer.write("0-galera.cnf", b"new")

        assert (tmp_path / "0-galera.cnf").read_bytes() == b"new"

    def test_file_is_world_readable(self, tmp_path: Path):
        path = FilesystemConfigWriter(tmp_path).write("1-bootstrap.cnf", b"x")

        assert stat.S_IMODE(path.stat().st_mode) == 0o644

    def test_leaves_no_temporary_files(self, tmp_path: Path):
        writer = FilesystemConfigWriter(tmp_path)

        writer.write("0-galera.cnf", b"a")
        writer.write("1-bootstrap.cnf", b"b")

        assert sorted(p.name for p in tmp_path.iterdir()) == [
            "0-galera.cnf",
            "1-bootstrap.cnf",
        ]

    def test_failed_replace_keeps_old_file(self, tmp_path: Path):
        (tmp_path / "0-galera.cnf").write_bytes(b"old")
        writer = FilesystemConfigWriter(tmp_path)

        with patch(
            "galera_init.adapters.filesystem_config_writer.os.replace",
            side_effect=OSError("disk full"),
        ):
            with pytest.raises(ConfigWriteError, match="disk full"):
                writer.write("0-galera.cnf", b"new")

        assert (tmp_path / "0-galera.cnf").read_bytes() == b"old"
        assert [p.name for p in tmp_path.iterdir()] == ["0-galera.cnf"]

    @pytest.mark.parametrize("name", ["", "../escape.cnf", "sub/0-galera.cnf"])
    def test_rejects_paths(self, tmp_path: Path, name):
        with pytest.raises(ConfigWriteError):
            FilesystemConfigWriter(tmp_path).write(name, b"x")

    def test_directory_is_a_file(self, tmp_path: Path):
        blocker = tmp_path / "conf.d"
        blocker.write_text("")

        with pytest.raises(ConfigWriteError):
            FilesystemConfigWriter(blocker).write("0-galera.cnf", b"x")

    def test_config_dir_property(self, tmp_path: Path):
        assert FilesystemConfigWriter(str(tmp_path)).config_dir == tmp_path

    def test_implements_port(self, tmp_path: Path):
        assert isinstance(FilesystemConfigWriter(tmp_path), ConfigWriterPort)

    def test_data_synced_before_replace(self, tmp_path: Path):
        calls = []
        real_fsync = os.fsync
        real_replace = os.replace

        def _fsync(fd):
            calls.append("fsync")
            real_fsync(fd)

        def _replace(src, dst):
            calls.append("replace")
            real_replace(src, dst)

        with patch("galera_init.adapters.filesystem_config_writer.os.fsync", _fsync), patch(
            "galera_init.adapters.filesystem_config_writer.os.replace", _replace
        ):
            FilesystemConfigWriter(tmp_path).write("0-galera.cnf", b"x")

        assert calls == ["fsync", "replace"]
