"""Tests for materializing embedded compiler binaries."""

import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from thriftgen.compiler.materializer import _cleanup, materialize, read_embedded_binary
from thriftgen.core.exceptions.errors import MaterializationError, MissingEmbeddedBinaryError

PAYLOAD = b"\x7fELF\x00fake-binary\xff"


@pytest.fixture
def binary_dir(temp_dir: Path) -> Path:
    """Create a directory holding one fake binary."""
    directory = temp_dir / "binaries"
    directory.mkdir()
    (directory / "thrift-0.5.0-linux64").write_bytes(PAYLOAD)
    return directory


class TestReadEmbeddedBinary:
    """Tests for read_embedded_binary."""

    def test_reads_from_binary_dir(self, binary_dir: Path) -> None:
        """Test reading a payload from an external directory."""
        assert read_embedded_binary("thrift-0.5.0-linux64", binary_dir) == PAYLOAD

    def test_missing_in_binary_dir(self, binary_dir: Path) -> None:
        """Test that an unknown id raises."""
        with pytest.raises(MissingEmbeddedBinaryError, match="thrift-0.5.0-osx64"):
            read_embedded_binary("thrift-0.5.0-osx64", binary_dir)

    def test_missing_in_bundled_package(self) -> None:
        """Test that ids absent from the bundled package raise."""
        with pytest.raises(MissingEmbeddedBinaryError) as exc_info:
            read_embedded_binary("thrift-0.0.0-nowhere64")

        assert exc_info.value.executable_id == "thrift-0.0.0-nowhere64"
        assert exc_info.value.details["location"] == "thriftgen.binaries"


class TestMaterialize:
    """Tests for materialize."""

    def test_writes_payload_byte_for_byte(self, binary_dir: Path) -> None:
        """Test that the temp file holds the exact payload."""
        path = Path(materialize("thrift-0.5.0-linux64", binary_dir))

        try:
            assert path.is_absolute()
            assert path.read_bytes() == PAYLOAD
            assert path.name.startswith("thrift-0.5.0-linux64")
        finally:
            path.unlink(missing_ok=True)

    @pytest.mark.skipif(sys.platform.startswith("win"), reason="POSIX permission bits")
    def test_marks_file_executable(self, binary_dir: Path) -> None:
        """Test that the temp file is executable."""
        path = Path(materialize("thrift-0.5.0-linux64", binary_dir))

        try:
            assert os.access(path, os.X_OK)
        finally:
            path.unlink(missing_ok=True)

    def test_each_call_creates_new_file(self, binary_dir: Path) -> None:
        """Test that two materializations do not share a file."""
        first = Path(materialize("thrift-0.5.0-linux64", binary_dir))
        second = Path(materialize("thrift-0.5.0-linux64", binary_dir))

        try:
            assert first != second
        finally:
            first.unlink(missing_ok=True)
            second.unlink(missing_ok=True)

    def test_registers_cleanup(self, binary_dir: Path) -> None:
        """Test that deletion at exit is scheduled."""
        with patch("thriftgen.compiler.materializer.atexit.register") as mock_register:
            path = Path(materialize("thrift-0.5.0-linux64", binary_dir))

        try:
            mock_register.assert_called_once_with(_cleanup, path)
        finally:
            path.unlink(missing_ok=True)

    def test_missing_binary(self, binary_dir: Path) -> None:
        """Test that a missing payload raises before creating a file."""
        with patch("thriftgen.compiler.materializer.tempfile.mkstemp") as mock_mkstemp:
            with pytest.raises(MissingEmbeddedBinaryError):
                materialize("thrift-0.5.0.exe", binary_dir)

        mock_mkstemp.assert_not_called()

    def test_permission_failure(self, binary_dir: Path) -> None:
        """Test that a chmod failure raises MaterializationError."""
        with patch.object(Path, "chmod", side_effect=PermissionError("denied")):
            with pytest.raises(MaterializationError, match="executable"):
                materialize("thrift-0.5.0-linux64", binary_dir)

    def test_write_failure(self, binary_dir: Path) -> None:
        """Test that a failed write is reported as a write, not a chmod."""
        with patch(
            "thriftgen.compiler.materializer.os.fdopen", side_effect=OSError(28, "No space left")
        ):
            with pytest.raises(MaterializationError, match="Unable to write") as exc_info:
                materialize("thrift-0.5.0-linux64", binary_dir)

        assert "executable" not in exc_info.value.message

    def test_cleanup_removes_file(self, temp_dir: Path) -> None:
        """Test the exit hook removes the file and tolerates a missing one."""
        path = temp_dir / "thrift-tmp"
        path.write_bytes(PAYLOAD)

        _cleanup(path)
        assert not path.exists()

        _cleanup(path)
