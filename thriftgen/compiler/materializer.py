"""Extraction of embedded compiler binaries to runnable temporary files."""

import atexit
import os
import stat
import tempfile
from importlib import resources
from pathlib import Path

from thriftgen.core.exceptions.errors import MaterializationError, MissingEmbeddedBinaryError
from thriftgen.core.logger.logger import get_logger

logger = get_logger(__name__)

BINARY_PACKAGE = "thriftgen.binaries"

_EXECUTABLE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def read_embedded_binary(executable_id: str, binary_dir: Path | None = None) -> bytes:
    """Read the binary payload registered under an executable id.

    Args:
        executable_id: Identifier from ``resolve_executable_id``.
        binary_dir: Directory to read from instead of the bundled package.

    Returns:
        Raw bytes of the binary.

    Raises:
        MissingEmbeddedBinaryError: If no binary exists for the id.
    """
    if binary_dir is not None:
        candidate = Path(binary_dir) / executable_id
        location = str(binary_dir)
    else:
        candidate = resources.files(BINARY_PACKAGE).joinpath(executable_id)
        location = BINARY_PACKAGE

    if not candidate.is_file():
        raise MissingEmbeddedBinaryError(executable_id, location=location)

    return candidate.read_bytes()


def materialize(executable_id: str, binary_dir: Path | None = None) -> str:
    """Write an embedded binary to a temporary executable file.

    The file is removed when the interpreter exits.

    Args:
        executable_id: Identifier from ``resolve_executable_id``.
        binary_dir: Directory to read from instead of the bundled package.

    Returns:
        Absolute path of the materialized executable.

    Raises:
        MissingEmbeddedBinaryError: If no binary exists for the id.
        MaterializationError: If the file cannot be written or made executable.
    """
    payload = read_embedded_binary(executable_id, binary_dir)

    try:
        fd, name = tempfile.mkstemp(prefix=f"{executable_id}-")
    except OSError as e:
        raise MaterializationError(
            f"Unable to create temporary file for {executable_id}",
            source=executable_id,
            details={"error": str(e)},
        ) from e

    path = Path(name).resolve()
    atexit.register(_cleanup, path)

    try:
        with os.fdopen(fd, "wb") as f:
            f.write(payload)
    except OSError as e:
        raise MaterializationError(
            f"Unable to write {executable_id} to {path}",
            source=executable_id,
            destination=str(path),
            details={"error": str(e)},
        ) from e

    try:
        path.chmod(path.stat().st_mode | _EXECUTABLE_BITS)
    except OSError as e:
        raise MaterializationError(
            f"Unable to make {path} executable",
            source=executable_id,
            destination=str(path),
            details={"error": str(e)},
        ) from e

    logger.debug(f"Materialized {executable_id} ({len(payload)} bytes) at {path}")
    return str(path)


def _cleanup(path: Path) -> None:
    """Remove a materialized executable, tolerating failure."""
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.debug(f"Failed to remove materialized executable {path}: {e}")
