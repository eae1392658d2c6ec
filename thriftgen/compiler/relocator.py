"""Relocation of generated source trees into the output directory."""

import os
from pathlib import Path

from thriftgen.core.exceptions.errors import RelocationError
from thriftgen.core.logger.logger import get_logger

logger = get_logger(__name__)


def relocate(source: Path, destination: Path, overwrite: bool = True) -> None:
    """Move a file or directory tree into place, merging directories.

    Directories are merged entry by entry into ``destination`` and the
    emptied ``source`` directory is removed. Files are moved with
    ``os.replace``, so an existing destination file is overwritten unless
    ``overwrite`` is False. In that case the whole tree is checked for
    collisions before the first move.

    Args:
        source: File or directory to move.
        destination: Target path for ``source`` itself (not its parent).
        overwrite: Replace existing destination files.

    Raises:
        RelocationError: If a directory cannot be created or removed, a
            file cannot be moved, or a destination file exists and
            ``overwrite`` is False.
    """
    source = Path(source)
    destination = Path(destination)

    if not overwrite:
        collision = _find_collision(source, destination)
        if collision is not None:
            colliding_source, colliding_destination = collision
            raise RelocationError(
                f"Unable to move {colliding_source} to {colliding_destination}: destination exists",
                source=str(colliding_source),
                destination=str(colliding_destination),
            )

    _move(source, destination)


def _find_collision(source: Path, destination: Path) -> tuple[Path, Path] | None:
    """Return the first (source, destination) file pair whose destination exists."""
    if source.is_dir():
        if not destination.is_dir():
            return None
        for entry in sorted(source.iterdir()):
            collision = _find_collision(entry, destination / entry.name)
            if collision is not None:
                return collision
        return None

    if destination.exists() and not destination.is_dir():
        return source, destination
    return None


def _move(source: Path, destination: Path) -> None:
    if source.is_dir():
        _relocate_directory(source, destination)
    else:
        _relocate_file(source, destination)


def _relocate_directory(source: Path, destination: Path) -> None:
    if not destination.is_dir():
        try:
            destination.mkdir(parents=True)
        except OSError as e:
            raise RelocationError(
                f"Unable to create directory {destination}",
                source=str(source),
                destination=str(destination),
                details={"error": str(e)},
            ) from e

    for entry in sorted(source.iterdir()):
        _move(entry, destination / entry.name)

    try:
        source.rmdir()
    except OSError as e:
        raise RelocationError(
            f"Unable to remove {source} after moving its contents",
            source=str(source),
            destination=str(destination),
            details={"error": str(e)},
        ) from e


def _relocate_file(source: Path, destination: Path) -> None:
    if destination.exists() and not destination.is_dir():
        logger.debug(f"Overwriting {destination}")

    try:
        os.replace(source, destination)
    except OSError as e:
        raise RelocationError(
            f"Unable to move {source} to {destination}",
            source=str(source),
            destination=str(destination),
            details={"error": str(e)},
        ) from e
