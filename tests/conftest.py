"""Pytest configuration and shared fixtures."""

import shutil
import sys
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from thriftgen.core.config.settings import CompilerSettings

FAKE_COMPILER = """#!/bin/sh
while [ $# -gt 1 ]; do
  if [ "$1" = "-o" ]; then out="$2"; fi
  shift
done
name=$(basename "$1" .thrift)
mkdir -p "$out/gen-java/com/example"
echo "class $name" > "$out/gen-java/com/example/$name.java"
echo "compiled $1"
"""


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory that is cleaned up after the test.

    Yields:
        Resolved path to the temporary directory.
    """
    temp_path = Path(tempfile.mkdtemp()).resolve()
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def compiler_settings() -> CompilerSettings:
    """Create compiler settings isolated from the environment."""
    return CompilerSettings(
        version="0.5.0",
        generated_dir_name="gen-java",
        source_extension=".thrift",
        generator="java:hashcode",
        executable=None,
        binary_dir=None,
        timeout=None,
    )


@pytest.fixture
def thrift_tree(temp_dir: Path) -> dict[str, Path]:
    """Create a small thrift source layout.

    Layout:
        thrift/api/service.thrift
        thrift/api/nested/types.thrift
        other/outside.thrift
        out/

    Returns:
        Mapping of names to paths.
    """
    thrift_root = temp_dir / "thrift"
    nested = thrift_root / "api" / "nested"
    nested.mkdir(parents=True)
    other = temp_dir / "other"
    other.mkdir()
    out = temp_dir / "out"
    out.mkdir()

    service = thrift_root / "api" / "service.thrift"
    service.write_text("service Ping { void ping() }\n")
    types = nested / "types.thrift"
    types.write_text("struct Point { 1: i32 x, 2: i32 y }\n")
    outside = other / "outside.thrift"
    outside.write_text("struct Outside {}\n")

    return {
        "root": temp_dir,
        "thrift": thrift_root,
        "service": service,
        "types": types,
        "other": other,
        "outside": outside,
        "out": out,
    }


@pytest.fixture
def fake_compiler(temp_dir: Path) -> Path:
    """Create a shell script that behaves like the thrift compiler.

    It writes ``<out>/gen-java/com/example/<name>.java`` for its source file.
    """
    if sys.platform.startswith("win"):
        pytest.skip("fake compiler is a POSIX shell script")

    script = temp_dir / "bin" / "thrift"
    script.parent.mkdir()
    script.write_text(FAKE_COMPILER)
    script.chmod(0o755)
    return script
