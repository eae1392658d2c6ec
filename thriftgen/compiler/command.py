"""Command line construction for thrift invocations."""

from pathlib import Path

from thriftgen.models.compiler import CompilerConfig


def build_command(config: CompilerConfig, source_file: Path) -> list[str]:
    """Create the compiler arguments for one source file.

    The executable itself is not part of the list.

    Args:
        config: Compiler configuration.
        source_file: The thrift file to compile.

    Returns:
        ``-I <dir>`` per search path, then ``-o``, ``--gen`` and the file.
    """
    command: list[str] = []
    for search_path in config.search_paths:
        command.extend(["-I", str(search_path)])
    command.extend(["-o", str(config.output_directory)])
    command.extend(["--gen", config.generator])
    command.append(str(source_file))
    return command
