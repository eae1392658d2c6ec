"""Main CLI entry point for thriftgen."""

import sys
from pathlib import Path

import click

from thriftgen.cli.display import (
    console,
    show_error,
    show_process_output,
    show_success,
    show_summary,
)
from thriftgen.compiler.orchestrator import compile_sources
from thriftgen.compiler.platform import host_platform, resolve_executable_id
from thriftgen.core.config.settings import get_settings
from thriftgen.core.exceptions.errors import ThriftGenError


def collect_sources(paths: tuple[str, ...], extension: str) -> list[Path]:
    """Expand directories into the thrift files they contain.

    Args:
        paths: Files or directories given on the command line.
        extension: Source file extension, e.g. ".thrift".

    Returns:
        Source files, with directory contents sorted.
    """
    sources: list[Path] = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            sources.extend(sorted(p for p in path.rglob(f"*{extension}") if p.is_file()))
        else:
            sources.append(path)
    return sources


@click.group(invoke_without_command=True)
@click.option("--version", "-v", is_flag=True, help="Show version")
@click.pass_context
def main(ctx: click.Context, version: bool) -> None:
    """thriftgen - run the Thrift compiler over a set of IDL files."""
    if version:
        from thriftgen import __version__

        click.echo(f"thriftgen version {__version__}")
        return

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command()
@click.argument("sources", nargs=-1, required=True, type=click.Path(exists=True))
@click.option(
    "--thrift-path",
    "-I",
    "thrift_paths",
    multiple=True,
    required=True,
    type=click.Path(exists=True, file_okay=False),
    help="Directory searched for includes (repeatable)",
)
@click.option(
    "--out",
    "-o",
    "output_dir",
    required=True,
    type=click.Path(exists=True, file_okay=False),
    help="Directory receiving generated sources",
)
@click.option("--gen", "generator", help="Value for the compiler's --gen option")
@click.option("--executable", "-e", type=click.Path(exists=True, dir_okay=False), help="Thrift compiler to use")
def compile(
    sources: tuple[str, ...],
    thrift_paths: tuple[str, ...],
    output_dir: str,
    generator: str | None,
    executable: str | None,
) -> None:
    """Compile thrift files, merging generated sources into the output directory.

    Example:
        thriftgen compile -I src/main/thrift -o target/gen src/main/thrift
    """
    settings = get_settings().compiler
    source_files = collect_sources(sources, settings.source_extension)
    search_paths = [Path(p) for p in thrift_paths]
    output_directory = Path(output_dir)
    generator = generator or settings.generator

    show_summary(source_files, search_paths, output_directory, generator)

    try:
        exit_code, compiler = compile_sources(
            source_files,
            search_paths,
            output_directory,
            generator=generator,
            executable=executable,
            settings=settings,
        )
    except ThriftGenError as e:
        show_error("Compilation Failed", str(e))
        sys.exit(1)

    show_process_output(compiler.output, compiler.error)

    if exit_code != 0:
        show_error("Compilation Failed", f"thrift exited with code {exit_code}")
        sys.exit(exit_code)

    show_success("Success", f"Compiled {len(source_files)} thrift file(s) into {output_directory}")


@main.command()
@click.option("--os-name", help="Operating system name (defaults to this host)")
@click.option("--os-arch", help="Architecture name (defaults to this host)")
def resolve(os_name: str | None, os_arch: str | None) -> None:
    """Print the bundled compiler binary id for a platform."""
    host_name, host_arch = host_platform()

    try:
        executable_id = resolve_executable_id(
            os_name or host_name,
            os_arch or host_arch,
            get_settings().compiler.version,
        )
    except ThriftGenError as e:
        show_error("Unsupported Platform", str(e))
        sys.exit(1)

    console.print(executable_id, markup=False, highlight=False)
