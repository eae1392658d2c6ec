"""Thrift compiler orchestration.

Compiles each configured source file in turn and merges the compiler's
generated directory into the output directory after every successful
invocation. Files are processed strictly one at a time because every
invocation writes into the same generated directory name.
"""

from collections.abc import Callable, Iterable
from pathlib import Path

from thriftgen.compiler.builder import ThriftBuilder
from thriftgen.compiler.command import build_command
from thriftgen.compiler.executor import ExecutionResult, ProcessExecutor
from thriftgen.compiler.relocator import relocate
from thriftgen.core.config.settings import CompilerSettings, get_settings
from thriftgen.core.logger.logger import get_logger
from thriftgen.models.compiler import CompilerConfig

logger = get_logger(__name__)


class ThriftCompiler:
    """Invokes the thrift compiler for every file of a configuration."""

    def __init__(
        self,
        config: CompilerConfig,
        executor: ProcessExecutor | None = None,
        relocator: Callable[[Path, Path], None] = relocate,
    ):
        """Initialize the compiler.

        Args:
            config: Validated compiler configuration.
            executor: Process executor. A default executor is used if not provided.
            relocator: Function merging the generated tree into the output directory.
        """
        self.config = config
        self.executor = executor or ProcessExecutor()
        self.relocator = relocator
        self._last_result: ExecutionResult | None = None

    @property
    def last_result(self) -> ExecutionResult | None:
        """Return the result of the most recent invocation."""
        return self._last_result

    @property
    def output(self) -> str:
        """Return stdout of the most recent invocation."""
        return self._last_result.stdout if self._last_result else ""

    @property
    def error(self) -> str:
        """Return stderr of the most recent invocation."""
        return self._last_result.stderr if self._last_result else ""

    def compile(self) -> int:
        """Compile every source file.

        Stops at the first invocation with a nonzero exit code; output of
        files compiled before it stays in place.

        Returns:
            0 if every invocation succeeded, otherwise the failing exit code.

        Raises:
            ProcessLaunchError: If the compiler cannot be started.
            RelocationError: If generated output cannot be moved.
        """
        total = len(self.config.source_files)
        logger.info(f"Compiling {total} thrift file(s) with --gen {self.config.generator}")

        for index, source_file in enumerate(self.config.source_files, start=1):
            logger.info(f"[{index}/{total}] {source_file}")

            arguments = build_command(self.config, source_file)
            result = self.executor.execute(self.config.executable, arguments)
            self._last_result = result

            if not result.success:
                logger.error(f"Compilation of {source_file} failed with exit code {result.return_code}")
                return result.return_code

            self._move_generated()

        logger.info(f"Compiled {total} thrift file(s) into {self.config.output_directory}")
        return 0

    def _move_generated(self) -> None:
        generated = self.config.generated_directory
        if not generated.is_dir():
            logger.warning(f"No generated output found at {generated}")
            return

        logger.debug(f"Moving {generated} into {self.config.output_directory}")
        self.relocator(generated, self.config.output_directory)


def compile_sources(
    source_files: Iterable[Path],
    search_paths: Iterable[Path],
    output_directory: Path,
    generator: str | None = None,
    executable: str | Path | None = None,
    settings: CompilerSettings | None = None,
) -> tuple[int, ThriftCompiler]:
    """Convenience function to configure and run the thrift compiler.

    Args:
        source_files: Thrift files to compile.
        search_paths: Include directories; each source must be beneath one.
        output_directory: Existing directory receiving generated sources.
        generator: Value for --gen. Defaults to the configured generator.
        executable: Explicit compiler path. Defaults to the bundled binary.
        settings: Compiler settings. Uses global settings if not provided.

    Returns:
        Tuple of (exit code, compiler) so callers can read captured output.
    """
    settings = settings or get_settings().compiler

    builder = ThriftBuilder(output_directory, executable=executable, settings=settings)
    builder.add_search_paths(search_paths)
    builder.add_source_files(source_files)
    builder.set_generator(generator or settings.generator)

    compiler = ThriftCompiler(builder.build(), ProcessExecutor(timeout=settings.timeout))
    return compiler.compile(), compiler
