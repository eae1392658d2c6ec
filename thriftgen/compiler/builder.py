"""Builder for validated thrift compiler configurations."""

from collections.abc import Iterable
from pathlib import Path

from thriftgen.compiler.materializer import materialize
from thriftgen.compiler.platform import host_platform, resolve_executable_id
from thriftgen.core.config.settings import CompilerSettings, get_settings
from thriftgen.core.exceptions.errors import InvalidArgumentError, InvalidStateError
from thriftgen.core.logger.logger import get_logger
from thriftgen.models.compiler import CompilerConfig

logger = get_logger(__name__)


class ThriftBuilder:
    """Accumulates search paths, source files and a generator.

    Thrift files must be on the search path: a source file is only accepted
    once one of its ancestor directories has been added with
    ``add_search_path``. Every addition is validated immediately.

    Example:
        builder = ThriftBuilder(Path("target/generated-sources"))
        builder.add_search_path(Path("src/main/thrift"))
        builder.add_source_file(Path("src/main/thrift/api/service.thrift"))
        builder.set_generator("java:hashcode")
        config = builder.build()
    """

    def __init__(
        self,
        output_directory: Path,
        os_name: str | None = None,
        os_arch: str | None = None,
        executable: str | Path | None = None,
        settings: CompilerSettings | None = None,
    ) -> None:
        """Initialize the builder.

        Args:
            output_directory: Existing directory receiving generated sources.
            os_name: Operating system to pick a binary for (host if omitted).
            os_arch: Architecture to pick a binary for (host if omitted).
            executable: Explicit compiler path; skips binary resolution.
            settings: Compiler settings. Uses global settings if not provided.

        Raises:
            InvalidArgumentError: If output_directory is not a directory.
            UnsupportedPlatformError: If the platform has no bundled binary.
            UnsupportedArchitectureError: If the architecture has no bundled binary.
        """
        self.settings = settings or get_settings().compiler

        output_directory = Path(output_directory)
        if not output_directory.is_dir():
            raise InvalidArgumentError(
                f"Output directory is not a directory: {output_directory}",
                argument=str(output_directory),
            )
        self.output_directory = output_directory.resolve()

        if executable is None and self.settings.executable is not None:
            executable = self.settings.executable

        self.executable = str(executable) if executable is not None else None
        self.executable_id: str | None = None
        if self.executable is None:
            host_name, host_arch = host_platform()
            self.executable_id = resolve_executable_id(
                os_name or host_name,
                os_arch or host_arch,
                self.settings.version,
            )

        self.generator: str | None = None
        self._search_paths: set[Path] = set()
        self._source_files: set[Path] = set()

    @property
    def search_paths(self) -> frozenset[Path]:
        """Return the search path elements added so far."""
        return frozenset(self._search_paths)

    @property
    def source_files(self) -> frozenset[Path]:
        """Return the source files added so far."""
        return frozenset(self._source_files)

    def add_search_path(self, directory: Path) -> "ThriftBuilder":
        """Add a directory to search for included thrift files.

        Args:
            directory: Existing directory.

        Returns:
            The builder.

        Raises:
            InvalidArgumentError: If directory is missing or not a directory.
        """
        if directory is None:
            raise InvalidArgumentError("Search path element must not be None")
        directory = Path(directory)
        if not directory.is_dir():
            raise InvalidArgumentError(
                f"Search path element is not a directory: {directory}",
                argument=str(directory),
            )
        self._search_paths.add(directory.resolve())
        return self

    def add_search_paths(self, directories: Iterable[Path]) -> "ThriftBuilder":
        """Add several search path elements.

        See ``add_search_path``.
        """
        for directory in directories:
            self.add_search_path(directory)
        return self

    def add_source_file(self, source_file: Path) -> "ThriftBuilder":
        """Add a thrift file to be compiled.

        Args:
            source_file: Existing regular file with the source extension.

        Returns:
            The builder.

        Raises:
            InvalidArgumentError: If the file is missing, not a regular file
                or has the wrong extension.
            InvalidStateError: If no search path element is an ancestor of it.
        """
        if source_file is None:
            raise InvalidArgumentError("Source file must not be None")
        source_file = Path(source_file)
        if not source_file.is_file():
            raise InvalidArgumentError(
                f"Source file is not a regular file: {source_file}",
                argument=str(source_file),
            )
        if not source_file.name.endswith(self.settings.source_extension):
            raise InvalidArgumentError(
                f"Source file must end with {self.settings.source_extension}: {source_file}",
                argument=str(source_file),
            )

        # A symlinked file is judged by where the link sits, not its target.
        source_file = source_file.parent.resolve() / source_file.name
        if not self._is_on_search_path(source_file):
            raise InvalidStateError(
                f"Source file is not beneath any search path element: {source_file}",
                details={"search_paths": sorted(str(p) for p in self._search_paths)},
            )

        self._source_files.add(source_file)
        return self

    def add_source_files(self, source_files: Iterable[Path]) -> "ThriftBuilder":
        """Add several thrift files.

        See ``add_source_file``.
        """
        for source_file in source_files:
            self.add_source_file(source_file)
        return self

    def set_generator(self, generator: str) -> "ThriftBuilder":
        """Set the value of the compiler's ``--gen`` option.

        Args:
            generator: Generator specification, e.g. "java:hashcode".

        Returns:
            The builder.

        Raises:
            InvalidArgumentError: If generator is empty or None.
        """
        if not generator:
            raise InvalidArgumentError("Generator must not be empty")
        self.generator = generator
        return self

    def build(self) -> CompilerConfig:
        """Produce an immutable configuration.

        Materializes the bundled compiler binary unless an explicit
        executable was given.

        Returns:
            The configuration.

        Raises:
            InvalidStateError: If no source files were added or no generator was set.
            MissingEmbeddedBinaryError: If no binary is bundled for this platform.
            MaterializationError: If the binary cannot be written out.
        """
        if not self._source_files:
            raise InvalidStateError("At least one thrift file must be added before build()")
        if not self.generator:
            raise InvalidStateError("A generator must be set before build()")

        executable = self.executable
        if executable is None:
            executable = materialize(self.executable_id, self.settings.binary_dir)

        logger.debug(
            f"Built configuration: {len(self._source_files)} source file(s), "
            f"{len(self._search_paths)} search path element(s), executable {executable}"
        )

        return CompilerConfig(
            executable=executable,
            generator=self.generator,
            search_paths=frozenset(self._search_paths),
            source_files=frozenset(self._source_files),
            output_directory=self.output_directory,
            generated_dir_name=self.settings.generated_dir_name,
        )

    def _is_on_search_path(self, source_file: Path) -> bool:
        """Walk up from the file's directory looking for a search path element."""
        directory = source_file.parent
        while True:
            if directory in self._search_paths:
                return True
            if directory.parent == directory:
                return False
            directory = directory.parent
