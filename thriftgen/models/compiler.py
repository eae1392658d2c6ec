"""Compiler configuration data models."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class CompilerConfig(BaseModel):
    """Immutable, validated configuration for a set of thrift invocations.

    Instances are produced by ``ThriftBuilder.build()``; the builder has
    already checked every source file against the search path.
    """

    model_config = ConfigDict(frozen=True)

    executable: str = Field(description="Path to the thrift executable")
    generator: str = Field(min_length=1, description="Value for the --gen option")
    search_paths: frozenset[Path] = Field(
        default_factory=frozenset,
        description="Directories searched for includes",
    )
    source_files: frozenset[Path] = Field(description="Thrift files to compile")
    output_directory: Path = Field(description="Directory receiving generated sources")
    generated_dir_name: str = Field(
        default="gen-java",
        min_length=1,
        description="Directory the compiler creates beneath output_directory",
    )

    @field_validator("source_files")
    @classmethod
    def validate_source_files(cls, v: frozenset[Path]) -> frozenset[Path]:
        """Require at least one source file."""
        if not v:
            raise ValueError("at least one source file is required")
        return v

    @field_validator("output_directory")
    @classmethod
    def validate_output_directory(cls, v: Path) -> Path:
        """Require an existing output directory."""
        if not v.is_dir():
            raise ValueError(f"output directory is not a directory: {v}")
        return v

    @model_validator(mode="after")
    def validate_sources_on_search_path(self) -> "CompilerConfig":
        """Require every source file to sit beneath a search path element."""
        for source_file in self.source_files:
            if not any(parent in self.search_paths for parent in source_file.parents):
                raise ValueError(f"source file is not on the search path: {source_file}")
        return self

    @property
    def generated_directory(self) -> Path:
        """Return the directory the compiler writes generated output into."""
        return self.output_directory / self.generated_dir_name
