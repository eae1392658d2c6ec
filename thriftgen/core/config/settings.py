"""Application settings using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from thriftgen.core.config.loader import DEFAULT_CONFIG_PATH, ConfigLoader


class CompilerSettings(BaseSettings):
    """Thrift compiler configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="THRIFTGEN_COMPILER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    version: str = Field(
        default="0.5.0",
        description="Version of the bundled thrift compiler",
    )
    generated_dir_name: str = Field(
        default="gen-java",
        description="Directory the compiler writes beneath the output directory",
    )
    source_extension: str = Field(
        default=".thrift",
        description="Required extension of thrift source files",
    )
    generator: str = Field(
        default="java:hashcode",
        description="Default value for the --gen option",
    )
    executable: Path | None = Field(
        default=None,
        description="Explicit compiler path (skips binary resolution)",
    )
    binary_dir: Path | None = Field(
        default=None,
        description="Directory holding compiler binaries (None = bundled)",
    )
    timeout: float | None = Field(
        default=None,
        gt=0,
        description="Per-invocation timeout in seconds (None = wait forever)",
    )

    @field_validator("executable", "binary_dir", mode="before")
    @classmethod
    def validate_path(cls, v: str | None) -> Path | None:
        """Validate and convert optional paths."""
        if v is None or v == "":
            return None
        return Path(v)

    @field_validator("source_extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        """Ensure the extension carries its leading dot."""
        if not v:
            raise ValueError("source_extension must not be empty")
        return v if v.startswith(".") else f".{v}"


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="THRIFTGEN_LOGGING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = Field(
        default="INFO",
        description="Log level",
    )
    format: str = Field(
        default="[%(name)s] %(message)s",
        description="Log format string",
    )
    file: Path | None = Field(
        default=None,
        description="Log file path",
    )
    use_rich: bool = Field(
        default=True,
        description="Use Rich console for output",
    )

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper

    @field_validator("file", mode="before")
    @classmethod
    def validate_file(cls, v: str | None) -> Path | None:
        """Validate and convert file to Path."""
        if v is None or v == "":
            return None
        return Path(v)


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="THRIFTGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    compiler: CompilerSettings = Field(default_factory=CompilerSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from YAML file.

        Environment variables still take precedence over values in the file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            Settings instance with values from YAML.
        """
        loader = ConfigLoader(path)
        loader.load()

        return cls(
            compiler=_with_env_overrides(CompilerSettings, loader.get_section("compiler")),
            logging=_with_env_overrides(LoggingSettings, loader.get_section("logging")),
        )

    @classmethod
    def load(cls) -> "Settings":
        """Load settings from default locations.

        Priority: Environment variables > .env > config/default.yaml > defaults

        Returns:
            Settings instance.
        """
        if DEFAULT_CONFIG_PATH.exists():
            return cls.from_yaml(DEFAULT_CONFIG_PATH)

        # Environment variables and .env are automatically loaded by pydantic-settings
        return cls()


def _with_env_overrides(section_cls: type[BaseSettings], values: dict) -> BaseSettings:
    """Build a settings section from YAML values, letting the environment win."""
    from_env = section_cls()
    overridden = from_env.model_fields_set
    merged = {k: v for k, v in values.items() if k not in overridden}
    merged.update({k: getattr(from_env, k) for k in overridden})
    return section_cls.model_validate(merged)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings singleton.
    """
    return Settings.load()
