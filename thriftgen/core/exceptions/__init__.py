"""Exception definitions module."""

from thriftgen.core.exceptions.errors import (
    ConfigurationError,
    FileOperationError,
    InvalidArgumentError,
    InvalidStateError,
    MaterializationError,
    MissingEmbeddedBinaryError,
    ProcessLaunchError,
    ProcessTimeoutError,
    RelocationError,
    ThriftGenError,
    UnsupportedArchitectureError,
    UnsupportedPlatformError,
)

__all__ = [
    "ThriftGenError",
    "InvalidArgumentError",
    "InvalidStateError",
    "UnsupportedPlatformError",
    "UnsupportedArchitectureError",
    "MissingEmbeddedBinaryError",
    "ProcessLaunchError",
    "ProcessTimeoutError",
    "FileOperationError",
    "MaterializationError",
    "RelocationError",
    "ConfigurationError",
]
