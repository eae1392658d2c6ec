"""Custom exception definitions for thriftgen."""

from typing import Any


class ThriftGenError(Exception):
    """Base exception for all thriftgen errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            details: Additional error details.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class InvalidArgumentError(ThriftGenError, ValueError):
    """Exception raised when a builder method receives a bad argument."""

    def __init__(
        self,
        message: str,
        argument: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize invalid argument error.

        Args:
            message: Error message.
            argument: The offending value, rendered as a string.
            details: Additional error details.
        """
        details = details or {}
        if argument:
            details["argument"] = argument
        super().__init__(message, details)


class InvalidStateError(ThriftGenError):
    """Exception raised when a builder invariant is violated."""


class UnsupportedPlatformError(ThriftGenError):
    """Exception raised for an operating system with no compiler binary."""

    def __init__(self, os_name: str) -> None:
        super().__init__(f"Unsupported os.name: {os_name}", {"os_name": os_name})
        self.os_name = os_name


class UnsupportedArchitectureError(ThriftGenError):
    """Exception raised for a CPU architecture with no compiler binary."""

    def __init__(self, os_arch: str) -> None:
        super().__init__(f"Unsupported os.arch: {os_arch}", {"os_arch": os_arch})
        self.os_arch = os_arch


class MissingEmbeddedBinaryError(ThriftGenError):
    """Exception raised when no binary is bundled for an executable id."""

    def __init__(self, executable_id: str, location: str | None = None) -> None:
        details = {"executable_id": executable_id}
        if location:
            details["location"] = location
        super().__init__(f"No binary embedded for: {executable_id}", details)
        self.executable_id = executable_id


class ProcessLaunchError(ThriftGenError):
    """Exception raised when the compiler process cannot be started."""

    def __init__(
        self,
        message: str,
        executable: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize process launch error.

        Args:
            message: Error message.
            executable: Path of the executable that failed to start.
            details: Additional error details.
        """
        details = details or {}
        if executable:
            details["executable"] = executable
        super().__init__(message, details)


class ProcessTimeoutError(ThriftGenError):
    """Exception raised when the compiler process exceeds its timeout."""

    def __init__(self, executable: str, timeout: float) -> None:
        super().__init__(
            f"Command timed out after {timeout} seconds",
            {"executable": executable, "timeout": timeout},
        )


class FileOperationError(ThriftGenError):
    """Exception raised for filesystem failures."""

    def __init__(
        self,
        message: str,
        source: str | None = None,
        destination: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize file operation error.

        Args:
            message: Error message.
            source: Path being read or moved.
            destination: Path being written.
            details: Additional error details.
        """
        details = details or {}
        if source:
            details["source"] = source
        if destination:
            details["destination"] = destination
        super().__init__(message, details)
        self.source = source
        self.destination = destination


class MaterializationError(FileOperationError):
    """Exception raised when an embedded binary cannot be written out."""


class RelocationError(FileOperationError):
    """Exception raised when generated output cannot be moved into place."""


class ConfigurationError(ThriftGenError):
    """Exception raised for configuration errors."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error.

        Args:
            message: Error message.
            config_key: Configuration key that caused the error.
            details: Additional error details.
        """
        details = details or {}
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details)
