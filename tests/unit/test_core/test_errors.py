"""Tests for the exception hierarchy."""

import pytest

from thriftgen.core.exceptions import (
    FileOperationError,
    InvalidArgumentError,
    MaterializationError,
    MissingEmbeddedBinaryError,
    RelocationError,
    ThriftGenError,
    UnsupportedPlatformError,
)


class TestThriftGenError:
    """Tests for ThriftGenError and subclasses."""

    def test_str_without_details(self) -> None:
        """Test plain message rendering."""
        assert str(ThriftGenError("boom")) == "boom"

    def test_str_with_details(self) -> None:
        """Test details are appended."""
        error = ThriftGenError("boom", {"key": "value"})

        assert str(error) == "boom - Details: {'key': 'value'}"

    def test_invalid_argument_is_value_error(self) -> None:
        """Test that callers can catch ValueError."""
        with pytest.raises(ValueError):
            raise InvalidArgumentError("bad", argument="x")

    def test_relocation_error_carries_paths(self) -> None:
        """Test source and destination details."""
        error = RelocationError("Unable to move", source="/a", destination="/b")

        assert isinstance(error, FileOperationError)
        assert error.details == {"source": "/a", "destination": "/b"}
        assert error.source == "/a"

    def test_io_failures_share_base(self) -> None:
        """Test that both IO failures are FileOperationErrors."""
        assert issubclass(MaterializationError, FileOperationError)
        assert issubclass(RelocationError, FileOperationError)

    def test_platform_errors(self) -> None:
        """Test platform related details."""
        assert UnsupportedPlatformError("Plan9").details == {"os_name": "Plan9"}
        assert MissingEmbeddedBinaryError("thrift-0.5.0.exe").executable_id == "thrift-0.5.0.exe"
