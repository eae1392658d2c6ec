"""Process executor for running the thrift compiler.

Runs the compiler synchronously and captures its output. A nonzero exit
code is reported in the result, not raised.
"""

import subprocess
import time
from dataclasses import dataclass, field
from typing import Any

from thriftgen.core.exceptions.errors import ProcessLaunchError, ProcessTimeoutError
from thriftgen.core.logger.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ExecutionResult:
    """Result of one compiler invocation.

    Attributes:
        return_code: Exit code of the process.
        stdout: Standard output of the process.
        stderr: Standard error of the process.
        command: Executable followed by its arguments.
        duration_seconds: Wall time of the invocation.
    """

    return_code: int
    stdout: str = ""
    stderr: str = ""
    command: list[str] = field(default_factory=list)
    duration_seconds: float = 0.0

    @property
    def success(self) -> bool:
        """Return True when the process exited with code 0."""
        return self.return_code == 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "success": self.success,
            "return_code": self.return_code,
            "duration_seconds": self.duration_seconds,
            "command": self.command,
        }


class ProcessExecutor:
    """Runs an executable and captures stdout, stderr and the exit code."""

    def __init__(self, timeout: float | None = None):
        """Initialize the executor.

        Args:
            timeout: Maximum time per invocation in seconds. None waits forever.
        """
        self.timeout = timeout

    def execute(self, executable: str, arguments: list[str]) -> ExecutionResult:
        """Run the executable with the given arguments.

        Args:
            executable: Path to the executable.
            arguments: Arguments, not including the executable.

        Returns:
            ExecutionResult with captured output.

        Raises:
            ProcessLaunchError: If the process cannot be started.
            ProcessTimeoutError: If the process outlives the timeout.
        """
        command = [executable, *arguments]
        logger.debug(f"Running: {' '.join(command)}")

        start_time = time.time()
        try:
            completed = subprocess.run(
                command,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise ProcessTimeoutError(executable, self.timeout) from e
        except OSError as e:
            raise ProcessLaunchError(
                f"Unable to start {executable}: {e.strerror or e}",
                executable=executable,
                details={"errno": e.errno},
            ) from e

        result = ExecutionResult(
            return_code=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
            command=command,
            duration_seconds=time.time() - start_time,
        )

        if not result.success:
            logger.warning(
                f"{executable} exited with code {result.return_code}. "
                f"Error: {result.stderr[:500] if result.stderr else 'Unknown error'}"
            )

        return result
