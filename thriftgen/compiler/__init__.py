"""Thrift compiler invocation.

This module provides:
- Platform resolution and extraction of the bundled compiler binary
- Validated configuration building
- Per-file compiler execution and relocation of generated sources
"""

from thriftgen.compiler.builder import ThriftBuilder
from thriftgen.compiler.command import build_command
from thriftgen.compiler.executor import ExecutionResult, ProcessExecutor
from thriftgen.compiler.materializer import materialize
from thriftgen.compiler.orchestrator import ThriftCompiler, compile_sources
from thriftgen.compiler.platform import host_platform, resolve_executable_id
from thriftgen.compiler.relocator import relocate

__all__ = [
    "ThriftBuilder",
    "build_command",
    "ExecutionResult",
    "ProcessExecutor",
    "materialize",
    "ThriftCompiler",
    "compile_sources",
    "host_platform",
    "resolve_executable_id",
    "relocate",
]
