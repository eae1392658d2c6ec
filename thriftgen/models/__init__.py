"""Data models module."""

from thriftgen.models.compiler import CompilerConfig

__all__ = ["CompilerConfig"]
