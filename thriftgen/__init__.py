"""thriftgen - Thrift compiler invocation for build tooling."""

__version__ = "0.1.0"
