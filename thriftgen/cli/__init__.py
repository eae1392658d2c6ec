"""Command line interface for thriftgen."""
