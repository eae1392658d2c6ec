"""Bundled thrift compiler binaries.

Files in this package are named by executable id, e.g.
``thrift-0.5.0-linux64`` or ``thrift-0.5.0.exe``.
"""
