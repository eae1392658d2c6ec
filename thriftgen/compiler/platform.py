"""Platform resolution for the bundled thrift compiler binaries.

Maps an (os name, architecture) pair onto the identifier of the compiler
binary built for it. The identifier doubles as the lookup key in the
embedded binary registry.
"""

import platform

from thriftgen.core.exceptions.errors import (
    UnsupportedArchitectureError,
    UnsupportedPlatformError,
)

EXECUTABLE_PREFIX = "thrift"

# os.name values -> binary os suffix
OS_NAME_MAP: dict[str, str] = {
    "Mac OS X": "osx",
    "Darwin": "osx",
    "Linux": "linux",
    "FreeBSD": "bsd",
    "OpenBSD": "bsd",
    "NetBSD": "bsd",
}

# os.arch values (lowercase) -> binary word size
OS_ARCH_MAP: dict[str, str] = {
    "amd64": "64",
    "x86_64": "64",
    "x86": "32",
    "i386": "32",
    "i486": "32",
    "i586": "32",
    "i686": "32",
}


def resolve_executable_id(os_name: str, os_arch: str, version: str) -> str:
    """Resolve the executable identifier for a platform.

    Args:
        os_name: Operating system name, e.g. "Linux" or "Windows 10".
        os_arch: Architecture name, e.g. "amd64" or "i386".
        version: Compiler version.

    Returns:
        Identifier such as "thrift-0.5.0-linux64" or "thrift-0.5.0.exe".

    Raises:
        UnsupportedPlatformError: If the os name is unknown.
        UnsupportedArchitectureError: If the architecture is unknown.
    """
    if os_name.startswith("Windows"):
        return f"{EXECUTABLE_PREFIX}-{version}.exe"

    os_suffix = OS_NAME_MAP.get(os_name)
    if os_suffix is None:
        raise UnsupportedPlatformError(os_name)

    arch_suffix = OS_ARCH_MAP.get(os_arch.lower())
    if arch_suffix is None:
        raise UnsupportedArchitectureError(os_arch)

    return f"{EXECUTABLE_PREFIX}-{version}-{os_suffix}{arch_suffix}"


def host_platform() -> tuple[str, str]:
    """Return the (os name, architecture) of the running interpreter."""
    return platform.system(), platform.machine()
