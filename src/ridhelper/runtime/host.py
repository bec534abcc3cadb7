"""Host environment queries, injectable so any OS/architecture can be simulated."""

from __future__ import annotations

import os
import platform
import struct
import sys
from dataclasses import dataclass

from ..errors import UnknownPlatformError

ARCH_X86 = "x86"
ARCH_X64 = "x64"
ARCH_ARM = "arm"
ARCH_ARM64 = "arm64"
ARCH_UNKNOWN = "unknown"

OS_WINDOWS = "win"
OS_MACOS = "osx"
OS_LINUX = "linux"
OS_UNKNOWN = "unknown"

KNOWN_ARCHITECTURES = (ARCH_X86, ARCH_X64, ARCH_ARM, ARCH_ARM64)
KNOWN_OS_PLATFORMS = (OS_WINDOWS, OS_MACOS, OS_LINUX)

_X86_MACHINES = {"x86", "i386", "i486", "i586", "i686", "x86pc"}
_X64_MACHINES = {"x64", "x86_64", "amd64", "em64t"}
_ARM64_MACHINES = {"arm64", "aarch64", "aarch64_be", "armv8b", "armv8l"}

# `sys.platform` / `platform.machine()` values reported by a host of each token.
_SIMULATED_SYS_PLATFORM = {
    OS_WINDOWS: "win32",
    OS_MACOS: "darwin",
    OS_LINUX: "linux",
}
_SIMULATED_MACHINE = {
    ARCH_X86: ("i686", 4),
    ARCH_X64: ("x86_64", 8),
    ARCH_ARM: ("armv7l", 4),
    ARCH_ARM64: ("aarch64", 8),
}


@dataclass(frozen=True)
class HostEnvironment:
    """What the running process knows about its host.

    `pointer_size` is the process pointer width in bytes. It separates a
    32-bit process from a 64-bit one on the same hardware, so a 32-bit
    interpreter on x86_64 reports `x86`.
    """

    sys_platform: str
    machine: str
    pointer_size: int = 8

    @classmethod
    def current(cls) -> HostEnvironment:
        return cls(
            sys_platform=sys.platform,
            machine=platform.machine(),
            pointer_size=struct.calcsize("P"),
        )

    @classmethod
    def simulate(cls, os_name: str, arch: str) -> HostEnvironment:
        """Return a host that reports `os_name` and `arch` (canonical tokens)."""
        if os_name not in _SIMULATED_SYS_PLATFORM:
            raise UnknownPlatformError(
                f"unknown OS platform: {os_name!r} (expected one of: {', '.join(KNOWN_OS_PLATFORMS)})"
            )
        if arch not in _SIMULATED_MACHINE:
            raise UnknownPlatformError(
                f"unknown architecture: {arch!r} (expected one of: {', '.join(KNOWN_ARCHITECTURES)})"
            )
        machine, pointer_size = _SIMULATED_MACHINE[arch]
        return cls(
            sys_platform=_SIMULATED_SYS_PLATFORM[os_name],
            machine=machine,
            pointer_size=pointer_size,
        )

    @classmethod
    def from_rid(cls, rid: str) -> HostEnvironment:
        """Parse an `os-arch` runtime identifier into a simulated host."""
        os_name, sep, arch = rid.strip().lower().partition("-")
        if not sep or not os_name or not arch:
            raise UnknownPlatformError(f"invalid runtime identifier: {rid!r} (expected OS-ARCH, e.g. linux-x64)")
        return cls.simulate(os_name, arch)

    def process_architecture(self) -> str:
        m = self.machine.strip().lower()
        is_64bit = self.pointer_size >= 8
        if m in _X64_MACHINES:
            return ARCH_X64 if is_64bit else ARCH_X86
        if m in _X86_MACHINES:
            return ARCH_X86
        if m in _ARM64_MACHINES:
            return ARCH_ARM64 if is_64bit else ARCH_ARM
        if m.startswith("arm"):
            return ARCH_ARM
        return ARCH_UNKNOWN

    def is_os_platform(self, os_name: str) -> bool:
        p = self.sys_platform
        if os_name == OS_WINDOWS:
            return p.startswith("win")
        if os_name == OS_MACOS:
            return p == "darwin"
        if os_name == OS_LINUX:
            return p.startswith("linux")
        return False

    def current_directory(self) -> str:
        # Read on every call; the working directory is process-wide and mutable.
        return os.getcwd()


# Bound once at import time; pass `host=` to any lookup to override.
HOST = HostEnvironment.current()


def resolve_host(host: HostEnvironment | None) -> HostEnvironment:
    return HOST if host is None else host
