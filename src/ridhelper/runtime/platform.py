from __future__ import annotations

from .host import (
    ARCH_ARM,
    ARCH_ARM64,
    ARCH_UNKNOWN,
    ARCH_X64,
    ARCH_X86,
    OS_LINUX,
    OS_MACOS,
    OS_UNKNOWN,
    OS_WINDOWS,
    HostEnvironment,
    resolve_host,
)


def architecture_name(*, host: HostEnvironment | None = None) -> str:
    """Return the process architecture: `x86`, `x64`, `arm`, `arm64` or `unknown`."""
    arch = resolve_host(host).process_architecture()
    if arch in {ARCH_X86, ARCH_X64, ARCH_ARM, ARCH_ARM64}:
        return arch
    return ARCH_UNKNOWN


def is_windows(*, host: HostEnvironment | None = None) -> bool:
    return resolve_host(host).is_os_platform(OS_WINDOWS)


def is_macos(*, host: HostEnvironment | None = None) -> bool:
    return resolve_host(host).is_os_platform(OS_MACOS)


def is_linux(*, host: HostEnvironment | None = None) -> bool:
    return resolve_host(host).is_os_platform(OS_LINUX)


def os_platform_name(*, host: HostEnvironment | None = None) -> str:
    """Return `win`, `osx`, `linux` or `unknown`.

    Checked in that order. Android and iOS are not recognized.
    """
    h = resolve_host(host)
    if is_windows(host=h):
        return OS_WINDOWS
    if is_macos(host=h):
        return OS_MACOS
    if is_linux(host=h):
        return OS_LINUX
    return OS_UNKNOWN


def runtime_identifier(*, host: HostEnvironment | None = None) -> str:
    """Return the runtime identifier (`os-arch`), e.g. `linux-x64`."""
    h = resolve_host(host)
    return f"{os_platform_name(host=h)}-{architecture_name(host=h)}"
