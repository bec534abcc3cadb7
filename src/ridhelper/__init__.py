"""ridhelper: runtime identifiers and native library paths for the host process."""

from __future__ import annotations

from . import errors
from .paths import dll_import_path, native_library_name, runtime_native_path, shared_library_extension
from .runtime.host import HostEnvironment
from .runtime.platform import (
    architecture_name,
    is_linux,
    is_macos,
    is_windows,
    os_platform_name,
    runtime_identifier,
)

__all__ = [
    "HostEnvironment",
    "architecture_name",
    "dll_import_path",
    "errors",
    "is_linux",
    "is_macos",
    "is_windows",
    "native_library_name",
    "os_platform_name",
    "runtime_identifier",
    "runtime_native_path",
    "shared_library_extension",
]
