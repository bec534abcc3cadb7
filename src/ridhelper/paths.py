"""Native library locations under `runtimes/<rid>/native`."""

from __future__ import annotations

import os
from pathlib import Path

from .runtime.host import HostEnvironment, resolve_host
from .runtime.platform import is_macos, is_windows, runtime_identifier


def runtime_native_path(absolute: bool = False, *, host: HostEnvironment | None = None) -> str:
    """Return `runtimes/<rid>/native`.

    With `absolute=True` the path is joined onto the current working
    directory as it is at call time. The directory is not required to exist.
    """
    h = resolve_host(host)
    path = Path("runtimes") / runtime_identifier(host=h) / "native"
    if absolute:
        path = Path(h.current_directory()) / path
    return str(path)


def shared_library_extension(with_dot: bool = False, *, host: HostEnvironment | None = None) -> str:
    h = resolve_host(host)
    ext = "so"
    if is_windows(host=h):
        ext = "dll"
    elif is_macos(host=h):
        ext = "dylib"
    if with_dot:
        ext = "." + ext
    return ext


def _has_extension(name: str) -> bool:
    base = os.path.basename(name)
    dot = base.rfind(".")
    return dot != -1 and dot != len(base) - 1


def native_library_name(name: str, *, host: HostEnvironment | None = None) -> str:
    """Normalize `name` to the host's shared library filename.

    Off Windows a `lib` prefix is added unless already present. A name with no
    extension gets the host's shared library extension. Any existing extension
    is kept as is, even one that is not a shared library extension
    (`foo.txt` stays `foo.txt`).
    """
    h = resolve_host(host)
    if not is_windows(host=h) and not name.startswith("lib"):
        name = "lib" + name
    if not _has_extension(name):
        name = name + shared_library_extension(True, host=h)
    return name


def dll_import_path(name: str, absolute: bool = False, *, host: HostEnvironment | None = None) -> str:
    """Return the path a native library `name` is expected at for this host."""
    h = resolve_host(host)
    return os.path.join(runtime_native_path(absolute, host=h), native_library_name(name, host=h))
