from __future__ import annotations

import ctypes
import os
import sys

import ridhelper


def main() -> None:
    # Expects a layout like:
    #   ./runtimes/linux-x64/native/libfoo.so
    #   ./runtimes/win-x64/native/foo.dll
    #   ./runtimes/osx-arm64/native/libfoo.dylib
    name = sys.argv[1] if len(sys.argv) > 1 else "foo"
    path = ridhelper.dll_import_path(name, absolute=True)
    print("runtime identifier ->", ridhelper.runtime_identifier())
    print("library path ->", path)

    # ridhelper only computes the path; loading is up to the caller.
    if os.name == "nt":
        lib = ctypes.WinDLL(path)
    else:
        lib = ctypes.CDLL(path)
    print("loaded ->", lib)


if __name__ == "__main__":
    main()
