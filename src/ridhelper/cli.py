from __future__ import annotations

import argparse
import importlib.metadata

from .errors import RidHelperError


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="ridhelper")
    parser.add_argument(
        "--rid",
        default=None,
        help="Simulate another host, as OS-ARCH (e.g. win-x64, osx-arm64). Default: the running host.",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    sub.add_parser("version", help="Print ridhelper version.")
    sub.add_parser("rid", help="Print the runtime identifier (os-arch).")
    sub.add_parser("arch", help="Print the process architecture name.")
    sub.add_parser("os", help="Print the OS platform name.")

    p_native = sub.add_parser("native-path", help="Print the runtimes/<rid>/native directory.")
    p_native.add_argument("--absolute", action="store_true", help="Join onto the current working directory.")

    p_ext = sub.add_parser("ext", help="Print the shared library extension.")
    p_ext.add_argument("--no-dot", action="store_true", help="Omit the leading dot.")

    p_name = sub.add_parser("lib-name", help="Print the host filename for a native library.")
    p_name.add_argument("name", help="Library name, e.g. foo or libfoo.")

    p_import = sub.add_parser("import-path", help="Print the full path a native library is expected at.")
    p_import.add_argument("name", help="Library name, e.g. foo or libfoo.")
    p_import.add_argument("--absolute", action="store_true", help="Join onto the current working directory.")

    args = parser.parse_args(argv)
    if args.cmd == "version":
        try:
            print(importlib.metadata.version("ridhelper"))
        except importlib.metadata.PackageNotFoundError:
            print("0.0.0")
        return

    from .paths import dll_import_path, native_library_name, runtime_native_path, shared_library_extension
    from .runtime.host import HostEnvironment
    from .runtime.platform import architecture_name, os_platform_name, runtime_identifier

    host = None
    if args.rid is not None:
        try:
            host = HostEnvironment.from_rid(args.rid)
        except RidHelperError as e:
            raise SystemExit(str(e)) from e

    if args.cmd == "rid":
        print(runtime_identifier(host=host))
    elif args.cmd == "arch":
        print(architecture_name(host=host))
    elif args.cmd == "os":
        print(os_platform_name(host=host))
    elif args.cmd == "native-path":
        print(runtime_native_path(args.absolute, host=host))
    elif args.cmd == "ext":
        print(shared_library_extension(not args.no_dot, host=host))
    elif args.cmd == "lib-name":
        print(native_library_name(args.name, host=host))
    elif args.cmd == "import-path":
        print(dll_import_path(args.name, args.absolute, host=host))
