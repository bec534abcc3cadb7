from __future__ import annotations

import os

import pytest


def _run(capsys, *argv: str) -> str:
    from ridhelper.cli import main

    main(list(argv))
    return capsys.readouterr().out.strip()


def test_cli_rid_uses_default_host(capsys):
    assert _run(capsys, "rid") == "linux-x64"


def test_cli_rid_override(capsys):
    assert _run(capsys, "--rid", "win-arm64", "rid") == "win-arm64"
    assert _run(capsys, "--rid", "win-arm64", "os") == "win"
    assert _run(capsys, "--rid", "win-arm64", "arch") == "arm64"


def test_cli_ext(capsys):
    assert _run(capsys, "--rid", "osx-x64", "ext") == ".dylib"
    assert _run(capsys, "--rid", "osx-x64", "ext", "--no-dot") == "dylib"


def test_cli_lib_name(capsys):
    assert _run(capsys, "--rid", "win-x64", "lib-name", "foo") == "foo.dll"
    assert _run(capsys, "--rid", "linux-x64", "lib-name", "foo") == "libfoo.so"


def test_cli_native_and_import_paths(capsys, monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    assert _run(capsys, "native-path") == os.path.join("runtimes", "linux-x64", "native")
    assert _run(capsys, "native-path", "--absolute") == os.path.join(os.getcwd(), "runtimes", "linux-x64", "native")
    assert _run(capsys, "--rid", "osx-arm64", "import-path", "foo", "--absolute") == os.path.join(
        os.getcwd(), "runtimes", "osx-arm64", "native", "libfoo.dylib"
    )


def test_cli_version_prints_something(capsys):
    assert _run(capsys, "version")


def test_cli_bad_rid_exits_with_message():
    from ridhelper.cli import main

    with pytest.raises(SystemExit, match=r"unknown OS platform: 'beos'"):
        main(["--rid", "beos-x64", "rid"])
