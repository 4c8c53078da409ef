# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for mode selection and running the hook chain."""

from __future__ import annotations

import errno
import os
from pathlib import Path

import pytest

from cuckoo.config import CuckooSettings
from cuckoo.dispatch import InvocationMode, invoke
from cuckoo.installer import install

ENV = {"PATH": os.environ.get("PATH", "/usr/bin:/bin")}


@pytest.fixture
def installed(tmp_path: Path, program: Path, settings: CuckooSettings) -> Path:
    """Install cuckoo over ``usr/bin/foobar`` and return the intercepted path."""

    target = tmp_path / "usr" / "bin" / "foobar"
    target.parent.mkdir(parents=True)
    target.write_text(f"#!/bin/sh\necho 50-foobar >> '{tmp_path / 'order.log'}'\nexit 2\n", encoding="utf-8")
    target.chmod(0o755)
    install(target, program=program, settings=settings)
    return target


def _recording_hook(make_hook, directory: Path, name: str, log: Path, status: int = 0) -> Path:
    return make_hook(directory, name, f"echo {name} >> '{log}'\nexit {status}\n")


def _order(log: Path) -> list[str]:
    return log.read_text(encoding="utf-8").split() if log.exists() else []


@pytest.mark.parametrize(
    ("argv0", "expected"),
    [
        ("cuckoo", InvocationMode.INSTALL),
        ("/usr/local/bin/cuckoo", InvocationMode.INSTALL),
        ("./cuckoo", InvocationMode.INSTALL),
        ("/usr/bin/foobar", InvocationMode.INVOKE),
        ("cuckoo-logargs", InvocationMode.INVOKE),
        ("/usr/bin/cuckoo.d", InvocationMode.INVOKE),
    ],
)
def test_mode_detection(argv0: str, expected: InvocationMode) -> None:
    assert InvocationMode.detect(argv0, CuckooSettings()) is expected


def test_example_scenario(tmp_path: Path, installed: Path, settings: CuckooSettings, make_hook) -> None:
    log = tmp_path / "order.log"
    _recording_hook(make_hook, installed.parent / ".foobar.d", "10-pre", log)

    status = invoke([str(installed), "arg1"], ENV, settings=settings)

    assert status == 2
    assert _order(log) == ["10-pre", "50-foobar"]


def test_all_hooks_attempted_and_first_failure_wins(
    tmp_path: Path, installed: Path, settings: CuckooSettings, make_hook
) -> None:
    log = tmp_path / "order.log"
    hook_dir = installed.parent / ".foobar.d"
    (hook_dir / "50-foobar").unlink()
    _recording_hook(make_hook, hook_dir, "10-a", log, 0)
    _recording_hook(make_hook, settings.common_root / "foobar", "20-b", log, 5)
    _recording_hook(make_hook, hook_dir, "30-c", log, 9)

    status = invoke([str(installed)], ENV, settings=settings)

    assert status == 5
    assert _order(log) == ["10-a", "20-b", "30-c"]


def test_all_success(tmp_path: Path, installed: Path, settings: CuckooSettings, make_hook) -> None:
    log = tmp_path / "order.log"
    hook_dir = installed.parent / ".foobar.d"
    (hook_dir / "50-foobar").unlink()
    for name in ("10-a", "20-b", "30-c"):
        _recording_hook(make_hook, hook_dir, name, log)

    assert invoke([str(installed)], ENV, settings=settings) == 0
    assert _order(log) == ["10-a", "20-b", "30-c"]


def test_no_hooks_is_a_successful_noop(
    tmp_path: Path, settings: CuckooSettings, program: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    link = tmp_path / "bin" / "foobar"
    link.parent.mkdir()
    link.symlink_to(program)

    def unexpected_launch(*args: object, **kwargs: object) -> None:
        raise AssertionError("no hook should be launched")

    monkeypatch.setattr("cuckoo.dispatch.launch", unexpected_launch)

    assert invoke([str(link)], ENV, settings=settings) == 0


def test_launch_failure_does_not_stop_chain(
    tmp_path: Path,
    installed: Path,
    settings: CuckooSettings,
    make_hook,
    caplog: pytest.LogCaptureFixture,
) -> None:
    log = tmp_path / "order.log"
    hook_dir = installed.parent / ".foobar.d"
    broken = hook_dir / "20-broken"
    broken.write_text("#!/nonexistent/interpreter\n", encoding="utf-8")
    broken.chmod(0o755)
    _recording_hook(make_hook, hook_dir, "90-after", log, 0)

    with caplog.at_level("ERROR", logger="cuckoo"):
        status = invoke([str(installed)], ENV, settings=settings)

    assert status == 127
    assert _order(log) == ["50-foobar", "90-after"]
    assert "20-broken" in caplog.text


def test_hooks_receive_arguments_and_environment(
    tmp_path: Path, installed: Path, settings: CuckooSettings, make_hook
) -> None:
    hook_dir = installed.parent / ".foobar.d"
    (hook_dir / "50-foobar").unlink()
    records = tmp_path / "records"
    records.mkdir()
    body = f"printf '%s\\n' \"$0\" \"$@\" \"$PROBE\" > '{records}'/$(basename \"$0\")\n"
    first = make_hook(hook_dir, "10-first", body)
    second = make_hook(settings.common_root / "foobar", "20-second", body)

    status = invoke([str(installed), "alpha", "two words"], {**ENV, "PROBE": "seen"}, settings=settings)

    assert status == 0
    for hook in (first, second):
        lines = (records / hook.name).read_text(encoding="utf-8").splitlines()
        assert lines == [str(hook.parent.resolve() / hook.name), "alpha", "two words", "seen"]


def test_unresolvable_invocation_path(tmp_path: Path, settings: CuckooSettings) -> None:
    status = invoke([str(tmp_path / "gone" / "foobar")], ENV, settings=settings)

    assert status == errno.ENOENT


def test_symlink_loop_in_invocation_path(tmp_path: Path, settings: CuckooSettings) -> None:
    loop = tmp_path / "loop"
    loop.symlink_to(loop)

    assert invoke([str(loop / "foobar")], ENV, settings=settings) == errno.ENOENT


def test_unlistable_hook_directory_runs_nothing(
    tmp_path: Path,
    installed: Path,
    settings: CuckooSettings,
    make_hook,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    log = tmp_path / "order.log"
    hook_dir = installed.parent.resolve() / ".foobar.d"
    _recording_hook(make_hook, settings.common_root / "foobar", "10-common", log)
    real_scandir = os.scandir

    def deny(path):
        if Path(path) == hook_dir:
            raise PermissionError(errno.EACCES, os.strerror(errno.EACCES), str(path))
        return real_scandir(path)

    monkeypatch.setattr("cuckoo.discovery.os.scandir", deny)

    status = invoke([str(installed)], ENV, settings=settings)

    assert status == errno.EACCES
    assert _order(log) == []
