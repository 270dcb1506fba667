from collections.abc import Iterator
import logging
from pathlib import Path
import shlex
import stat

import pytest
import structlog

from hook_fmt.common.logging import HANDLER_NAME


class FakeTools:
    """Write executable ``/bin/sh`` scripts that stand in for formatters.

    Every script appends ``name|cwd|args`` to a shared log before exiting, so
    tests can check what ran, where, and in which order.
    """

    def __init__(self, bin_dir: Path, log_path: Path) -> None:
        self.bin_dir = bin_dir
        self.log_path = log_path

    def add(
        self,
        name: str,
        *,
        exit_code: int = 0,
        stderr: str = "",
        body: str = "",
        directory: Path | None = None,
    ) -> Path:
        directory = directory if directory is not None else self.bin_dir
        directory.mkdir(parents=True, exist_ok=True)
        script = directory / name
        lines = [
            "#!/bin/sh",
            f"printf '%s|%s|%s\\n' {shlex.quote(name)} \"$(pwd -P)\" \"$*\""
            f" >> {shlex.quote(str(self.log_path))}",
        ]
        if stderr:
            lines.append(f"printf '%s' {shlex.quote(stderr)} >&2")
        if body:
            lines.append(body)
        lines.append(f"exit {exit_code}")
        script.write_text("\n".join(lines) + "\n")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    def calls(self) -> list[tuple[str, str, str]]:
        if not self.log_path.exists():
            return []
        result = []
        for line in self.log_path.read_text().splitlines():
            name, cwd, args = line.split("|", 2)
            result.append((name, cwd, args))
        return result

    def names(self) -> list[str]:
        return [name for name, _, _ in self.calls()]


@pytest.fixture
def fake_tools(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> FakeTools:
    bin_dir = tmp_path / "fake-bin"
    bin_dir.mkdir()
    monkeypatch.setenv("PATH", str(bin_dir))
    return FakeTools(bin_dir, tmp_path / "calls.log")


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    ws = tmp_path / "ws"
    ws.mkdir()
    return ws


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    level = root.level
    yield
    for handler in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(handler)
    root.setLevel(level)
    structlog.reset_defaults()


def logged_events(caplog: pytest.LogCaptureFixture) -> list[object]:
    return [r.msg.get("event") for r in caplog.records if isinstance(r.msg, dict)]
