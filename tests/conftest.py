from pathlib import Path

import pytest

from luna_builder.build_config import BuildConfig, default_build_config
from luna_builder.errors import CommandError
from luna_builder.lib.command import CmdResult, Command


class FakeRunner:
    """Stands in for run_cmd: records commands, fails the listed programs."""

    def __init__(self) -> None:
        self.commands: list[Command] = []
        self.verbose_flags: list[bool] = []
        self.fail: set[str] = set()

    def __call__(self, command: Command, *, verbose: bool = False, check: bool = True) -> CmdResult:
        self.commands.append(command)
        self.verbose_flags.append(verbose)
        rc = 1 if command.program in self.fail else 0
        if rc and check:
            raise CommandError(command.argv, rc, command.render())
        return CmdResult(argv=list(command.argv), returncode=rc)

    @property
    def programs(self) -> list[str]:
        return [c.program for c in self.commands]


@pytest.fixture
def cfg(tmp_path: Path) -> BuildConfig:
    host_tmp = tmp_path / "host-tmp"
    host_tmp.mkdir()
    return default_build_config(home=str(tmp_path)).with_updates(host_tmp_dir=host_tmp)


@pytest.fixture
def fake_runner(monkeypatch) -> FakeRunner:
    runner = FakeRunner()
    for module in [
        "luna_builder.lib.chroot",
        "luna_builder.steps.step_02_bootstrap_base",
        "luna_builder.steps.step_07_prepare_image_files",
        "luna_builder.steps.step_08_boot_structure",
        "luna_builder.steps.step_09_create_iso",
    ]:
        monkeypatch.setattr(f"{module}.run_cmd", runner)
    return runner


@pytest.fixture
def tool_path(tmp_path: Path, monkeypatch) -> Path:
    """An otherwise empty PATH directory; tests drop fake tools into it."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    monkeypatch.setenv("PATH", str(bin_dir))
    return bin_dir


@pytest.fixture
def install_tool(tool_path: Path):
    def install(name: str) -> Path:
        tool = tool_path / name
        tool.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
        tool.chmod(0o755)
        return tool

    return install
