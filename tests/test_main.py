import os

import pytest

from luna_builder import main as main_mod
from luna_builder.build_config import CONFIG_SECTION
from luna_builder.pipeline import PipelineResult


@pytest.fixture(autouse=True)
def _isolated(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setattr(main_mod, "configure_logging", lambda **kw: None)


@pytest.fixture
def calls(monkeypatch):
    recorded = []

    def fake_run_pipeline(cfg, steps):
        recorded.append((cfg, steps))
        return PipelineResult(ran_steps=[s.step_id for s in steps])

    monkeypatch.setattr(main_mod, "run_pipeline", fake_run_pipeline)
    return recorded


def test_non_root_exits_without_running_steps(monkeypatch, calls, caplog):
    monkeypatch.setattr(os, "geteuid", lambda: 1000)
    assert main_mod.main([]) == 1
    assert calls == []
    assert "Use: sudo luna-build" in caplog.messages


def test_help_exits_zero(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main_mod.main(["-h"])
    assert excinfo.value.code == 0
    assert "-v" in capsys.readouterr().out


def test_unknown_flag_exits_one(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main_mod.main(["-x"])
    assert excinfo.value.code == 1
    assert "unrecognized arguments" in capsys.readouterr().err


def test_flags_reach_the_config(monkeypatch, calls):
    monkeypatch.setattr(os, "geteuid", lambda: 0)
    monkeypatch.setattr(main_mod, "report_success", lambda cfg: None)

    assert main_mod.main(["-v", "-c"]) == 0

    ((cfg, steps),) = calls
    assert cfg.verbose and cfg.clean_build
    assert len(steps) == 10


def test_defaults_leave_flags_off(monkeypatch, calls):
    monkeypatch.setattr(os, "geteuid", lambda: 0)
    monkeypatch.setattr(main_mod, "report_success", lambda cfg: None)
    assert main_mod.main([]) == 0
    ((cfg, _),) = calls
    assert not cfg.verbose and not cfg.clean_build


def test_step_failure_exits_one(monkeypatch, caplog):
    monkeypatch.setattr(os, "geteuid", lambda: 0)
    monkeypatch.setattr(
        main_mod,
        "run_pipeline",
        lambda cfg, steps: PipelineResult(failed_step=9, failed_title="Create ISO image"),
    )
    assert main_mod.main([]) == 1
    assert "Build failed at step 9: Create ISO image" in caplog.messages


def test_save_config_does_not_need_root(monkeypatch, calls, tmp_path):
    monkeypatch.setattr(os, "geteuid", lambda: 1000)
    target = tmp_path / "saved" / "luna.conf"
    assert main_mod.main(["--save-config", str(target)]) == 0
    assert target.read_text(encoding="utf-8").startswith(f"[{CONFIG_SECTION}]")
    assert calls == []


def test_config_file_is_loaded(monkeypatch, calls, tmp_path):
    monkeypatch.setattr(os, "geteuid", lambda: 0)
    monkeypatch.setattr(main_mod, "report_success", lambda cfg: None)
    conf = tmp_path / "luna.conf"
    conf.write_text(f"[{CONFIG_SECTION}]\nwork_dir = ~/custom-build\n", encoding="utf-8")

    assert main_mod.main(["--config", str(conf)]) == 0

    ((cfg, _),) = calls
    assert cfg.work_dir == tmp_path / "custom-build"


def test_missing_config_file_exits_one(calls, tmp_path):
    assert main_mod.main(["--config", str(tmp_path / "absent.conf")]) == 1
    assert calls == []


def test_check_deps_reports_missing_tools(monkeypatch, tmp_path, caplog):
    monkeypatch.setenv("PATH", str(tmp_path))
    assert main_mod.main(["--check-deps"]) == 1
    assert "Missing dependency: xorriso (apt install xorriso)" in caplog.messages


def test_check_deps_all_present(monkeypatch, tmp_path):
    for name in ["mmdebstrap", "mksquashfs", "xorriso", "grub-mkrescue", "chroot"]:
        tool = tmp_path / name
        tool.write_text("#!/bin/sh\n", encoding="utf-8")
        tool.chmod(0o755)
    monkeypatch.setenv("PATH", str(tmp_path))
    assert main_mod.main(["--check-deps"]) == 0


def test_non_utf8_config_exits_one(calls, tmp_path, caplog):
    conf = tmp_path / "luna.conf"
    conf.write_bytes(b"\xff\xfe")
    assert main_mod.main(["--config", str(conf)]) == 1
    assert calls == []
    assert any(m.startswith("Cannot load configuration") for m in caplog.messages)


def test_unwritable_save_path_exits_one(tmp_path, caplog):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")
    assert main_mod.main(["--save-config", str(blocker / "luna.conf")]) == 1
    assert any(m.startswith("Cannot save configuration") for m in caplog.messages)


@pytest.mark.parametrize("flag", ["--ch", "--verb", "--save"])
def test_abbreviated_flags_are_rejected(flag, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main_mod.main([flag])
    assert excinfo.value.code == 1
