from __future__ import annotations

import logging
import os
from pathlib import Path

from ..build_config import BuildConfig
from ..errors import StagingError
from .command import CmdResult, Command, run_cmd
from .scripts import ChrootScript

logger = logging.getLogger(__name__)


def chroot_command(chroot_dir: Path, *argv: str) -> Command:
    return Command.of("chroot", chroot_dir, *argv)


def run_chroot_script(cfg: BuildConfig, script: ChrootScript) -> CmdResult:
    """Write a script on the host, copy it into the chroot and run it there.

    The write is fatal, copy and chmod are best-effort, and the chroot run
    decides the outcome.
    """

    host_path = cfg.host_tmp_dir / script.filename
    try:
        host_path.write_text(script.body, encoding="utf-8")
        os.chmod(host_path, 0o755)
    except OSError as e:
        raise StagingError(f"Cannot write script {host_path}: {e}") from e

    chroot_tmp = cfg.chroot_dir / "tmp"
    copied = run_cmd(Command.of("cp", host_path, f"{chroot_tmp}/"), verbose=cfg.verbose, check=False)
    if not copied.ok:
        logger.warning("Could not copy %s into %s", script.filename, chroot_tmp)

    marked = run_cmd(Command.of("chmod", "+x", chroot_tmp / script.filename), verbose=cfg.verbose, check=False)
    if not marked.ok:
        logger.warning("Could not mark %s executable", chroot_tmp / script.filename)

    logger.info("Running %s inside %s", script.filename, cfg.chroot_dir)
    return run_cmd(
        chroot_command(cfg.chroot_dir, "/bin/bash", f"/tmp/{script.filename}"),
        verbose=cfg.verbose,
    )
