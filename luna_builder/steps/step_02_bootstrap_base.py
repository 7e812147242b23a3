from __future__ import annotations

import logging

from ..build_config import BuildConfig
from ..lib.command import Command, run_cmd
from ..lib.tools import require_tool

logger = logging.getLogger(__name__)


def mmdebstrap_command(cfg: BuildConfig) -> Command:
    return Command.of(
        "mmdebstrap",
        "--variant=important",
        f"--include={','.join(cfg.base_packages)}",
        cfg.base_codename,
        cfg.chroot_dir,
        cfg.mirror,
    )


class BootstrapBaseSystemStep:
    step_id = "02_bootstrap_base"
    title = "Build base system"

    def run(self, cfg: BuildConfig) -> None:
        require_tool("mmdebstrap")

        logger.info(
            "Bootstrapping %s %s (%s) into %s",
            cfg.base_distro,
            cfg.base_version,
            cfg.base_codename,
            cfg.chroot_dir,
        )
        run_cmd(mmdebstrap_command(cfg), verbose=cfg.verbose)
