from __future__ import annotations

import logging

from ..build_config import BuildConfig
from ..lib.chroot import run_chroot_script
from ..lib.scripts import load_script

logger = logging.getLogger(__name__)


class InstallSoftwareStep:
    step_id = "06_install_software"
    title = "Install additional software"

    def run(self, cfg: BuildConfig) -> None:
        # The script also writes /etc/os-release and /etc/lsb-release for the target OS.
        logger.info("Installing additional software: %s", ", ".join(cfg.additional_packages))
        run_chroot_script(cfg, load_script("software", cfg))
