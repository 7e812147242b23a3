from __future__ import annotations

import logging

from ..build_config import BuildConfig
from ..lib.chroot import run_chroot_script
from ..lib.scripts import load_script

logger = logging.getLogger(__name__)


class InstallDesktopStep:
    step_id = "04_install_desktop"
    title = "Install KDE Plasma with Wayland"

    def run(self, cfg: BuildConfig) -> None:
        # Also configures SDDM autologin and the default "luna" user with passwordless sudo.
        logger.info("Installing %d desktop packages", len(cfg.desktop_packages))
        run_chroot_script(cfg, load_script("kde", cfg))
