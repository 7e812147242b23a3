from __future__ import annotations

from ..build_config import BuildConfig
from ..lib.chroot import run_chroot_script
from ..lib.scripts import load_script


class InstallCalamaresStep:
    step_id = "05_install_calamares"
    title = "Install Calamares graphical installer"

    def run(self, cfg: BuildConfig) -> None:
        run_chroot_script(cfg, load_script("calamares", cfg))
