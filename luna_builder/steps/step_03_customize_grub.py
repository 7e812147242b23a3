from __future__ import annotations

from ..build_config import BuildConfig
from ..lib.chroot import run_chroot_script
from ..lib.scripts import load_script


class CustomizeGrubStep:
    step_id = "03_customize_grub"
    title = "Configure GRUB with custom theme"

    def run(self, cfg: BuildConfig) -> None:
        run_chroot_script(cfg, load_script("grub", cfg))
