from __future__ import annotations

import logging

from ..build_config import BuildConfig
from ..lib.command import Command, run_cmd
from ..lib.image import mksquashfs_command
from ..lib.kernel import INITRD_PATTERN, KERNEL_PATTERN, find_boot_file

logger = logging.getLogger(__name__)


class PrepareImageFilesStep:
    step_id = "07_prepare_image_files"
    title = "Prepare ISO files"

    def run(self, cfg: BuildConfig) -> None:
        boot_dir = cfg.chroot_dir / "boot"

        vmlinuz = find_boot_file(boot_dir, KERNEL_PATTERN)
        run_cmd(Command.of("cp", vmlinuz, cfg.image_dir / "vmlinuz"), verbose=cfg.verbose)

        initrd = find_boot_file(boot_dir, INITRD_PATTERN)
        run_cmd(Command.of("cp", initrd, cfg.image_dir / "initrd"), verbose=cfg.verbose)

        logger.info("Kernel %s, initrd %s", vmlinuz.name, initrd.name)
        logger.info("Creating squashfs image...")
        run_cmd(mksquashfs_command(cfg), verbose=cfg.verbose)
