from __future__ import annotations

import logging

from ..build_config import BuildConfig
from ..errors import StagingError
from ..lib.bootloader import write_boot_files
from ..lib.command import Command, run_cmd
from ..lib.image import SQUASHFS_NAME

logger = logging.getLogger(__name__)

LIVE_DIRS = ["boot/grub", "casper", ".disk"]


class CreateBootStructureStep:
    step_id = "08_boot_structure"
    title = "Create boot structure"

    def run(self, cfg: BuildConfig) -> None:
        for rel in LIVE_DIRS:
            d = cfg.iso_dir / rel
            try:
                d.mkdir(mode=0o755, parents=True, exist_ok=True)
            except OSError as e:
                raise StagingError(f"Cannot create directory {d}: {e}") from e

        casper = cfg.iso_dir / "casper"
        for name in ["vmlinuz", "initrd", SQUASHFS_NAME]:
            # Best-effort: a missing artifact surfaces when the ISO is mastered.
            r = run_cmd(Command.of("cp", cfg.image_dir / name, f"{casper}/"), verbose=cfg.verbose, check=False)
            if not r.ok:
                logger.warning("Could not copy %s into %s", name, casper)

        write_boot_files(cfg)
