from __future__ import annotations

import logging

from ..build_config import BuildConfig
from ..lib.command import run_cmd
from ..lib.image import xorriso_command
from ..lib.tools import require_tool

logger = logging.getLogger(__name__)


class CreateIsoImageStep:
    step_id = "09_create_iso"
    title = "Create ISO image"

    def run(self, cfg: BuildConfig) -> None:
        require_tool("xorriso")
        logger.info("Mastering %s from %s", cfg.output_iso, cfg.iso_dir)
        run_cmd(xorriso_command(cfg), verbose=cfg.verbose)
