from __future__ import annotations

import logging

from ..build_config import BuildConfig
from ..lib.scripts import SCRIPT_FILENAMES

logger = logging.getLogger(__name__)


class CleanupStep:
    step_id = "10_cleanup"
    title = "Finish build"

    def run(self, cfg: BuildConfig) -> None:
        # Only the host-side temp scripts; chroot/image/iso are left for inspection.
        for filename in SCRIPT_FILENAMES.values():
            p = cfg.host_tmp_dir / filename
            try:
                p.unlink(missing_ok=True)
            except OSError as e:
                logger.warning("Could not remove %s: %s", p, e)
