from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import List

from ..build_config import BuildConfig
from ..errors import StagingError

logger = logging.getLogger(__name__)


def work_tree(cfg: BuildConfig) -> List[Path]:
    return [cfg.work_dir, cfg.chroot_dir, cfg.image_dir, cfg.iso_dir]


def _refuses_wipe(path: Path) -> bool:
    # Never the filesystem root, the current directory or anything above it.
    resolved = path.resolve()
    cwd = Path.cwd().resolve()
    return resolved == Path(resolved.anchor) or resolved == cwd or resolved in cwd.parents


def stage_directories(cfg: BuildConfig) -> None:
    """Create work/chroot/image/iso, wiping the work dir first on a clean build."""

    if cfg.clean_build and cfg.work_dir.exists():
        if _refuses_wipe(cfg.work_dir):
            raise StagingError(f"Refusing to remove work directory {cfg.work_dir}")
        logger.info("Clean build: removing %s", cfg.work_dir)
        try:
            shutil.rmtree(cfg.work_dir)
        except OSError as e:
            raise StagingError(f"Cannot remove {cfg.work_dir}: {e}") from e

    for d in work_tree(cfg):
        try:
            d.mkdir(mode=0o755, exist_ok=True)
        except OSError as e:
            raise StagingError(f"Cannot create directory {d}: {e}") from e

    logger.info("Work tree ready at %s", cfg.work_dir)
