from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from .build_config import BuildConfig

if TYPE_CHECKING:
    from .pipeline import PipelineResult

logger = logging.getLogger(__name__)

RULE = "=" * 43


def format_progress(step: int, total: int, message: str) -> str:
    percentage = step / total * 100
    return f"[{step}/{total}] {percentage:.0f}% {message}"


def format_size_mb(size_bytes: int) -> str:
    return f"{size_bytes / (1024 * 1024):.2f} MB"


def report_progress(step: int, total: int, message: str) -> None:
    logger.info("%s", format_progress(step, total, message))


def output_size(cfg: BuildConfig) -> Optional[int]:
    try:
        return cfg.output_iso.stat().st_size
    except OSError:
        return None


def report_success(cfg: BuildConfig) -> None:
    logger.info(RULE)
    logger.info("%s build completed successfully!", cfg.distro_name)
    logger.info("ISO file: %s", cfg.output_iso)
    size = output_size(cfg)
    if size is not None:
        logger.info("Size: %s", format_size_mb(size))
    logger.info(RULE)
    logger.info("To write to USB: dd if=\"%s\" of=/dev/sdX bs=4M status=progress && sync", cfg.output_iso)


def report_failure(result: "PipelineResult") -> None:
    logger.error("Build failed at step %d: %s", result.failed_step, result.failed_title)
