from __future__ import annotations

import logging
from pathlib import Path

from ..errors import DiscoveryError

logger = logging.getLogger(__name__)

KERNEL_PATTERN = "vmlinuz-*"
INITRD_PATTERN = "initrd.img-*"


def find_boot_file(boot_dir: Path, pattern: str) -> Path:
    """Return the first regular file under boot_dir matching pattern.

    Candidates are ordered by path string, so the pick is reproducible; with
    several kernel versions installed this is the lexicographically smallest
    one, not the newest.
    """

    matches = sorted((p for p in boot_dir.rglob(pattern) if p.is_file()), key=str)
    if not matches:
        raise DiscoveryError(f"No file matching {pattern} under {boot_dir}")
    if len(matches) > 1:
        logger.warning(
            "Several files match %s under %s; using %s",
            pattern,
            boot_dir,
            matches[0].name,
        )
    return matches[0]
