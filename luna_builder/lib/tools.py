from __future__ import annotations

import logging
import shutil
from typing import Dict, List

from ..errors import ToolMissingError

logger = logging.getLogger(__name__)


# External tools the build shells out to, with the host package that provides them.
REQUIRED_TOOLS: Dict[str, str] = {
    "mmdebstrap": "apt install mmdebstrap",
    "mksquashfs": "apt install squashfs-tools",
    "xorriso": "apt install xorriso",
    "grub-mkrescue": "apt install grub-common",
    "chroot": "apt install coreutils",
}


def check_dependency(name: str) -> bool:
    return shutil.which(name) is not None


def require_tool(name: str) -> None:
    if not check_dependency(name):
        raise ToolMissingError(name, REQUIRED_TOOLS.get(name))
    logger.debug("Found %s at %s", name, shutil.which(name))


def missing_dependencies() -> List[str]:
    return [name for name in REQUIRED_TOOLS if not check_dependency(name)]
