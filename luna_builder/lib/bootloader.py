from __future__ import annotations

import logging

from ..build_config import BuildConfig
from ..errors import StagingError

logger = logging.getLogger(__name__)


def render_grub_cfg(cfg: BuildConfig) -> str:
    """GRUB menu for the live ISO (casper layout)."""

    name = cfg.distro_name
    return (
        "set timeout=30\n"
        "set default=0\n\n"
        f'menuentry "Start {name} Live (Wayland)" {{\n'
        "    linux /casper/vmlinuz boot=casper noprompt quiet splash ---\n"
        "    initrd /casper/initrd\n"
        "}\n\n"
        f'menuentry "Start {name} Live (Safe Graphics)" {{\n'
        "    linux /casper/vmlinuz boot=casper nomodeset quiet splash ---\n"
        "    initrd /casper/initrd\n"
        "}\n\n"
        f'menuentry "Install {name}" {{\n'
        "    linux /casper/vmlinuz boot=casper noprompt only-ubiquity quiet splash ---\n"
        "    initrd /casper/initrd\n"
        "}\n\n"
        'menuentry "Boot from first hard disk" {\n'
        "    set root=(hd0)\n"
        "    chainloader +1\n"
        "}\n"
    )


def render_disk_info(cfg: BuildConfig) -> str:
    return (
        f"{cfg.distro_name} {cfg.codename.title()} {cfg.version} {cfg.architecture}\n"
        f"Based on {cfg.base_distro.title()} {cfg.base_version} LTS\n"
    )


def write_boot_files(cfg: BuildConfig) -> None:
    """Write boot/grub/grub.cfg and .disk/info into the ISO tree."""

    files = [
        (cfg.iso_dir / "boot/grub/grub.cfg", render_grub_cfg(cfg)),
        (cfg.iso_dir / ".disk/info", render_disk_info(cfg)),
    ]
    for path, contents in files:
        try:
            path.write_text(contents, encoding="utf-8")
        except OSError as e:
            raise StagingError(f"Cannot write {path}: {e}") from e
        logger.info("Wrote %s", path)
