from __future__ import annotations

from ..build_config import BuildConfig
from .command import Command

SQUASHFS_NAME = "filesystem.squashfs"


def mksquashfs_command(cfg: BuildConfig) -> Command:
    return Command.of(
        "mksquashfs",
        cfg.chroot_dir,
        cfg.image_dir / SQUASHFS_NAME,
        "-comp",
        "xz",
        "-b",
        "1M",
        "-noappend",
    )


def xorriso_command(cfg: BuildConfig) -> Command:
    # Hybrid BIOS (El Torito) + EFI image with a GPT/MBR protective layout.
    return Command.of(
        "xorriso",
        "-as",
        "mkisofs",
        "-volid",
        cfg.distro_name,
        "-full-iso9660-filenames",
        "-joliet",
        "-rational-rock",
        "-iso-level",
        "3",
        "-eltorito-boot",
        "boot/grub/bios.img",
        "-no-emul-boot",
        "-boot-load-size",
        "4",
        "-boot-info-table",
        "--efi-boot",
        "boot/grub/efi.img",
        "-efi-boot-part",
        "--efi-boot-image",
        "--protective-msdos-label",
        "-isohybrid-gpt-basdat",
        "-o",
        cfg.output_iso,
        cfg.iso_dir,
    )
