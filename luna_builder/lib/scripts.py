from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from string import Template
from typing import Dict

from ..build_config import BuildConfig

# Script name -> file shipped in luna_builder/scripts/ and written to the host temp dir.
SCRIPT_FILENAMES: Dict[str, str] = {
    "grub": "setup-grub.sh",
    "kde": "setup-kde.sh",
    "calamares": "setup-calamares.sh",
    "software": "setup-software.sh",
}


@dataclass(frozen=True)
class ChrootScript:
    """Shell program run inside the chroot. The body is opaque to the builder."""

    name: str
    filename: str
    body: str


def _scripts_dir() -> Path:
    return Path(__file__).resolve().parents[1] / "scripts"


def script_values(cfg: BuildConfig) -> Dict[str, str]:
    short_title = cfg.distro_name.split()[0]
    return {
        "distro_name": cfg.distro_name,
        "distro_short_name": cfg.distro_short_name,
        "short_title": short_title,
        "os_id": short_title.lower(),
        "lsb_id": cfg.distro_name.replace(" ", ""),
        "version": cfg.version,
        "codename": cfg.codename,
        "codename_title": cfg.codename.title(),
        "base_distro": cfg.base_distro,
        "base_codename": cfg.base_codename,
        "desktop_packages": " ".join(cfg.desktop_packages),
        "additional_packages": " ".join(cfg.additional_packages),
    }


def load_script(name: str, cfg: BuildConfig) -> ChrootScript:
    try:
        filename = SCRIPT_FILENAMES[name]
    except KeyError:
        raise ValueError(f"Unknown chroot script: {name}") from None

    template = Template((_scripts_dir() / filename).read_text(encoding="utf-8"))
    return ChrootScript(name=name, filename=filename, body=template.safe_substitute(script_values(cfg)))
