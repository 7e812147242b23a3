from __future__ import annotations

import configparser
import dataclasses
import logging
import os
import pwd
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from .errors import ConfigError
from .lib.manifests import load_package_manifest

logger = logging.getLogger(__name__)


CONFIG_SECTION = "Luna Linux Build Configuration"

# Keys written by save_build_config() and accepted by load_build_config().
SAVED_KEYS = (
    "distro_name",
    "version",
    "codename",
    "base_distro",
    "base_version",
    "architecture",
    "work_dir",
    "output_iso",
)
PATH_KEYS = {"work_dir", "output_iso"}


def home_dir() -> str:
    home = os.environ.get("HOME")
    if home:
        return home
    return pwd.getpwuid(os.getuid()).pw_dir


def expand_path(path: str, home: Optional[str] = None) -> str:
    """Replace a leading ``~`` with the home directory; pass anything else through."""
    if path.startswith("~"):
        return (home if home is not None else home_dir()) + path[1:]
    return path


@dataclass(frozen=True)
class BuildConfig:
    work_dir: Path
    output_iso: Path

    distro_name: str = "Luna Linux"
    distro_short_name: str = "luna-linux"
    version: str = "1.0"
    codename: str = "stellar"
    base_distro: str = "ubuntu"
    base_version: str = "22.04"
    base_codename: str = "jammy"
    architecture: str = "amd64"
    mirror: str = "http://archive.ubuntu.com/ubuntu/"

    host_tmp_dir: Path = Path("/tmp")

    verbose: bool = False
    clean_build: bool = False

    base_packages: Tuple[str, ...] = field(default_factory=tuple)
    desktop_packages: Tuple[str, ...] = field(default_factory=tuple)
    additional_packages: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def chroot_dir(self) -> Path:
        return self.work_dir / "chroot"

    @property
    def image_dir(self) -> Path:
        return self.work_dir / "image"

    @property
    def iso_dir(self) -> Path:
        return self.work_dir / "iso"

    def with_updates(self, **updates: object) -> "BuildConfig":
        return dataclasses.replace(self, **updates)


def default_build_config(home: Optional[str] = None) -> BuildConfig:
    """Hard-coded Luna Linux defaults, with paths under the invoking user's home."""
    base = Path(home if home is not None else home_dir())
    packages = load_package_manifest()
    iso_name = f"Luna-Linux-{BuildConfig.base_version}-{BuildConfig.architecture}.iso"
    return BuildConfig(
        work_dir=base / "luna-linux-build",
        output_iso=base / iso_name,
        base_packages=tuple(packages.get("base", [])),
        desktop_packages=tuple(packages.get("desktop", [])),
        additional_packages=tuple(packages.get("additional", [])),
    )


def save_build_config(cfg: BuildConfig, path: str) -> Path:
    parser = configparser.ConfigParser(interpolation=None)
    parser.optionxform = str  # type: ignore[assignment]
    parser[CONFIG_SECTION] = {key: str(getattr(cfg, key)) for key in SAVED_KEYS}

    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as fh:
        parser.write(fh)
    logger.info("Saved build configuration to %s", p)
    return p


def load_build_config(path: str, base: Optional[BuildConfig] = None) -> BuildConfig:
    """Read a file written by save_build_config() on top of ``base`` (defaults if None)."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)

    parser = configparser.ConfigParser(interpolation=None)
    parser.optionxform = str  # type: ignore[assignment]
    try:
        parser.read_string(p.read_text(encoding="utf-8"), source=str(p))
    except UnicodeDecodeError as e:
        raise ConfigError(f"{p} is not valid UTF-8: {e}") from e
    except configparser.Error as e:
        raise ConfigError(f"Cannot parse {p}: {e}") from e

    if not parser.has_section(CONFIG_SECTION):
        raise ConfigError(f"{p} has no [{CONFIG_SECTION}] section")

    cfg = base if base is not None else default_build_config()
    updates: dict[str, object] = {}
    for key, value in parser.items(CONFIG_SECTION):
        if key not in SAVED_KEYS:
            logger.warning("Ignoring unknown configuration key %s in %s", key, p)
            continue
        if key in PATH_KEYS:
            if not value.strip():
                raise ConfigError(f"{key} in {p} must not be empty")
            updates[key] = Path(expand_path(value.strip()))
        else:
            updates[key] = value

    logger.info("Loaded build configuration from %s", p)
    return cfg.with_updates(**updates)


def describe_config(cfg: BuildConfig) -> None:
    logger.info("=== Luna Linux Builder configuration ===")
    logger.info("Distribution: %s %s (%s)", cfg.distro_name, cfg.version, cfg.codename)
    logger.info("Base: %s %s %s", cfg.base_distro, cfg.base_version, cfg.architecture)
    logger.info("Work directory: %s", cfg.work_dir)
    logger.info("Output ISO: %s", cfg.output_iso)
    logger.info("Mode: %s", "verbose" if cfg.verbose else "normal")
