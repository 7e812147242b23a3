from __future__ import annotations

import argparse
import logging
import os
import sys
from datetime import datetime
from typing import NoReturn, Optional

from .build_config import default_build_config, describe_config, load_build_config, save_build_config
from .errors import ConfigError
from .logging_utils import configure_logging
from .lib.tools import REQUIRED_TOOLS, missing_dependencies
from .pipeline import build_steps, run_pipeline
from .report import report_failure, report_success

logger = logging.getLogger(__name__)

PROG = "luna-build"


class _ArgumentParser(argparse.ArgumentParser):
    # Usage errors exit with 1, like every other failure.
    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    p = _ArgumentParser(
        prog=PROG,
        description="Build the Luna Linux live/installer ISO.",
        allow_abbrev=False,
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Echo every invoked command")
    p.add_argument("-c", "--clean", action="store_true", help="Remove the work directory before building")
    p.add_argument("--config", default=None, help="Load a saved build configuration")
    p.add_argument("--save-config", default=None, metavar="PATH", help="Write the effective configuration and exit")
    p.add_argument("--log", default=None, help="Also write a DEBUG log to this file")
    p.add_argument("--check-deps", action="store_true", help="Report missing external tools and exit")
    return p


def check_deps() -> int:
    missing = missing_dependencies()
    for name in missing:
        logger.error("Missing dependency: %s (%s)", name, REQUIRED_TOOLS[name])
    if not missing:
        logger.info("All external tools found: %s", ", ".join(REQUIRED_TOOLS))
    return 1 if missing else 0


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    configure_logging(log_path=args.log)

    cfg = default_build_config()
    if args.config:
        try:
            cfg = load_build_config(args.config, base=cfg)
        except (OSError, ConfigError) as e:
            logger.error("Cannot load configuration %s: %s", args.config, e)
            return 1
    cfg = cfg.with_updates(verbose=bool(args.verbose), clean_build=bool(args.clean))

    if args.save_config:
        try:
            save_build_config(cfg, args.save_config)
        except OSError as e:
            logger.error("Cannot save configuration %s: %s", args.save_config, e)
            return 1
        return 0

    if args.check_deps:
        return check_deps()

    if os.geteuid() != 0:
        logger.error("This program must be run as root")
        logger.error("Use: sudo %s", PROG)
        return 1

    logger.info("Starting %s build", cfg.distro_name)
    logger.info("Date and time: %s", datetime.now().strftime("%c"))
    describe_config(cfg)

    result = run_pipeline(cfg, build_steps())
    if not result.success:
        report_failure(result)
        return 1

    report_success(cfg)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
