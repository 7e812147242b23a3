from __future__ import annotations

import logging
import os
import shlex
import subprocess
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

from ..errors import CommandError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Command:
    """An external program invocation: program + arguments, no shell."""

    argv: Tuple[str, ...]
    cwd: Optional[str] = None
    env: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def of(cls, *argv: object, cwd: Optional[str] = None, env: Mapping[str, str] | None = None) -> "Command":
        return cls(argv=tuple(str(a) for a in argv), cwd=cwd, env=dict(env or {}))

    @property
    def program(self) -> str:
        return self.argv[0]

    def render(self) -> str:
        return " ".join(shlex.quote(a) for a in self.argv)


@dataclass(frozen=True)
class CmdResult:
    argv: list[str]
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def run_cmd(command: Command, *, verbose: bool = False, check: bool = True) -> CmdResult:
    """Run a command synchronously and map its exit status to success/failure.

    - verbose echoes the command line at INFO; otherwise it is logged at DEBUG.
    - Output is not captured; the tool writes straight to the terminal.
    - A spawn failure (program missing, not executable) counts as failure
      with returncode 127.
    - check=True raises CommandError on failure.
    """

    argv_list = list(command.argv)
    rendered = command.render()
    logger.log(logging.INFO if verbose else logging.DEBUG, "[CMD] %s", rendered)

    try:
        p = subprocess.run(
            argv_list,
            cwd=command.cwd,
            env=dict(os.environ, **command.env),
        )
        returncode = p.returncode
    except OSError as e:
        logger.debug("Spawn failed for %s: %s", command.program, e)
        returncode = 127

    result = CmdResult(argv=argv_list, returncode=returncode)
    if not result.ok:
        logger.error("Command failed (%d): %s", returncode, rendered)
        if check:
            raise CommandError(argv_list, returncode, rendered)

    return result
