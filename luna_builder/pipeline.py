from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Protocol, Sequence

from .build_config import BuildConfig
from .errors import BuildError
from .report import report_progress
from .steps import (
    BootstrapBaseSystemStep,
    CleanupStep,
    CreateBootStructureStep,
    CreateDirectoriesStep,
    CreateIsoImageStep,
    CustomizeGrubStep,
    InstallCalamaresStep,
    InstallDesktopStep,
    InstallSoftwareStep,
    PrepareImageFilesStep,
)

logger = logging.getLogger(__name__)


class Step(Protocol):
    """A single build step; raises BuildError on failure."""

    step_id: str
    title: str

    def run(self, cfg: BuildConfig) -> None:
        ...


@dataclass(frozen=True)
class PipelineResult:
    ran_steps: List[str] = field(default_factory=list)
    failed_step: Optional[int] = None
    failed_title: Optional[str] = None
    error: Optional[BuildError] = None

    @property
    def success(self) -> bool:
        return self.failed_step is None


def build_steps() -> List[Step]:
    return [
        CreateDirectoriesStep(),
        BootstrapBaseSystemStep(),
        CustomizeGrubStep(),
        InstallDesktopStep(),
        InstallCalamaresStep(),
        InstallSoftwareStep(),
        PrepareImageFilesStep(),
        CreateBootStructureStep(),
        CreateIsoImageStep(),
        CleanupStep(),
    ]


def run_pipeline(
    cfg: BuildConfig,
    steps: Sequence[Step],
    *,
    progress: Callable[[int, int, str], None] = report_progress,
) -> PipelineResult:
    """Run steps strictly in order, stopping at the first failure.

    Nothing is rolled back: the work tree keeps whatever the failed step and
    its predecessors left behind.
    """

    ran: List[str] = []
    total = len(steps)

    for index, step in enumerate(steps, start=1):
        progress(index, total, step.title)
        try:
            step.run(cfg)
        except BuildError as e:
            logger.error("%s", e)
            return PipelineResult(ran_steps=ran, failed_step=index, failed_title=step.title, error=e)
        ran.append(step.step_id)

    return PipelineResult(ran_steps=ran)
