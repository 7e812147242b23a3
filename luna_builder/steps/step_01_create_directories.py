from __future__ import annotations

from ..build_config import BuildConfig
from ..lib.staging import stage_directories


class CreateDirectoriesStep:
    step_id = "01_create_directories"
    title = "Create directory structure"

    def run(self, cfg: BuildConfig) -> None:
        stage_directories(cfg)
