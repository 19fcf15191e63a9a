"""
Runs the Angular CLI extract-i18n builder.

The toolchain itself is a black box: it gets a fixed command line and its exit
status is reported as success or ExternalToolError.
"""
import os
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from .errors import ExternalToolError
from .logger import get_logger

logger = get_logger(__name__)

EXTRACTION_DONE_MESSAGE = "Extraction and merge completed successfully."


class ExtractionRunner(ABC):
    """Interface for anything that can run an i18n extraction."""

    @abstractmethod
    def run(self, output_dir: str, fmt: str) -> None:
        """Runs the extraction into output_dir; raises ExternalToolError on failure."""


class AngularCliRunner(ExtractionRunner):
    def __init__(self, working_dir: Optional[str] = None):
        self.working_dir = Path(working_dir or os.getcwd())

    @property
    def node_modules(self) -> Path:
        return self.working_dir / "node_modules"

    def base_command(self) -> List[str]:
        # Prefer the project's own CLI over whatever npx resolves
        ng_js = self.node_modules / "@angular" / "cli" / "bin" / "ng.js"
        if ng_js.exists():
            return ["node", str(ng_js)]
        return ["npx", "ng"]

    def build_command(self, output_dir: str, fmt: str) -> List[str]:
        return self.base_command() + ["extract-i18n", "--output-path", str(output_dir), f"--format={fmt}"]

    def run(self, output_dir: str, fmt: str) -> None:
        command = self.build_command(output_dir, fmt)
        env = dict(os.environ, NODE_PATH=str(self.node_modules))
        logger.info(f"Running: {' '.join(command)}")

        try:
            completed = subprocess.run(
                command,
                cwd=str(self.working_dir),
                env=env,
                capture_output=True,
                text=True,
            )
        except OSError as e:
            raise ExternalToolError(f"Could not start {command[0]}: {e}") from e

        if completed.returncode != 0:
            output = (completed.stderr or completed.stdout or "").strip()
            logger.error(f"extract-i18n failed with exit code {completed.returncode}: {output}")
            raise ExternalToolError(
                f"Command failed with exit code {completed.returncode}: {' '.join(command)}\n{output}"
            )
        logger.debug(completed.stdout)
