"""
InitCommand — Bootstrap a Taskfile for a bun project

Reads package.json in the working directory, requires a "dev" script,
and writes Taskfile.yml with a single dev task. Never overwrites an
existing Taskfile and never leaves a partial one behind.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Sequence

from .base import BaseCommand
from ..errors import CommandError

logger = logging.getLogger(__name__)


PACKAGE_JSON = "package.json"
TASKFILE = "Taskfile.yml"

TASKFILE_CONTENT = "\n".join([
    'version: "3"',
    "",
    "tasks:",
    "  dev:",
    "    cmds:",
    "      - bun dev",
    "",
])


class InitCommand(BaseCommand):
    """Create Taskfile.yml from the project's package.json."""

    name = "init"
    description = "Create Taskfile.yml with dev task running bun dev"
    usage = "init"

    def run(self, args: Sequence[str]) -> None:
        if args:
            raise CommandError(f"Unexpected arguments for init: {' '.join(args)}")

        self._read_dev_script()
        taskfile_path = self.project_dir / TASKFILE

        if taskfile_path.exists():
            raise CommandError(f"{TASKFILE} already exists. Aborting to avoid overwriting.")

        self._write_exclusive(taskfile_path, TASKFILE_CONTENT)
        self.out(f"Created {TASKFILE} with dev task running bun dev.")

    def _read_dev_script(self) -> str:
        """
        Load package.json and return its trimmed scripts.dev.

        Raises:
            CommandError: missing, unreadable or invalid package.json,
                or no usable dev script
        """
        package_json_path = self.project_dir / PACKAGE_JSON

        if not package_json_path.exists():
            raise CommandError(f"{PACKAGE_JSON} not found in the current directory.")

        try:
            raw = package_json_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise CommandError(f"Unable to read {PACKAGE_JSON}: {e}") from e

        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError as e:
            raise CommandError(f"{PACKAGE_JSON} is not valid JSON: {e}") from e

        dev_script = None
        if isinstance(parsed, dict):
            scripts = parsed.get("scripts")
            candidate = scripts.get("dev") if isinstance(scripts, dict) else None
            if isinstance(candidate, str) and candidate.strip():
                dev_script = candidate.strip()

        if not dev_script:
            raise CommandError(f"No dev script found in {PACKAGE_JSON}.")

        logger.debug("Found dev script: %s", dev_script)
        return dev_script

    def _write_exclusive(self, path: Path, content: str) -> None:
        """
        Write content next to path, then hard-link it into place.

        os.link() fails if path exists, so a Taskfile that appeared after
        the existence check in run() is never replaced.
        """
        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=path.parent,
                prefix=f".{path.name}.", suffix=".tmp", delete=False
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(content)
            os.chmod(tmp_name, 0o644)
            os.link(tmp_name, path)
        except FileExistsError as e:
            raise CommandError(f"{TASKFILE} already exists. Aborting to avoid overwriting.") from e
        except OSError as e:
            raise CommandError(f"Failed to write {TASKFILE}: {e}") from e
        finally:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)


COMMAND_CLASS = InitCommand
