from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import Mapping

from ffbuild.errors import CommandError

log = logging.getLogger(__name__)


class Runner:
    """Run external build tools, one blocking process at a time."""

    def run(
        self,
        cmd: list[str | Path],
        *,
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
        quiet: bool = False,
    ) -> None:
        """Run *cmd* and raise CommandError unless it exits 0.

        *env* is overlaid on a copy of the current environment for this call
        only. With *quiet* set, stdout and stderr are discarded.
        """
        argv = [str(c) for c in cmd]
        log.info("$ %s", " ".join(argv))

        child_env = None
        if env:
            child_env = {**os.environ, **env}
        output = subprocess.DEVNULL if quiet else None

        try:
            proc = subprocess.run(argv, cwd=cwd, env=child_env, stdout=output, stderr=output)
        except OSError as err:
            raise CommandError(argv, None, str(err)) from err
        if proc.returncode != 0:
            raise CommandError(argv, proc.returncode)
