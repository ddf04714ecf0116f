from __future__ import annotations

import logging

from ffbuild.config import BuildArtifact
from ffbuild.errors import CommandError, VerificationFailed
from ffbuild.runner import Runner

log = logging.getLogger(__name__)

VERSION_ARGS = ["-hide_banner", "-loglevel", "error", "-version"]


def verify_binary(artifact: BuildArtifact, runner: Runner) -> None:
    """Check that the binary starts and answers ``-version``.

    Only the exit status is checked. A crash here usually means the binary
    contains instructions the host CPU cannot execute (SIGILL).
    """
    log.info("verifying %s (%s)", artifact.path, artifact.describe())
    try:
        runner.run([artifact.path, *VERSION_ARGS], quiet=True)
    except CommandError as err:
        raise VerificationFailed(f"verification failed (cannot execute ffmpeg): {err}") from err
    log.info("verification succeeded")
