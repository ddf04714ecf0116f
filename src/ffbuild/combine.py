from __future__ import annotations

import logging
from pathlib import Path

from ffbuild.config import BINARY_NAME, BuildArtifact, BuildConfig
from ffbuild.errors import BuildError, CommandError, MergeError
from ffbuild.runner import Runner

log = logging.getLogger(__name__)


def combine(config: BuildConfig, artifacts: list[BuildArtifact], runner: Runner) -> BuildArtifact:
    """Merge per-arch binaries into one universal binary with lipo.

    A single artifact is returned untouched.
    """
    if len(artifacts) == 1:
        return artifacts[0]

    missing = [str(a.path) for a in artifacts if not a.path.is_file()]
    if missing:
        raise MergeError(f"cannot create universal binary, missing: {', '.join(missing)}")

    out_dir = config.universal_dir / "bin"
    out_dir.mkdir(parents=True, exist_ok=True)
    out = out_dir / BINARY_NAME

    log.info("creating universal binary %s", out)
    try:
        runner.run(["lipo", "-create", *(a.path for a in artifacts), "-output", out])
    except CommandError as err:
        raise MergeError(str(err)) from err

    archs = tuple(arch for a in artifacts for arch in a.archs)
    return BuildArtifact(path=out, archs=archs)


def generate_dsym(artifact: BuildArtifact, runner: Runner) -> Path:
    dsym = artifact.path.with_name(artifact.path.name + ".dSYM")
    log.info("generating debug symbols %s", dsym)
    try:
        runner.run(["dsymutil", artifact.path, "-o", dsym])
    except CommandError as err:
        raise BuildError(f"dsymutil failed: {err}") from err
    return dsym
