"""Copy the final binary and FFmpeg's license into the app's resources."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from ffbuild.config import BINARY_NAME, LICENSE_NAME, BuildArtifact, BuildConfig
from ffbuild.errors import PublishError

log = logging.getLogger(__name__)


def publish(config: BuildConfig, artifact: BuildArtifact) -> Path:
    target_dir = config.resource_dir
    target = target_dir / BINARY_NAME
    log.info("copying binary + %s into %s", LICENSE_NAME, target_dir)

    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        shutil.copy2(artifact.path, target)
        target.chmod(0o755)
    except OSError as err:
        raise PublishError(f"could not publish {artifact.path} to {target}: {err}") from err

    license_src = config.source_dir / LICENSE_NAME
    if license_src.is_file():
        try:
            shutil.copy2(license_src, target_dir / LICENSE_NAME)
        except OSError as err:
            raise PublishError(f"could not copy {license_src}: {err}") from err
    else:
        log.warning("%s missing; not copied", LICENSE_NAME)

    return target
