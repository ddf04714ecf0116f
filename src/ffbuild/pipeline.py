from __future__ import annotations

import logging

import httpx

from ffbuild.builder import build_all
from ffbuild.combine import combine, generate_dsym
from ffbuild.config import BuildArtifact, BuildConfig
from ffbuild.fetch import fetch_source
from ffbuild.publish import publish
from ffbuild.runner import Runner
from ffbuild.sign import sign_binary
from ffbuild.verify import verify_binary

log = logging.getLogger(__name__)


def run_build(
    config: BuildConfig,
    runner: Runner | None = None,
    client: httpx.Client | None = None,
) -> BuildArtifact:
    """Fetch, build, merge, sign, publish and verify, stopping at the first failure.

    Returns the final (universal or single-arch) artifact. Intermediate build
    trees are left in place.
    """
    runner = runner or Runner()
    log.info(
        "building FFmpeg %s sign=%s verify=%s arch=%s min_version=%s",
        config.version,
        config.sign,
        config.verify,
        config.single_arch or "both",
        config.min_version,
    )

    fetch_source(config, client=client)
    artifacts = build_all(config, runner)
    final = combine(config, artifacts, runner)

    if config.dsym:
        generate_dsym(final, runner)
    if config.sign:
        sign_binary(config, final, runner)

    published = publish(config, final)

    if config.verify:
        verify_binary(final, runner)

    log.info("built ffmpeg at %s and copied to %s", final.path, published)
    log.info("(artifacts retained for inspection; no cleanup performed)")
    return final
