from __future__ import annotations

import logging

from ffbuild.config import IDENTITY_ENV, BuildArtifact, BuildConfig
from ffbuild.errors import CommandError, MissingSigningIdentity, SignError
from ffbuild.runner import Runner

log = logging.getLogger(__name__)

IDENTITY_HELP = f"""no signing identity set (use --identity or the {IDENTITY_ENV} env var)

Set your codesigning identity first, for example:
  export {IDENTITY_ENV}="Developer ID Application: Your Name (XX9X9X9XX9)"

List available identities:
  security find-identity -p codesigning -v"""


def resolve_identity(config: BuildConfig) -> str:
    identity = (config.identity or "").strip()
    if not identity:
        raise MissingSigningIdentity(IDENTITY_HELP)
    return identity


def sign_binary(config: BuildConfig, artifact: BuildArtifact, runner: Runner) -> None:
    """Sign the binary in place with the hardened runtime and a secure timestamp."""
    identity = resolve_identity(config)
    log.info("code signing %s with identity: %s", artifact.path, identity)
    cmd = [
        "codesign",
        "--force",
        "--options",
        "runtime",
        "--timestamp",
        "--sign",
        identity,
        artifact.path,
    ]
    try:
        runner.run(cmd)
    except CommandError as err:
        raise SignError(str(err)) from err
