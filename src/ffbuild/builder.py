"""Configure, compile and install FFmpeg once per target architecture.

Both architectures share one source tree, so every build starts with
``make distclean`` before ``./configure`` runs.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ffbuild.config import BINARY_NAME, Arch, BuildArtifact, BuildConfig
from ffbuild.errors import BuildError, CommandError
from ffbuild.runner import Runner

log = logging.getLogger(__name__)

# Only what is needed to decode mp3/wav and write 16-bit PCM wav.
COMMON_FLAGS = [
    "--disable-everything",
    "--enable-protocol=file",
    "--enable-decoder=mp3,pcm_s16le",
    "--enable-encoder=pcm_s16le",
    "--enable-demuxer=mp3,wav",
    "--enable-muxer=wav,pcm_s16le",
    "--enable-filter=aresample",
    "--enable-small",
    "--disable-network",
    "--disable-autodetect",
    "--disable-doc",
    "--enable-static",
    "--disable-shared",
]


def configure_args(arch: Arch, prefix: Path, min_version: str, disable_asm: bool = True) -> list[str]:
    flags = list(COMMON_FLAGS)
    if disable_asm:
        flags.append("--disable-asm")
    return [
        "./configure",
        f"--prefix={prefix}",
        f"--arch={arch}",
        "--target-os=darwin",
        *flags,
        "--cc=clang",
        f"--extra-cflags=-arch {arch} -g -mmacosx-version-min={min_version}",
        f"--extra-ldflags=-arch {arch} -mmacosx-version-min={min_version}",
        "--enable-cross-compile",
    ]


def deployment_env(min_version: str) -> dict[str, str]:
    return {"MACOSX_DEPLOYMENT_TARGET": min_version}


def build_arch(config: BuildConfig, arch: Arch, runner: Runner) -> BuildArtifact:
    src = config.source_dir
    prefix = config.arch_dir(arch).resolve()
    log.info("configuring %s -> %s", arch, prefix)

    try:
        runner.run(["make", "distclean"], cwd=src)
    except CommandError as err:
        log.debug("distclean skipped: %s", err)

    steps = [
        ("configure", configure_args(arch, prefix, config.min_version, config.disable_asm), deployment_env(config.min_version)),
        ("make", ["make", f"-j{config.jobs}"], None),
        ("install", ["make", "install"], None),
    ]
    for step, cmd, env in steps:
        try:
            runner.run(cmd, cwd=src, env=env)
        except CommandError as err:
            raise BuildError(f"{step} failed for {arch}: {err}") from err

    return BuildArtifact(path=config.arch_dir(arch) / "bin" / BINARY_NAME, archs=(arch,))


def build_all(config: BuildConfig, runner: Runner) -> list[BuildArtifact]:
    for arch in config.targets:
        try:
            config.arch_dir(arch).mkdir(parents=True, exist_ok=True)
        except OSError as err:
            raise BuildError(f"cannot create output directory for {arch}: {err}") from err
    return [build_arch(config, arch, runner) for arch in config.targets]
