"""Command line entry point: build a minimal universal ffmpeg for macOS."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from ffbuild.config import DEFAULT_MIN_VERSION, IDENTITY_ENV, Arch, BuildConfig, default_jobs
from ffbuild.errors import FFBuildError
from ffbuild.logging_utils import configure_logging
from ffbuild.pipeline import run_build

log = logging.getLogger(__name__)

EPILOG = f"""environment:
  {IDENTITY_ENV}  Developer ID Application identity if --sign used

examples:
  {IDENTITY_ENV}="Developer ID Application: Your Name (XX9X9X9XX9)" ffbuild --sign --verify
  ffbuild --arch arm64 --verify
"""


def positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value}") from None
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {value}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ffbuild",
        description="Build a minimal, static, universal ffmpeg for macOS",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument("--sign", action="store_true", help=f"codesign resulting ffmpeg (requires --identity or {IDENTITY_ENV} env)")
    parser.add_argument("--verify", action="store_true", help="execute ffmpeg -version to validate the result")
    parser.add_argument("--arch", type=Arch.parse, metavar="{arm64,x86_64}", help="single-arch build (skip universal lipo)")
    parser.add_argument("--min-version", default=DEFAULT_MIN_VERSION, help=f"MACOSX_DEPLOYMENT_TARGET (default {DEFAULT_MIN_VERSION})")
    parser.add_argument("--identity", help=f"signing identity, overrides {IDENTITY_ENV}")
    parser.add_argument("--enable-asm", action="store_true", help="keep assembly optimizations (disabled by default to avoid SIGILL)")
    parser.add_argument("--dsym", action="store_true", help="generate a .dSYM bundle next to the final binary")
    parser.add_argument("-j", "--jobs", type=positive_int, default=None, help="parallel make jobs (default: logical CPU count)")
    parser.add_argument("--root", type=Path, default=Path("."), help="working directory for sources and outputs")
    parser.add_argument("--log-file", type=Path, help="also write the log to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def config_from_args(args: argparse.Namespace) -> BuildConfig:
    identity = args.identity if args.identity is not None else os.environ.get(IDENTITY_ENV)
    return BuildConfig(
        sign=args.sign,
        verify=args.verify,
        single_arch=args.arch,
        min_version=args.min_version,
        identity=identity,
        disable_asm=not args.enable_asm,
        dsym=args.dsym,
        jobs=args.jobs or default_jobs(),
        root=args.root,
    )


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.INFO
    try:
        configure_logging(level, args.log_file)
    except OSError as err:
        configure_logging(level)
        log.error("error: cannot write log file %s: %s", args.log_file, err)
        return 1
    config = config_from_args(args)
    try:
        run_build(config)
    except FFBuildError as err:
        log.error("error: %s", err)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
