from __future__ import annotations

import argparse


class FFBuildError(Exception):
    """Base class for every fatal build failure."""


class ArgumentError(FFBuildError):
    pass


class InvalidArchitecture(ArgumentError, argparse.ArgumentTypeError):
    def __init__(self, value: str) -> None:
        super().__init__(f"invalid --arch value: {value} (expected arm64 or x86_64)")
        self.value = value


class CommandError(FFBuildError):
    """An external command exited non-zero or could not be started."""

    def __init__(self, cmd: list[str], returncode: int | None, reason: str = "") -> None:
        self.cmd = cmd
        self.returncode = returncode
        rendered = " ".join(cmd)
        if returncode is None:
            msg = f"could not run {rendered}: {reason}"
        else:
            msg = f"{rendered} exited with status {returncode}"
        super().__init__(msg)


class FetchError(FFBuildError):
    pass


class BuildError(FFBuildError):
    pass


class MergeError(FFBuildError):
    pass


class MissingSigningIdentity(FFBuildError):
    pass


class SignError(FFBuildError):
    pass


class PublishError(FFBuildError):
    pass


class VerificationFailed(FFBuildError):
    pass
