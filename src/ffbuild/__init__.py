from ffbuild.config import Arch, BuildArtifact, BuildConfig
from ffbuild.errors import FFBuildError
from ffbuild.pipeline import run_build
from ffbuild.runner import Runner

__all__ = ["Arch", "BuildArtifact", "BuildConfig", "FFBuildError", "Runner", "run_build"]
