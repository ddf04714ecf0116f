"""Build constants and the immutable configuration passed between stages."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass, field
from pathlib import Path

from ffbuild.errors import InvalidArchitecture

FFMPEG_VERSION = "6.1"
RELEASES_URL = "https://ffmpeg.org/releases"
DEFAULT_MIN_VERSION = "11.0"
IDENTITY_ENV = "IDENTITY"

OUTPUT_DIRNAME = "build_ffmpeg"
RESOURCE_DIR = Path("macos/Runner/Resources")
BINARY_NAME = "ffmpeg"
LICENSE_NAME = "LICENSE.md"


class Arch(str, enum.Enum):
    ARM64 = "arm64"
    X86_64 = "x86_64"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> Arch:
        try:
            return cls(value)
        except ValueError:
            raise InvalidArchitecture(value) from None


ALL_ARCHS: tuple[Arch, ...] = (Arch.ARM64, Arch.X86_64)


def default_jobs() -> int:
    return os.cpu_count() or 1


@dataclass(frozen=True)
class BuildConfig:
    version: str = FFMPEG_VERSION
    sign: bool = False
    verify: bool = False
    single_arch: Arch | None = None
    min_version: str = DEFAULT_MIN_VERSION
    identity: str | None = None
    disable_asm: bool = True
    dsym: bool = False
    jobs: int = field(default_factory=default_jobs)
    root: Path = Path(".")

    @property
    def targets(self) -> tuple[Arch, ...]:
        if self.single_arch is not None:
            return (self.single_arch,)
        return ALL_ARCHS

    @property
    def source_name(self) -> str:
        return f"ffmpeg-{self.version}"

    @property
    def source_dir(self) -> Path:
        return self.root / self.source_name

    @property
    def tarball(self) -> Path:
        return self.root / f"{self.source_name}.tar.bz2"

    @property
    def tarball_url(self) -> str:
        return f"{RELEASES_URL}/{self.source_name}.tar.bz2"

    @property
    def output_dir(self) -> Path:
        return self.root / OUTPUT_DIRNAME

    def arch_dir(self, arch: Arch) -> Path:
        return self.output_dir / arch.value

    @property
    def universal_dir(self) -> Path:
        return self.output_dir / "universal"

    @property
    def resource_dir(self) -> Path:
        return self.root / RESOURCE_DIR


@dataclass(frozen=True)
class BuildArtifact:
    """A built ffmpeg executable and the architectures it contains."""

    path: Path
    archs: tuple[Arch, ...]

    @property
    def universal(self) -> bool:
        return len(self.archs) > 1

    def describe(self) -> str:
        return "+".join(a.value for a in self.archs)
