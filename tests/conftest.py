from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

import pytest

from ffbuild.config import BuildConfig
from ffbuild.errors import CommandError


@dataclass
class Call:
    argv: list[str]
    cwd: Path | None
    env: dict[str, str] | None
    quiet: bool


@dataclass
class FakeRunner:
    """Records commands and imitates the files make install and lipo produce."""

    calls: list[Call] = field(default_factory=list)
    failures: list[Callable[[list[str]], bool]] = field(default_factory=list)
    _prefix: Path | None = None

    def fail_when(self, predicate: Callable[[list[str]], bool]) -> None:
        self.failures.append(predicate)

    def run(self, cmd, *, cwd=None, env=None, quiet=False) -> None:
        argv = [str(c) for c in cmd]
        self.calls.append(Call(argv, cwd, dict(env) if env else None, quiet))
        if any(p(argv) for p in self.failures):
            raise CommandError(argv, 1)

        if argv[0] == "./configure":
            prefix = next(a for a in argv if a.startswith("--prefix="))
            self._prefix = Path(prefix.split("=", 1)[1])
        elif argv == ["make", "install"]:
            binary = self._prefix / "bin" / "ffmpeg"
            binary.parent.mkdir(parents=True, exist_ok=True)
            binary.write_bytes(b"\xcf\xfa\xed\xfe fake " + self._prefix.name.encode())
            binary.chmod(0o644)
        elif argv[0] == "lipo":
            out = Path(argv[argv.index("-output") + 1])
            out.write_bytes(b"\xca\xfe\xba\xbe fat")

    def commands(self, name: str) -> list[list[str]]:
        return [c.argv for c in self.calls if c.argv[0] == name]


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    src = tmp_path / "ffmpeg-6.1"
    src.mkdir()
    (src / "LICENSE.md").write_text("FFmpeg license\n")
    return src


@pytest.fixture
def config(tmp_path: Path, source_tree: Path) -> BuildConfig:
    return BuildConfig(root=tmp_path, jobs=4)
