from dataclasses import replace

import pytest

from ffbuild.config import Arch, BuildArtifact
from ffbuild.errors import MissingSigningIdentity, SignError
from ffbuild.sign import resolve_identity, sign_binary


@pytest.fixture
def artifact(tmp_path):
    path = tmp_path / "ffmpeg"
    path.write_bytes(b"bin")
    path.chmod(0o755)
    return BuildArtifact(path=path, archs=(Arch.ARM64,))


@pytest.mark.parametrize("identity", [None, "", "   "])
def test_missing_identity(config, runner, artifact, identity):
    config = replace(config, sign=True, identity=identity)
    with pytest.raises(MissingSigningIdentity) as exc:
        sign_binary(config, artifact, runner)
    assert "security find-identity -p codesigning -v" in str(exc.value)
    assert runner.calls == []


def test_resolve_identity_strips(config):
    assert resolve_identity(replace(config, identity="  Dev ID  ")) == "Dev ID"


def test_codesign_invocation(config, runner, artifact):
    config = replace(config, sign=True, identity="Developer ID Application: A (X)")
    sign_binary(config, artifact, runner)
    assert runner.commands("codesign") == [
        [
            "codesign",
            "--force",
            "--options",
            "runtime",
            "--timestamp",
            "--sign",
            "Developer ID Application: A (X)",
            str(artifact.path),
        ]
    ]
    assert artifact.path.stat().st_mode & 0o777 == 0o755


def test_codesign_failure(config, runner, artifact):
    runner.fail_when(lambda argv: argv[0] == "codesign")
    with pytest.raises(SignError):
        sign_binary(replace(config, identity="X"), artifact, runner)
