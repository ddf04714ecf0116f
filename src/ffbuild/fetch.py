"""Download and unpack the FFmpeg release tarball."""

from __future__ import annotations

import logging
import tarfile
from pathlib import Path

import httpx

from ffbuild.config import BuildConfig
from ffbuild.errors import FetchError

log = logging.getLogger(__name__)

DOWNLOAD_TIMEOUT = 180


def download(client: httpx.Client, url: str, dest: Path) -> None:
    partial = dest.with_name(dest.name + ".part")
    log.info("downloading %s", url)
    try:
        with client.stream("GET", url) as resp:
            resp.raise_for_status()
            with open(partial, "wb") as f:
                for chunk in resp.iter_bytes():
                    f.write(chunk)
        partial.replace(dest)
    except (httpx.HTTPError, OSError) as err:
        partial.unlink(missing_ok=True)
        raise FetchError(f"download of {url} failed: {err}") from err
    log.info("saved %s (%d KB)", dest.name, dest.stat().st_size // 1024)


def extract(tarball: Path, out_dir: Path) -> None:
    try:
        with tarfile.open(tarball, mode="r:bz2") as tar:
            tar.extractall(path=out_dir, filter="data")
    except (tarfile.TarError, OSError) as err:
        raise FetchError(f"could not extract {tarball}: {err}") from err
    log.info("extracted to %s", out_dir)


def fetch_source(config: BuildConfig, client: httpx.Client | None = None) -> Path:
    """Make sure the FFmpeg source tree exists, downloading it only when absent.

    A source directory that already exists is trusted as-is, even if an
    earlier extraction was interrupted.
    """
    source_dir = config.source_dir
    if source_dir.is_dir():
        log.info("source already present at %s, skipping download", source_dir)
        return source_dir

    if not config.tarball.exists():
        if client is None:
            with httpx.Client(follow_redirects=True, timeout=DOWNLOAD_TIMEOUT) as owned:
                download(owned, config.tarball_url, config.tarball)
        else:
            download(client, config.tarball_url, config.tarball)

    extract(config.tarball, config.root)
    if not source_dir.is_dir():
        raise FetchError(f"{config.tarball.name} did not contain {config.source_name}/")
    return source_dir
