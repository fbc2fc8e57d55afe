"""File I/O helpers for fetching and unpacking the CLDR JSON archive."""

from __future__ import annotations

import json
import zipfile
from pathlib import Path

import requests
from tqdm import tqdm

DEFAULT_USER_AGENT = "money-locale-gen/1.0"
DEFAULT_TIMEOUT_SECONDS = 60


class DownloadError(Exception):
    """Raised when the CLDR archive cannot be downloaded."""


class ExtractionError(Exception):
    """Raised when the CLDR archive cannot be extracted."""


def _discard(path: Path) -> None:
    if path.exists():
        path.unlink()


def download_file(url: str, destination: Path) -> None:
    """Download ``url`` to ``destination`` with a progress bar.

    The payload is streamed into a ``.part`` file that only replaces
    ``destination`` once complete, so an interrupted download never leaves a
    truncated archive in the cache.

    Raises:
        DownloadError: If the download fails.
    """
    partial = destination.with_name(destination.name + ".part")
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        with requests.get(
            url,
            stream=True,
            timeout=DEFAULT_TIMEOUT_SECONDS,
            headers={"User-Agent": DEFAULT_USER_AGENT},
        ) as response:
            response.raise_for_status()
            total_size = int(response.headers.get("content-length", 0))

            with (
                partial.open("wb") as output,
                tqdm(
                    desc=f"Downloading {destination.name}",
                    total=total_size,
                    unit="iB",
                    unit_scale=True,
                    unit_divisor=1024,
                ) as bar,
            ):
                for chunk in response.iter_content(chunk_size=8192):
                    bar.update(output.write(chunk))
            partial.replace(destination)

    except requests.RequestException as e:
        _discard(partial)
        raise DownloadError(f"Error downloading {url}: {e}") from e
    except OSError as e:
        _discard(partial)
        raise DownloadError(f"Error saving {url} to {destination}: {e}") from e


def extract_archive(archive_path: Path, destination: Path) -> None:
    """Extract the JSON members of a CLDR ZIP archive.

    Raises:
        ExtractionError: If the archive is unreadable or extraction fails.
    """
    try:
        with zipfile.ZipFile(archive_path) as archive:
            members = [
                member
                for member in archive.infolist()
                if member.is_dir() or member.filename.endswith(".json")
            ]
            with tqdm(
                total=len(members),
                desc=f"Extracting {archive_path.name}",
                unit="file",
            ) as bar:
                for member in members:
                    archive.extract(member, destination)
                    bar.update(1)
    except zipfile.BadZipFile as e:
        raise ExtractionError(
            f"Failed to open zip file '{archive_path}'. It may be corrupted."
        ) from e
    except OSError as e:
        raise ExtractionError(f"Error extracting archive: {e}") from e


def load_json(path: Path) -> dict:
    """Load JSON file from disk."""
    with path.open(encoding="utf-8") as handle:
        return json.load(handle)
