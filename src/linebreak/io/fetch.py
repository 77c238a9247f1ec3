"""Download Unicode data files.

This module fetches LineBreak.txt and LineBreakTest.txt from the Unicode
Character Database into a local directory.
"""

import logging
from collections.abc import Mapping
from pathlib import Path

import httpx

from linebreak.config import DEFAULT_CLASS_ALIASES, LINE_BREAK_FILE_NAME, TEST_FILE_NAME
from linebreak.domain import LineBreakClass
from linebreak.exceptions import DownloadError

logger = logging.getLogger(__name__)

# Location of each file relative to the UCD root
REMOTE_PATHS: dict[str, str] = {
    LINE_BREAK_FILE_NAME: LINE_BREAK_FILE_NAME,
    TEST_FILE_NAME: f"auxiliary/{TEST_FILE_NAME}",
}


def data_file_url(name: str, base_url: str) -> str:
    """Return the download URL of a data file.

    Raises:
        KeyError: If ``name`` is not a known data file
    """
    return base_url.rstrip("/") + "/" + REMOTE_PATHS[name]


def download_data_file(
    name: str,
    dest_dir: Path,
    base_url: str,
    client: httpx.Client | None = None,
    timeout: float = 30.0,
) -> Path:
    """Download one data file into ``dest_dir``.

    The file is written to a temporary name first and renamed once complete.

    Args:
        name: LineBreak.txt or LineBreakTest.txt
        dest_dir: Target directory (created if needed)
        base_url: UCD root URL
        client: HTTP client to use (default: a new client)
        timeout: Request timeout in seconds

    Returns:
        Path of the downloaded file

    Raises:
        DownloadError: If the request fails
    """
    url = data_file_url(name, base_url)
    dest_dir.mkdir(parents=True, exist_ok=True)
    target = dest_dir / name
    partial = target.with_suffix(target.suffix + ".part")

    owns_client = client is None
    http = client if client is not None else httpx.Client(timeout=timeout, follow_redirects=True)
    try:
        response = http.get(url)
        response.raise_for_status()
    except httpx.HTTPError as e:
        raise DownloadError(url, str(e)) from e
    finally:
        if owns_client:
            http.close()

    partial.write_bytes(response.content)
    partial.replace(target)
    logger.debug("Downloaded %s (%d bytes) to %s", url, len(response.content), target)
    return target


def download_all(dest_dir: Path, base_url: str, client: httpx.Client | None = None) -> list[Path]:
    """Download every data file the package uses.

    Returns:
        Paths of the downloaded files
    """
    return [
        download_data_file(name, dest_dir, base_url, client=client)
        for name in (LINE_BREAK_FILE_NAME, TEST_FILE_NAME)
    ]


def unsupported_abbreviations(
    path: Path, aliases: Mapping[str, str] = DEFAULT_CLASS_ALIASES
) -> set[str]:
    """Return class abbreviations in a LineBreak.txt file that need an alias.

    Useful after fetching a newer UCD release, to spot property values the
    40-class model does not know and ``aliases`` does not cover.
    """
    found: set[str] = set()
    with path.open(encoding="utf-8") as fh:
        for line in fh:
            content = line.split("#", 1)[0].strip()
            if ";" not in content:
                continue
            abbreviation = content.split(";")[1].strip()
            if abbreviation in aliases:
                continue
            if abbreviation not in LineBreakClass.__members__ or abbreviation == "NONE":
                found.add(abbreviation)
    return found
