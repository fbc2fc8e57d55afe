#!/usr/bin/env python3
"""CLI entrypoint for generating Money's locale and currency Swift sources."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from localegen.codegen import generate_source
from localegen.io import DownloadError, ExtractionError, download_file, extract_archive
from localegen.naming import GenerationError
from localegen.processing import build_locale_info
from localegen.sources import CldrLocaleDataSource
from localegen.testgen import DEFAULT_MODULE_NAME, generate_tests
from localegen.writers import write_generated

CLDR_RELEASE = "48.0.0"
CLDR_ARCHIVE_NAME = f"cldr-{CLDR_RELEASE}-json-full.zip"
CLDR_URL = (
    "https://github.com/unicode-org/cldr-json/releases/download/"
    f"{CLDR_RELEASE}/{CLDR_ARCHIVE_NAME}"
)
DISPLAY_LOCALE = "en"

__SCRIPT_DIR = Path(__file__).resolve().parent
CACHE_DIR = __SCRIPT_DIR / "cldr"

app = typer.Typer(
    help="Generate Money's Locale, Country and Currency Swift types from CLDR data.",
    add_completion=False,
)


def fail(message: str) -> typer.Exit:
    typer.secho(message, fg=typer.colors.RED, err=True)
    return typer.Exit(code=1)


def resolve_archive(cldr_zip: Path | None, cache_dir: Path) -> Path:
    if cldr_zip:
        typer.echo(f"Using existing CLDR archive: {cldr_zip}")
        return cldr_zip

    archive_path = cache_dir / CLDR_ARCHIVE_NAME
    if archive_path.is_file():
        typer.echo(f"Using cached CLDR archive: {archive_path}")
        return archive_path

    typer.echo(f"Downloading {CLDR_URL}...")
    try:
        download_file(CLDR_URL, archive_path)
    except DownloadError as e:
        raise fail(str(e)) from e
    return archive_path


@app.command()
def main(
    source_output: Annotated[
        Path,
        typer.Argument(
            help="Destination Swift file for the generated types.",
            writable=True,
            resolve_path=True,
            dir_okay=False,
        ),
    ],
    tests_output: Annotated[
        Path,
        typer.Argument(
            help="Destination Swift file for the generated unit tests.",
            writable=True,
            resolve_path=True,
            dir_okay=False,
        ),
    ],
    cldr_zip: Annotated[
        Path | None,
        typer.Option(
            "--cldr-zip",
            help="Path to an existing CLDR archive. If missing, the archive is downloaded into the cache directory.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ] = None,
    cache_dir: Annotated[
        Path,
        typer.Option(
            "--cache-dir",
            help="Directory where the downloaded CLDR archive is kept between runs.",
            file_okay=False,
            dir_okay=True,
            resolve_path=True,
        ),
    ] = CACHE_DIR,
    module_name: Annotated[
        str,
        typer.Option(
            "--module-name",
            help="Swift module imported with @testable by the generated tests.",
        ),
    ] = DEFAULT_MODULE_NAME,
    currencies: Annotated[
        bool,
        typer.Option(
            "--currencies/--no-currencies",
            help="Include the ISO currency classes and Money type aliases.",
        ),
    ] = True,
) -> None:
    """Generate the Swift source and XCTest files from CLDR data."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        archive_path = resolve_archive(cldr_zip, cache_dir)

        typer.echo(f"Extracting {archive_path.name}...")
        extract_dir = Path(tmp_dir) / "cldr"
        try:
            extract_archive(archive_path, extract_dir)
        except ExtractionError as e:
            raise fail(str(e)) from e

        typer.echo(f"Loading CLDR locale data (display locale: {DISPLAY_LOCALE})...")
        try:
            source = CldrLocaleDataSource.from_directory(extract_dir, DISPLAY_LOCALE)
        except (FileNotFoundError, ValidationError, KeyError) as e:
            raise fail(f"Error: CLDR data missing or malformed: {e}") from e

    identifiers = source.list_locale_identifiers()
    typer.echo(f"Building locale model from {len(identifiers)} identifiers...")
    info = build_locale_info(source)
    typer.echo(
        f"Found {len(info.languages)} languages, {len(info.countries)} countries, "
        f"{len(info.languages_with_more_than_one_country)} spoken in several countries."
    )

    currency_codes = source.list_currency_codes() if currencies else []
    try:
        source_text = generate_source(info, currency_codes)
        tests_text = generate_tests(info, module_name)
    except GenerationError as e:
        raise fail(f"Error: {e}") from e

    for path, content in ((source_output, source_text), (tests_output, tests_text)):
        typer.echo(f"Writing {path}...")
        try:
            write_generated(path, content)
        except (OSError, UnicodeEncodeError) as e:
            raise fail(f"Error: unable to write {path}: {e}") from e

    typer.secho(
        f"\nSuccessfully wrote {source_output} and {tests_output}",
        fg=typer.colors.GREEN,
        bold=True,
    )


if __name__ == "__main__":
    app()
