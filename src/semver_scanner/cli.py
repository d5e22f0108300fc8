# SPDX-License-Identifier: MIT
"""CLI entry point for the semver-scan command."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

import click

from .config import ConfigError, load_config
from .metadata import distribution_version, project_version
from .scanner import ParseFailure, ParseResult, scan
from .version import Version, recover


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def _fields(result: ParseResult) -> dict[str, Any]:
    return {
        "major": result.major,
        "minor": result.minor,
        "patch": result.patch,
        "prerelease": list(result.prerelease_identifiers)
        if result.prerelease_identifiers is not None
        else None,
        "build": list(result.build_metadata_identifiers)
        if result.build_metadata_identifiers is not None
        else None,
    }


def _failure_fields(failure: ParseFailure) -> dict[str, Any]:
    return {
        "location": failure.location,
        "component": failure.component.value,
        "kind": failure.kind.value,
        "identifiers": list(failure.reason.identifiers)
        if failure.reason.identifiers is not None
        else None,
        "message": failure.describe(),
    }


def _report(text: str, lenient: bool, json_output: bool) -> bool:
    """Scan one version string and print the outcome. Returns success."""
    outcome = scan(text)
    failure: Optional[ParseFailure] = None
    result: Optional[ParseResult] = None

    if isinstance(outcome, ParseFailure):
        failure = outcome
        if lenient:
            result = recover(outcome)
    else:
        result = outcome

    if json_output:
        record: dict[str, Any] = {"input": text, "valid": result is not None}
        if result is not None:
            record.update(_fields(result))
            record["version"] = str(Version.from_parse_result(result))
        if failure is not None:
            record["error"] = _failure_fields(failure)
        click.echo(json.dumps(record))
    elif result is not None:
        message = f"{text}: {Version.from_parse_result(result)}"
        if failure is not None:
            message += f" (recovered: {failure.describe()})"
        echo_success(message)
    elif failure is not None:
        echo_error(f"{text}: {failure.describe()}")

    return result is not None


@click.command()
@click.version_option(package_name="semver-scanner")
@click.argument("versions", nargs=-1)
@click.option(
    "--lenient/--strict",
    default=None,
    help="Accept versions where only the major component is present.",
)
@click.option(
    "--json/--no-json",
    "json_output",
    default=None,
    help="Print one JSON object per version.",
)
@click.option(
    "--from-project",
    "projects",
    multiple=True,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Read [project].version from the pyproject.toml in this directory.",
)
@click.option(
    "--from-distribution",
    "distributions",
    multiple=True,
    help="Read the version of an installed distribution.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Load [tool.semver-scanner] settings from this directory.",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
def cli(
    versions: tuple[str, ...],
    lenient: Optional[bool],
    json_output: Optional[bool],
    projects: tuple[Path, ...],
    distributions: tuple[str, ...],
    directory: Optional[Path],
    verbose: bool,
) -> None:
    """Parse semantic version strings.

    Prints the parsed version, or where and why parsing failed. Exits with
    status 1 if any version could not be parsed.

    \b
    Examples:
        semver-scan 1.2.3-rc.1+build.5
        semver-scan --lenient 1.2
        semver-scan --json 1.2.3 1.2.x
        semver-scan --from-project . --from-distribution click
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        config = load_config(directory)
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    if lenient is None:
        lenient = config.lenient
    if json_output is None:
        json_output = config.json_output

    if not (versions or projects or distributions):
        raise click.UsageError("Provide at least one version, --from-project or --from-distribution.")

    ok = True
    for text in versions:
        ok = _report(text, lenient, json_output) and ok

    lookups: list[tuple[str, Optional[Version]]] = [
        (f"project {project}", project_version(project)) for project in projects
    ]
    lookups.extend(
        (f"distribution {name}", distribution_version(name)) for name in distributions
    )
    for label, found in lookups:
        if found is None:
            ok = False
            if json_output:
                click.echo(json.dumps({"input": label, "valid": False}))
            else:
                echo_error(f"{label}: no valid semantic version found")
        elif json_output:
            click.echo(json.dumps({"input": label, "valid": True, "version": str(found)}))
        else:
            echo_success(f"{label}: {found}")

    if not ok:
        sys.exit(1)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
