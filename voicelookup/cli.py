"""Command-line interface for voicelookup.

Responsibilities:
- Expose user-facing commands for transcript lookups and catalog inspection.
- Convert CLI arguments into `LookupConfig` and wire the matcher.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .catalog import CatalogIndex
from .cli_rendering import (
    echo_lookup_plan,
    echo_match_result,
    echo_records,
    exit_with_command_error,
)
from .config import ConfigLoader, LookupConfig
from .errors import CatalogValidationError, LookupStageError
from .io.catalog_loader import CatalogLoader
from .matcher import ProductMatcher, build_lookup_plan
from .parsing import normalize_optional_string
from .telemetry.logger import LookupLogger
from .text.locales import LocaleProfile, available_locales

app = typer.Typer(
    name="voicelookup",
    no_args_is_help=True,
    help="Voice product lookup CLI.",
)

CatalogOption = Annotated[
    Path | None,
    typer.Option("--catalog", help="JSON catalog path (overrides config file value)."),
]
LocaleOption = Annotated[
    str | None,
    typer.Option("--locale", help="Locale code for normalization rules (e.g. `he`, `en`)."),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Optional YAML config file path."),
]


def _load_config(config_path: Path | None) -> LookupConfig:
    """Load YAML or environment config and map failures to stage errors."""

    if config_path is None:
        try:
            return ConfigLoader.from_env()
        except ValueError as exc:
            raise LookupStageError(
                stage="config",
                detail=f"Invalid environment configuration: {exc}",
                hint="Fix `VOICELOOKUP_*` environment variables and rerun.",
            ) from exc

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise LookupStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise LookupStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc


def _resolve_command_config(
    config_file: Path | None,
    catalog: Path | None,
    locale: str | None,
) -> LookupConfig:
    """Resolve effective command config from file/env defaults and CLI overrides."""

    config = _load_config(config_file)
    if catalog is not None:
        config.catalog_path = catalog
    locale_override = normalize_optional_string(locale)
    if locale_override is not None:
        config.locale = locale_override.lower()
    try:
        config.validate()
    except ValueError as exc:
        raise LookupStageError(
            stage="config",
            detail=str(exc),
            hint="Run `voicelookup locales` to list supported locales.",
        ) from exc
    return config


def _create_logger(config: LookupConfig) -> LookupLogger | None:
    return LookupLogger() if config.log_stages else None


def _build_index(
    config: LookupConfig,
    profile: LocaleProfile,
    lookup_logger: LookupLogger | None,
) -> CatalogIndex:
    """Load and index the configured catalog, mapping faults to stage errors."""

    source = str(config.catalog_path) if config.catalog_path is not None else "bundled"
    if lookup_logger is not None:
        lookup_logger.log_stage_start("catalog", source=source)
    try:
        if config.catalog_path is None:
            records = CatalogLoader.bundled()
        else:
            records = CatalogLoader.from_json(config.catalog_path)
        index = CatalogIndex.build(records, profile.normalizer())
    except FileNotFoundError as exc:
        if lookup_logger is not None:
            lookup_logger.log_stage_failure("catalog", type(exc).__name__)
        raise LookupStageError(
            stage="catalog",
            detail=f"Catalog file not found: `{config.catalog_path}`.",
            hint="Pass an existing JSON catalog via `--catalog <path.json>`.",
        ) from exc
    except CatalogValidationError as exc:
        if lookup_logger is not None:
            lookup_logger.log_stage_failure("catalog", type(exc).__name__)
        raise LookupStageError(
            stage="catalog",
            detail=str(exc),
            hint="Fix the catalog entries so every record has a unique `id` and name.",
        ) from exc

    if lookup_logger is not None:
        lookup_logger.log_stage_complete("catalog", records=len(index))
    return index


@app.command("lookup")
def lookup_command(
    transcript: Annotated[str, typer.Argument(help="Transcript text to look up.")],
    catalog: CatalogOption = None,
    locale: LocaleOption = None,
    config_file: ConfigOption = None,
) -> None:
    """Match one transcript against the product catalog."""

    try:
        config = _resolve_command_config(config_file, catalog, locale)
        lookup_logger = _create_logger(config)
        profile = config.locale_profile()
        matcher = ProductMatcher(_build_index(config, profile, lookup_logger), profile)
        result = matcher.find_matches(transcript)
    except Exception as exc:
        exit_with_command_error("lookup", exc)

    if lookup_logger is not None:
        lookup_logger.log_lookup(
            key=matcher.normalizer.normalize(transcript),
            tier=result.tier if result is not None else None,
            match_count=len(result) if result is not None else 0,
        )
    echo_match_result(transcript, result)


@app.command("normalize")
def normalize_command(
    text: Annotated[str, typer.Argument(help="Text to normalize.")],
    locale: LocaleOption = None,
    config_file: ConfigOption = None,
) -> None:
    """Print the normalized key and variations searched for a transcript."""

    try:
        config = _resolve_command_config(config_file, None, locale)
        profile = config.locale_profile()
        plan = build_lookup_plan(text, profile.normalizer(), profile.morphology)
    except Exception as exc:
        exit_with_command_error("normalize", exc)

    echo_lookup_plan(plan)


@app.command("list-catalog")
def list_catalog_command(
    catalog: CatalogOption = None,
    locale: LocaleOption = None,
    config_file: ConfigOption = None,
) -> None:
    """Validate the catalog and print its records in source order."""

    try:
        config = _resolve_command_config(config_file, catalog, locale)
        lookup_logger = _create_logger(config)
        index = _build_index(config, config.locale_profile(), lookup_logger)
    except Exception as exc:
        exit_with_command_error("list-catalog", exc)

    echo_records(index.records)
    typer.echo(f"Records: {len(index)}")


@app.command("locales")
def locales_command() -> None:
    """List registered locale codes."""

    for code in available_locales():
        typer.echo(code)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
