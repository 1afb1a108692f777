"""Command-line interface for slugsmith.

Responsibilities:
- Expose user-facing commands for transliteration and slug resolution.
- Convert CLI arguments and config files into `SlugConfig` and run them.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from dataclasses import fields as dataclass_fields
from pathlib import Path
import sys
from typing import Annotated

from loguru import logger as loguru_logger
import typer

from .behavior import TransliterateBehavior
from .cli_rendering import echo_slug_result, exit_with_command_error
from .config import ConfigLoader, SlugConfig
from .errors import SlugStageError
from .io.registry import RecordRegistry, UniqueValidator
from .models.datatypes import RecordEvent, SlugRecord
from .parsing import normalize_optional_string, parse_taken_lines
from .resolver import resolve_slug
from .telemetry.logger import SlugLogger
from .text.transliteration import transliterate
from .uniqueness import taken_values_predicate

app = typer.Typer(
    name="slugsmith",
    no_args_is_help=True,
    help="Transliterate titles into unique URL slugs.",
)

_RECORD_FIELDS = frozenset(
    item.name for item in dataclass_fields(SlugRecord) if item.name not in {"record_id", "errors"}
)


def _load_yaml_config(config_path: Path | None) -> SlugConfig | None:
    """Load a YAML config file when requested and map failures to stage errors."""

    if config_path is None:
        return None

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise SlugStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise SlugStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except Exception as exc:
        raise SlugStageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify YAML syntax and file permissions.",
        ) from exc


def _resolve_command_config(
    config_file: Path | None,
    unique: bool | None,
    max_attempts: int | None,
) -> SlugConfig:
    """Resolve effective config: YAML defaults, then env, then explicit CLI flags."""

    base_config = _load_yaml_config(config_file) or SlugConfig()
    try:
        config = ConfigLoader.merge_env(base_config)
    except ValueError as exc:
        raise SlugStageError(
            stage="config",
            detail=f"Invalid environment configuration: {exc}",
            hint="Fix or unset the `SLUGSMITH_*` environment variables.",
        ) from exc

    return SlugConfig(
        from_field=config.from_field,
        to_field=config.to_field,
        validate_unique=unique if unique is not None else config.validate_unique,
        max_attempts=max_attempts if max_attempts is not None else config.max_attempts,
        extra=dict(config.extra),
    )


def _read_taken_values(taken: list[str] | None, taken_file: Path | None) -> list[str]:
    """Collect taken values from repeated `--taken` options and a taken-values file."""

    values = [value for value in (normalize_optional_string(item) for item in taken or []) if value]
    if taken_file is None:
        return values

    try:
        raw_text = taken_file.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise SlugStageError(
            stage="input",
            detail=f"Taken-values file not found: `{taken_file}`.",
            hint="Pass an existing file with one slug per line via `--taken-file`.",
        ) from exc
    return values + parse_taken_lines(raw_text)


def _create_logger(verbose: bool) -> SlugLogger | None:
    """Create a stderr logger for verbose runs, replacing loguru's default sink."""

    if not verbose:
        return None
    loguru_logger.remove()
    return SlugLogger(sink=sys.stderr)


def _close_logger(logger: SlugLogger | None) -> None:
    """Detach the command logger's handler once the command finishes."""

    if logger is not None:
        logger.close()


@app.command("transliterate")
def transliterate_command(
    text: Annotated[str, typer.Argument(help="Source text to transliterate.")],
) -> None:
    """Print the slug candidate for TEXT without uniqueness checks."""

    typer.echo(transliterate(text))


@app.command("make")
def make_command(
    text: Annotated[str, typer.Argument(help="Source text, usually a title.")],
    alias: Annotated[
        str | None,
        typer.Option("--alias", help="Manually entered slug; used verbatim when non-empty."),
    ] = None,
    taken: Annotated[
        list[str] | None,
        typer.Option("--taken", help="Value already in use. Repeat for several values."),
    ] = None,
    taken_file: Annotated[
        Path | None,
        typer.Option("--taken-file", help="UTF-8 file with one taken value per line."),
    ] = None,
    unique: Annotated[
        bool | None,
        typer.Option(
            "--unique/--no-unique",
            help="Append a `-N` suffix when the value is taken (overrides config).",
        ),
    ] = None,
    max_attempts: Annotated[
        int | None,
        typer.Option("--max-attempts", min=1, help="Give up after N taken candidates."),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file with defaults."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Print resolution details and stage logs."),
    ] = False,
) -> None:
    """Print a unique slug for TEXT given a set of taken values."""

    logger = _create_logger(verbose)
    try:
        config = _resolve_command_config(config_file, unique, max_attempts)
        taken_values = _read_taken_values(taken, taken_file)
        if logger is not None:
            logger.log_stage_start("make", taken=len(taken_values))
        result = resolve_slug(
            alias,
            text,
            config.validate_unique,
            taken_values_predicate(taken_values),
            max_attempts=config.max_attempts,
            on_collision=logger.log_collision if logger is not None else None,
        )
        if logger is not None:
            logger.log_stage_complete("make", attempts=result.attempts)
    except Exception as exc:
        exit_with_command_error("make", exc)
    finally:
        _close_logger(logger)

    echo_slug_result(result, verbose=verbose)


@app.command("assign")
def assign_command(
    record_id: Annotated[str, typer.Argument(help="Record identifier in the registry.")],
    title: Annotated[str, typer.Argument(help="Record title used as the slug source.")],
    registry_path: Annotated[
        Path,
        typer.Option("--registry", help="JSON registry file; created when missing."),
    ],
    alias: Annotated[
        str | None,
        typer.Option("--alias", help="Manually entered slug; used verbatim when non-empty."),
    ] = None,
    reset_alias: Annotated[
        bool,
        typer.Option(
            "--reset-alias",
            help="Clear the stored slug so it is derived again from TITLE.",
        ),
    ] = False,
    unique: Annotated[
        bool | None,
        typer.Option("--unique/--no-unique", help="Override uniqueness enforcement."),
    ] = None,
    max_attempts: Annotated[
        int | None,
        typer.Option("--max-attempts", min=1, help="Give up after N taken candidates."),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file with defaults."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Print stage logs."),
    ] = False,
) -> None:
    """Insert or update a registry record and assign its slug."""

    logger = _create_logger(verbose)
    try:
        config = _resolve_command_config(config_file, unique, max_attempts)
        unbound = sorted({config.from_field, config.to_field}.difference(_RECORD_FIELDS))
        if unbound:
            raise SlugStageError(
                stage="config",
                detail=f"Registry records have no field(s): {', '.join(unbound)}.",
                hint="Use `from_field: title` and `to_field: alias` with the registry.",
            )

        registry = RecordRegistry(registry_path).load()
        record = registry.get(record_id)
        if record is None:
            record = SlugRecord(record_id=record_id)
            event = RecordEvent.BEFORE_INSERT
        else:
            event = RecordEvent.BEFORE_UPDATE
        record.title = title
        if reset_alias:
            record.alias = ""
        if alias is not None:
            record.alias = alias.strip()

        behavior = TransliterateBehavior.from_config(config, logger=logger)
        value = behavior.evaluate(record, event, UniqueValidator(registry))
        registry.put(record)
        registry.save()
    except Exception as exc:
        exit_with_command_error("assign", exc)
    finally:
        _close_logger(logger)

    typer.echo(value)
    typer.echo(f"Event: {event.value}", err=True)
    typer.echo(f"Registry: {registry_path}", err=True)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
