"""tokendiff compare command - diff two exported catalogs."""

import json
import math
from pathlib import Path

import click
import structlog

from tokendiff.catalog.loader import load_catalog
from tokendiff.catalog.models import TokenExport
from tokendiff.config.loader import load_config
from tokendiff.config.models import LoggingConfig, TokenFilters
from tokendiff.core.errors import TokenDiffError
from tokendiff.core.logging import clear_run_id, configure_logging, log_file_path, set_run_id
from tokendiff.diff.models import ComparisonChanges
from tokendiff.pipeline import compare_catalogs

log = structlog.get_logger(__name__)


@click.command()
@click.argument("old", type=click.Path(path_type=Path))
@click.argument("new", type=click.Path(path_type=Path))
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    default=None,
    help="YAML config file (logging, matching, filters)",
)
@click.option(
    "--threshold",
    type=click.FloatRange(0.0, 1.0),
    default=None,
    help="Minimum confidence for replacement suggestions",
)
@click.option("--no-suggestions", is_flag=True, help="Skip replacement suggestions")
@click.option("--exclude-hash", is_flag=True, help="Ignore tokens whose name starts with '#'")
@click.option("--exclude-hover", is_flag=True, help="Ignore tokens whose name ends with '_hover'")
@click.option("--exclude-utility", is_flag=True, help="Ignore the 'Utility' group")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def compare_command(
    ctx: click.Context,
    old: Path,
    new: Path,
    config_path: Path | None,
    threshold: float | None,
    no_suggestions: bool,
    exclude_hash: bool,
    exclude_hover: bool,
    exclude_utility: bool,
    as_json: bool,
) -> None:
    """Compare catalog OLD against catalog NEW.

    Reports added, removed and modified tokens, and proposes a replacement
    for each removed token when a close enough candidate was added.
    """
    try:
        config = load_config(config_path)
    except TokenDiffError as e:
        raise click.ClickException(str(e)) from e

    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    configure_logging(config.logging, level="DEBUG" if verbose else None)

    try:
        old_catalog = load_catalog(old)
        new_catalog = load_catalog(new)
    except TokenDiffError as e:
        raise _load_failure(e, config.logging) from e

    matching = config.matching
    if threshold is not None:
        matching = matching.model_copy(update={"minimum_confidence_threshold": threshold})
    if not math.isclose(matching.total_weight, 1.0, abs_tol=1e-6):
        log.warning("matching_weights_not_normalized", total_weight=matching.total_weight)

    filters = TokenFilters(
        exclude_tokens_starting_with_hash=(
            exclude_hash or config.filters.exclude_tokens_starting_with_hash
        ),
        exclude_tokens_ending_with_hover=(
            exclude_hover or config.filters.exclude_tokens_ending_with_hover
        ),
        exclude_utility_group=exclude_utility or config.filters.exclude_utility_group,
    )

    set_run_id()
    try:
        changes = compare_catalogs(
            old_catalog.tokens,
            new_catalog.tokens,
            config=matching,
            filters=filters,
            with_suggestions=not no_suggestions,
        )
    finally:
        clear_run_id()

    if as_json:
        payload = {
            "old": old_catalog.metadata.model_dump(by_alias=True),
            "new": new_catalog.metadata.model_dump(by_alias=True),
            **changes.to_dict(),
        }
        click.echo(json.dumps(payload, indent=2))
        return

    _print_report(old, old_catalog, new, new_catalog, changes)


def _load_failure(error: TokenDiffError, logging_config: LoggingConfig) -> click.ClickException:
    """Log the full error and point at the log file when one is configured."""
    log.error("catalog_load_failed", code=error.code.value, error=error.error_name, **error.details)
    message = str(error)
    path = log_file_path(logging_config)
    if path is not None:
        message = f"{message}\nSee log at {path}"
    return click.ClickException(message)


def _print_report(
    old_path: Path,
    old_catalog: TokenExport,
    new_path: Path,
    new_catalog: TokenExport,
    changes: ComparisonChanges,
) -> None:
    click.echo(
        f"Comparing {old_path.name} (v{old_catalog.metadata.version}) "
        f"-> {new_path.name} (v{new_catalog.metadata.version})"
    )
    counts = changes.summary()
    click.echo(
        f"Added: {counts['added']}  Removed: {counts['removed']}  "
        f"Modified: {counts['modified']}  Suggestions: {counts['auto_suggestions']}"
    )

    if not changes.has_changes:
        click.echo("No changes.")
        return

    if changes.added:
        click.echo("")
        click.echo("Added tokens:")
        for token in changes.added:
            click.echo(f"  + {token.path}")

    if changes.removed:
        click.echo("")
        click.echo("Removed tokens:")
        for token in changes.removed:
            click.echo(f"  - {token.path}")
            suggestion = changes.get_auto_suggestion(token.path)
            if suggestion is not None:
                click.echo(
                    f"      suggested: {suggestion.suggested_path} "
                    f"(confidence {suggestion.confidence:.0%})"
                )

    if changes.modified:
        click.echo("")
        click.echo("Modified tokens:")
        for modification in changes.modified:
            click.echo(f"  ~ {modification.path}")
            for change in modification.color_changes:
                delta = change.delta
                click.echo(
                    f"      {change.brand}/{change.appearance}: "
                    f"{change.old_hex} -> {change.new_hex} "
                    f"({delta.classification.label}: {delta.description})"
                )
