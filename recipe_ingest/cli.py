"""
CLI interface for recipe text ingestion.

    recipe-ingest validate cookbook.txt
    recipe-ingest parse cookbook.txt --volume 2 --json
"""
import json
import logging

import click

from recipe_ingest.config import settings
from recipe_ingest.engine.validator import format_validation_results
from recipe_ingest.errors import InputReadError, RecipeIngestError
from recipe_ingest.services.ingest_service import RecipeIngestService


def _log_level(verbose: bool) -> int:
    """Resolve the logging level; --verbose or DEBUG=true force DEBUG."""
    if verbose or settings.debug:
        return logging.DEBUG
    return getattr(logging, settings.log_level, logging.INFO)


def _configure_logging(verbose: bool) -> None:
    """Configure logging with the configured level."""
    logging.basicConfig(
        level=_log_level(verbose),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def _read_text(source) -> str:
    """Read the whole input file, wrapping decode errors."""
    try:
        return source.read()
    except UnicodeDecodeError as e:
        raise InputReadError(getattr(source, "name", "<input>"), str(e)) from e


def _fail(error: RecipeIngestError, as_json: bool) -> None:
    """Print a structured error and exit with its exit code."""
    if as_json:
        click.echo(json.dumps(error.to_response().model_dump(), indent=2))
    else:
        click.echo(f"Error: {error.message}", err=True)
        for message in error.details.get("errors", []):
            click.echo(f"  - {message}", err=True)
    raise SystemExit(error.exit_code)


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.version_option(settings.app_version, prog_name=settings.app_name)
@click.pass_context
def cli(ctx, verbose: bool):
    """Recipe Ingest - parse and validate delimited cookbook text"""
    _configure_logging(verbose)
    ctx.obj = RecipeIngestService()


@cli.command()
@click.argument('source', type=click.File('r', encoding='utf-8'))
@click.option('--json', 'as_json', is_flag=True, help='Print the report as JSON')
@click.pass_obj
def validate(service: RecipeIngestService, source, as_json: bool):
    """Check recipe text structure before importing it."""
    try:
        text = _read_text(source)
    except RecipeIngestError as e:
        _fail(e, as_json)

    report = service.validate(text)

    if as_json:
        click.echo(report.model_dump_json(by_alias=True, indent=2))
    else:
        click.echo(format_validation_results(report))

    if not report.is_valid:
        raise SystemExit(1)


@cli.command()
@click.argument('source', type=click.File('r', encoding='utf-8'))
@click.option('--volume', default='1', show_default=True, help='Cookbook volume label')
@click.option('--json', 'as_json', is_flag=True, help='Print parsed recipes as JSON')
@click.option('--strict', is_flag=True, help='Refuse to parse text that fails validation')
@click.pass_obj
def parse(service: RecipeIngestService, source, volume: str, as_json: bool, strict: bool):
    """Parse recipe text into recipe records."""
    try:
        text = _read_text(source)
        result = service.ingest(text, volume, strict=strict)
    except RecipeIngestError as e:
        _fail(e, as_json)

    if as_json:
        click.echo(result.model_dump_json(by_alias=True, indent=2))
        return

    stats = result.stats
    click.echo("=" * 60)
    click.echo(f"PARSED RECIPES: volume {result.volume}")
    click.echo("=" * 60)

    for number, recipe in enumerate(result.recipes, 1):
        click.echo(f"\n{number:2}. {recipe.title}  [{recipe.category.value}]")
        click.echo(
            f"    {len(recipe.ingredients)} ingredients, "
            f"{len(recipe.instructions)} instructions"
        )
        click.echo(f"    tags: {', '.join(recipe.tags)}")

    click.echo("\n" + "-" * 60)
    click.echo(f"Recipes parsed:     {stats.total_recipes}")
    click.echo(f"With descriptions:  {stats.with_descriptions}")
    click.echo(f"Avg ingredients:    {stats.avg_ingredients}")
    click.echo(f"Avg instructions:   {stats.avg_instructions}")
    click.echo(f"Categories:         {stats.categories}")
    if result.failed_blocks:
        failed = ', '.join(str(n) for n in result.failed_blocks)
        click.echo(f"Failed to parse:    {len(result.failed_blocks)} (blocks {failed})")
    if result.skipped_blocks:
        click.echo(f"Skipped (too short): {result.skipped_blocks}")


if __name__ == '__main__':
    cli()
