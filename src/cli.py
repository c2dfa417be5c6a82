from __future__ import annotations

import json
import logging
import subprocess
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import typer

from src.config import settings, setup_logging
from src.db import Backend, BackendError, fetch_properties, upsert_properties
from src.models import FilterState, Property, SortOption, format_price
from src.search.facets import derive_facets
from src.search.filters import apply_filters
from src.search.sorting import sort_properties
from src.search.tags import active_tags

app = typer.Typer(help="Property listing site - web app and listing tools")
logger = logging.getLogger(__name__)

APP_PATH = Path(__file__).parent / "ui" / "app.py"


def _get_backend() -> Backend:
    return Backend()


def _load(backend: Backend) -> list[Property]:
    try:
        return fetch_properties(backend)
    except BackendError as e:
        typer.echo(f"Could not load properties: {e.message}", err=True)
        raise typer.Exit(1)


def _read_jsonl(path: Path) -> list[Property]:
    properties: list[Property] = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line:
                properties.append(Property.model_validate_json(line))
    return properties


@app.command()
def serve(
    port: int = typer.Option(8501, help="Port for the web app"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs"),
) -> None:
    """Run the web site."""
    setup_logging(verbose)
    cmd = [
        sys.executable, "-m", "streamlit", "run", str(APP_PATH),
        "--server.port", str(port),
        "--logger.level", "debug" if verbose else "info",
    ]
    logger.info("Starting web app on port %d", port)
    raise typer.Exit(subprocess.call(cmd))


@app.command()
def explore(
    query: str = typer.Option("", "--query", "-q", help="Match title, location or name"),
    location: List[str] = typer.Option([], "--location", help="Location to include (repeatable)"),
    beds: List[int] = typer.Option([], "--beds", help="Bedroom count to include (repeatable)"),
    baths: List[int] = typer.Option([], "--baths", help="Bathroom count to include (repeatable)"),
    finance_type: List[str] = typer.Option([], "--finance-type", help="Finance type to include (repeatable)"),
    new_only: bool = typer.Option(False, "--new-only", help="Only new listings"),
    trending_only: bool = typer.Option(False, "--trending-only", help="Only trending listings"),
    price_min: float = typer.Option(0, help="Minimum price"),
    price_max: float = typer.Option(settings.PRICE_CEILING, help="Maximum price"),
    sqft_min: float = typer.Option(0, help="Minimum area in sqft"),
    sqft_max: float = typer.Option(settings.SQFT_CEILING, help="Maximum area in sqft"),
    sort: SortOption = typer.Option(SortOption.NEWEST, help="Result order"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs"),
) -> None:
    """Filter and sort listings the way the explore page does."""
    setup_logging(verbose)

    filters = FilterState(
        query=query,
        locations=tuple(location),
        beds=tuple(beds),
        baths=tuple(baths),
        finance_types=tuple(finance_type),
        new_listing_only=new_only,
        trending_only=trending_only,
        price_min=price_min,
        price_max=price_max,
        sqft_min=sqft_min,
        sqft_max=sqft_max,
    )
    properties = _load(_get_backend())
    results = sort_properties(apply_filters(properties, filters), sort)

    tags = active_tags(filters)
    if tags:
        typer.echo("Filters: " + ", ".join(tag.label for tag in tags))
    typer.echo(f"{len(results)} {'property' if len(results) == 1 else 'properties'} ({sort.label})")
    for prop in results:
        typer.echo(f"{prop.id}\t{prop.title}\t{prop.location or '-'}\t{format_price(prop.price)}")


@app.command()
def facets(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs"),
) -> None:
    """Show the filter options available in the current listings."""
    setup_logging(verbose)
    found = derive_facets(_load(_get_backend()))

    sections = [
        ("Location", found.locations),
        ("Bedrooms", found.beds),
        ("Bathrooms", found.baths),
        ("Finance Type", found.finance_types),
    ]
    for title, options in sections:
        typer.echo(f"{title}:")
        for value, count in options:
            typer.echo(f"  {value} ({count})")
    typer.echo(f"New Listing: {found.new_listing_count}")
    typer.echo(f"Trending: {found.trending_count}")


@app.command()
def sync(
    input_file: Path = typer.Argument(..., help="JSONL file to sync"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs"),
) -> None:
    """Read a JSONL file and upsert to Supabase."""
    setup_logging(verbose)

    if not input_file.exists():
        typer.echo(f"File not found: {input_file}")
        raise typer.Exit(1)

    properties = _read_jsonl(input_file)
    typer.echo(f"Loaded {len(properties)} properties from {input_file}")

    try:
        count = upsert_properties(properties, _get_backend())
    except BackendError as e:
        typer.echo(f"Sync failed: {e.message}", err=True)
        raise typer.Exit(1)
    typer.echo(f"Upserted {count} properties to Supabase.")


@app.command()
def export(
    output: Path = typer.Option(Path("data"), help="Output directory"),
    name: Optional[str] = typer.Option(
        None,
        "--name",
        "-n",
        help="Override output filename"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs"),
) -> None:
    """Save every listing, newest first, as JSONL."""
    setup_logging(verbose)
    properties = _load(_get_backend())

    if not properties:
        typer.echo("No properties found.")
        raise typer.Exit(0)

    output.mkdir(parents=True, exist_ok=True)
    if name:
        base = Path(name)
        if base.suffix != ".jsonl":
            base = base.with_suffix(".jsonl")
        filename = output / base
    else:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filename = output / f"{settings.PROPERTIES_TABLE}_{timestamp}.jsonl"

    with open(filename, "w", encoding="utf-8") as f:
        for prop in properties:
            f.write(json.dumps(prop.model_dump(mode="json", exclude_none=True), ensure_ascii=False) + "\n")

    typer.echo(f"Saved {len(properties)} properties to {filename}")


if __name__ == "__main__":
    app()
