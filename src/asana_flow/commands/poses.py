"""Pose catalog listing command."""

from pathlib import Path

import click

from ..models.poses import Category
from ..utils.display import format_category
from ..utils.pose_utils import categorize_poses
from .base import catalog_option, echo_json, echo_warning, format_table, get_catalog, json_option


@click.command()
@click.option(
    "--category",
    type=click.Choice([c.value for c in Category], case_sensitive=False),
    help="Only list one category",
)
@catalog_option
@json_option
def poses(category: str | None, catalog_path: Path | None, as_json: bool):
    """List the poses in the catalog, grouped by category."""
    catalog = get_catalog(catalog_path)
    grouped = categorize_poses(catalog)
    if category:
        grouped = {category.upper(): grouped[category.upper()]}

    if as_json:
        echo_json({cat: [p.to_dict() for p in items] for cat, items in grouped.items()})
        return

    if not any(grouped.values()):
        echo_warning("No poses found.")
        return

    for cat, items in grouped.items():
        if not items:
            continue
        click.echo()
        click.echo(click.style(format_category(cat), bold=True))
        rows = [
            [p.id, p.name_english, p.name_native, str(p.difficulty), ", ".join(p.target_regions)]
            for p in sorted(items, key=lambda p: (p.difficulty, p.id))
        ]
        click.echo(format_table(["ID", "Name", "Native", "Level", "Targets"], rows))
