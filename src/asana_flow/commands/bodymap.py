"""Body map coverage command."""

from pathlib import Path

import click

from ..data.catalog_loader import load_practice_records
from ..models.history import utc_now
from ..services.body_map import analyze_body_map
from .base import catalog_option, echo_info, echo_json, format_table, get_catalog, json_option


@click.command()
@click.argument(
    "history_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option(
    "--days", "-d", type=int, default=30, show_default=True, help="Analysis window"
)
@catalog_option
@json_option
def bodymap(history_file: Path, days: int, catalog_path: Path | None, as_json: bool):
    """Show which body regions your practice has covered.

    HISTORY_FILE is a JSON list of per-pose practice totals
    (pose_id, practice_count, total_duration_seconds, last_practiced).
    Records not practiced within the last --days days are left out.
    """
    catalog = get_catalog(catalog_path)
    records = load_practice_records(history_file, catalog)
    report = analyze_body_map(records, window_days=days, now=utc_now())

    if as_json:
        echo_json(report.to_dict())
        return

    click.echo()
    click.echo(click.style(f"Body Map (last {days} days)", bold=True))
    click.echo("=" * 50)
    click.echo(f"Total practices: {report.total_practices}")
    click.echo(
        f"Balance: {report.balance_score}/100 "
        f"(front {report.front_focus}% / back {report.back_focus}%)"
    )
    click.echo()

    regions = sorted(
        report.regions.values(), key=lambda f: f.practice_count, reverse=True
    )
    rows = [
        [
            focus.label,
            focus.side.value,
            str(focus.practice_count),
            f"{focus.percentage}%",
            str(focus.intensity),
            ", ".join(p.name for p in focus.top_poses),
        ]
        for focus in regions
        if focus.practice_count > 0
    ]
    if rows:
        click.echo(
            format_table(["Region", "Side", "Count", "Share", "Intensity", "Top poses"], rows)
        )
    else:
        echo_info("No practice recorded in this window.")

    if report.recommendations:
        click.echo()
        click.echo(click.style("Recommendations:", bold=True))
        for note in report.recommendations:
            click.echo(f"  - {note}")
