"""Rest and recovery recommendation command."""

from pathlib import Path

import click

from ..data.catalog_loader import load_practice_logs
from ..services.recovery import analyze, recommend_recovery
from ..utils.display import intensity_label
from .base import (
    catalog_option,
    echo_info,
    echo_json,
    echo_warning,
    format_table,
    get_catalog,
    json_option,
)


@click.command()
@click.argument("logs_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@catalog_option
@json_option
def recovery(logs_file: Path, catalog_path: Path | None, as_json: bool):
    """Check recent practice load and get a recovery suggestion.

    LOGS_FILE is a JSON list of sessions from the last week
    (duration_minutes, poses, created_at).
    """
    catalog = get_catalog(catalog_path)
    logs = load_practice_logs(logs_file)
    analysis = analyze(logs, catalog)
    suggestion = recommend_recovery(analysis)

    if as_json:
        echo_json({"analysis": analysis.to_dict(), "recommendation": suggestion.to_dict()})
        return

    click.echo()
    click.echo(click.style("Practice Load", bold=True))
    click.echo("=" * 50)
    click.echo(f"Sessions: {analysis.total_sessions}")
    click.echo(
        f"Minutes: {analysis.total_minutes} "
        f"(avg {analysis.average_session_length} per session)"
    )
    if analysis.total_sessions:
        click.echo(f"Days since last practice: {analysis.days_since_last_practice}")
    click.echo(f"Intensity score: {analysis.intensity_score}/100")

    worked = [a for a in analysis.region_activity if a.count > 0]
    if worked:
        click.echo()
        click.echo(
            format_table(
                ["Region", "Count", "Intensity", "Load"],
                [
                    [a.region, str(a.count), str(a.intensity), intensity_label(a.intensity)]
                    for a in worked
                ],
            )
        )

    if analysis.needs_rest:
        click.echo()
        echo_warning("Rest is recommended:")
        for reason in analysis.rest_reasons:
            click.echo(f"  - {reason}")

    click.echo()
    click.echo(click.style(f"{suggestion.title} ({suggestion.suggested_duration} min)", bold=True))
    click.echo(suggestion.description)
    if suggestion.avoid_areas:
        echo_info(f"Give a break to: {', '.join(suggestion.avoid_areas)}")
    if suggestion.focus_areas:
        echo_info(f"Gently explore: {', '.join(suggestion.focus_areas)}")
    click.echo("Suggested poses:")
    for pose_name in suggestion.suggested_poses:
        click.echo(f"  - {pose_name}")
