"""Next-pose recommendation command."""

from pathlib import Path

import click

from ..models.recommendation import Recommendation, SessionContext
from ..services.sequencer import SequenceRecommender
from ..utils.display import format_category
from .base import (
    catalog_option,
    echo_error,
    echo_info,
    echo_json,
    format_table,
    get_catalog,
    json_option,
    resolve_poses,
)


@click.command()
@click.option("--current", "-c", help="Pose currently being held (name or id)")
@click.option(
    "--session",
    "-s",
    multiple=True,
    help="Pose already practiced this session, oldest first (repeatable)",
)
@click.option(
    "--progress",
    "-p",
    type=float,
    default=0.0,
    show_default=True,
    help="Fraction of the session completed (clamped to 0-1)",
)
@click.option("--goal", "-g", multiple=True, help="Practice goal, e.g. flexibility")
@click.option("--limit", "-n", type=int, default=5, show_default=True)
@click.option("--start", "mode", flag_value="start", help="Recommend opening poses")
@click.option("--cooldown", "mode", flag_value="cooldown", help="Recommend cool-down poses")
@catalog_option
@json_option
@click.pass_context
def recommend(
    ctx: click.Context,
    current: str | None,
    session: tuple[str, ...],
    progress: float,
    goal: tuple[str, ...],
    limit: int,
    mode: str | None,
    catalog_path: Path | None,
    as_json: bool,
):
    """Recommend what pose to practice next.

    Examples:

        # Opening poses
        asana-flow recommend --start

        # Next pose after Mountain, 20% into the session
        asana-flow recommend -c mountain -s mountain -p 0.2

        # Gentle closing poses after a session
        asana-flow recommend --cooldown -s warrior-1 -s triangle -s seated-twist
    """
    catalog = get_catalog(catalog_path)
    if not catalog:
        echo_error("Pose catalog is empty.")
        ctx.exit(1)

    recommender = SequenceRecommender()
    session_poses = resolve_poses(ctx, session, catalog)

    if mode == "start":
        results = recommender.recommend_start(catalog, limit)
    elif mode == "cooldown":
        if not session_poses:
            echo_error("Cool-down recommendations need at least one --session pose.")
            ctx.exit(1)
        results = recommender.recommend_cooldown(catalog, session_poses, limit)
    else:
        current_pose = resolve_poses(ctx, [current], catalog)[0] if current else None
        context = SessionContext(
            current_pose=current_pose,
            session_poses=session_poses,
            session_progress=progress,
            goals=list(goal),
        )
        results = recommender.recommend(catalog, context, limit)

    if as_json:
        echo_json([r.to_dict() for r in results])
        return

    if not results:
        echo_info("No recommendations for this session.")
        return

    _print_recommendations(results)


def _print_recommendations(results: list[Recommendation]) -> None:
    rows = [
        [
            str(i),
            r.pose.name_english,
            format_category(r.pose.category.value),
            str(r.pose.difficulty),
            f"{r.score:.2f}",
            "; ".join(r.reasons),
        ]
        for i, r in enumerate(results, 1)
    ]
    click.echo()
    click.echo(
        format_table(["#", "Pose", "Category", "Level", "Score", "Why"], rows)
    )
