"""Warm-up and cool-down generation commands."""

import click

from ..models.sequence import GeneratedSequence
from ..services.warmup import generate_cooldown, generate_warmup
from ..utils.display import format_sequence_duration
from .base import (
    catalog_option,
    echo_json,
    echo_warning,
    format_table,
    get_catalog,
    json_option,
    resolve_poses,
)


@click.group()
def sequence():
    """Generate warm-up and cool-down sequences for a program.

    Pass the program's main poses (names or ids) in practice order.
    """
    pass


def _run(ctx: click.Context, build, poses, minutes, catalog_path, as_json) -> None:
    catalog = get_catalog(catalog_path)
    program_poses = resolve_poses(ctx, poses, catalog)
    generated = build(program_poses, catalog, minutes)

    if as_json:
        echo_json(generated.to_dict())
        return

    _print_sequence(generated)


@sequence.command("warmup")
@click.argument("poses", nargs=-1, required=True)
@click.option("--minutes", "-m", type=int, default=5, show_default=True)
@catalog_option
@json_option
@click.pass_context
def warmup(ctx, poses, minutes, catalog_path, as_json):
    """Build a warm-up for the given program poses."""
    _run(ctx, generate_warmup, poses, minutes, catalog_path, as_json)


@sequence.command("cooldown")
@click.argument("poses", nargs=-1, required=True)
@click.option("--minutes", "-m", type=int, default=5, show_default=True)
@catalog_option
@json_option
@click.pass_context
def cooldown(ctx, poses, minutes, catalog_path, as_json):
    """Build a cool-down for the given program poses."""
    _run(ctx, generate_cooldown, poses, minutes, catalog_path, as_json)


def _print_sequence(generated: GeneratedSequence) -> None:
    click.echo()
    click.echo(click.style(generated.description, bold=True))
    if not generated.items:
        echo_warning("No suitable poses found in the catalog.")
        return

    rows = [
        [
            str(i),
            item.pose.name_english,
            format_sequence_duration(item.duration),
            item.purpose,
        ]
        for i, item in enumerate(generated.items, 1)
    ]
    click.echo(format_table(["#", "Pose", "Hold", "Purpose"], rows))
    click.echo(f"Total: {format_sequence_duration(generated.total_duration)}")
