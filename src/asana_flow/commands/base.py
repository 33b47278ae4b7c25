"""Shared CLI utilities."""

import json
from pathlib import Path

import click

from ..data.catalog_loader import load_catalog
from ..models.poses import Pose
from ..utils.pose_utils import find_pose

catalog_option = click.option(
    "--catalog",
    "catalog_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Pose catalog JSON (defaults to data/poses.json or the built-in library)",
)

json_option = click.option(
    "--json", "as_json", is_flag=True, help="Print machine-readable JSON"
)


def get_catalog(catalog_path: Path | None) -> list[Pose]:
    """Load the catalog for a command."""
    return load_catalog(catalog_path)


def resolve_poses(
    ctx: click.Context, names: tuple[str, ...] | list[str], catalog: list[Pose]
) -> list[Pose]:
    """Resolve pose names or ids, exiting with an error on the first unknown one."""
    poses = []
    for name in names:
        pose = find_pose(name, catalog)
        if pose is None:
            echo_error(f"Pose '{name}' not found in catalog.")
            ctx.exit(1)
        poses.append(pose)
    return poses


def echo_json(data: dict | list) -> None:
    """Print data as indented JSON."""
    click.echo(json.dumps(data, indent=2))


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = ["".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers))]
    lines.append("".join("-" * w + " " * padding for w in widths))

    for row in rows:
        lines.append(
            "".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row))
        )

    return "\n".join(lines)
