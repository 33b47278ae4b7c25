"""CLI entry point for asana-flow."""

import click

from . import __version__
from .commands import bodymap, poses, recommend, recovery, sequence, serve


@click.group()
@click.version_option(version=__version__, prog_name="asana-flow")
def main():
    """asana-flow: practice personalization for yoga sequences.

    Recommend the next pose, map which body regions your practice covers,
    and check whether it is time for a rest day.

    Example usage:

        # Browse the pose catalog
        asana-flow poses

        # What comes after Mountain Pose?
        asana-flow recommend --current mountain --session mountain

        # Body coverage over the last 30 days
        asana-flow bodymap history.json

        # Rest check for the last week
        asana-flow recovery logs.json
    """
    pass


main.add_command(poses)
main.add_command(recommend)
main.add_command(bodymap)
main.add_command(recovery)
main.add_command(sequence)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
