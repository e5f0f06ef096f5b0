import functools
import logging

import click

from handins import commands
from handins.errors import HandinsError


def report_errors(func):
    @functools.wraps(func)
    def inner(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except HandinsError as e:
            raise click.ClickException(e.message) from e

    return inner


@click.group()
@click.option("--config", "config_path", default=None, type=click.Path(dir_okay=False),
              help="YAML configuration file (default: ~/.handins.yml)")
@click.option("-v", "--verbose", count=True, help="Log progress; repeat for debug output")
@click.pass_context
def cli(ctx, config_path, verbose):
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = commands.load_settings(config_path)


@click.command()
@click.argument("course")
@click.pass_obj
@report_errors
def grade(settings, course):
    """Show your grades and the best/worst case course grade."""
    commands.grade(settings, course)


cli.add_command(grade)


@click.command(name="list")
@click.argument("course")
@click.pass_obj
@report_errors
def list_assignments(settings, course):
    """List the assignments that have not been graded yet."""
    commands.list_outstanding(settings, course)


cli.add_command(list_assignments)


@click.command()
@click.argument("course")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.argument("query", required=False)
@click.option("--latest", is_flag=True, help="Submit to the most recently due assignment")
@click.option("--dry-run", is_flag=True, help="Choose the assignment but do not upload")
@click.pass_obj
@report_errors
def submit(settings, course, path, query, latest, dry_run):
    """Submit PATH to the assignment whose name best matches QUERY."""
    if query is None and not latest:
        raise click.UsageError("Give an assignment name or use --latest.")
    commands.submit(settings, course, path, query=query, latest=latest, dry_run=dry_run)


cli.add_command(submit)


def main():
    cli()


if __name__ == "__main__":
    main()
