import os
import sys
import getpass
from contextlib import contextmanager

import click
import pendulum as plm
import terminaltables as ttbl
import yaml

from handins.errors import CredentialsError, NoMatch
from handins.interface import Portal
from handins.model import Settings
from handins.task.disambiguate import Disambiguator
from handins.task.grade import project, split_graded
from handins.task.lateness import is_late
from handins.task.resolve import SelectionMode, resolve, by_due_date
from handins.util.util import get_class_from_string, get_logger

DEFAULT_CONFIG_PATH = os.path.join(os.path.expanduser('~'), '.handins.yml')


# -------------------------------------------------------------------------------------------------------------
def load_settings(path=None):
    logger = get_logger()
    if path is None:
        if not os.path.exists(DEFAULT_CONFIG_PATH):
            logger.info("No configuration file found; using default settings")
            return Settings()
        path = DEFAULT_CONFIG_PATH

    logger.info(f"Loading the handins configuration file {path}...")
    if not os.path.exists(path):
        sys.exit(
            f"""
              There is no configuration file at {path}.
              Please specify a valid configuration file path.
              """
        )
    with open(path) as f:
        config = yaml.safe_load(f) or {}

    return Settings.model_validate(config)


# -------------------------------------------------------------------------------------------------------------
def get_portal(settings):
    PortalClass = get_class_from_string(settings.portal_class)
    if not issubclass(PortalClass, Portal):
        raise ValueError(f"{settings.portal_class} is not a Portal")
    return PortalClass.model_validate(settings.model_dump())


# -------------------------------------------------------------------------------------------------------------
def get_credentials():
    username = input('username: ').strip()
    if not username:
        raise CredentialsError('no username provided!')
    password = getpass.getpass('password: ')
    if not password:
        raise CredentialsError('no password provided')
    return username, password


# -------------------------------------------------------------------------------------------------------------
@contextmanager
def open_portal(settings):
    portal = get_portal(settings)
    username, password = get_credentials()
    portal.open(username, password)
    try:
        yield portal
    finally:
        portal.close()


# -------------------------------------------------------------------------------------------------------------
def grade(settings, course):
    course_id = settings.lookup_course(course)
    with open_portal(settings) as portal:
        records = portal.get_assignments(course_id)

    projection = project(records)
    # computed up front so that nothing is printed for an undefined grade
    figures = [
        ('Your current grade:', projection.current),
        ('Your minimum grade:', projection.minimum),
        ('Your maximum grade:', projection.maximum),
        ('Ungraded points you can earn:', projection.upside),
    ]

    graded, _ = split_graded(records)
    tbl = [['Homework', 'Grade', 'Weight']]
    for r in graded:
        tbl.append([r.name, f"{r.grade:.2f}", f"{r.weight:.2f}"])
    click.echo(ttbl.AsciiTable(tbl, 'Grades').table)

    width = max(len(label) for label, _ in figures) + 1
    for label, value in figures:
        click.echo(f"{label:<{width}} {value:.2f}")
    return projection


# -------------------------------------------------------------------------------------------------------------
def list_outstanding(settings, course, now=None):
    course_id = settings.lookup_course(course)
    with open_portal(settings) as portal:
        records = portal.get_assignments(course_id)

    _, ungraded = split_graded(records)
    tbl = [['Assignment', 'Due', 'Weight', 'Late']]
    for i in by_due_date(ungraded):
        r = ungraded[i]
        due = r.due_date.in_timezone(settings.time_zone).format('ddd YYYY-MM-DD HH:mm')
        tbl.append([r.name, due, f"{r.weight:.2f}", 'yes' if is_late(r, now) else ''])
    click.echo(ttbl.AsciiTable(tbl, 'Outstanding assignments').table)
    return ungraded


# -------------------------------------------------------------------------------------------------------------
def submit(settings, course, path, query=None, latest=False, dry_run=False,
           disambiguator=None, now=None):
    logger = get_logger()
    course_id = settings.lookup_course(course)
    mode = SelectionMode.MOST_RECENT if latest else SelectionMode.FUZZY
    disambiguator = Disambiguator() if disambiguator is None else disambiguator
    now = plm.now() if now is None else now

    with open_portal(settings) as portal:
        _, ungraded = split_graded(portal.get_assignments(course_id))
        ranked = resolve(query or '', ungraded, mode=mode, threshold=settings.similarity_threshold)
        if len(ranked) == 0:
            raise NoMatch(f"No ungraded assignment matches '{query}'.")

        if mode == SelectionMode.MOST_RECENT:
            # the user asked for the latest assignment, so there is nothing to disambiguate
            record = disambiguator.release(ungraded[ranked[0]], now)
        else:
            record = disambiguator.choose(ungraded, ranked, now)

        link = record.submission_link(settings.base_url, course_id)
        logger.info(f"Submitting to {record.name} at {link}")
        if dry_run:
            click.echo(f"Would submit {path} to {record.name}: {link}")
            return record

        portal.submit(course_id, record, path)
        click.echo(f"Submitted {path} to {record.name}.")
    return record
