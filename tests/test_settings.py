from pathlib import Path

import pytest

from handins import commands
from handins.errors import UnknownCourse
from handins.interface import Handins
from handins.model import Settings

TEMPLATE = Path(__file__).resolve().parent / "handins_config_template.yml"


def test_config_template_loads() -> None:
    settings = commands.load_settings(str(TEMPLATE))
    assert settings.base_url == 'https://handins.ccs.neu.edu'
    assert settings.lookup_course('cs2510a') == 126


def test_missing_config_exits(tmp_path) -> None:
    with pytest.raises(SystemExit):
        commands.load_settings(str(tmp_path / 'nope.yml'))


def test_default_settings_without_config(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(commands, 'DEFAULT_CONFIG_PATH', str(tmp_path / '.handins.yml'))
    settings = commands.load_settings()
    assert settings == Settings()


def test_partial_config_keeps_defaults(tmp_path) -> None:
    path = tmp_path / 'handins.yml'
    path.write_text('similarity_threshold: 0.8\ncourse_aliases:\n  OOD: 140\n')
    settings = commands.load_settings(str(path))
    assert settings.similarity_threshold == 0.8
    assert settings.lookup_course('ood') == 140
    assert settings.time_zone == 'America/New_York'


@pytest.mark.parametrize('course, course_id', [
    ('fundies2', 129), ('F2', 129), (' cs2510 ', 129), ('f2a', 126), ('4242', 4242),
])
def test_lookup_course(course, course_id) -> None:
    assert Settings().lookup_course(course) == course_id


def test_lookup_unknown_course() -> None:
    with pytest.raises(UnknownCourse, match='Supported courses'):
        Settings().lookup_course('cs3500')


def test_get_portal() -> None:
    portal = commands.get_portal(Settings(base_url='https://example.edu'))
    assert isinstance(portal, Handins)
    assert portal.base_url == 'https://example.edu'


def test_get_portal_rejects_non_portal() -> None:
    with pytest.raises(ValueError):
        commands.get_portal(Settings(portal_class='handins.model.Settings'))
