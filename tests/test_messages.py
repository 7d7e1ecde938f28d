"""
Tests for localized violation messages.
"""

from __future__ import annotations

import locale

import pytest

from project_path_checker.schemas.violations import (
    AccentedCharacters,
    CloudFolder,
    DocumentsFolder,
    OnDesktop,
    PathTooLong,
)
from project_path_checker.services.messages import (
    MESSAGES,
    ViolationFormatter,
    detect_language,
    get_message_lookup,
)

EN = ViolationFormatter(get_message_lookup('en'))
FR = ViolationFormatter(get_message_lookup('fr'))


def test_catalogs_share_keys() -> None:
    assert MESSAGES['en'].keys() == MESSAGES['fr'].keys()


def test_path_too_long_includes_measured_and_maximum_length() -> None:
    message = EN.explain(PathTooLong(length=95, max_length=90))

    assert message == (
        'The project is in a folder whose path is too long (95 characters). '
        'The path should not exceed 90 characters. '
        'Solution: 1. Close your editor ; 2. Move the project to another folder ; 3. Reopen the project.'
    )


def test_accents_suggest_renaming() -> None:
    message = EN.explain(AccentedCharacters())

    assert message.startswith('The project is in a folder whose path contains accented characters. ')
    assert 'Remove accents' in message


def test_cloud_folder_names_the_folder() -> None:
    assert EN.explain(CloudFolder(name='Dropbox')).startswith('The project is in a Dropbox folder. Solution:')
    assert FR.detail(CloudFolder(name='Google')) == 'dans un dossier Google.'


@pytest.mark.parametrize('reason', [DocumentsFolder(), OnDesktop()], ids=['documents', 'desktop'])
def test_special_folders_explain_why(reason: DocumentsFolder | OnDesktop) -> None:
    assert MESSAGES['en']['WHY'] in EN.explain(reason)


@pytest.mark.parametrize(
    'reason',
    [PathTooLong(length=91, max_length=90), AccentedCharacters(), CloudFolder(name='OneDrive')],
    ids=['length', 'accents', 'cloud'],
)
def test_other_reasons_skip_why(reason: PathTooLong | AccentedCharacters | CloudFolder) -> None:
    assert MESSAGES['en']['WHY'] not in EN.explain(reason)


def test_title_lists_short_causes() -> None:
    reasons = (PathTooLong(length=120, max_length=90), AccentedCharacters(), CloudFolder(name='OneDrive'), OnDesktop())

    assert EN.title(reasons) == (
        'INVALID PROJECT LOCATION (path too long, accented characters, in a OneDrive folder., on the desktop.)'
    )
    assert FR.title(reasons[:2]) == 'EMPLACEMENT DE PROJET NON VALIDE (chemin trop long, caractères accentués)'


def test_french_explanation() -> None:
    assert FR.explain(OnDesktop()).startswith('Le projet est sur le bureau. ')


def test_status_lines() -> None:
    assert EN.current_location('D:\\Dev\\Proj\\') == 'Current location: D:\\Dev\\Proj\\'
    assert EN.congratulations().startswith('Congratulations')
    assert FR.congratulations().startswith('Bravo')
    assert 'Project Path Checker' in EN.about('Project Path Checker', 'Version 0.9.1')
    assert 'Version 0.9.1' in FR.about('Project Path Checker', 'Version 0.9.1')


def test_custom_lookup_is_used() -> None:
    formatter = ViolationFormatter(lambda key: f'<{key}>')

    assert formatter.explain(OnDesktop()) == '<EXPLANATION_START> <ON_DESKTOP> <WHY> <SOLUTION_MOVE>'


def test_detect_language_override() -> None:
    assert detect_language('fr') == 'fr'
    assert detect_language('en') == 'en'


@pytest.mark.parametrize(
    ('locale_name', 'expected'),
    [('fr_CA', 'fr'), ('fr_FR', 'fr'), ('French_Canada', 'fr'), ('en_US', 'en'), ('de_DE', 'en'), (None, 'en')],
)
def test_detect_language_from_locale(monkeypatch: pytest.MonkeyPatch, locale_name: str | None, expected: str) -> None:
    monkeypatch.setattr(locale, 'getlocale', lambda *args: (locale_name, 'UTF-8'))

    assert detect_language() == expected
