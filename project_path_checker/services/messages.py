"""
Localized messages for check reports.

The evaluator only produces structured reasons. This module turns them into
text through a key -> message lookup, so hosts can inject any catalog.

Catalogs: English ('en') and French ('fr'). Placeholders use str.format
positional fields ({0}, {1}).
"""

from __future__ import annotations

import locale
from collections.abc import Callable, Iterable, Mapping
from typing import Literal

from project_path_checker.schemas.violations import (
    CloudFolder,
    PathTooLong,
    ViolationKind,
    ViolationReason,
)

__all__ = ['Language', 'MESSAGES', 'MessageLookup', 'ViolationFormatter', 'detect_language', 'get_message_lookup']

Language = Literal['en', 'fr']

MessageLookup = Callable[[str], str]

PROJECT_URL = 'https://github.com/JonathanTremblay/UnityProjectPathChecker'

MESSAGES: Mapping[Language, Mapping[str, str]] = {
    'en': {
        'ABOUT': '** {0} is free and open source. For updates and feedback, visit ' + PROJECT_URL + '. ** ({1})',
        'INVALID_TITLE': 'INVALID PROJECT LOCATION',
        'MORE_INFO': '(For more information, see the warnings above.)',
        'EXPLANATION_START': 'The project is',
        'WHY': 'This is a problem because this folder can be synchronized by OneDrive.',
        'SOLUTION_MOVE': 'Solution: 1. Close your editor ; 2. Move the project to another folder ; 3. Reopen the project.',
        'SOLUTION_RENAME': (
            'Solution: 1. Close your editor ; 2. Remove accents from the structure where the project is located ; '
            '3. Reopen the project.'
        ),
        'PATH_TOO_LONG': 'in a folder whose path is too long ({0} characters). The path should not exceed {1} characters.',
        'ACCENTED_CHARACTERS': 'in a folder whose path contains accented characters.',
        'CLOUD_FOLDER': 'in a {0} folder.',
        'DOCUMENTS_FOLDER': "in the OS's Documents folder.",
        'ON_DESKTOP': 'on the desktop.',
        'CAUSE_PATH_TOO_LONG': 'path too long',
        'CAUSE_ACCENTED_CHARACTERS': 'accented characters',
        'CONGRATS': 'Congratulations, the project is in a suitable folder: short path, no accents, not in a OneDrive folder.',
        'CURRENT_LOCATION': 'Current location:',
    },
    'fr': {
        'ABOUT': (
            '** {0} est gratuit et open source. Pour les mises à jour et les commentaires, visitez '
            + PROJECT_URL
            + '. ** ({1})'
        ),
        'INVALID_TITLE': 'EMPLACEMENT DE PROJET NON VALIDE',
        'MORE_INFO': "(Pour plus d'informations, consulter les avertissements ci-dessus.)",
        'EXPLANATION_START': 'Le projet est',
        'WHY': "C'est un problème, car ce dossier peut être synchronisé par OneDrive.",
        'SOLUTION_MOVE': (
            'Solution: 1. Fermer votre éditeur ; 2. Déplacer le projet dans un autre dossier ; 3. Réouvrir le projet.'
        ),
        'SOLUTION_RENAME': (
            'Solution: 1. Fermer votre éditeur ; 2. Éliminer les accents de la structure où se trouve le projet ; '
            '3. Réouvrir le projet.'
        ),
        'PATH_TOO_LONG': (
            'dans un dossier dont le chemin est trop long ({0} caractères). '
            'Le chemin ne devrait pas dépasser {1} caractères.'
        ),
        'ACCENTED_CHARACTERS': 'dans un dossier dont le chemin contient des caractères accentués.',
        'CLOUD_FOLDER': 'dans un dossier {0}.',
        'DOCUMENTS_FOLDER': "dans le dossier Documents de l'OS.",
        'ON_DESKTOP': 'sur le bureau.',
        'CAUSE_PATH_TOO_LONG': 'chemin trop long',
        'CAUSE_ACCENTED_CHARACTERS': 'caractères accentués',
        'CONGRATS': 'Bravo le projet est dans un dossier adéquat: chemin court, sans accent, pas dans un dossier OneDrive.',
        'CURRENT_LOCATION': 'Emplacement actuel:',
    },
}


def detect_language(override: Language | None = None) -> Language:
    """
    Pick the message language.

    Uses the override when given, otherwise French for any 'fr*' process
    locale and English for everything else.
    """
    if override is not None:
        return override
    language_code, _ = locale.getlocale()
    if language_code and language_code.lower().startswith('fr'):
        return 'fr'
    return 'en'


def get_message_lookup(language: Language) -> MessageLookup:
    """Return a key -> message function for the given catalog."""
    return MESSAGES[language].__getitem__


# ==============================================================================
# Formatter
# ==============================================================================


def _path_too_long(lookup: MessageLookup, reason: ViolationReason) -> str:
    assert isinstance(reason, PathTooLong)
    return lookup('PATH_TOO_LONG').format(reason.length, reason.max_length)


def _cloud_folder(lookup: MessageLookup, reason: ViolationReason) -> str:
    assert isinstance(reason, CloudFolder)
    return lookup('CLOUD_FOLDER').format(reason.name)


# Reason tag -> localized detail ("in a folder whose path ...")
_DETAILS: Mapping[ViolationKind, Callable[[MessageLookup, ViolationReason], str]] = {
    'path_too_long': _path_too_long,
    'accented_characters': lambda lookup, _: lookup('ACCENTED_CHARACTERS'),
    'cloud_folder': _cloud_folder,
    'documents_folder': lambda lookup, _: lookup('DOCUMENTS_FOLDER'),
    'on_desktop': lambda lookup, _: lookup('ON_DESKTOP'),
}

# Reasons whose short label differs from the detail sentence
_CAUSES: Mapping[ViolationKind, str] = {
    'path_too_long': 'CAUSE_PATH_TOO_LONG',
    'accented_characters': 'CAUSE_ACCENTED_CHARACTERS',
}

_SYNC_EXPOSED: frozenset[ViolationKind] = frozenset({'documents_folder', 'on_desktop'})


class ViolationFormatter:
    """
    Renders violation reasons and status lines through a message lookup.

    Example:
        formatter = ViolationFormatter(get_message_lookup('en'))
        formatter.explain(OnDesktop())
        # 'The project is on the desktop. This is a problem because ... Solution: ...'
    """

    def __init__(self, lookup: MessageLookup) -> None:
        self.lookup = lookup

    def detail(self, reason: ViolationReason) -> str:
        return _DETAILS[reason.kind](self.lookup, reason)

    def explain(self, reason: ViolationReason) -> str:
        """Full warning: what is wrong, why (Desktop/Documents only) and how to fix it."""
        parts = [self.lookup('EXPLANATION_START'), self.detail(reason)]
        if reason.kind in _SYNC_EXPOSED:
            parts.append(self.lookup('WHY'))
        solution = 'SOLUTION_RENAME' if reason.kind == 'accented_characters' else 'SOLUTION_MOVE'
        parts.append(self.lookup(solution))
        return ' '.join(parts)

    def cause(self, reason: ViolationReason) -> str:
        """Short label used in the title line."""
        key = _CAUSES.get(reason.kind)
        if key is not None:
            return self.lookup(key)
        return self.detail(reason)

    def title(self, reasons: Iterable[ViolationReason]) -> str:
        causes = ', '.join(self.cause(reason) for reason in reasons)
        return f'{self.lookup("INVALID_TITLE")} ({causes})'

    def current_location(self, path: str) -> str:
        return f'{self.lookup("CURRENT_LOCATION")} {path}'

    def more_info(self) -> str:
        return self.lookup('MORE_INFO')

    def congratulations(self) -> str:
        return self.lookup('CONGRATS')

    def about(self, app_name: str, version: str) -> str:
        return self.lookup('ABOUT').format(app_name, version)
