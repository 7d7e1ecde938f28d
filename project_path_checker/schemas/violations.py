"""
Violation schemas.

A check pass produces an ordered tuple of ViolationReason values. Each reason
is a tagged model (discriminated on `kind`) carrying just enough data for a
message formatter to render it; no message text lives here.

Architecture:
1. SpecialFolders - OS-reported Desktop/Documents paths (inputs)
2. ViolationReason - tagged union of the five rule outcomes
3. CheckResult - ordered reasons for one evaluated path
"""

from __future__ import annotations

from typing import Annotated, Literal

import pydantic

from project_path_checker.schemas.base import StrictModel

# ==============================================================================
# Inputs
# ==============================================================================


class SpecialFolders(StrictModel):
    """
    Desktop and Documents locations as reported by the operating system.

    Both are None on platforms without the concept; the matching rules are
    then skipped. Empty strings are normalized to None so that an empty
    prefix can never match every path.
    """

    desktop: str | None = None
    documents: str | None = None

    @pydantic.field_validator('desktop', 'documents')
    @classmethod
    def empty_as_absent(cls, v: str | None) -> str | None:
        """Treat empty folder paths as absent."""
        return v or None


# ==============================================================================
# Violation Reasons
# ==============================================================================

ViolationKind = Literal['path_too_long', 'accented_characters', 'cloud_folder', 'documents_folder', 'on_desktop']


class PathTooLong(StrictModel):
    """The path is longer than the configured maximum."""

    kind: Literal['path_too_long'] = 'path_too_long'
    length: int
    max_length: int


class AccentedCharacters(StrictModel):
    """The path contains at least one accented Latin letter."""

    kind: Literal['accented_characters'] = 'accented_characters'


class CloudFolder(StrictModel):
    """The path contains the name of a cloud-sync folder."""

    kind: Literal['cloud_folder'] = 'cloud_folder'
    name: str  # Matched folder name, verbatim from CLOUD_FOLDERS


class DocumentsFolder(StrictModel):
    """The path is inside the OS Documents folder."""

    kind: Literal['documents_folder'] = 'documents_folder'


class OnDesktop(StrictModel):
    """The path is inside the OS Desktop folder."""

    kind: Literal['on_desktop'] = 'on_desktop'


ViolationReason = Annotated[
    PathTooLong | AccentedCharacters | CloudFolder | DocumentsFolder | OnDesktop,
    pydantic.Field(discriminator='kind'),
]


# ==============================================================================
# Result
# ==============================================================================


class CheckResult(StrictModel):
    """
    Outcome of evaluating one candidate path.

    Reasons are ordered: length, accents, cloud folders (OneDrive, Dropbox,
    Google, apple~Cloud), documents, desktop. An empty tuple means the
    location is suitable.
    """

    path: str
    max_length: int
    reasons: tuple[ViolationReason, ...] = ()

    @property
    def ok(self) -> bool:
        """True when no rule was violated."""
        return not self.reasons

    @property
    def kinds(self) -> tuple[ViolationKind, ...]:
        return tuple(reason.kind for reason in self.reasons)
