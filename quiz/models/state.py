"""Editor State - Maquina de estados do editor de questao.

Each editor instance is always in exactly one of these states. States are
immutable; transitions are computed by ``quiz.engine.draft_engine.reduce``.

    Collapsed --expand--> Loading --ok--> Expanded --save ok--> Collapsed
                                  \\-err-> Failed
    Collapsed/Expanded --delete--> Deleting --ok--> Deleted
                                            \\-err-> Collapsed(notice)
"""

from dataclasses import dataclass
from typing import Union

from .schemas import Question


@dataclass(frozen=True)
class Collapsed:
    """Summary only; the full question has not been loaded (or was dropped)."""

    summary: str = ""
    notice: str | None = None


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Expanded:
    """Full draft open for editing.

    Attributes:
        draft: Local copy of the question; edits never touch the server
        is_new: Question has a placeholder id and was never persisted
        is_dirty: Draft changed since it was loaded or last saved
        is_saving: A create/update request is in flight
        notice: Last message surfaced to the user (validation or save error)
    """

    draft: Question
    is_new: bool = False
    is_dirty: bool = False
    is_saving: bool = False
    notice: str | None = None


@dataclass(frozen=True)
class Deleting:
    summary: str = ""


@dataclass(frozen=True)
class Deleted:
    pass


@dataclass(frozen=True)
class Failed:
    """Load failed; editing is disabled until the page is reloaded."""

    message: str


EditorState = Union[Collapsed, Loading, Expanded, Deleting, Deleted, Failed]
