"""Question Editor - View-model de uma questao no editor de quiz.

Wires user actions to the pure reducer (``quiz.engine.draft_engine.reduce``)
and to the transport for load, save and delete. Rendering is left to the
caller: it reads ``editor.state`` after each action.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

from ..engine.draft_engine import (
    build_create_input,
    build_update_input,
    is_placeholder_id,
    new_question_draft,
    reduce,
    summarize_prompt,
)
from ..engine.validation_engine import QuestionValidationEngine
from ..exceptions import TransportError
from ..models import events as ev
from ..models.enums import QuestionType
from ..models.schemas import Question, QuestionCreateInput, QuestionUpdateInput
from ..models.state import Collapsed, Deleted, Deleting, EditorState, Expanded, Failed, Loading

logger = logging.getLogger(__name__)

UNSAVED_ALERT_MESSAGE = (
    "You have unsaved questions in this quiz. Do you want to discard these changes?"
)
DELETE_CONFIRM_MESSAGE = (
    "Are you sure you want to delete this question? "
    "All students’ attempts for this question will also be deleted."
)
DISCARD_NEW_CONFIRM_MESSAGE = (
    "This question has never been saved, so any content will be lost. Remove this question?"
)
SAVE_ERROR_MESSAGE = (
    "There was an error saving this question. "
    "Please copy the question to a document and try again later."
)
DELETE_ERROR_PREFIX = "There was an error deleting this question: "
DELETE_ERROR_FALLBACK = "Please try again later."
QUESTION_NOT_FOUND = "Question not found"


class QuestionGateway(Protocol):
    """Operacoes de transporte usadas pelo editor (ver ``QuizApiClient``)."""

    async def fetch_question(self, question_id: str) -> Question | None: ...

    async def create_question(self, quiz_id: str, question: QuestionCreateInput) -> Question: ...

    async def update_question(self, question_id: str, data: QuestionUpdateInput) -> Question: ...

    async def delete_question(self, question_id: str) -> str: ...


def _always_confirm(message: str) -> bool:
    return True


class QuestionEditor:
    """Editor colapsavel de uma questao.

    Args:
        gateway: Transporte GraphQL
        quiz_id: Quiz que recebe questoes novas
        question_id: ID persistido ou placeholder ``_newN``
        default_prompt: Resumo exibido enquanto colapsado
        default_expanded: Carrega a questao ao montar
        confirm: Pergunta sim/nao ao usuario (delete, descarte de questao nova)
        notify: Exibe uma mensagem ao usuario
        on_new_save: Chamado uma vez com (id temporario, questao persistida)
        on_delete: Chamado com o id quando a questao sai da lista
    """

    def __init__(
        self,
        gateway: QuestionGateway,
        quiz_id: str,
        question_id: str,
        default_prompt: str = "",
        default_expanded: bool = False,
        confirm: Callable[[str], bool] | None = None,
        notify: Callable[[str], None] | None = None,
        on_new_save: Callable[[str, Question], None] | None = None,
        on_delete: Callable[[str], None] | None = None,
        validator: QuestionValidationEngine | None = None,
    ):
        self.gateway = gateway
        self.quiz_id = quiz_id
        self.question_id = question_id
        self.default_expanded = default_expanded
        self.confirm = confirm or _always_confirm
        self.notify = notify
        self.on_new_save = on_new_save
        self.on_delete = on_delete
        self.validator = validator or QuestionValidationEngine()
        self._summary = summarize_prompt(default_prompt)
        self._state: EditorState = Collapsed(summary=self._summary)

    # =========================================================================
    # STATE
    # =========================================================================

    @property
    def state(self) -> EditorState:
        return self._state

    @property
    def is_new(self) -> bool:
        return isinstance(self._state, Expanded) and self._state.is_new

    @property
    def has_unsaved_changes(self) -> bool:
        """Backs the navigation guard (``UNSAVED_ALERT_MESSAGE``)."""
        return isinstance(self._state, Expanded) and self._state.is_dirty

    @property
    def is_busy(self) -> bool:
        state = self._state
        return isinstance(state, (Loading, Deleting)) or (
            isinstance(state, Expanded) and state.is_saving
        )

    def dispatch(self, event: object) -> EditorState:
        self._state = reduce(self._state, event)
        return self._state

    def _surface(self, message: str) -> None:
        if self.notify is not None:
            self.notify(message)

    # =========================================================================
    # LOAD
    # =========================================================================

    async def mount(self) -> None:
        """Placeholder ids open a blank draft; otherwise load if expanded by default."""
        if is_placeholder_id(self.question_id):
            self.dispatch(ev.NewDraftOpened(new_question_draft(self.question_id)))
        elif self.default_expanded:
            await self.expand()

    async def expand(self) -> None:
        """Carrega a questao completa na primeira expansao.

        Does nothing unless collapsed, so an open draft is never re-fetched.
        """
        if not isinstance(self._state, Collapsed):
            return

        self.dispatch(ev.ExpandRequested())
        try:
            question = await self.gateway.fetch_question(self.question_id)
            if question is None:
                raise TransportError(QUESTION_NOT_FOUND)
        except Exception as e:
            logger.exception(f"Erro ao carregar questao {self.question_id}")
            self.dispatch(ev.LoadFailed(str(e)))
            return

        self.dispatch(ev.LoadSucceeded(question))

    # =========================================================================
    # EDITS
    # =========================================================================

    def change_prompt(self, prompt: str) -> None:
        self.dispatch(ev.PromptChanged(prompt))

    def change_concept(self, concept: str) -> None:
        self.dispatch(ev.ConceptChanged(concept))

    def change_type(self, question_type: QuestionType) -> None:
        self.dispatch(ev.TypeChanged(QuestionType(question_type)))

    def change_option_text(self, index: int, text: str) -> None:
        self.dispatch(ev.OptionTextChanged(index, text))

    def choose_correct_option(self, index: int) -> None:
        self.dispatch(ev.CorrectOptionChosen(index))

    def change_short_answer(self, index: int, value: str) -> None:
        self.dispatch(ev.ShortAnswerChanged(index, value))

    # =========================================================================
    # SAVE / DISCARD
    # =========================================================================

    async def save(self) -> bool:
        """Valida e persiste o rascunho.

        Returns:
            True se salvo; False se rejeitado pela validacao ou pelo servidor
        """
        state = self._state
        if not isinstance(state, Expanded) or state.is_saving:
            return False

        message = self.validator.validate(state.draft)
        if message is not None:
            self.dispatch(ev.SaveRejected(message))
            self._surface(f"Please correct this error: {message}")
            return False

        self.dispatch(ev.SaveStarted())
        draft = state.draft
        try:
            if state.is_new:
                saved = await self.gateway.create_question(self.quiz_id, build_create_input(draft))
            else:
                saved = await self.gateway.update_question(
                    self.question_id, build_update_input(draft)
                )
        except Exception:
            logger.exception(f"Erro ao salvar questao {self.question_id}")
            self.dispatch(ev.SaveFailed(SAVE_ERROR_MESSAGE))
            self._surface(SAVE_ERROR_MESSAGE)
            return False

        temporary_id = self.question_id
        self.question_id = saved.id
        self._summary = summarize_prompt(saved.prompt)
        self.dispatch(ev.SaveSucceeded(saved))

        if state.is_new:
            logger.info(f"Questao nova salva: {temporary_id} -> {saved.id}")
            if self.on_new_save is not None:
                self.on_new_save(temporary_id, saved)
        return True

    def discard(self) -> None:
        """Cancela a edicao.

        A never-saved question is removed from the list (after confirmation
        if its prompt has content); a persisted one just collapses.
        """
        state = self._state
        if not isinstance(state, Expanded) or state.is_saving:
            return

        if state.is_new:
            if state.draft.prompt.strip() and not self.confirm(DISCARD_NEW_CONFIRM_MESSAGE):
                return
            self.dispatch(ev.Discarded())
            self._notify_deleted()
            return

        self.dispatch(ev.Discarded(summary=self._summary))

    # =========================================================================
    # DELETE
    # =========================================================================

    async def delete(self) -> bool:
        """Remove a questao apos confirmacao.

        Returns:
            True se a questao saiu da lista
        """
        state = self._state
        if isinstance(state, (Loading, Deleting, Deleted, Failed)):
            return False
        if isinstance(state, Expanded) and state.is_saving:
            return False

        if not self.confirm(DELETE_CONFIRM_MESSAGE):
            return False

        if is_placeholder_id(self.question_id):
            self.dispatch(ev.RemovedLocally())
            self._notify_deleted()
            return True

        self.dispatch(ev.DeleteStarted(summary=self._summary))
        try:
            await self.gateway.delete_question(self.question_id)
        except Exception as e:
            logger.exception(f"Erro ao remover questao {self.question_id}")
            reason = DELETE_ERROR_FALLBACK
            if isinstance(e, TransportError) and e.errors:
                reason = e.message
            message = DELETE_ERROR_PREFIX + reason
            self.dispatch(ev.DeleteFailed(message))
            self._surface(message)
            return False

        self.dispatch(ev.DeleteSucceeded())
        self._notify_deleted()
        return True

    def _notify_deleted(self) -> None:
        if self.on_delete is not None:
            self.on_delete(self.question_id)
