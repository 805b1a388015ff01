"""Question List - Lista de IDs de questoes mantida pelo editor de quiz."""

import logging
from collections.abc import Callable

from ..models.schemas import Question
from .controller import QuestionEditor, QuestionGateway

logger = logging.getLogger(__name__)


class QuestionList:
    """IDs das questoes de um quiz, na ordem exibida.

    New questions enter with a placeholder id (``_new0``, ``_new1``...) and
    are swapped for the persisted id when their editor reports the first
    save.

    Example:
        >>> questions = QuestionList("quiz-1", ["a", "b"])
        >>> temp_id = questions.add_placeholder()
        >>> questions.ids
        ['a', 'b', '_new0']
    """

    def __init__(self, quiz_id: str, question_ids: list[str] | None = None):
        self.quiz_id = quiz_id
        self.ids: list[str] = list(question_ids or [])
        self._next_placeholder = 0

    def add_placeholder(self) -> str:
        temp_id = f"_new{self._next_placeholder}"
        self._next_placeholder += 1
        self.ids.append(temp_id)
        return temp_id

    def on_new_save(self, temporary_id: str, question: Question) -> None:
        """Troca o ID temporario pelo persistido, mantendo a posicao."""
        try:
            position = self.ids.index(temporary_id)
        except ValueError:
            logger.warning(f"ID temporario desconhecido: {temporary_id}")
            self.ids.append(question.id)
            return
        self.ids[position] = question.id

    def on_delete(self, question_id: str) -> None:
        if question_id in self.ids:
            self.ids.remove(question_id)

    def editor_for(
        self,
        gateway: QuestionGateway,
        question_id: str,
        default_prompt: str = "",
        default_expanded: bool = False,
        confirm: Callable[[str], bool] | None = None,
        notify: Callable[[str], None] | None = None,
    ) -> QuestionEditor:
        """Cria um editor ligado aos callbacks desta lista."""
        return QuestionEditor(
            gateway,
            quiz_id=self.quiz_id,
            question_id=question_id,
            default_prompt=default_prompt,
            default_expanded=default_expanded,
            confirm=confirm,
            notify=notify,
            on_new_save=self.on_new_save,
            on_delete=self.on_delete,
        )

    def __len__(self) -> int:
        return len(self.ids)

    def __iter__(self):
        return iter(self.ids)
