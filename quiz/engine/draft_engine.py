"""Draft Engine - Mutacoes puras do rascunho e reducer do editor.

Every function here returns a new value and never mutates its input, so a
previous draft snapshot stays valid for change detection.
"""

import html
import logging
import re
from dataclasses import replace

from ..models import events as ev
from ..models.enums import DEFAULT_QUESTION_TYPE, QuestionType
from ..models.schemas import (
    Option,
    OptionCreateInput,
    OptionUpdateData,
    OptionUpdateInput,
    OptionWhereUniqueInput,
    Question,
    QuestionCreateInput,
    QuestionUpdateInput,
    ShortAnswerSetInput,
)
from ..models.state import (
    Collapsed,
    Deleted,
    Deleting,
    EditorState,
    Expanded,
    Failed,
    Loading,
)

logger = logging.getLogger(__name__)

# Placeholder ids look like "_new0", "_new12"
PLACEHOLDER_PATTERN = re.compile(r"^_new[0-9]*")
NEW_OPTION_COUNT = 8

_TAG_PATTERN = re.compile(r"<[^>]*>")
_SPACE_PATTERN = re.compile(r"\s+")


# =============================================================================
# PLACEHOLDERS & SUMMARIES
# =============================================================================


def is_placeholder_id(question_id: str) -> bool:
    return bool(PLACEHOLDER_PATTERN.match(question_id or ""))


def new_question_draft(question_id: str, option_count: int = NEW_OPTION_COUNT) -> Question:
    """Cria o rascunho em branco de uma questao nova.

    Args:
        question_id: Placeholder id (``_newN``)
        option_count: Numero de alternativas em branco

    Returns:
        Question com alternativas ``_newOption1..N`` vazias
    """
    return Question(
        id=question_id,
        concept="",
        prompt="",
        type=DEFAULT_QUESTION_TYPE,
        options=[
            Option(id=f"_newOption{i}", text="", is_correct=False)
            for i in range(1, option_count + 1)
        ],
        correct_short_answers=[],
    )


def summarize_prompt(prompt: str | None) -> str:
    """Plain-text one-liner of a rich-text prompt, for collapsed headings."""
    if not prompt:
        return ""
    text = html.unescape(_TAG_PATTERN.sub(" ", prompt))
    return _SPACE_PATTERN.sub(" ", text).strip()


# =============================================================================
# DRAFT MUTATIONS
# =============================================================================


def set_prompt(question: Question, prompt: str) -> Question:
    return question.model_copy(update={"prompt": prompt})


def set_concept(question: Question, concept: str) -> Question:
    return question.model_copy(update={"concept": concept})


def set_type(question: Question, question_type: QuestionType) -> Question:
    return question.model_copy(update={"type": QuestionType(question_type)})


def set_option_text(question: Question, index: int, text: str) -> Question:
    """Replace the text of option ``index`` only."""
    _check_option_index(question, index)
    options = list(question.options)
    options[index] = options[index].model_copy(update={"text": text})
    return question.model_copy(update={"options": options})


def mark_correct(question: Question, index: int) -> Question:
    """Marca a alternativa ``index`` como correta.

    The previously correct option is unmarked in the same transition, so no
    snapshot ever holds two correct options.
    """
    _check_option_index(question, index)
    options = [
        option
        if option.is_correct == (i == index)
        else option.model_copy(update={"is_correct": i == index})
        for i, option in enumerate(question.options)
    ]
    return question.model_copy(update={"options": options})


def set_short_answer(question: Question, index: int, value: str) -> Question:
    """Edita uma resposta curta aceita.

    An empty value removes the slot. Index ``len(answers)`` is the trailing
    "add answer" slot: a non-empty value there appends.
    """
    answers = list(question.correct_short_answers)
    if index < 0 or index > len(answers):
        raise IndexError(f"Short answer index {index} out of range")

    if value == "":
        if index < len(answers):
            del answers[index]
    elif index == len(answers):
        answers.append(value)
    else:
        answers[index] = value

    return question.model_copy(update={"correct_short_answers": answers})


def _check_option_index(question: Question, index: int) -> None:
    if index < 0 or index >= len(question.options):
        raise IndexError(f"Option index {index} out of range")


def apply_edit(question: Question, event: object) -> Question:
    """Aplica um evento de edicao ao rascunho."""
    if isinstance(event, ev.PromptChanged):
        return set_prompt(question, event.prompt)
    if isinstance(event, ev.ConceptChanged):
        return set_concept(question, event.concept)
    if isinstance(event, ev.TypeChanged):
        return set_type(question, event.type)
    if isinstance(event, ev.OptionTextChanged):
        return set_option_text(question, event.index, event.text)
    if isinstance(event, ev.CorrectOptionChosen):
        return mark_correct(question, event.index)
    if isinstance(event, ev.ShortAnswerChanged):
        return set_short_answer(question, event.index, event.value)
    raise TypeError(f"Not a draft edit: {event!r}")


# =============================================================================
# MUTATION PAYLOADS
# =============================================================================


def build_create_input(question: Question) -> QuestionCreateInput:
    """Payload de criacao (alternativas apenas com texto e correcao)."""
    return QuestionCreateInput(
        type=question.type,
        prompt=question.prompt,
        concept=question.concept,
        options=[
            OptionCreateInput(text=option.text, is_correct=option.is_correct)
            for option in question.options
        ],
        correct_short_answers=list(question.correct_short_answers),
    )


def build_update_input(question: Question) -> QuestionUpdateInput:
    """Payload de atualizacao (alternativas identificadas pelos IDs)."""
    return QuestionUpdateInput(
        type=question.type,
        prompt=question.prompt,
        concept=question.concept,
        options=[
            OptionUpdateInput(
                where=OptionWhereUniqueInput(id=option.id),
                data=OptionUpdateData(text=option.text, is_correct=option.is_correct),
            )
            for option in question.options
        ],
        correct_short_answers=ShortAnswerSetInput(values=list(question.correct_short_answers)),
    )


# =============================================================================
# REDUCER
# =============================================================================


def reduce(state: EditorState, event: object) -> EditorState:
    """Compute the editor's next state.

    Events that do not apply to the current state return it unchanged.

    Args:
        state: Estado atual
        event: Evento de ``quiz.models.events``

    Returns:
        Novo estado (ou o mesmo objeto quando o evento nao se aplica)
    """
    if isinstance(event, ev.ExpandRequested):
        return Loading() if isinstance(state, Collapsed) else state

    if isinstance(event, ev.LoadSucceeded):
        if isinstance(state, Loading):
            return Expanded(draft=event.question)
        return state

    if isinstance(event, ev.LoadFailed):
        if isinstance(state, Loading):
            return Failed(message=f"Error loading question: {event.reason}")
        return state

    if isinstance(event, ev.NewDraftOpened):
        return Expanded(draft=event.question, is_new=True)

    if isinstance(event, ev.DRAFT_EDITS):
        if not isinstance(state, Expanded) or state.is_saving:
            return state
        try:
            draft = apply_edit(state.draft, event)
        except IndexError as e:
            logger.warning(f"Edicao ignorada: {e}")
            return state
        return replace(state, draft=draft, is_dirty=True)

    if isinstance(event, ev.SaveRejected):
        if isinstance(state, Expanded):
            return replace(state, notice=event.message)
        return state

    if isinstance(event, ev.SaveStarted):
        if isinstance(state, Expanded) and not state.is_saving:
            return replace(state, is_saving=True, notice=None)
        return state

    if isinstance(event, ev.SaveSucceeded):
        if isinstance(state, Expanded):
            return Collapsed(summary=summarize_prompt(event.question.prompt))
        return state

    if isinstance(event, ev.SaveFailed):
        if isinstance(state, Expanded):
            return replace(state, is_saving=False, notice=event.message)
        return state

    if isinstance(event, ev.Discarded):
        if isinstance(state, Expanded) and not state.is_saving:
            return Deleted() if state.is_new else Collapsed(summary=event.summary)
        return state

    if isinstance(event, ev.RemovedLocally):
        return Deleted()

    if isinstance(event, ev.DeleteStarted):
        if isinstance(state, (Collapsed, Expanded)):
            return Deleting(summary=event.summary)
        return state

    if isinstance(event, ev.DeleteSucceeded):
        return Deleted() if isinstance(state, Deleting) else state

    if isinstance(event, ev.DeleteFailed):
        if isinstance(state, Deleting):
            return Collapsed(summary=state.summary, notice=event.message)
        return state

    raise TypeError(f"Unknown editor event: {event!r}")
