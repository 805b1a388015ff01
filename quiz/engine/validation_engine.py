"""Question Validation Engine - Regras de validacao antes de salvar."""

from ..models.enums import QuestionType
from ..models.schemas import Question


def _is_blank(text: str | None) -> bool:
    return text is None or text.strip() == ""


class QuestionValidationEngine:
    """Valida um rascunho de questao antes de qualquer chamada de rede.

    Rules are evaluated in order and the first failure wins:
        1. Prompt non-blank
        2. Concept non-blank
        3. Multiple choice: 2+ non-blank options, one marked correct,
           and the correct option itself non-blank
        4. Short answer: at least one non-blank accepted answer

    Example:
        >>> engine = QuestionValidationEngine()
        >>> engine.validate(Question(id="_new0"))
        'Please enter a prompt for this question'
    """

    PROMPT_REQUIRED = "Please enter a prompt for this question"
    CONCEPT_REQUIRED = "Please enter a concept for this question"
    TOO_FEW_OPTIONS = "The question must have 2 or more non-blank options"
    NO_CORRECT_OPTION = (
        "There must be a correct option "
        "(choose with the radio button to the left of the option)."
    )
    CORRECT_OPTION_BLANK = "The correct option must not be blank"
    NO_SHORT_ANSWER = "There must be at least one non-blank correct short answer."

    MIN_OPTIONS = 2

    def validate(self, question: Question) -> str | None:
        """Valida a questao.

        Args:
            question: Rascunho a validar

        Returns:
            None se valida, ou a mensagem do primeiro erro encontrado
        """
        if _is_blank(question.prompt):
            return self.PROMPT_REQUIRED

        if _is_blank(question.concept):
            return self.CONCEPT_REQUIRED

        if question.type == QuestionType.MULTIPLE_CHOICE:
            return self._validate_options(question)

        if question.type == QuestionType.SHORT_ANSWER:
            if not any(not _is_blank(answer) for answer in question.correct_short_answers):
                return self.NO_SHORT_ANSWER

        return None

    def is_valid(self, question: Question) -> bool:
        return self.validate(question) is None

    def _validate_options(self, question: Question) -> str | None:
        non_blank = 0
        has_correct = False
        correct_blank = False

        for option in question.options:
            blank = _is_blank(option.text)
            if not blank:
                non_blank += 1
            if option.is_correct:
                has_correct = True
                if blank:
                    correct_blank = True

        if non_blank < self.MIN_OPTIONS:
            return self.TOO_FEW_OPTIONS
        if not has_correct:
            return self.NO_CORRECT_OPTION
        if correct_blank:
            return self.CORRECT_OPTION_BLANK
        return None
