"""Course Concept Engine - Agregacao de conceitos distintos de um curso."""

import logging
from collections.abc import Iterable
from typing import Any

logger = logging.getLogger(__name__)


class CourseConceptEngine:
    """Coleta os conceitos distintos usados nas questoes de um curso.

    Works on the nested read shape ``quizzes -> questions -> concept``.
    Concepts are trimmed, blank ones dropped, and comparison is
    case-sensitive ("Algebra" and "algebra" are two concepts). The result
    keeps first-seen order.

    Example:
        >>> engine = CourseConceptEngine()
        >>> engine.collect([{"questions": [{"concept": " Sets "}, {"concept": ""}]}])
        ['Sets']
    """

    def collect(self, quizzes: Iterable[Any]) -> list[str]:
        """Extrai conceitos distintos.

        Args:
            quizzes: Quizzes (dicts or objects) each exposing ``questions``,
                whose items expose ``concept``

        Returns:
            Lista de conceitos distintos, nao vazios
        """
        concepts: dict[str, None] = {}

        for quiz in quizzes:
            for question in self._field(quiz, "questions") or []:
                concept = (self._field(question, "concept") or "").strip()
                if concept:
                    concepts.setdefault(concept, None)

        logger.debug(f"{len(concepts)} conceitos encontrados")
        return list(concepts)

    @staticmethod
    def _field(item: Any, name: str) -> Any:
        if isinstance(item, dict):
            return item.get(name)
        return getattr(item, name, None)
