# =============================================================================
# TESTES - Course Concept Engine
# =============================================================================

from types import SimpleNamespace


class TestCourseConceptEngine:
    """Testes para agregacao de conceitos."""

    def test_collect_trims_dedupes_and_drops_blank(self):
        from quiz.engine.concept_engine import CourseConceptEngine

        quizzes = [
            {"questions": [{"concept": " Sets "}, {"concept": "Logic"}, {"concept": ""}]},
            {"questions": [{"concept": "Sets"}, {"concept": "   "}, {"concept": None}]},
        ]

        assert CourseConceptEngine().collect(quizzes) == ["Sets", "Logic"]

    def test_collect_is_case_sensitive(self):
        from quiz.engine.concept_engine import CourseConceptEngine

        quizzes = [{"questions": [{"concept": "Algebra"}, {"concept": "algebra"}]}]

        assert CourseConceptEngine().collect(quizzes) == ["Algebra", "algebra"]

    def test_collect_accepts_objects(self):
        """Aceita objetos com atributos alem de dicts."""
        from quiz.engine.concept_engine import CourseConceptEngine

        quiz = SimpleNamespace(questions=[SimpleNamespace(concept="Graphs")])

        assert CourseConceptEngine().collect([quiz]) == ["Graphs"]

    def test_collect_empty(self):
        from quiz.engine.concept_engine import CourseConceptEngine

        assert CourseConceptEngine().collect([]) == []
        assert CourseConceptEngine().collect([{"questions": None}]) == []
