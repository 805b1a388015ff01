# =============================================================================
# TESTES - Draft Engine Module
# =============================================================================
# Testes unitarios para mutacoes do rascunho e reducer do editor
# =============================================================================

import pytest


class TestPlaceholders:
    """Testes para IDs temporarios e rascunho novo."""

    @pytest.mark.parametrize("question_id", ["_new", "_new0", "_new12", "_new3abc"])
    def test_placeholder_ids(self, question_id):
        """IDs com prefixo _new seguido de digitos sao placeholders."""
        from quiz.engine.draft_engine import is_placeholder_id

        assert is_placeholder_id(question_id) is True

    @pytest.mark.parametrize("question_id", ["abc", "new0", "x_new0", ""])
    def test_persisted_ids(self, question_id):
        from quiz.engine.draft_engine import is_placeholder_id

        assert is_placeholder_id(question_id) is False

    def test_new_draft_has_eight_blank_options(self):
        """Rascunho novo: 8 alternativas vazias, nenhuma correta."""
        from quiz.engine.draft_engine import new_question_draft
        from quiz.models import QuestionType

        draft = new_question_draft("_new0")

        assert draft.id == "_new0"
        assert draft.prompt == ""
        assert draft.concept == ""
        assert draft.type == QuestionType.MULTIPLE_CHOICE
        assert [o.id for o in draft.options] == [f"_newOption{i}" for i in range(1, 9)]
        assert all(o.text == "" and not o.is_correct for o in draft.options)
        assert draft.correct_short_answers == []

    def test_summarize_prompt_strips_markup(self):
        from quiz.engine.draft_engine import summarize_prompt

        assert summarize_prompt("<p>What is <b>2 &amp; 2</b>?</p>") == "What is 2 & 2 ?"
        assert summarize_prompt(None) == ""


class TestDraftMutations:
    """Testes para mutacoes puras do rascunho."""

    def test_mark_correct_keeps_single_correct(self, sample_question):
        """Marcar outra alternativa desmarca a anterior."""
        from quiz.engine.draft_engine import mark_correct

        updated = mark_correct(sample_question, 1)

        assert [o.is_correct for o in updated.options] == [False, True, False]
        # Snapshot anterior intacto
        assert [o.is_correct for o in sample_question.options] == [True, False, False]

    def test_mark_correct_out_of_range(self, sample_question):
        from quiz.engine.draft_engine import mark_correct

        with pytest.raises(IndexError):
            mark_correct(sample_question, 3)

    def test_set_option_text_only_touches_one_option(self, sample_question):
        from quiz.engine.draft_engine import set_option_text

        updated = set_option_text(sample_question, 2, "{1}")

        assert [o.text for o in updated.options] == ["{}", "{0}", "{1}"]
        assert [o.id for o in updated.options] == ["option-1", "option-2", "option-3"]
        assert updated.options[0] is sample_question.options[0]

    def test_set_option_text_negative_index(self, sample_question):
        from quiz.engine.draft_engine import set_option_text

        with pytest.raises(IndexError):
            set_option_text(sample_question, -1, "x")

    def test_short_answer_empty_value_removes_slot(self, sample_short_answer_question):
        """Valor vazio remove a resposta."""
        from quiz.engine.draft_engine import set_short_answer

        updated = set_short_answer(sample_short_answer_question, 0, "")

        assert updated.correct_short_answers == ["negation"]

    def test_short_answer_trailing_slot_appends(self, sample_short_answer_question):
        from quiz.engine.draft_engine import set_short_answer

        updated = set_short_answer(sample_short_answer_question, 2, "¬")

        assert updated.correct_short_answers == ["not", "negation", "¬"]

    def test_short_answer_trailing_slot_empty_is_noop(self, sample_short_answer_question):
        from quiz.engine.draft_engine import set_short_answer

        updated = set_short_answer(sample_short_answer_question, 2, "")

        assert updated.correct_short_answers == ["not", "negation"]

    def test_short_answer_replace(self, sample_short_answer_question):
        from quiz.engine.draft_engine import set_short_answer

        updated = set_short_answer(sample_short_answer_question, 1, "NOT")

        assert updated.correct_short_answers == ["not", "NOT"]

    def test_short_answer_whitespace_is_kept(self, sample_short_answer_question):
        """Apenas string vazia remove; espacos ficam ate a validacao."""
        from quiz.engine.draft_engine import set_short_answer

        updated = set_short_answer(sample_short_answer_question, 0, "  ")

        assert updated.correct_short_answers == ["  ", "negation"]

    def test_short_answer_out_of_range(self, sample_short_answer_question):
        from quiz.engine.draft_engine import set_short_answer

        with pytest.raises(IndexError):
            set_short_answer(sample_short_answer_question, 5, "x")

    def test_set_type_switches_without_dropping_data(self, sample_question):
        from quiz.engine.draft_engine import set_type
        from quiz.models import QuestionType

        updated = set_type(sample_question, "SHORT_ANSWER")

        assert updated.type == QuestionType.SHORT_ANSWER
        assert updated.options == sample_question.options


class TestMutationPayloads:
    """Testes para montagem dos payloads de create/update."""

    def test_create_input_drops_option_ids(self, sample_question):
        from quiz.engine.draft_engine import build_create_input

        payload = build_create_input(sample_question).model_dump(mode="json", by_alias=True)

        assert payload["prompt"] == sample_question.prompt
        assert payload["type"] == "MULTIPLE_CHOICE"
        assert payload["options"][0] == {"text": "{}", "isCorrect": True}
        assert "id" not in payload["options"][0]
        assert payload["correctShortAnswers"] == []

    def test_update_input_keys_options_by_id(self, sample_short_answer_question, sample_question):
        from quiz.engine.draft_engine import build_update_input

        payload = build_update_input(sample_question).model_dump(mode="json", by_alias=True)

        assert payload["options"][1] == {
            "where": {"id": "option-2"},
            "data": {"text": "{0}", "isCorrect": False},
        }
        short = build_update_input(sample_short_answer_question).model_dump(
            mode="json", by_alias=True
        )
        assert short["correctShortAnswers"] == {"set": ["not", "negation"]}


class TestReducer:
    """Testes para transicoes de estado do editor."""

    def test_expand_from_collapsed_loads(self):
        from quiz.engine.draft_engine import reduce
        from quiz.models import events as ev
        from quiz.models.state import Collapsed, Loading

        assert isinstance(reduce(Collapsed("x"), ev.ExpandRequested()), Loading)

    def test_expand_ignored_when_expanded(self, sample_question):
        from quiz.engine.draft_engine import reduce
        from quiz.models import events as ev
        from quiz.models.state import Expanded

        state = Expanded(draft=sample_question)

        assert reduce(state, ev.ExpandRequested()) is state

    def test_load_success_and_failure(self, sample_question):
        from quiz.engine.draft_engine import reduce
        from quiz.models import events as ev
        from quiz.models.state import Expanded, Failed, Loading

        loaded = reduce(Loading(), ev.LoadSucceeded(sample_question))
        failed = reduce(Loading(), ev.LoadFailed("boom"))

        assert isinstance(loaded, Expanded)
        assert loaded.draft == sample_question
        assert loaded.is_dirty is False
        assert failed == Failed(message="Error loading question: boom")

    def test_edit_marks_dirty(self, sample_question):
        from quiz.engine.draft_engine import reduce
        from quiz.models import events as ev
        from quiz.models.state import Expanded

        state = reduce(Expanded(draft=sample_question), ev.PromptChanged("New prompt"))

        assert state.draft.prompt == "New prompt"
        assert state.is_dirty is True

    def test_edit_ignored_while_saving(self, sample_question):
        from quiz.engine.draft_engine import reduce
        from quiz.models import events as ev
        from quiz.models.state import Expanded

        state = Expanded(draft=sample_question, is_saving=True)

        assert reduce(state, ev.ConceptChanged("Other")) is state

    def test_invalid_index_edit_is_ignored(self, sample_question, capture_logs):
        from quiz.engine.draft_engine import reduce
        from quiz.models import events as ev
        from quiz.models.state import Expanded

        state = Expanded(draft=sample_question)

        assert reduce(state, ev.CorrectOptionChosen(10)) is state
        assert "Edicao ignorada" in capture_logs.text

    def test_save_cycle(self, sample_question):
        from quiz.engine.draft_engine import reduce
        from quiz.models import events as ev
        from quiz.models.state import Collapsed, Expanded

        state = Expanded(draft=sample_question, is_dirty=True, notice="old")
        state = reduce(state, ev.SaveStarted())
        assert state.is_saving is True
        assert state.notice is None

        failed = reduce(state, ev.SaveFailed("nope"))
        assert failed.is_saving is False
        assert failed.notice == "nope"
        assert failed.draft == sample_question

        saved = reduce(state, ev.SaveSucceeded(sample_question))
        assert saved == Collapsed(summary="Which set is empty?")

    def test_save_rejected_sets_notice(self, sample_question):
        from quiz.engine.draft_engine import reduce
        from quiz.models import events as ev
        from quiz.models.state import Expanded

        state = reduce(Expanded(draft=sample_question), ev.SaveRejected("bad"))

        assert state.notice == "bad"
        assert state.is_saving is False

    def test_discard_new_removes(self, sample_question):
        from quiz.engine.draft_engine import reduce
        from quiz.models import events as ev
        from quiz.models.state import Collapsed, Deleted, Expanded

        assert isinstance(reduce(Expanded(sample_question, is_new=True), ev.Discarded()), Deleted)
        assert reduce(Expanded(sample_question), ev.Discarded("Old")) == Collapsed(summary="Old")

    def test_discard_ignored_while_saving(self, sample_question):
        from quiz.engine.draft_engine import reduce
        from quiz.models import events as ev
        from quiz.models.state import Expanded

        state = Expanded(sample_question, is_new=True, is_saving=True)

        assert reduce(state, ev.Discarded()) is state

    def test_delete_cycle(self):
        from quiz.engine.draft_engine import reduce
        from quiz.models import events as ev
        from quiz.models.state import Collapsed, Deleted, Deleting

        deleting = reduce(Collapsed("Q"), ev.DeleteStarted("Q"))
        assert deleting == Deleting(summary="Q")
        assert isinstance(reduce(deleting, ev.DeleteSucceeded()), Deleted)
        assert reduce(deleting, ev.DeleteFailed("err")) == Collapsed(summary="Q", notice="err")

    def test_delete_started_ignored_while_loading(self):
        from quiz.engine.draft_engine import reduce
        from quiz.models import events as ev
        from quiz.models.state import Loading

        state = Loading()

        assert reduce(state, ev.DeleteStarted("Q")) is state

    def test_unknown_event(self):
        from quiz.engine.draft_engine import reduce
        from quiz.models.state import Collapsed

        with pytest.raises(TypeError):
            reduce(Collapsed(), object())
