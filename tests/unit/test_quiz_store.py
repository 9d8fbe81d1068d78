# =============================================================================
# TESTES - Quiz Store Module
# =============================================================================
# Testes unitarios para persistencia SQLite (banco temporario por teste)
# =============================================================================

import sqlite3

import pytest


def _draft(text, question_type, *options):
    from quiz.models.domain import OptionDraft, QuestionDraft
    from quiz.models.enums import QuestionType

    return QuestionDraft(
        text=text,
        type=QuestionType(question_type),
        options=tuple(OptionDraft(text=t, is_correct=c) for t, c in options),
    )


def _count(db_path, table):
    conn = sqlite3.connect(db_path)
    try:
        return conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]
    finally:
        conn.close()


class TestQuizStoreSchema:
    """Testes para criacao de schema."""

    @pytest.mark.asyncio
    async def test_init_schema_creates_parent_dir(self, tmp_path):
        """Verifica que o diretorio do banco e criado."""
        from quiz.storage.quiz_store import QuizStore

        store = QuizStore(tmp_path / "nested" / "quiz.db")
        await store.init_schema()

        assert (tmp_path / "nested" / "quiz.db").exists()
        assert await store.ping() is True

    @pytest.mark.asyncio
    async def test_init_schema_idempotent(self, quiz_store):
        await quiz_store.init_schema()

        assert await quiz_store.ping() is True

    @pytest.mark.asyncio
    async def test_ping_without_schema(self, tmp_path):
        """Verifica ping em banco sem tabelas."""
        from quiz.storage.quiz_store import QuizStore

        store = QuizStore(tmp_path / "empty.db")

        assert await store.ping() is False


class TestQuizStoreQuizzes:
    """Testes para CRUD de quizzes."""

    @pytest.mark.asyncio
    async def test_create_and_get(self, quiz_store):
        """Verifica criacao e leitura."""
        quiz = await quiz_store.create_quiz("Capitais")

        loaded = await quiz_store.get_quiz(quiz.id)

        assert loaded.title == "Capitais"
        assert loaded.question_count == 0
        assert loaded.created_at == loaded.updated_at

    @pytest.mark.asyncio
    async def test_get_missing(self, quiz_store):
        assert await quiz_store.get_quiz("00000000-0000-4000-8000-000000000000") is None

    @pytest.mark.asyncio
    async def test_list_newest_first_with_counts(self, quiz_store):
        """Verifica ordem (mais recente primeiro) e contagem de perguntas."""
        first = await quiz_store.create_quiz("First")
        second = await quiz_store.create_quiz("Second")
        await quiz_store.create_question(
            first.id, _draft("Q", "TEXT", ("A", True))
        )

        quizzes = await quiz_store.list_quizzes()

        assert [q.id for q in quizzes] == [second.id, first.id]
        assert quizzes[1].question_count == 1
        assert quizzes[0].question_count == 0

    @pytest.mark.asyncio
    async def test_update(self, quiz_store):
        quiz = await quiz_store.create_quiz("Old")

        updated = await quiz_store.update_quiz(quiz.id, "New")

        assert updated.title == "New"
        assert updated.created_at == quiz.created_at

    @pytest.mark.asyncio
    async def test_update_missing(self, quiz_store):
        assert await quiz_store.update_quiz("missing", "New") is None

    @pytest.mark.asyncio
    async def test_delete_cascades(self, quiz_store, temp_db_path):
        """Verifica que perguntas e alternativas saem junto com o quiz."""
        quiz = await quiz_store.create_quiz("Cascade")
        await quiz_store.create_question(
            quiz.id, _draft("Q1", "SINGLE_CHOICE", ("A", True), ("B", False))
        )
        await quiz_store.create_question(quiz.id, _draft("Q2", "TEXT", ("Paris", True)))

        assert await quiz_store.delete_quiz(quiz.id) is True

        assert await quiz_store.get_quiz(quiz.id) is None
        assert _count(temp_db_path, "questions") == 0
        assert _count(temp_db_path, "options") == 0

    @pytest.mark.asyncio
    async def test_delete_missing(self, quiz_store):
        assert await quiz_store.delete_quiz("missing") is False


class TestQuizStoreQuestions:
    """Testes para perguntas e alternativas."""

    @pytest.mark.asyncio
    async def test_create_question_returns_typed_record(self, quiz_store):
        """Verifica variante da uniao e alternativas persistidas."""
        from quiz.models.domain import MultipleChoiceQuestion

        quiz = await quiz_store.create_quiz("Web")

        question = await quiz_store.create_question(
            quiz.id,
            _draft("Frameworks?", "MULTIPLE_CHOICE", ("React", True), ("Django", False), ("Vue", True)),
        )

        assert isinstance(question, MultipleChoiceQuestion)
        assert question.quiz_id == quiz.id
        assert [(o.text, o.is_correct) for o in question.options] == [
            ("React", True),
            ("Django", False),
            ("Vue", True),
        ]

    @pytest.mark.asyncio
    async def test_create_question_unknown_quiz(self, quiz_store):
        """Verifica erro de chave estrangeira."""
        from core.exceptions import StoreError

        with pytest.raises(StoreError) as exc_info:
            await quiz_store.create_question("missing", _draft("Q", "TEXT", ("A", True)))

        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_list_questions_in_creation_order(self, quiz_store):
        """Verifica ordem de criacao, estavel entre leituras."""
        quiz = await quiz_store.create_quiz("Ordem")
        ids = []
        for i in range(5):
            question = await quiz_store.create_question(
                quiz.id, _draft(f"Q{i}", "TEXT", (f"A{i}", True))
            )
            ids.append(question.id)

        first = await quiz_store.list_questions(quiz.id)
        second = await quiz_store.list_questions(quiz.id)

        assert [q.id for q in first] == ids
        assert first == second

    @pytest.mark.asyncio
    async def test_list_questions_scoped_to_quiz(self, quiz_store):
        quiz_a = await quiz_store.create_quiz("A")
        quiz_b = await quiz_store.create_quiz("B")
        await quiz_store.create_question(quiz_a.id, _draft("QA", "TEXT", ("A", True)))

        assert await quiz_store.list_questions(quiz_b.id) == []

    @pytest.mark.asyncio
    async def test_get_question_missing(self, quiz_store):
        assert await quiz_store.get_question("missing") is None

    @pytest.mark.asyncio
    async def test_replace_question(self, quiz_store, temp_db_path):
        """Verifica troca de tipo e substituicao completa das alternativas."""
        from quiz.models.domain import TextQuestion

        quiz = await quiz_store.create_quiz("Replace")
        question = await quiz_store.create_question(
            quiz.id, _draft("Old", "SINGLE_CHOICE", ("A", True), ("B", False))
        )
        old_ids = {opt.id for opt in question.options}

        replaced = await quiz_store.replace_question(
            question.id, _draft("Capital of France?", "TEXT", ("Paris", True))
        )

        assert isinstance(replaced, TextQuestion)
        assert replaced.text == "Capital of France?"
        assert [opt.text for opt in replaced.options] == ["Paris"]
        assert old_ids.isdisjoint({opt.id for opt in replaced.options})
        assert _count(temp_db_path, "options") == 1

    @pytest.mark.asyncio
    async def test_replace_question_missing(self, quiz_store):
        result = await quiz_store.replace_question("missing", _draft("Q", "TEXT", ("A", True)))

        assert result is None

    @pytest.mark.asyncio
    async def test_replace_question_rolls_back_on_failure(self, quiz_store):
        """Verifica que falha no meio da troca preserva as alternativas antigas."""
        from core.exceptions import StoreError

        quiz = await quiz_store.create_quiz("Rollback")
        question = await quiz_store.create_question(
            quiz.id, _draft("Q", "SINGLE_CHOICE", ("A", True), ("B", False))
        )

        # NULL viola NOT NULL em options.text depois do DELETE ja executado
        with pytest.raises(StoreError):
            await quiz_store.replace_question(
                question.id, _draft("Q2", "SINGLE_CHOICE", (None, True))
            )

        loaded = await quiz_store.get_question(question.id)
        assert loaded.text == "Q"
        assert [opt.text for opt in loaded.options] == ["A", "B"]

    @pytest.mark.asyncio
    async def test_delete_question_cascades_options(self, quiz_store, temp_db_path):
        quiz = await quiz_store.create_quiz("Delete")
        question = await quiz_store.create_question(
            quiz.id, _draft("Q", "MULTIPLE_CHOICE", ("A", True), ("B", True))
        )

        assert await quiz_store.delete_question(question.id) is True
        assert await quiz_store.get_question(question.id) is None
        assert _count(temp_db_path, "options") == 0
        assert await quiz_store.delete_question(question.id) is False
