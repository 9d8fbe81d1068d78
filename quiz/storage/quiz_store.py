"""Quiz Store - Persistencia de quizzes, perguntas e alternativas em SQLite."""

from __future__ import annotations

import sqlite3
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path

from core.exceptions import StoreError
from core.logger import get_logger

from ..models.domain import (
    OptionRecord,
    QuestionDraft,
    QuestionWithOptions,
    QuizRecord,
    build_question,
)

logger = get_logger("store")

SCHEMA = """
CREATE TABLE IF NOT EXISTS quizzes (
    id TEXT PRIMARY KEY,
    title TEXT NOT NULL,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS questions (
    id TEXT PRIMARY KEY,
    quiz_id TEXT NOT NULL REFERENCES quizzes(id) ON DELETE CASCADE,
    text TEXT NOT NULL,
    type TEXT NOT NULL CHECK (type IN ('SINGLE_CHOICE', 'MULTIPLE_CHOICE', 'TEXT')),
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS options (
    id TEXT PRIMARY KEY,
    question_id TEXT NOT NULL REFERENCES questions(id) ON DELETE CASCADE,
    text TEXT NOT NULL,
    is_correct INTEGER NOT NULL DEFAULT 0,
    position INTEGER NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_questions_quiz ON questions(quiz_id);
CREATE INDEX IF NOT EXISTS idx_options_question ON options(question_id);
"""


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _new_id() -> str:
    return str(uuid.uuid4())


class QuizStore:
    """Persistencia relacional de quizzes sobre SQLite.

    Uma conexao por operacao; chaves estrangeiras com ``ON DELETE CASCADE``
    (quiz -> perguntas -> alternativas). Erros do driver viram ``StoreError``,
    sem retry.

    Example:
        >>> store = QuizStore("data/quiz.db")
        >>> await store.init_schema()
        >>> quiz = await store.create_quiz("Capitais")
        >>> loaded = await store.get_quiz(quiz.id)
    """

    def __init__(self, db_path: str | Path):
        """Inicializa store apontando para o arquivo SQLite.

        Args:
            db_path: Caminho do banco (diretorio pai e criado se preciso)
        """
        self.db_path = Path(db_path)

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        """Abre conexao com FKs ligadas e traduz erros do driver."""
        conn = None
        try:
            conn = sqlite3.connect(self.db_path)
            conn.row_factory = sqlite3.Row
            conn.execute("PRAGMA foreign_keys = ON")
            yield conn
        except sqlite3.IntegrityError as e:
            logger.error(f"Violacao de integridade no banco: {e}")
            if "FOREIGN KEY" in str(e):
                raise StoreError(
                    "Foreign key constraint failed", status_code=400, details={"error": str(e)}
                ) from e
            raise StoreError(
                "A record with this data already exists", status_code=409, details={"error": str(e)}
            ) from e
        except sqlite3.Error as e:
            logger.error(f"Erro de banco de dados: {e}")
            raise StoreError("Database error occurred", details={"error": str(e)}) from e
        finally:
            if conn is not None:
                conn.close()

    # =========================================================================
    # Schema
    # =========================================================================

    async def init_schema(self) -> None:
        """Cria tabelas se nao existirem."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        with self._connect() as conn:
            conn.executescript(SCHEMA)
        logger.info(f"Schema inicializado: {self.db_path}")

    async def ping(self) -> bool:
        """Readiness check: banco acessivel e schema presente."""
        with self._connect() as conn:
            row = conn.execute(
                "SELECT COUNT(*) FROM sqlite_master WHERE type = 'table' AND name = 'quizzes'"
            ).fetchone()
        return bool(row[0])

    # =========================================================================
    # Quizzes
    # =========================================================================

    @staticmethod
    def _quiz_from_row(row: sqlite3.Row) -> QuizRecord:
        return QuizRecord(
            id=row["id"],
            title=row["title"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
            question_count=row["question_count"],
        )

    _QUIZ_SELECT = """
        SELECT z.id, z.title, z.created_at, z.updated_at,
               (SELECT COUNT(*) FROM questions q WHERE q.quiz_id = z.id) AS question_count
        FROM quizzes z
    """

    async def create_quiz(self, title: str) -> QuizRecord:
        quiz_id = _new_id()
        now = _now()
        with self._connect() as conn:
            with conn:
                conn.execute(
                    "INSERT INTO quizzes (id, title, created_at, updated_at) VALUES (?, ?, ?, ?)",
                    (quiz_id, title, now, now),
                )
        logger.debug(f"Quiz inserido: {quiz_id}")
        return QuizRecord(id=quiz_id, title=title, created_at=now, updated_at=now)

    async def list_quizzes(self) -> list[QuizRecord]:
        """Lista quizzes, mais recentes primeiro."""
        with self._connect() as conn:
            rows = conn.execute(
                self._QUIZ_SELECT + " ORDER BY z.created_at DESC, z.rowid DESC"
            ).fetchall()
        return [self._quiz_from_row(row) for row in rows]

    async def get_quiz(self, quiz_id: str) -> QuizRecord | None:
        """Busca quiz por ID.

        Returns:
            QuizRecord se encontrado, None caso contrario
        """
        with self._connect() as conn:
            row = conn.execute(self._QUIZ_SELECT + " WHERE z.id = ?", (quiz_id,)).fetchone()
        return self._quiz_from_row(row) if row else None

    async def update_quiz(self, quiz_id: str, title: str) -> QuizRecord | None:
        with self._connect() as conn:
            with conn:
                cursor = conn.execute(
                    "UPDATE quizzes SET title = ?, updated_at = ? WHERE id = ?",
                    (title, _now(), quiz_id),
                )
            if cursor.rowcount == 0:
                return None
            row = conn.execute(self._QUIZ_SELECT + " WHERE z.id = ?", (quiz_id,)).fetchone()
        return self._quiz_from_row(row)

    async def delete_quiz(self, quiz_id: str) -> bool:
        """Remove quiz; perguntas e alternativas saem em cascata."""
        with self._connect() as conn:
            with conn:
                cursor = conn.execute("DELETE FROM quizzes WHERE id = ?", (quiz_id,))
        return cursor.rowcount > 0

    # =========================================================================
    # Questions
    # =========================================================================

    @staticmethod
    def _insert_options(
        conn: sqlite3.Connection, question_id: str, draft: QuestionDraft
    ) -> None:
        conn.executemany(
            "INSERT INTO options (id, question_id, text, is_correct, position) "
            "VALUES (?, ?, ?, ?, ?)",
            [
                (_new_id(), question_id, opt.text, int(opt.is_correct), position)
                for position, opt in enumerate(draft.options)
            ],
        )

    @staticmethod
    def _load_questions(
        conn: sqlite3.Connection, where: str, params: tuple
    ) -> list[QuestionWithOptions]:
        """Carrega perguntas + alternativas em ordem de criacao."""
        question_rows = conn.execute(
            "SELECT id, quiz_id, text, type, created_at, updated_at FROM questions "
            f"WHERE {where} ORDER BY rowid",
            params,
        ).fetchall()
        if not question_rows:
            return []

        ids = [row["id"] for row in question_rows]
        placeholders = ", ".join("?" for _ in ids)
        option_rows = conn.execute(
            "SELECT id, question_id, text, is_correct FROM options "
            f"WHERE question_id IN ({placeholders}) ORDER BY position, rowid",
            ids,
        ).fetchall()

        options_by_question: dict[str, list[OptionRecord]] = {qid: [] for qid in ids}
        for row in option_rows:
            options_by_question[row["question_id"]].append(
                OptionRecord(id=row["id"], text=row["text"], is_correct=bool(row["is_correct"]))
            )

        return [
            build_question(
                row["type"],
                id=row["id"],
                quiz_id=row["quiz_id"],
                text=row["text"],
                options=options_by_question[row["id"]],
                created_at=row["created_at"],
                updated_at=row["updated_at"],
            )
            for row in question_rows
        ]

    async def create_question(self, quiz_id: str, draft: QuestionDraft) -> QuestionWithOptions:
        """Insere pergunta e alternativas numa unica transacao."""
        question_id = _new_id()
        now = _now()
        with self._connect() as conn:
            with conn:
                conn.execute(
                    "INSERT INTO questions (id, quiz_id, text, type, created_at, updated_at) "
                    "VALUES (?, ?, ?, ?, ?, ?)",
                    (question_id, quiz_id, draft.text, draft.type.value, now, now),
                )
                self._insert_options(conn, question_id, draft)
            (question,) = self._load_questions(conn, "id = ?", (question_id,))
        logger.debug(f"Pergunta inserida: {question_id} ({len(draft.options)} alternativas)")
        return question

    async def list_questions(self, quiz_id: str) -> list[QuestionWithOptions]:
        """Todas as perguntas do quiz, com ``is_correct`` em cada alternativa."""
        with self._connect() as conn:
            return self._load_questions(conn, "quiz_id = ?", (quiz_id,))

    async def get_question(self, question_id: str) -> QuestionWithOptions | None:
        with self._connect() as conn:
            questions = self._load_questions(conn, "id = ?", (question_id,))
        return questions[0] if questions else None

    async def replace_question(
        self, question_id: str, draft: QuestionDraft
    ) -> QuestionWithOptions | None:
        """Atualiza pergunta e substitui todas as alternativas.

        DELETE + UPDATE + INSERT na mesma transacao: leitores concorrentes
        nunca veem a pergunta sem alternativas.

        Returns:
            Pergunta atualizada, ou None se nao existir
        """
        with self._connect() as conn:
            with conn:
                cursor = conn.execute(
                    "UPDATE questions SET text = ?, type = ?, updated_at = ? WHERE id = ?",
                    (draft.text, draft.type.value, _now(), question_id),
                )
                if cursor.rowcount == 0:
                    return None
                conn.execute("DELETE FROM options WHERE question_id = ?", (question_id,))
                self._insert_options(conn, question_id, draft)
            (question,) = self._load_questions(conn, "id = ?", (question_id,))
        return question

    async def delete_question(self, question_id: str) -> bool:
        """Remove pergunta; alternativas saem em cascata."""
        with self._connect() as conn:
            with conn:
                cursor = conn.execute("DELETE FROM questions WHERE id = ?", (question_id,))
        return cursor.rowcount > 0
