# quiz_store.py
import logging
from datetime import datetime
from typing import List

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from quizhost import models
from quizhost.db import Database
from quizhost.errors import Conflict, NotFound, StoreError
from quizhost.schemas import QuizCreate, QuizOut, parse

logger = logging.getLogger(__name__)

class QuizStore:
    """Quizzes keyed by their caller-chosen id.

    Only ``is_active`` can change after a quiz is created; there is no
    update path for title or questions.
    """

    def __init__(self, database: Database):
        self.database = database

    def create(self, quiz) -> None:
        data = parse(QuizCreate, quiz)

        row = models.Quiz(
            id=data.id,
            title=data.title,
            questions=[q.model_dump(by_alias=True) for q in data.questions],
            time_per_question_seconds=data.time_per_question_seconds,
            created_at=data.created_at or datetime.utcnow(),
            is_active=data.is_active,
        )
        with self.database.get_session() as db:
            try:
                db.add(row)
                db.commit()
            except IntegrityError as e:
                db.rollback()
                raise Conflict(f"Quiz '{data.id}' already exists") from e
            except SQLAlchemyError as e:
                db.rollback()
                logger.exception("Error inserting quiz %s", data.id)
                raise StoreError("Failed to create quiz") from e
        logger.info("Quiz %s created (%d questions)", data.id, len(data.questions))

    def get(self, quiz_id: str) -> QuizOut:
        with self.database.get_session() as db:
            try:
                row = db.get(models.Quiz, quiz_id)
            except SQLAlchemyError as e:
                logger.exception("Error fetching quiz %s", quiz_id)
                raise StoreError("Failed to fetch quiz") from e
            if row is None:
                raise NotFound("Quiz not found")
            return QuizOut.model_validate(row)

    def list_all(self) -> List[QuizOut]:
        # id breaks ties between quizzes created in the same instant
        return self._select(order_by=(models.Quiz.created_at.desc(), models.Quiz.id))

    def list_active(self) -> List[QuizOut]:
        return self._select(models.Quiz.is_active.is_(True), order_by=(models.Quiz.id,))

    def set_active(self, quiz_id: str, active: bool) -> None:
        with self.database.get_session() as db:
            try:
                # rowcount is rows matched, so re-applying the same value still counts
                matched = (
                    db.query(models.Quiz)
                    .filter(models.Quiz.id == quiz_id)
                    .update({models.Quiz.is_active: bool(active)}, synchronize_session=False)
                )
                db.commit()
            except SQLAlchemyError as e:
                db.rollback()
                logger.exception("Error updating quiz status %s", quiz_id)
                raise StoreError("Failed to update quiz status") from e
        if matched == 0:
            raise NotFound("Quiz not found")
        logger.info("Quiz %s is_active=%s", quiz_id, bool(active))

    def delete(self, quiz_id: str) -> None:
        with self.database.get_session() as db:
            try:
                deleted = (
                    db.query(models.Quiz)
                    .filter(models.Quiz.id == quiz_id)
                    .delete(synchronize_session=False)
                )
                db.commit()
            except SQLAlchemyError as e:
                db.rollback()
                logger.exception("Error deleting quiz %s", quiz_id)
                raise StoreError("Failed to delete quiz") from e
        if deleted == 0:
            raise NotFound("Quiz not found")
        logger.info("Quiz %s deleted", quiz_id)

    def _select(self, *criteria, order_by) -> List[QuizOut]:
        with self.database.get_session() as db:
            try:
                rows = db.query(models.Quiz).filter(*criteria).order_by(*order_by).all()
            except SQLAlchemyError as e:
                logger.exception("Error fetching quizzes")
                raise StoreError("Failed to fetch quizzes") from e
            return [QuizOut.model_validate(r) for r in rows]
