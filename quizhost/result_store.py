# result_store.py
import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError

from quizhost import models
from quizhost.db import Database
from quizhost.errors import StoreError
from quizhost.schemas import ResultCreate, ResultOut, parse

logger = logging.getLogger(__name__)

class ResultStore:
    """Append-only participant results. The quiz id is not checked against QuizStore."""

    def __init__(self, database: Database):
        self.database = database

    def submit(self, result) -> int:
        """Append one attempt and return its id. Retakes add new rows."""
        data = parse(ResultCreate, result)

        with self.database.get_session() as db:
            row = models.Result(
                participant_name=data.participant_name,
                quiz_id=data.quiz_id,
                score=data.score,
                total_questions=data.total_questions,
                completed_at=data.completed_at,
                total_time_spent_seconds=data.total_time_spent_seconds,
            )
            try:
                db.add(row)
                db.commit()
            except SQLAlchemyError as e:
                db.rollback()
                logger.exception("Error inserting result for quiz %s", data.quiz_id)
                raise StoreError("Failed to submit result") from e
            result_id = row.id

        logger.info(
            "Result %s submitted for quiz %s: %s scored %d/%d",
            result_id, data.quiz_id, data.participant_name, data.score, data.total_questions,
        )
        return result_id

    def list_for_quiz(self, quiz_id: str) -> List[ResultOut]:
        """Leaderboard: highest score first, faster total time breaks ties, then submission order."""
        with self.database.get_session() as db:
            try:
                rows = (
                    db.query(models.Result)
                    .filter(models.Result.quiz_id == quiz_id)
                    .order_by(
                        models.Result.score.desc(),
                        models.Result.total_time_spent_seconds.asc(),
                        models.Result.id.asc(),
                    )
                    .all()
                )
            except SQLAlchemyError as e:
                logger.exception("Error fetching results for quiz %s", quiz_id)
                raise StoreError("Failed to fetch results") from e
            return [ResultOut.model_validate(r) for r in rows]
