# models.py
from datetime import datetime
from sqlalchemy import Boolean, Column, Integer, String, Text, DateTime, JSON
from quizhost.db import Base

class Quiz(Base):
    __tablename__ = "quizzes"

    # caller-chosen id; the primary key is what rejects duplicate creates
    id = Column(String(255), primary_key=True)
    title = Column(String(512), nullable=False)
    questions = Column(JSON, nullable=False)   # [{"prompt", "options", "correctOptionIndex"}, ...]
    time_per_question_seconds = Column(Integer, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    is_active = Column(Boolean, default=False, nullable=False, index=True)

class Result(Base):
    __tablename__ = "results"
    # never reuse ids of deleted rows
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    participant_name = Column(Text, nullable=False)
    # no ForeignKey: results may outlive (or predate) their quiz
    quiz_id = Column(String(255), nullable=False, index=True)
    score = Column(Integer, nullable=False)
    total_questions = Column(Integer, nullable=False)
    completed_at = Column(String(64), nullable=False)
    total_time_spent_seconds = Column(Integer, nullable=False, default=0)
