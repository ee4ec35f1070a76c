# schemas.py
from datetime import datetime, timezone
from typing import Annotated, List, Optional

from pydantic import (
    AfterValidator,
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
    model_validator,
)
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from quizhost.errors import ValidationError

def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value

NonBlankStr = Annotated[str, AfterValidator(_not_blank)]

# ints go into 64-bit INTEGER columns; JSON true/false are not numbers here
MAX_STORED_INT = 2**63 - 1
StoredInt = Annotated[int, Field(strict=True, le=MAX_STORED_INT)]

class CamelModel(BaseModel):
    # JSON is camelCase, python attributes (and ORM columns) are snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

class Question(CamelModel):
    # "question" / "correctAnswer" are what older admin clients send
    prompt: str = Field(alias="prompt", validation_alias=AliasChoices("prompt", "question"))
    options: List[str] = Field(min_length=2)
    correct_option_index: StoredInt = Field(
        ge=0,
        alias="correctOptionIndex",
        validation_alias=AliasChoices("correctOptionIndex", "correct_option_index", "correctAnswer"),
    )

    @model_validator(mode="after")
    def _index_in_range(self):
        if self.correct_option_index >= len(self.options):
            raise ValueError(
                f"correctOptionIndex {self.correct_option_index} is out of range for {len(self.options)} options"
            )
        return self

class QuizCreate(CamelModel):
    id: NonBlankStr
    title: NonBlankStr
    questions: List[Question] = Field(min_length=1)
    time_per_question_seconds: StoredInt = Field(
        gt=0,
        alias="timePerQuestionSeconds",
        validation_alias=AliasChoices("timePerQuestionSeconds", "time_per_question_seconds", "timePerQuestion"),
    )
    created_at: Optional[datetime] = None
    is_active: bool = False

    @field_validator("created_at")
    @classmethod
    def _to_naive_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        # the database keeps naive UTC, so compare and sort in that form
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value

class QuizOut(QuizCreate):
    created_at: datetime

    @field_serializer("created_at")
    def _iso_z(self, value: datetime) -> str:
        return value.isoformat() + "Z"

class StatusUpdate(CamelModel):
    is_active: bool

class ResultCreate(CamelModel):
    participant_name: NonBlankStr
    quiz_id: NonBlankStr
    score: StoredInt = Field(ge=0)
    total_questions: StoredInt = Field(gt=0)
    completed_at: NonBlankStr
    total_time_spent_seconds: StoredInt = Field(
        default=0,
        ge=0,
        alias="totalTimeSpentSeconds",
        validation_alias=AliasChoices("totalTimeSpentSeconds", "total_time_spent_seconds", "totalTimeSpent"),
    )

    @field_validator("total_time_spent_seconds", mode="before")
    @classmethod
    def _missing_time_is_zero(cls, value):
        return 0 if value is None else value

class ResultOut(ResultCreate):
    id: int

class MessageOut(BaseModel):
    message: str

class HealthOut(BaseModel):
    status: str
    database: str
    timestamp: str

def parse(model, data):
    """Validate ``data`` as ``model``; pydantic failures become our ValidationError."""
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(describe_errors(e.errors())) from e

def describe_errors(errors) -> str:
    parts = []
    for err in errors:
        where = ".".join(str(p) for p in err["loc"]) or "body"
        parts.append(f"{where}: {err['msg']}")
    return "; ".join(parts)
