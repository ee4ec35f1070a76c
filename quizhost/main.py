# main.py
import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import List, Optional

import uvicorn
from fastapi import APIRouter, Depends, FastAPI, Header, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from quizhost import schemas
from quizhost.config import Settings, load_settings
from quizhost.db import Database
from quizhost.errors import Conflict, NotFound, StoreError, Unauthorized, ValidationError
from quizhost.logging_config import configure_logging
from quizhost.quiz_store import QuizStore
from quizhost.result_store import ResultStore
from quizhost.seed import seed_demo_quiz

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

# -----------------------------------------------------------------------------
# Dependencies
# -----------------------------------------------------------------------------
def get_quiz_store(request: Request) -> QuizStore:
    return request.app.state.quiz_store

def get_result_store(request: Request) -> ResultStore:
    return request.app.state.result_store

def check_admin_key(settings: Settings, api_key: Optional[str]) -> None:
    # TODO: switch to secrets.compare_digest if the key ever guards more than quiz admin
    if api_key != settings.admin_api_key:
        raise Unauthorized("Unauthorized: Invalid API key")

def require_admin(request: Request, x_api_key: Optional[str] = Header(None)) -> None:
    try:
        check_admin_key(request.app.state.settings, x_api_key)
    except Unauthorized as e:
        logger.warning("Rejected admin request to %s", request.url.path)
        raise HTTPException(status_code=401, detail=str(e))

# -----------------------------------------------------------------------------
# Health
# -----------------------------------------------------------------------------
@router.get("/health", response_model=schemas.HealthOut)
def health(request: Request):
    try:
        request.app.state.database.ping()
    except SQLAlchemyError as e:
        logger.error("Health check failed: %s", e)
        raise HTTPException(status_code=500, detail="Database unavailable")
    return {
        "status": "Server is running",
        "database": "ok",
        "timestamp": datetime.utcnow().isoformat() + "Z",
    }

# -----------------------------------------------------------------------------
# Quizzes (admin)
# -----------------------------------------------------------------------------
@router.post("/quizzes", status_code=201, response_model=schemas.MessageOut,
             dependencies=[Depends(require_admin)])
def create_quiz(payload: schemas.QuizCreate, quizzes: QuizStore = Depends(get_quiz_store)):
    try:
        quizzes.create(payload)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Conflict as e:
        raise HTTPException(status_code=409, detail=str(e))
    except StoreError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {"message": "Quiz created successfully"}

@router.get("/quizzes", response_model=List[schemas.QuizOut],
            dependencies=[Depends(require_admin)])
def list_quizzes(quizzes: QuizStore = Depends(get_quiz_store)):
    try:
        return quizzes.list_all()
    except StoreError as e:
        raise HTTPException(status_code=500, detail=str(e))

@router.put("/quizzes/{quiz_id}/status", response_model=schemas.MessageOut,
            dependencies=[Depends(require_admin)])
def update_quiz_status(quiz_id: str, payload: schemas.StatusUpdate,
                       quizzes: QuizStore = Depends(get_quiz_store)):
    try:
        quizzes.set_active(quiz_id, payload.is_active)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StoreError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {"message": "Quiz status updated"}

@router.delete("/quizzes/{quiz_id}", response_model=schemas.MessageOut,
               dependencies=[Depends(require_admin)])
def delete_quiz(quiz_id: str, quizzes: QuizStore = Depends(get_quiz_store)):
    try:
        quizzes.delete(quiz_id)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StoreError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {"message": "Quiz deleted successfully"}

# -----------------------------------------------------------------------------
# Participant-facing
# -----------------------------------------------------------------------------
@router.get("/quizzes/active", response_model=List[schemas.QuizOut])
def list_active_quizzes(quizzes: QuizStore = Depends(get_quiz_store)):
    try:
        return quizzes.list_active()
    except StoreError as e:
        raise HTTPException(status_code=500, detail=str(e))

@router.post("/results", status_code=201, response_model=schemas.MessageOut)
def submit_result(payload: schemas.ResultCreate, results: ResultStore = Depends(get_result_store)):
    try:
        results.submit(payload)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StoreError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {"message": "Result submitted successfully"}

@router.get("/results/{quiz_id}", response_model=List[schemas.ResultOut])
def list_results(quiz_id: str, results: ResultStore = Depends(get_result_store)):
    try:
        return results.list_for_quiz(quiz_id)
    except StoreError as e:
        raise HTTPException(status_code=500, detail=str(e))

# -----------------------------------------------------------------------------
# App factory
# -----------------------------------------------------------------------------
async def _bad_request(request: Request, exc: RequestValidationError):
    # malformed bodies are a 400 here, not FastAPI's default 422
    return JSONResponse(status_code=400, content={"detail": schemas.describe_errors(exc.errors())})

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()
    log = configure_logging(settings.log_level)

    database = Database(settings.database_url)
    database.create_all()
    quiz_store = QuizStore(database)
    if settings.seed_demo_quiz:
        seed_demo_quiz(quiz_store)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        database.dispose()

    app = FastAPI(title="quizhost – Quiz hosting backend", lifespan=lifespan)
    app.state.settings = settings
    app.state.database = database
    app.state.quiz_store = quiz_store
    app.state.result_store = ResultStore(database)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "x-api-key"],
    )
    app.add_exception_handler(RequestValidationError, _bad_request)
    app.include_router(router)

    log.info("quizhost ready (database %s)", database.engine.url.render_as_string(hide_password=True))
    return app

def run() -> None:
    settings = load_settings()
    uvicorn.run("quizhost.main:create_app", factory=True, host=settings.host, port=settings.port)
