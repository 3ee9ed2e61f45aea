from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from edugamify.core.database import get_db
from edugamify.core.errors import (
    DependencyUnavailableError,
    InvalidSubmissionError,
    NotFoundError,
    PersistenceConflictError,
)
from edugamify.core.security import get_current_user_id
from edugamify.schemas.leaderboard import LeaderboardResponse
from edugamify.schemas.progress import ProgressResponse
from edugamify.schemas.quiz import (
    QuizDetailResponse,
    QuizListResponse,
    QuizSubmission,
    SubmissionResponse,
)
from edugamify.services.leaderboard import LeaderboardService
from edugamify.services.progress import ProgressService
from edugamify.services.quiz import QuizService

router = APIRouter(tags=["quiz"])


@router.get("/quiz", response_model=QuizListResponse, status_code=status.HTTP_200_OK)
def get_all_quizzes(db: Session = Depends(get_db)):
    """List available quizzes without their answer keys"""
    try:
        return QuizService(db).list_quizzes()
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal server error: {str(e)}",
        )


@router.get("/quiz/leaderboard", response_model=LeaderboardResponse)
def get_leaderboard(db: Session = Depends(get_db)):
    """Top users by points; ties keep registration order"""
    try:
        return LeaderboardService(db).get_leaderboard()
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal server error: {str(e)}",
        )


@router.get("/quiz/progress/{user_id}", response_model=ProgressResponse)
def get_user_progress(
    user_id: int,
    db: Session = Depends(get_db),
    current_user_id: int = Depends(get_current_user_id),
):
    """Progress summary of a user (protected)"""
    try:
        return ProgressService(db).get_user_progress(user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal server error: {str(e)}",
        )


@router.get("/quiz/{quiz_id}", response_model=QuizDetailResponse)
def get_quiz_by_id(quiz_id: int, db: Session = Depends(get_db)):
    """Get a quiz to play; correct answers are never included"""
    try:
        return QuizService(db).get_quiz(quiz_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal server error: {str(e)}",
        )


@router.post("/quiz/{quiz_id}/submit", response_model=SubmissionResponse)
def submit_quiz(
    quiz_id: int,
    submission: QuizSubmission,
    db: Session = Depends(get_db),
    current_user_id: int = Depends(get_current_user_id),
    idempotency_key: Optional[str] = Header(None, alias="Idempotency-Key", max_length=100),
):
    """
    Submit answers for a quiz (protected)

    Answers are option indices matched to questions by position; null or
    missing entries count as wrong. Send an Idempotency-Key header to make
    retries safe: a repeated key returns the first report and awards nothing.
    """
    try:
        return QuizService(db).submit_quiz(
            quiz_id, current_user_id, submission, submission_key=idempotency_key
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidSubmissionError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except PersistenceConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except DependencyUnavailableError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e)
        )
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal server error: {str(e)}",
        )
