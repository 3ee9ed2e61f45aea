from typing import List, Optional

from pydantic import Field, StrictInt

from edugamify.schemas.common import CamelModel


class QuestionPublic(CamelModel):
    """A question as shown before submission: no answer key"""

    question: str = Field(..., description="Question prompt")
    options: List[str] = Field(..., description="Answer options in display order")
    points: int = Field(0, description="Points for a correct answer")


class QuizResponse(CamelModel):
    id: int
    title: str
    description: Optional[str] = None
    difficulty: str
    points: int = Field(..., description="Total point value of the quiz")
    time_limit: Optional[int] = Field(None, description="Time limit in seconds")
    subject: Optional[str] = None
    questions: List[QuestionPublic]


class QuizListResponse(CamelModel):
    success: bool = True
    count: int
    quizzes: List[QuizResponse]
    message: str = "📚 Available quizzes loaded!"


class QuizDetailResponse(CamelModel):
    success: bool = True
    quiz: QuizResponse
    message: str


class QuizSubmission(CamelModel):
    answers: List[Optional[StrictInt]] = Field(
        ...,
        description="Selected option index per question, by position; null means unanswered",
    )
    time_spent: StrictInt = Field(..., description="Elapsed time in seconds", ge=0)


class QuestionBreakdown(CamelModel):
    question: str
    user_answer: Optional[int] = None
    correct_answer: int
    is_correct: bool
    points: int


class BadgeInfo(CamelModel):
    name: str
    description: str
    icon: str


class SubmissionReport(CamelModel):
    score: int = Field(..., description="Number of correct answers")
    total_questions: int
    percentage: int
    points_earned: int
    time_spent: int
    new_badges: List[BadgeInfo]
    per_question: List[QuestionBreakdown]


class SubmissionResponse(CamelModel):
    success: bool = True
    result: SubmissionReport
    message: str
    badges: Optional[str] = Field(None, description="Summary line for new badges")
    replayed: bool = Field(
        False, description="True when an earlier submission with the same key was returned"
    )
