from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from edugamify.core.config import settings
from edugamify.core.database import SessionLocal, init_db
from edugamify.routes.auth import router as auth_router
from edugamify.routes.quiz import router as quiz_router
from edugamify.routes.user import router as user_router
from edugamify.services.seed import seed_sample_quizzes


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    if settings.SEED_SAMPLE_QUIZZES:
        db = SessionLocal()
        try:
            seed_sample_quizzes(db)
        finally:
            db.close()
    yield


app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,  # Frontend URLs
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
def read_root():
    return {"message": "🎮 EduGamify API is running"}


app.include_router(auth_router, prefix="/api")
app.include_router(quiz_router, prefix="/api")
app.include_router(user_router, prefix="/api")
