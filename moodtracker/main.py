from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from moodtracker.config import settings
from moodtracker.db import database
from moodtracker.logging_config import setup_logging
from moodtracker.routers import mood_router
from moodtracker.routers import recommendation_router
from moodtracker.routers import user_router

setup_logging(json_mode=settings.log_json, level=settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    database.close()


app = FastAPI(
    title="Mood Tracker Backend",
    description="Mood logging, weekly trends and mood-based recommendations.",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(user_router.router)
app.include_router(mood_router.router)
app.include_router(recommendation_router.router)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/")
def root():
    return {"status": "ok", "service": "moodtracker-backend"}
