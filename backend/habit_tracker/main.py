import logging
from contextlib import asynccontextmanager
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .config import CORS_ORIGINS, LOG_LEVEL
from .database import Base, engine
from .middleware import auth_middleware
from .schema import create_graphql_router

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    logger.info(f"Database ready: {engine.url.render_as_string(hide_password=True)}")
    yield


app = FastAPI(title="Habit Tracker", redirect_slashes=False, lifespan=lifespan)

app.middleware("http")(auth_middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

app.include_router(create_graphql_router(), prefix="/graphql")


@app.get("/health")
def health():
    return {"status": "ok"}


def run():
    uvicorn.run("habit_tracker.main:app", host="0.0.0.0", port=4000)


if __name__ == "__main__":
    run()
