from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from contextlib import asynccontextmanager
from checklist.app.api.v1.api import api_router
from checklist.app.core.config import settings
from checklist.app.core.logging_config import setup_logging
from checklist.app.db.session import create_db_and_tables
from checklist.app.db import models # Import models to register them with SQLModel

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL)
    create_db_and_tables()
    yield

app = FastAPI(title="Venue Checklist API", lifespan=lifespan)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS, # Frontend URL
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api")

@app.get("/")
def read_root():
    return {"message": "Welcome to the Venue Checklist API"}
