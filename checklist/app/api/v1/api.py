from fastapi import APIRouter
from checklist.app.api.v1.endpoints import tasks, artists, guests, options

api_router = APIRouter()
api_router.include_router(tasks.router)
api_router.include_router(artists.router)
api_router.include_router(guests.router)
api_router.include_router(options.router)
