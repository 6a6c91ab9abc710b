"""API router registration."""

from fastapi import APIRouter

from . import images

# Routes are mounted at the root to match the paths the web client uses
router = APIRouter()

router.include_router(images.router)
