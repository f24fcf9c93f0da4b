"""API sub-routers package.

Exposes a single `router` combining the proofreading and evaluation
routers for inclusion in the FastAPI `app`.
"""

from fastapi import APIRouter

from .evaluation import router as evaluation_router
from .proofread import router as proofread_router

router = APIRouter()
router.include_router(proofread_router)
router.include_router(evaluation_router)

__all__ = [
    "router",
]
