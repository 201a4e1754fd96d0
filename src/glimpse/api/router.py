"""Top-level API router: mounts the domain routers under /api/v1."""

from fastapi import APIRouter

from glimpse.api.routes import explain, image, system, text, upload

api_router = APIRouter()
api_router.include_router(text.router, prefix="/text", tags=["text"])
api_router.include_router(image.router, prefix="/image", tags=["image"])
api_router.include_router(explain.router, prefix="/explain", tags=["explain"])
api_router.include_router(upload.router, prefix="/upload", tags=["upload"])
api_router.include_router(system.router, prefix="/system", tags=["system"])
