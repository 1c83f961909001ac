"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from virtual_posts.presentation.api.v1.endpoints.health import router as health_router
from virtual_posts.presentation.api.v1.endpoints.posts import router as posts_router
from virtual_posts.presentation.api.v1.endpoints.virtual_pages import router as virtual_pages_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(posts_router)
router.include_router(virtual_pages_router)
