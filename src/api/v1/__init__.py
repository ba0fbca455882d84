"""API v1 router configuration."""

from fastapi import APIRouter

from api.v1.routes.user_groups import router as user_groups_router
from api.v1.routes.user_groups import workspace_router as workspace_user_groups_router

router = APIRouter()
router.include_router(user_groups_router)
router.include_router(workspace_user_groups_router)
