from fastapi import APIRouter
from modules.member_groups.controllers import router as member_groups_router


# Main v1 router (includes all endpoints)
router = APIRouter()
router.include_router(member_groups_router)
