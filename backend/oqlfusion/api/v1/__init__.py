from fastapi import APIRouter
from oqlfusion.api.v1 import structvar

router = APIRouter()
router.include_router(structvar.router, prefix="/structvar", tags=["structvar"])
