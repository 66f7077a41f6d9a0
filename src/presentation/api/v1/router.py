from fastapi import APIRouter

from .accounts import accounts_router
from .cards import cards_router
from .health import health_router
from .loans import loans_router

router = APIRouter()

router.include_router(accounts_router, prefix="/api", tags=["Accounts"])
router.include_router(loans_router, prefix="/api", tags=["Loans"])
router.include_router(cards_router, prefix="/api", tags=["Cards"])
router.include_router(health_router, tags=["Health"])
