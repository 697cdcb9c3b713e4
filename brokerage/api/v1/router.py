from fastapi import APIRouter

from brokerage.api.v1.endpoints import reports, transactions, access, health

router = APIRouter(prefix="/api/v1")

router.include_router(reports.router)
router.include_router(transactions.router)
router.include_router(access.router)
router.include_router(health.router)
