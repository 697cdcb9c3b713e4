from fastapi import APIRouter, Depends, Path, Request

from brokerage.core.config import settings
from brokerage.core.rate_limit import limiter
from brokerage.schemas.transaction import (
    TermsUpdate,
    TransactionCreate,
    TransactionOut,
)
from brokerage.services.transaction_service import TransactionService
from brokerage.api.deps import get_transaction_service

router = APIRouter(prefix="/transactions", tags=["Transactions"])


@router.post("", response_model=TransactionOut, status_code=201)
@limiter.limit(settings.WRITE_RATE_LIMIT)
async def record_transaction(
    request: Request,
    request_body: TransactionCreate,
    service: TransactionService = Depends(get_transaction_service),
) -> TransactionOut:
    """Record a transaction; a ``sold`` one marks the listing sold."""
    result = await service.record_transaction(request_body)
    return TransactionOut(**result)


@router.get("/{transaction_id}", response_model=TransactionOut)
async def get_transaction(
    transaction_id: int = Path(..., ge=1),
    service: TransactionService = Depends(get_transaction_service),
) -> TransactionOut:
    result = await service.get_transaction(transaction_id)
    return TransactionOut(**result)


@router.patch("/{transaction_id}/terms", response_model=TransactionOut)
@limiter.limit(settings.WRITE_RATE_LIMIT)
async def update_terms(
    request: Request,
    request_body: TermsUpdate,
    transaction_id: int = Path(..., ge=1),
    service: TransactionService = Depends(get_transaction_service),
) -> TransactionOut:
    """Update a transaction's terms.

    The listing status is synchronised in the same database transaction
    and returned as ``listing_status``.
    """
    result = await service.update_terms(transaction_id, request_body.terms)
    return TransactionOut(**result)
