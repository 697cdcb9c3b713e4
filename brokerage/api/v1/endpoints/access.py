from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query

from brokerage.schemas.access import ManagerEmployee, ManagerEmployeePage
from brokerage.services.access_service import AccessService
from brokerage.api.deps import get_access_service

router = APIRouter(prefix="/access", tags=["Access"])


@router.get("/manager-employees", response_model=ManagerEmployeePage)
async def list_manager_employees(
    manager_id: Optional[int] = Query(None, ge=1, description="Only this manager"),
    skip: int = Query(0, ge=0, description="Number of rows to skip"),
    limit: int = Query(50, ge=1, le=500, description="Max rows to return"),
    service: AccessService = Depends(get_access_service),
) -> ManagerEmployeePage:
    """Manager → employee → office relationships."""
    result = await service.list_manager_employees(
        manager_id=manager_id, skip=skip, limit=limit
    )
    return ManagerEmployeePage(**result)


@router.get(
    "/manager-employees/{employee_id}", response_model=List[ManagerEmployee]
)
async def get_employee_managers(
    employee_id: int = Path(..., ge=1),
    service: AccessService = Depends(get_access_service),
) -> List[ManagerEmployee]:
    """Managers (and office) of one employee."""
    rows = await service.get_employee_managers(employee_id)
    return [ManagerEmployee(**row) for row in rows]
