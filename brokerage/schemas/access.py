from typing import List

from pydantic import BaseModel


class ManagerEmployee(BaseModel):
    manager_id: int
    employee_id: int
    manager_first_name: str
    manager_last_name: str
    employee_first_name: str
    employee_last_name: str
    office_address: str
    office_city: str


class ManagerEmployeePage(BaseModel):
    data: List[ManagerEmployee]
    total: int
    skip: int
    limit: int
