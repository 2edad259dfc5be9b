"""Employee registry endpoints."""

from __future__ import annotations

from datetime import date
from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, EmailStr, Field

from teamforge.api.dependencies import get_store
from teamforge.models.person import Availability, Person, SkillRecord
from teamforge.roster.store import RosterStore

router = APIRouter(prefix="/employees", tags=["employees"])


class EmployeeCreateRequest(BaseModel):
    name: str = Field(..., min_length=3)
    role: str = Field(..., min_length=2)
    skills: List[Union[str, SkillRecord]] = Field(default_factory=list)
    availability: Availability = Availability.AVAILABLE
    primary_skill: Optional[str] = None
    department: Optional[str] = None
    email: Optional[EmailStr] = None
    location: Optional[str] = None
    phone: Optional[str] = Field(None, min_length=8)
    start_date: Optional[date] = None
    avatar: Optional[str] = None


class EmployeeUpdateRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=3)
    role: Optional[str] = Field(None, min_length=2)
    skills: Optional[List[Union[str, SkillRecord]]] = None
    availability: Optional[Availability] = None
    primary_skill: Optional[str] = None
    department: Optional[str] = None
    email: Optional[EmailStr] = None
    location: Optional[str] = None
    phone: Optional[str] = Field(None, min_length=8)
    start_date: Optional[date] = None
    avatar: Optional[str] = None


@router.get("", response_model=List[Person])
async def list_employees(
    search: Optional[str] = Query(None, description="Matches name or role"),
    department: Optional[str] = None,
    availability: Optional[Availability] = None,
    store: RosterStore = Depends(get_store),
) -> List[Person]:
    return store.list_employees(search=search, department=department, availability=availability)


@router.post("", response_model=Person, status_code=status.HTTP_201_CREATED)
async def create_employee(payload: EmployeeCreateRequest, store: RosterStore = Depends(get_store)) -> Person:
    """Register a new employee; the id is assigned by the roster."""

    return store.create_employee(payload.model_dump())


@router.get("/{employee_id}", response_model=Person)
async def get_employee(employee_id: int, store: RosterStore = Depends(get_store)) -> Person:
    return store.get_employee(employee_id)


@router.put("/{employee_id}", response_model=Person)
async def update_employee(
    employee_id: int,
    payload: EmployeeUpdateRequest,
    store: RosterStore = Depends(get_store),
) -> Person:
    return store.update_employee(employee_id, payload.model_dump(exclude_unset=True))


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(employee_id: int, store: RosterStore = Depends(get_store)) -> None:
    """Remove an employee from the roster and from any team they belong to."""

    store.delete_employee(employee_id)
