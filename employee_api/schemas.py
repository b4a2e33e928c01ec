from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class EmployeeIn(BaseModel):
    """Body of create and update requests. A client-sent id is ignored."""

    name: str = Field(..., examples=["Jane Doe"])
    position: str = Field(..., examples=["Software Engineer"])
    salary: Decimal = Field(..., examples=[85000.00])


class EmployeeSchema(BaseModel):
    """A stored row. Columns are nullable, so rows written elsewhere may hold nulls."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., examples=[1])
    name: Optional[str] = Field(None, examples=["Jane Doe"])
    position: Optional[str] = Field(None, examples=["Software Engineer"])
    salary: Optional[Decimal] = Field(None, examples=[85000.00])


class ErrorSchema(BaseModel):
    detail: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"detail": "Employee 1 not found"},
        }
    )
