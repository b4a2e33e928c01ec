from typing import Any, Iterable

import simplejson
from fastapi.responses import JSONResponse

from employee_api.models import Employee
from employee_api.schemas import EmployeeSchema


class DecimalJSONResponse(JSONResponse):
    """JSON response that writes Decimal values as exact JSON numbers."""

    def render(self, content: Any) -> bytes:
        return simplejson.dumps(
            content,
            use_decimal=True,
            ensure_ascii=False,
            separators=(",", ":"),
        ).encode("utf-8")


def employee_body(employee: Employee) -> dict:
    # Python mode keeps salary as Decimal for the renderer above.
    return EmployeeSchema.model_validate(employee).model_dump()


def employee_response(employee: Employee, **kwargs) -> DecimalJSONResponse:
    return DecimalJSONResponse(employee_body(employee), **kwargs)


def employees_response(employees: Iterable[Employee]) -> DecimalJSONResponse:
    return DecimalJSONResponse([employee_body(e) for e in employees])
