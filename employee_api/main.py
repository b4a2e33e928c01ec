import os
from typing import List

from dotenv import find_dotenv, load_dotenv
from fastapi import Depends, FastAPI, HTTPException, Path, Request, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from employee_api.database import get_db, init_db
from employee_api.loggers import logger
from employee_api.models import Employee
from employee_api.responses import (
    DecimalJSONResponse,
    employee_response,
    employees_response,
)
from employee_api.schemas import EmployeeIn, EmployeeSchema, ErrorSchema

load_dotenv(find_dotenv())
DETAILED_ERRORS = os.environ.get("DETAILED_ERRORS", "false").lower() == "true"

init_db()


app = FastAPI(
    title="Employee Records API",
    version="0.0.1",
    default_response_class=DecimalJSONResponse,
)


@app.exception_handler(SQLAlchemyError)
def database_error(request: Request, exc: SQLAlchemyError):
    logger.error(
        f"Database error on {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )
    detail = f"Database error: {exc}" if DETAILED_ERRORS else "Database error"
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": detail},
    )


def get_employee_or_404(db: Session, employee_id: int) -> Employee:
    employee = db.get(Employee, employee_id)
    if employee is None:
        logger.info(f"Employee {employee_id} not found")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee {employee_id} not found",
        )
    return employee


@app.get(
    "/api/employees",
    response_model=List[EmployeeSchema],
    summary="List all employees.",
)
def list_employees(db: Session = Depends(get_db)):
    return employees_response(db.query(Employee).order_by(Employee.id).all())


@app.get(
    "/api/employees/{employee_id}",
    response_model=EmployeeSchema,
    responses={404: {"model": ErrorSchema}},
    summary="Get one employee by id.",
)
def get_employee(
    employee_id: int = Path(..., examples=[1]),
    db: Session = Depends(get_db),
):
    return employee_response(get_employee_or_404(db, employee_id))


@app.post(
    "/api/employees",
    status_code=status.HTTP_201_CREATED,
    response_model=EmployeeSchema,
    summary="Create an employee.",
)
def create_employee(
    payload: EmployeeIn,
    db: Session = Depends(get_db),
):
    employee = Employee(**payload.model_dump())
    db.add(employee)
    db.commit()
    db.refresh(employee)
    logger.info(f"Created employee {employee.id}")
    return employee_response(
        employee,
        status_code=status.HTTP_201_CREATED,
        headers={"Location": f"/api/employees/{employee.id}"},
    )


@app.put(
    "/api/employees/{employee_id}",
    response_model=EmployeeSchema,
    responses={404: {"model": ErrorSchema}},
    summary="Replace the name, position and salary of an employee.",
)
def update_employee(
    payload: EmployeeIn,
    employee_id: int = Path(..., examples=[1]),
    db: Session = Depends(get_db),
):
    employee = get_employee_or_404(db, employee_id)
    employee.name = payload.name
    employee.position = payload.position
    employee.salary = payload.salary
    db.commit()
    db.refresh(employee)
    logger.info(f"Updated employee {employee_id}")
    return employee_response(employee)


@app.delete(
    "/api/employees/{employee_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorSchema}},
    summary="Delete an employee.",
)
def delete_employee(
    employee_id: int = Path(..., examples=[1]),
    db: Session = Depends(get_db),
):
    employee = get_employee_or_404(db, employee_id)
    db.delete(employee)
    db.commit()
    logger.info(f"Deleted employee {employee_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
