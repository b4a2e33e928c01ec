from sqlalchemy import Column, Integer, Numeric, Text

from employee_api.database import Base


class Employee(Base):
    __tablename__ = "Employees"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text)
    position = Column(Text)
    salary = Column(Numeric(18, 2))

    def __repr__(self) -> str:
        return f"<Employee id={self.id} name={self.name!r}>"
