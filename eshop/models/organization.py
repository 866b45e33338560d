"""ORM models for departments and the employees assigned to them."""

from sqlalchemy import Column, Integer, String

from eshop.models.base import Base


class Department(Base):
    __tablename__ = "departments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    address = Column(String(1024), nullable=False)


class Employee(Base):
    """
    Employee record. department_id refers to a department owned by the
    department resource; it is resolved over HTTP, not by a foreign key.
    """

    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    department_id = Column(Integer, nullable=False, index=True)
