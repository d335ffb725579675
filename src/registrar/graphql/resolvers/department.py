from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..context import get_loaders, get_repository, parse_id

if TYPE_CHECKING:
    from ..types.department import Department
    from ..types.student import Student

logger = get_logger(__name__)


async def resolve_departments(info: strawberry.Info) -> list[Department]:
    from ..types.department import Department as DepartmentType

    departments = await get_repository(info).list_departments()
    return [DepartmentType.from_model(department) for department in departments]


async def resolve_department_by_id(info: strawberry.Info, id: str) -> Department | None:
    dept_id = parse_id(id)
    department = await get_repository(info).get_department(dept_id) if dept_id is not None else None
    if department is None:
        logger.info("Department not found", department_id=id)
        return None

    from ..types.department import Department as DepartmentType

    return DepartmentType.from_model(department)


async def resolve_department_students(
    department: Department, info: strawberry.Info
) -> list[Student]:
    from ..types.student import Student as StudentType

    students = await get_loaders(info).department_students_loader.load(int(department.id))
    return [StudentType.from_model(student) for student in students]


async def create_department(info: strawberry.Info, name: str, description: str) -> Department:
    from ..types.department import Department as DepartmentType

    department = await get_repository(info).create_department(name=name, description=description)
    return DepartmentType.from_model(department)
