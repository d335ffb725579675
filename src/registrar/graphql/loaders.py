"""
Per-request batch loaders for relationship fields
"""

from collections import defaultdict
from collections.abc import Sequence

from strawberry.dataloader import DataLoader

from ..dbmodels import Courses, Departments, Students, Teachers
from ..repository import Repository


def _by_id(records: Sequence, keys: list[int]) -> list:
    records_map = {record.id: record for record in records}
    return [records_map.get(key) for key in keys]


def _grouped(records: Sequence, attr: str, keys: list[int]) -> list[list]:
    groups: dict[int, list] = defaultdict(list)
    for record in records:
        groups[getattr(record, attr)].append(record)
    return [groups.get(key, []) for key in keys]


class Loaders:
    """Data loaders bound to one repository for the lifetime of a request."""

    def __init__(self, repository: Repository):
        self.repository = repository
        self.department_loader = DataLoader(load_fn=self.load_departments)
        self.teacher_loader = DataLoader(load_fn=self.load_teachers)
        self.department_students_loader = DataLoader(load_fn=self.load_department_students)
        self.teacher_courses_loader = DataLoader(load_fn=self.load_teacher_courses)

    async def load_departments(self, keys: list[int]) -> list[Departments | None]:
        """Batch load departments by ID."""
        departments = await self.repository.get_departments(keys)
        return _by_id(departments, keys)

    async def load_teachers(self, keys: list[int]) -> list[Teachers | None]:
        """Batch load teachers by ID."""
        teachers = await self.repository.get_teachers(keys)
        return _by_id(teachers, keys)

    async def load_department_students(self, keys: list[int]) -> list[list[Students]]:
        """Batch load the students of each department."""
        students = await self.repository.students_for_departments(keys)
        return _grouped(students, "dept_id", keys)

    async def load_teacher_courses(self, keys: list[int]) -> list[list[Courses]]:
        """Batch load the courses of each teacher."""
        courses = await self.repository.courses_for_teachers(keys)
        return _grouped(courses, "teacher_id", keys)
