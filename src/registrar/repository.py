"""
Data access for the Registrar entities.

Resolvers never open sessions themselves: they receive a ``Repository`` through
the GraphQL context, so tests can hand them a double instead of a database.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from contextlib import AbstractAsyncContextManager
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .database.connection import get_async_session
from .dbmodels import Courses, Departments, Students, Teachers
from .logging import get_logger

logger = get_logger(__name__)

SessionFactory = Callable[[], AbstractAsyncContextManager[AsyncSession]]


class Repository(ABC):
    """Reads and writes used by the resolver map."""

    # Students
    @abstractmethod
    async def list_students(self, enrolled: bool | None = None) -> Sequence[Students]:
        """All students, optionally filtered on the enrolled flag."""

    @abstractmethod
    async def get_student(self, student_id: int) -> Students | None: ...

    @abstractmethod
    async def create_student(
        self, *, email: str, full_name: str, dept_id: int | None = None
    ) -> Students: ...

    @abstractmethod
    async def enroll_student(self, student_id: int) -> Students | None:
        """Set ``enrolled`` on the student, returning None when no such student exists."""

    @abstractmethod
    async def students_for_departments(self, dept_ids: Sequence[int]) -> Sequence[Students]: ...

    # Departments
    @abstractmethod
    async def list_departments(self) -> Sequence[Departments]: ...

    @abstractmethod
    async def get_department(self, dept_id: int) -> Departments | None: ...

    @abstractmethod
    async def get_departments(self, dept_ids: Sequence[int]) -> Sequence[Departments]: ...

    @abstractmethod
    async def create_department(self, *, name: str, description: str) -> Departments: ...

    # Teachers
    @abstractmethod
    async def list_teachers(self) -> Sequence[Teachers]: ...

    @abstractmethod
    async def get_teacher(self, teacher_id: int) -> Teachers | None: ...

    @abstractmethod
    async def get_teacher_by_email(self, email: str) -> Teachers | None: ...

    @abstractmethod
    async def get_teachers(self, teacher_ids: Sequence[int]) -> Sequence[Teachers]: ...

    @abstractmethod
    async def create_teacher(
        self,
        *,
        email: str,
        full_name: str | None = None,
        courses: Sequence[dict[str, Any]] = (),
    ) -> Teachers:
        """Create a teacher together with its nested courses in one transaction."""

    # Courses
    @abstractmethod
    async def list_courses(self) -> Sequence[Courses]: ...

    @abstractmethod
    async def get_course(self, course_id: int) -> Courses | None: ...

    @abstractmethod
    async def create_course(
        self,
        *,
        code: str,
        name: str,
        description: str | None = None,
        teacher_id: int | None = None,
    ) -> Courses: ...

    @abstractmethod
    async def courses_for_teachers(self, teacher_ids: Sequence[int]) -> Sequence[Courses]: ...


class SqlAlchemyRepository(Repository):
    """Repository backed by SQLAlchemy async sessions."""

    def __init__(self, session_factory: SessionFactory = get_async_session) -> None:
        self._session_factory = session_factory

    async def _all(self, stmt: Any) -> Sequence[Any]:
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return result.scalars().all()

    async def _one_or_none(self, stmt: Any) -> Any:
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return result.scalar_one_or_none()

    async def _add(self, instance: Any) -> Any:
        async with self._session_factory() as session:
            session.add(instance)
            await session.flush()
            return instance

    # Students
    async def list_students(self, enrolled: bool | None = None) -> Sequence[Students]:
        stmt = select(Students).order_by(Students.id)
        if enrolled is not None:
            stmt = stmt.where(Students.enrolled == enrolled)
        return await self._all(stmt)

    async def get_student(self, student_id: int) -> Students | None:
        return await self._one_or_none(select(Students).where(Students.id == student_id))

    async def create_student(
        self, *, email: str, full_name: str, dept_id: int | None = None
    ) -> Students:
        student = Students(email=email, full_name=full_name, dept_id=dept_id, enrolled=False)
        student = await self._add(student)
        logger.info("Student registered", student_id=student.id, dept_id=dept_id)
        return student

    async def enroll_student(self, student_id: int) -> Students | None:
        async with self._session_factory() as session:
            result = await session.execute(select(Students).where(Students.id == student_id))
            student = result.scalar_one_or_none()
            if student is None:
                return None

            student.enrolled = True
            await session.flush()
            logger.info("Student enrolled", student_id=student_id)
            return student

    async def students_for_departments(self, dept_ids: Sequence[int]) -> Sequence[Students]:
        if not dept_ids:
            return []
        stmt = select(Students).where(Students.dept_id.in_(dept_ids)).order_by(Students.id)
        return await self._all(stmt)

    # Departments
    async def list_departments(self) -> Sequence[Departments]:
        return await self._all(select(Departments).order_by(Departments.id))

    async def get_department(self, dept_id: int) -> Departments | None:
        return await self._one_or_none(select(Departments).where(Departments.id == dept_id))

    async def get_departments(self, dept_ids: Sequence[int]) -> Sequence[Departments]:
        if not dept_ids:
            return []
        return await self._all(select(Departments).where(Departments.id.in_(dept_ids)))

    async def create_department(self, *, name: str, description: str) -> Departments:
        department = await self._add(Departments(name=name, description=description))
        logger.info("Department created", department_id=department.id)
        return department

    # Teachers
    async def list_teachers(self) -> Sequence[Teachers]:
        return await self._all(select(Teachers).order_by(Teachers.id))

    async def get_teacher(self, teacher_id: int) -> Teachers | None:
        return await self._one_or_none(select(Teachers).where(Teachers.id == teacher_id))

    async def get_teacher_by_email(self, email: str) -> Teachers | None:
        stmt = select(Teachers).where(Teachers.email == email).order_by(Teachers.id).limit(1)
        return await self._one_or_none(stmt)

    async def get_teachers(self, teacher_ids: Sequence[int]) -> Sequence[Teachers]:
        if not teacher_ids:
            return []
        return await self._all(select(Teachers).where(Teachers.id.in_(teacher_ids)))

    async def create_teacher(
        self,
        *,
        email: str,
        full_name: str | None = None,
        courses: Sequence[dict[str, Any]] = (),
    ) -> Teachers:
        teacher = Teachers(email=email, full_name=full_name)
        teacher.courses = [Courses(**course) for course in courses]
        teacher = await self._add(teacher)
        logger.info("Teacher created", teacher_id=teacher.id, course_count=len(courses))
        return teacher

    # Courses
    async def list_courses(self) -> Sequence[Courses]:
        return await self._all(select(Courses).order_by(Courses.id))

    async def get_course(self, course_id: int) -> Courses | None:
        return await self._one_or_none(select(Courses).where(Courses.id == course_id))

    async def create_course(
        self,
        *,
        code: str,
        name: str,
        description: str | None = None,
        teacher_id: int | None = None,
    ) -> Courses:
        course = Courses(code=code, name=name, description=description, teacher_id=teacher_id)
        course = await self._add(course)
        logger.info("Course created", course_id=course.id, teacher_id=teacher_id)
        return course

    async def courses_for_teachers(self, teacher_ids: Sequence[int]) -> Sequence[Courses]:
        if not teacher_ids:
            return []
        stmt = select(Courses).where(Courses.teacher_id.in_(teacher_ids)).order_by(Courses.id)
        return await self._all(stmt)
