"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.course import Course
from ..types.department import Department
from ..types.student import Student
from ..types.teacher import Teacher


# Input types for mutations
@strawberry.input
class CourseCreateWithoutTeacherInput:
    """A course created as part of its teacher."""

    code: str
    name: str
    description: str | None = None


@strawberry.input
class TeacherCreateInput:
    """Input for creating a teacher with nested courses."""

    email: str
    full_name: str | None = None
    courses: list[CourseCreateWithoutTeacherInput] | None = None


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # Student mutations
    @strawberry.mutation(name="registerStudent")
    async def register_student(
        self,
        info: strawberry.Info,
        email: str,
        full_name: str,
        dept: strawberry.ID | None = None,
    ) -> Student:
        """Register a new, not yet enrolled student."""
        from ..resolvers.student import register_student

        return await register_student(info, email, full_name, dept)

    @strawberry.mutation
    async def enroll(self, info: strawberry.Info, id: strawberry.ID) -> Student | None:
        """Enroll an existing student."""
        from ..resolvers.student import enroll_student

        return await enroll_student(info, id)

    # Teacher and course mutations
    @strawberry.mutation(name="createTeacher")
    async def create_teacher(self, info: strawberry.Info, data: TeacherCreateInput) -> Teacher:
        """Create a teacher and its courses."""
        from ..resolvers.teacher import create_teacher

        return await create_teacher(info, data)

    @strawberry.mutation(name="createCourse")
    async def create_course(
        self,
        info: strawberry.Info,
        teacher_email: str,
        code: str,
        name: str,
        description: str | None = None,
    ) -> Course:
        """Create a course taught by an existing teacher."""
        from ..resolvers.course import create_course

        return await create_course(info, teacher_email, code, name, description)

    # Department mutations
    @strawberry.mutation(name="createDepartment")
    async def create_department(
        self, info: strawberry.Info, name: str, description: str
    ) -> Department:
        """Create a department."""
        from ..resolvers.department import create_department

        return await create_department(info, name, description)
