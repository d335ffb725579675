"""
Department GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from ...dbmodels import Departments
    from .student import Student


@strawberry.type
class Department:
    """Department type for GraphQL API."""

    id: strawberry.ID
    name: str
    description: str

    @strawberry.field
    async def students(
        self, info: strawberry.Info
    ) -> list[Annotated["Student", strawberry.lazy(".student")]]:
        """Get the students registered in this department."""
        from ..resolvers.department import resolve_department_students

        return await resolve_department_students(self, info)

    @classmethod
    def from_model(cls, department: "Departments") -> "Department":
        return cls(
            id=strawberry.ID(str(department.id)),
            name=department.name,
            description=department.description,
        )
