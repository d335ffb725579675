"""
Integration tests for the query root against a SQLite database
"""

import pytest

STUDENT_FIELDS = "id email fullName enrolled dept { id name }"


@pytest.mark.integration
@pytest.mark.asyncio
async def test_empty_collections(execute):
    """All collection queries return empty lists on an empty database."""
    result = await execute("{ students { id } }")
    assert result.errors is None
    assert result.data == {"students": []}

    for field in ("enrollment", "departments", "courses", "teachers"):
        result = await execute(f"{{ {field} {{ id }} }}")
        assert result.errors is None
        assert result.data == {field: []}


@pytest.mark.integration
@pytest.mark.asyncio
async def test_student_by_id(execute, repository):
    """A student is fetched by its textual ID with its department."""
    department = await repository.create_department(name="Physics", description="Matter")
    student = await repository.create_student(
        email="marie@example.edu", full_name="Marie Curie", dept_id=department.id
    )

    result = await execute(
        f"query ($id: ID!) {{ student(id: $id) {{ {STUDENT_FIELDS} }} }}",
        {"id": str(student.id)},
    )

    assert result.errors is None
    assert result.data == {
        "student": {
            "id": str(student.id),
            "email": "marie@example.edu",
            "fullName": "Marie Curie",
            "enrolled": False,
            "dept": {"id": str(department.id), "name": "Physics"},
        }
    }


@pytest.mark.integration
@pytest.mark.asyncio
@pytest.mark.parametrize("field", ["student", "department", "course", "teacher"])
@pytest.mark.parametrize(
    "missing_id", ["999", "not-a-number", "2147483648", "99999999999999999999"]
)
async def test_lookup_miss_returns_null(execute, field, missing_id):
    """Unknown or malformed IDs resolve to null without errors."""
    result = await execute(
        f"query ($id: ID!) {{ {field}(id: $id) {{ id }} }}", {"id": missing_id}
    )

    assert result.errors is None
    assert result.data == {field: None}


@pytest.mark.integration
@pytest.mark.asyncio
async def test_enrollment_is_enrolled_subset_of_students(execute, repository):
    """enrollment returns exactly the students with enrolled == true."""
    ids = []
    for n in range(4):
        student = await repository.create_student(
            email=f"student{n}@example.edu", full_name=f"Student {n}"
        )
        ids.append(student.id)
    await repository.enroll_student(ids[1])
    await repository.enroll_student(ids[3])

    students = (await execute("{ students { id enrolled } }")).data["students"]
    enrollment = (await execute("{ enrollment { id enrolled } }")).data["enrollment"]

    assert len(students) == 4
    assert enrollment == [s for s in students if s["enrolled"]]
    assert [s["id"] for s in enrollment] == [str(ids[1]), str(ids[3])]


@pytest.mark.integration
@pytest.mark.asyncio
async def test_department_students(execute, repository):
    """Department.students lists only that department's students."""
    maths = await repository.create_department(name="Maths", description="Numbers")
    history = await repository.create_department(name="History", description="Past")
    await repository.create_student(email="a@example.edu", full_name="A", dept_id=maths.id)
    await repository.create_student(email="b@example.edu", full_name="B", dept_id=history.id)
    await repository.create_student(email="c@example.edu", full_name="C", dept_id=maths.id)
    await repository.create_student(email="d@example.edu", full_name="D")

    result = await execute("{ departments { name students { email } } }")

    assert result.errors is None
    assert result.data == {
        "departments": [
            {"name": "Maths", "students": [{"email": "a@example.edu"}, {"email": "c@example.edu"}]},
            {"name": "History", "students": [{"email": "b@example.edu"}]},
        ]
    }


@pytest.mark.integration
@pytest.mark.asyncio
async def test_teacher_courses_and_course_teacher(execute, repository):
    """Teacher.courses and Course.teacher resolve both sides of the relation."""
    teacher = await repository.create_teacher(
        email="euler@example.edu",
        full_name="Leonhard Euler",
        courses=[{"code": "M1", "name": "Analysis"}, {"code": "M2", "name": "Graphs"}],
    )
    await repository.create_course(code="X1", name="Orphan")

    result = await execute(
        "query ($id: ID!) { teacher(id: $id) { fullName courses { code teacher { email } } } }",
        {"id": str(teacher.id)},
    )
    assert result.errors is None
    assert result.data == {
        "teacher": {
            "fullName": "Leonhard Euler",
            "courses": [
                {"code": "M1", "teacher": {"email": "euler@example.edu"}},
                {"code": "M2", "teacher": {"email": "euler@example.edu"}},
            ],
        }
    }

    result = await execute("{ courses { code teacher { id } } }")
    assert result.errors is None
    assert result.data["courses"][-1] == {"code": "X1", "teacher": None}
