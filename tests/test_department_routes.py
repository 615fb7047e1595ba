"""
Tests for the department endpoints.
"""

import pytest


async def create_department(client, payload: dict) -> dict:
    response = await client.post("/api/departments/create-department", json=payload)
    assert response.status_code == 201
    return response.json()


async def test_list_departments_empty(client) -> None:
    response = await client.get("/api/departments")
    assert response.status_code == 200
    assert response.json() == []


async def test_create_and_fetch_department(client, department_payload: dict) -> None:
    created = await create_department(client, department_payload)
    assert created["id"] > 0
    assert created["code"] == "D1"

    response = await client.get(f"/api/departments/{created['id']}")
    assert response.status_code == 200
    assert response.json() == created

    listed = await client.get("/api/departments")
    assert listed.json() == [created]


async def test_generated_ids_increase(client, department_payload: dict) -> None:
    first = await create_department(client, department_payload)
    second = await create_department(client, {**department_payload, "code": "D2"})
    assert second["id"] == first["id"] + 1


async def test_fetch_department_by_code(client, department_payload: dict) -> None:
    created = await create_department(client, department_payload)

    response = await client.get("/api/departments/code/D1")
    assert response.status_code == 200
    assert response.json() == created

    missing = await client.get("/api/departments/code/NOPE")
    assert missing.status_code == 404


async def test_missing_department_returns_structured_404(client) -> None:
    response = await client.get("/api/departments/42")
    assert response.status_code == 404
    body = response.json()
    assert body == {
        "status": 404,
        "error": "Not Found",
        "message": "Department not found",
        "details": "Department with ID 42 not found",
        "path": "/api/departments/42",
    }


@pytest.mark.parametrize("department_id", [0, -1])
async def test_non_positive_ids_are_bad_requests(client, department_id: int) -> None:
    payload = {"id": department_id, "name": "X", "code": "X1"}
    responses = [
        await client.get(f"/api/departments/{department_id}"),
        await client.put(f"/api/departments/update-department/{department_id}", json=payload),
        await client.delete(f"/api/departments/delete-department/{department_id}"),
    ]
    for response in responses:
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid department ID"


async def test_duplicate_code_conflicts(client, db, department_payload: dict) -> None:
    await create_department(client, department_payload)

    response = await client.post("/api/departments/create-department", json=department_payload)
    assert response.status_code == 409
    assert await db.departments.count_documents({}) == 1


async def test_create_department_requires_fields(client) -> None:
    response = await client.post("/api/departments/create-department", json={"name": "No code"})
    assert response.status_code == 422


async def test_update_department(client, department_payload: dict) -> None:
    created = await create_department(client, department_payload)
    payload = {"id": created["id"], "name": "Research Labs", "code": "D1", "description": None}

    response = await client.put(f"/api/departments/update-department/{created['id']}", json=payload)
    assert response.status_code == 200
    assert response.json()["name"] == "Research Labs"

    fetched = await client.get(f"/api/departments/{created['id']}")
    assert fetched.json()["name"] == "Research Labs"


async def test_update_with_mismatched_ids_leaves_store_untouched(client, department_payload: dict) -> None:
    created = await create_department(client, department_payload)
    payload = {**department_payload, "id": created["id"] + 1, "name": "Changed"}

    response = await client.put(f"/api/departments/update-department/{created['id']}", json=payload)
    assert response.status_code == 400
    assert response.json()["message"] == "Department ID mismatch"

    fetched = await client.get(f"/api/departments/{created['id']}")
    assert fetched.json()["name"] == "Research"


async def test_update_missing_department_does_not_upsert(client, db, department_payload: dict) -> None:
    response = await client.put(
        "/api/departments/update-department/7",
        json={**department_payload, "id": 7},
    )
    assert response.status_code == 404
    assert await db.departments.count_documents({}) == 0


async def test_update_to_taken_code_conflicts(client, department_payload: dict) -> None:
    await create_department(client, department_payload)
    other = await create_department(client, {**department_payload, "code": "D2"})

    response = await client.put(
        f"/api/departments/update-department/{other['id']}",
        json={**department_payload, "id": other["id"], "code": "D1"},
    )
    assert response.status_code == 409


async def test_delete_department(client, department_payload: dict) -> None:
    created = await create_department(client, department_payload)

    response = await client.delete(f"/api/departments/delete-department/{created['id']}")
    assert response.status_code == 204
    assert response.content == b""

    # Repeated deletes fail the same way
    for _ in range(2):
        again = await client.delete(f"/api/departments/delete-department/{created['id']}")
        assert again.status_code == 404
        assert again.json()["message"] == "Department not found"


async def test_fetch_department_by_code_with_slash(client, department_payload: dict) -> None:
    created = await create_department(client, {**department_payload, "code": "R/D"})

    response = await client.get("/api/departments/code/R/D")
    assert response.status_code == 200
    assert response.json() == created
