def _employee_payload(**overrides):
    payload = {
        "name": "Nimal Silva",
        "employee_id": "EMP-001",
        "email": "nimal@example.com",
        "nic": "901234567V",
        "role": "Travel Agent",
        "phone_number": "0771234567",
        "salary": 1000,
    }
    payload.update(overrides)
    return payload


def test_create_and_read_employee(client):
    res = client.post("/api/employees/", json=_employee_payload())
    assert res.status_code == 201
    data = res.json()
    assert data["role"] == "Travel Agent"
    assert data["status"] == "active"

    res = client.get(f"/api/employees/{data['id']}")
    assert res.status_code == 200
    assert res.json()["employee_id"] == "EMP-001"


def test_salary_limit_per_role(client):
    res = client.post("/api/employees/", json=_employee_payload(role="Driver", salary=501))
    assert res.status_code == 400
    assert res.json()["message"] == "Salary for Driver cannot exceed $500"

    res = client.post("/api/employees/", json=_employee_payload(salary=1200))
    assert res.status_code == 201


def test_update_checks_merged_role_and_salary(client):
    created = client.post("/api/employees/", json=_employee_payload()).json()

    # 1000 is fine for an agent but not for a worker
    res = client.put(f"/api/employees/{created['id']}", json={"role": "Worker"})
    assert res.status_code == 400
    assert res.json()["message"] == "Salary for Worker cannot exceed $350"

    res = client.put(
        f"/api/employees/{created['id']}", json={"role": "Worker", "salary": 300}
    )
    assert res.status_code == 200
    assert res.json()["role"] == "Worker"


def test_duplicate_employee_conflict(client):
    client.post("/api/employees/", json=_employee_payload())
    res = client.post("/api/employees/", json=_employee_payload(email="other@example.com"))
    assert res.status_code == 409
    assert res.json()["message"] == "Employee ID, email or NIC already exists"


def test_delete_employee(client):
    created = client.post("/api/employees/", json=_employee_payload()).json()
    res = client.delete(f"/api/employees/{created['id']}")
    assert res.status_code == 200
    assert res.json() == {"success": True, "message": "Employee deleted"}
    assert client.get(f"/api/employees/{created['id']}").status_code == 404
