"""Tests for employee API endpoints."""

from decimal import Decimal

import pytest


def emp_body(deptno, **overrides):
    body = {
        "ename": "SMITH",
        "job": "CLERK",
        "hiredate": "2020-12-17",
        "sal": 800.00,
        "deptno": deptno,
    }
    body.update(overrides)
    return body


@pytest.fixture
def deptno(client):
    """Create a department and return its deptno."""
    return client.post("/dept", json={"dname": "SALES", "loc": "NYC"}).json()["deptno"]


@pytest.fixture
def king(client, deptno):
    """Create an employee with no manager."""
    response = client.post(
        "/emp", json=emp_body(deptno, ename="KING", job="PRESIDENT", sal=5000)
    )
    return response.json()


@pytest.fixture
def smith(client, deptno, king):
    """Create an employee reporting to KING."""
    return client.post("/emp", json=emp_body(deptno, mgr=king["empno"])).json()


class TestListEmployees:
    """Tests for GET /emp."""

    def test_empty_returns_no_content(self, client):
        """Test an empty list is answered with 204."""
        response = client.get("/emp")

        assert response.status_code == 204
        assert response.content == b""

    def test_lists_in_empno_order(self, client, king, smith):
        """Test employees are listed in empno order."""
        response = client.get("/emp")

        assert response.status_code == 200
        assert [e["ename"] for e in response.json()] == ["KING", "SMITH"]


class TestCreateEmployee:
    """Tests for POST /emp."""

    def test_create(self, client, deptno):
        """Test an employee is created and reads back identically."""
        response = client.post("/emp", json=emp_body(deptno))

        assert response.status_code == 201
        body = response.json()
        assert body["ename"] == "SMITH"
        assert body["hiredate"] == "2020-12-17"
        assert Decimal(str(body["sal"])) == Decimal("800.00")
        assert client.get(f"/emp/{body['empno']}").json() == body

    def test_unset_fields_omitted(self, client, deptno):
        """Test mgr and comm are left out when unset."""
        body = client.post("/emp", json=emp_body(deptno)).json()

        assert "mgr" not in body
        assert "comm" not in body

    def test_amounts_have_two_places(self, client, deptno):
        """Test sal and comm are returned with cent precision."""
        body = client.post("/emp", json=emp_body(deptno, sal=1250.5, comm=500)).json()

        assert str(Decimal(str(body["sal"]))) == "1250.50"
        assert str(Decimal(str(body["comm"]))) == "500.00"

    def test_client_empno_ignored(self, client, deptno, king):
        """Test an empno in the body does not choose the key."""
        response = client.post("/emp", json=emp_body(deptno, empno=king["empno"]))

        assert response.status_code == 201
        assert response.json()["empno"] != king["empno"]

    def test_missing_department(self, client):
        """Test a missing department is 422 and nothing is stored."""
        response = client.post("/emp", json=emp_body(1))

        assert response.status_code == 422
        assert response.json() == {"message": "deptno [1] is not exists."}
        assert client.get("/emp").status_code == 204

    def test_missing_manager(self, client, deptno, king):
        """Test a missing manager is 422 and nothing is stored."""
        response = client.post("/emp", json=emp_body(deptno, mgr=999))

        assert response.status_code == 422
        assert response.json() == {"message": "mgr(empno) [999] is not exists."}
        assert len(client.get("/emp").json()) == 1

    def test_salary_out_of_range(self, client, deptno):
        """Test a salary above the maximum is 400."""
        response = client.post("/emp", json=emp_body(deptno, sal=100000))

        assert response.status_code == 400
        assert response.json() == {
            "message": "Bad Request. [sal: must be in the range 0.01 to 99999.99.]"
        }

    @pytest.mark.parametrize(
        "field_name, value",
        [("deptno", 2**64), ("deptno", 2**31), ("deptno", -1), ("mgr", 2**64), ("mgr", -1)],
    )
    def test_reference_out_of_range(self, client, deptno, field_name, value):
        """Test department and manager ids outside the id range are malformed."""
        response = client.post("/emp", json={**emp_body(deptno), field_name: value})

        assert response.status_code == 400
        assert f"body.{field_name}" in response.json()["message"]
        assert client.get("/emp").status_code == 204

    def test_invalid_date(self, client, deptno):
        """Test an impossible hire date is malformed."""
        response = client.post("/emp", json=emp_body(deptno, hiredate="2020-13-01"))

        assert response.status_code == 400
        assert "hiredate" in response.json()["message"]


class TestGetEmployee:
    """Tests for GET /emp/{empno}."""

    def test_get_with_manager(self, client, king, smith):
        """Test a subordinate exposes its manager."""
        body = client.get(f"/emp/{smith['empno']}").json()
        assert body["mgr"] == king["empno"]

    def test_missing(self, client):
        """Test a missing employee is 404."""
        response = client.get("/emp/999")

        assert response.status_code == 404
        assert response.json() == {"message": "Not Found."}


class TestUpdateEmployee:
    """Tests for PATCH /emp/{empno}."""

    def test_update(self, client, deptno, smith):
        """Test every mutable field is replaced."""
        response = client.patch(
            f"/emp/{smith['empno']}",
            json=emp_body(deptno, empno=500, job="ANALYST", sal=3000, comm=250.25),
        )

        assert response.status_code == 200
        body = response.json()
        assert body["empno"] == smith["empno"]
        assert body["job"] == "ANALYST"
        assert "mgr" not in body
        assert Decimal(str(body["comm"])) == Decimal("250.25")

    def test_update_missing(self, client, deptno):
        """Test updating a missing employee is 404."""
        response = client.patch("/emp/999", json=emp_body(deptno))
        assert response.status_code == 404

    def test_update_missing_department(self, client, smith):
        """Test moving to a missing department is 422."""
        response = client.patch(f"/emp/{smith['empno']}", json=emp_body(999))

        assert response.status_code == 422
        assert response.json() == {"message": "deptno [999] is not exists."}

    def test_update_missing_manager(self, client, deptno, smith):
        """Test pointing at a missing manager is 422."""
        response = client.patch(f"/emp/{smith['empno']}", json=emp_body(deptno, mgr=999))

        assert response.status_code == 422
        assert client.get(f"/emp/{smith['empno']}").json() == smith


class TestDeleteEmployee:
    """Tests for DELETE /emp/{empno}."""

    def test_delete_manager_rejected(self, client, king, smith):
        """Test an employee with reports cannot be deleted."""
        response = client.delete(f"/emp/{king['empno']}")

        assert response.status_code == 422
        assert response.json() == {"message": f"empno [{king['empno']}] can not delete."}

    def test_delete(self, client, king, smith):
        """Test reports then managers can be deleted."""
        assert client.delete(f"/emp/{smith['empno']}").status_code == 204
        assert client.delete(f"/emp/{king['empno']}").status_code == 204
        assert client.get("/emp").status_code == 204

    def test_delete_missing(self, client):
        """Test deleting a missing employee is 404."""
        assert client.delete("/emp/999").status_code == 404


class TestDepartmentLifecycle:
    """End-to-end department and employee lifecycle."""

    def test_department_with_employee(self, client):
        """Test a department can only be deleted once it is empty."""
        created = client.post("/dept", json={"dname": "SALES", "loc": "NYC"})
        assert created.status_code == 201
        deptno = created.json()["deptno"]

        hired = client.post("/emp", json=emp_body(deptno))
        assert hired.status_code == 201
        empno = hired.json()["empno"]

        blocked = client.delete(f"/dept/{deptno}")
        assert blocked.status_code == 422
        assert blocked.json() == {"message": f"deptno [{deptno}] can not delete."}

        assert client.delete(f"/emp/{empno}").status_code == 204
        assert client.delete(f"/dept/{deptno}").status_code == 204

        missing = client.get("/dept/999")
        assert missing.status_code == 404
        assert missing.json() == {"message": "Not Found."}
