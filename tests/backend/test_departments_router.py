"""
Tests for the departments router with a mocked DepartmentService.
"""

from app.services.department_service import DepartmentExistsError

ENGINEERING = {
    "_id": "665f1a2b3c4d5e6f7a8b9c01",
    "name": "Engineering",
    "slug": "engineering",
    "logo": None,
    "metadata": {"floor": 3},
}


class TestReadDepartments:

    def test_list(self, authed_client, mock_department_service):
        mock_department_service.list_departments.return_value = [ENGINEERING]

        response = authed_client.get("/api/v1/departments")

        assert response.status_code == 200
        data = response.json()
        assert data["departments"][0]["slug"] == "engineering"
        assert data["departments"][0]["_id"] == ENGINEERING["_id"]
        assert data["message"] == "Departments fetched successfully"

    def test_get_by_slug(self, authed_client, mock_department_service):
        mock_department_service.get_department.return_value = ENGINEERING

        response = authed_client.get("/api/v1/departments/engineering")

        assert response.status_code == 200
        mock_department_service.get_department.assert_called_once_with("engineering")
        assert response.json()["department"]["metadata"] == {"floor": 3}

    def test_get_unknown_returns_404(
        self, authed_client, mock_department_service, assert_error_response
    ):
        mock_department_service.get_department.return_value = None

        response = authed_client.get("/api/v1/departments/nope")

        assert_error_response(response, 404, "not found")


class TestWriteDepartments:

    def test_create_accepts_string_metadata(self, authed_client, mock_department_service):
        mock_department_service.create_department.return_value = ENGINEERING

        response = authed_client.post(
            "/api/v1/departments",
            json={"name": "Engineering", "slug": "engineering", "metadata": '{"floor":3}'},
        )

        assert response.status_code == 201
        body = mock_department_service.create_department.call_args.args[0]
        assert body.metadata == '{"floor":3}'

    def test_create_duplicate_returns_409(
        self, authed_client, mock_department_service, assert_error_response
    ):
        mock_department_service.create_department.side_effect = DepartmentExistsError(
            "Department 'engineering' already exists"
        )

        response = authed_client.post(
            "/api/v1/departments", json={"name": "Engineering", "slug": "engineering"}
        )

        assert_error_response(response, 409, "already exists")

    def test_create_invalid_metadata_returns_400(
        self, authed_client, mock_department_service, assert_error_response
    ):
        mock_department_service.create_department.side_effect = ValueError("Expecting value")

        response = authed_client.post(
            "/api/v1/departments",
            json={"name": "Engineering", "slug": "engineering", "metadata": "{oops"},
        )

        assert_error_response(response, 400, "invalid metadata")

    def test_update_unknown_returns_404(self, authed_client, mock_department_service):
        mock_department_service.update_department.return_value = None

        response = authed_client.put("/api/v1/departments/nope", json={"name": "X"})

        assert response.status_code == 404

    def test_update(self, authed_client, mock_department_service):
        mock_department_service.update_department.return_value = {
            **ENGINEERING, "metadata": {"floor": 4},
        }

        response = authed_client.put(
            "/api/v1/departments/engineering", json={"metadata": {"floor": 4}}
        )

        assert response.status_code == 200
        assert response.json()["department"]["metadata"] == {"floor": 4}

    def test_delete(self, authed_client, mock_department_service):
        mock_department_service.delete_department.return_value = True

        response = authed_client.delete("/api/v1/departments/engineering")

        assert response.status_code == 204

    def test_delete_unknown_returns_404(self, authed_client, mock_department_service):
        mock_department_service.delete_department.return_value = False

        response = authed_client.delete("/api/v1/departments/nope")

        assert response.status_code == 404
