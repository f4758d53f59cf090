"""
Tests for module endpoints and the active module pointer.

System role: Verification of the module management HTTP contract
"""

import uuid

from tutorbot.api.deps.dependencies import get_module_service, require_admin
from tutorbot.core.exceptions import NotFoundError, PermissionDeniedError

from factories import make_module


class TestModuleEndpoints:
    def test_list_modules(self, client, override, user_id) -> None:
        # Arrange
        service = override(get_module_service)
        service.list_modules.return_value = [make_module(name="Algebra"), make_module(name="Biology")]

        # Act
        response = client.get("/api/v1/modules")

        # Assert
        assert response.status_code == 200
        assert [m["name"] for m in response.json()] == ["Algebra", "Biology"]
        service.list_modules.assert_awaited_once_with(user_id)

    def test_create_module(self, client, override, user_id) -> None:
        # Arrange
        service = override(get_module_service)
        service.create_module.return_value = make_module(user_id=user_id, name="Graphs")

        # Act
        response = client.post("/api/v1/modules", json={"name": "Graphs", "code": "CS301"})

        # Assert
        assert response.status_code == 201
        assert response.json()["name"] == "Graphs"
        kwargs = service.create_module.await_args.kwargs
        assert kwargs["is_global"] is False
        assert kwargs["code"] == "CS301"

    def test_create_global_module_as_non_admin_is_403(self, client, override) -> None:
        # Arrange
        service = override(get_module_service)
        service.create_module.side_effect = PermissionDeniedError("Only admins can create global modules")

        # Act
        response = client.post("/api/v1/modules", json={"name": "Shared", "is_global": True})

        # Assert
        assert response.status_code == 403
        assert response.json() == {
            "success": False,
            "error": "Only admins can create global modules",
            "details": None,
        }

    def test_blank_name_rejected(self, client, override) -> None:
        override(get_module_service)

        response = client.post("/api/v1/modules", json={"name": ""})

        assert response.status_code == 400

    def test_update_passes_only_sent_fields(self, client, override, user_id) -> None:
        # Arrange
        service = override(get_module_service)
        module = make_module(name="Graphs II")
        service.update_module.return_value = module

        # Act
        response = client.put(f"/api/v1/modules/{module.id}", json={"name": "Graphs II"})

        # Assert
        assert response.status_code == 200
        service.update_module.assert_awaited_once_with(module.id, user_id, name="Graphs II")

    def test_unknown_module_is_404(self, client, override) -> None:
        # Arrange
        service = override(get_module_service)
        module_id = uuid.uuid4()
        service.get_module.side_effect = NotFoundError("module", module_id)

        # Act
        response = client.get(f"/api/v1/modules/{module_id}")

        # Assert
        assert response.status_code == 404
        assert response.json()["details"] == {"module_id": str(module_id)}

    def test_delete_module(self, client, override, user_id) -> None:
        # Arrange
        service = override(get_module_service)
        module_id = uuid.uuid4()

        # Act
        response = client.delete(f"/api/v1/modules/{module_id}")

        # Assert
        assert response.status_code == 200
        service.delete_module.assert_awaited_once_with(module_id, user_id)


class TestActiveModuleEndpoints:
    def test_active_route_not_shadowed_by_module_id(self, client, override) -> None:
        # Arrange
        service = override(get_module_service)
        service.get_active_module.return_value = None

        # Act
        response = client.get("/api/v1/modules/active")

        # Assert
        assert response.status_code == 200
        assert response.json() == {"module_id": None, "module": None}
        service.get_module.assert_not_awaited()

    def test_set_active_module_as_admin(self, app, client, override, admin_id) -> None:
        # Arrange
        app.dependency_overrides[require_admin] = lambda: admin_id
        service = override(get_module_service)
        module = make_module(is_global=True)
        service.set_active_module.return_value = module

        # Act
        response = client.put("/api/v1/modules/active", json={"module_id": str(module.id)})

        # Assert
        assert response.status_code == 200
        assert response.json()["module_id"] == str(module.id)
        service.set_active_module.assert_awaited_once_with(module.id, changed_by=admin_id)

    def test_set_active_module_requires_admin(self, app, client, override) -> None:
        # Arrange
        def deny():
            raise PermissionDeniedError("Admin role required")

        app.dependency_overrides[require_admin] = deny
        service = override(get_module_service)

        # Act
        response = client.put("/api/v1/modules/active", json={"module_id": None})

        # Assert
        assert response.status_code == 403
        service.set_active_module.assert_not_awaited()
