"""
Tests for POST /api/v1/chat.

System role: Verification of the stateless chat HTTP contract
"""

import uuid

from langchain_core.messages import AIMessage, HumanMessage

from tutorbot.api.deps.dependencies import get_chat_service
from tutorbot.application.services import ChatResult
from tutorbot.core.exceptions import ChatCompletionError, ValidationError


class TestChatEndpoint:
    def test_returns_reply_with_camel_case_fields(self, client, override) -> None:
        # Arrange
        service = override(get_chat_service)
        service.process_chat.return_value = ChatResult(
            response="What do you already know about heaps?",
            has_module_content=True,
        )
        module_id = uuid.uuid4()

        # Act
        response = client.post(
            "/api/v1/chat",
            json={
                "messages": [
                    {"role": "user", "content": "hi"},
                    {"role": "assistant", "content": "hello"},
                    {"role": "user", "content": "What is a heap?"},
                ],
                "moduleId": str(module_id),
            },
        )

        # Assert
        assert response.status_code == 200
        assert response.json() == {
            "response": "What do you already know about heaps?",
            "toolsUsed": [],
            "hasModuleContent": True,
        }
        messages, passed_module_id = service.process_chat.await_args.args
        assert [type(m) for m in messages] == [HumanMessage, AIMessage, HumanMessage]
        assert messages[-1].content == "What is a heap?"
        assert passed_module_id == module_id

    def test_module_id_optional(self, client, override) -> None:
        # Arrange
        service = override(get_chat_service)
        service.process_chat.return_value = ChatResult(response="ok", has_module_content=False)

        # Act
        response = client.post("/api/v1/chat", json={"messages": [{"role": "user", "content": "hi"}]})

        # Assert
        assert response.status_code == 200
        assert service.process_chat.await_args.args[1] is None

    def test_invalid_role_rejected(self, client, override) -> None:
        # Arrange
        service = override(get_chat_service)

        # Act
        response = client.post("/api/v1/chat", json={"messages": [{"role": "tool", "content": "x"}]})

        # Assert
        assert response.status_code == 400
        assert response.json()["success"] is False
        service.process_chat.assert_not_awaited()

    def test_service_validation_error_is_400(self, client, override) -> None:
        # Arrange
        service = override(get_chat_service)
        service.process_chat.side_effect = ValidationError("Last message must be from the user")

        # Act
        response = client.post("/api/v1/chat", json={"messages": []})

        # Assert
        assert response.status_code == 400
        assert response.json()["error"] == "Last message must be from the user"

    def test_upstream_failure_is_502(self, client, override) -> None:
        # Arrange
        service = override(get_chat_service)
        service.process_chat.side_effect = ChatCompletionError("rate limited", status_code=429)

        # Act
        response = client.post("/api/v1/chat", json={"messages": [{"role": "user", "content": "hi"}]})

        # Assert
        assert response.status_code == 502
        assert response.json()["success"] is False

    def test_missing_identity_is_401(self, anonymous_client, override) -> None:
        override(get_chat_service)

        response = anonymous_client.post("/api/v1/chat", json={"messages": [{"role": "user", "content": "hi"}]})

        assert response.status_code == 401

    def test_malformed_identity_is_401(self, anonymous_client, override) -> None:
        override(get_chat_service)

        response = anonymous_client.post(
            "/api/v1/chat",
            json={"messages": [{"role": "user", "content": "hi"}]},
            headers={"X-User-Id": "not-a-uuid"},
        )

        assert response.status_code == 401
