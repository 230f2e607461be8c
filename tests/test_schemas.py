"""Tests for tool input models, advertised schemas and configuration."""
import pytest
from pydantic import ValidationError

from todoist_mcp.config import DEFAULT_API_BASE_URL, ESSENTIAL_TOOLS, ServerConfig, get_config
from todoist_mcp.models import AuthorizationContext
from todoist_mcp.schemas import (
    CompletedTasksInput,
    CreateCommentInput,
    CreateProjectInput,
    CreateTaskInput,
    GetTasksInput,
    LabelIdInput,
    MeInput,
    UpdateTaskInput,
)


class TestInputSchema:
    """JSON Schema advertised to MCP clients."""

    def test_required_and_optional_fields(self):
        schema = CreateTaskInput.input_schema()

        assert schema["type"] == "object"
        assert schema["required"] == ["content"]
        assert "title" not in schema

    def test_optional_fields_are_plain_types(self):
        """Optional fields show their own type, without a null branch or default."""
        description = CreateTaskInput.input_schema()["properties"]["description"]

        assert description["type"] == "string"
        assert "anyOf" not in description
        assert "default" not in description
        assert "title" not in description

    def test_numeric_bounds(self):
        properties = CreateTaskInput.input_schema()["properties"]
        assert properties["priority"]["minimum"] == 1
        assert properties["priority"]["maximum"] == 4

        limit = GetTasksInput.input_schema()["properties"]["limit"]
        assert (limit["type"], limit["minimum"], limit["maximum"]) == ("integer", 1, 200)

        completed_limit = CompletedTasksInput.input_schema()["properties"]["limit"]
        assert completed_limit["maximum"] == 50

    def test_enumerations(self):
        properties = CreateProjectInput.input_schema()["properties"]
        assert len(properties["color"]["enum"]) == 20
        assert "berry_red" in properties["color"]["enum"]
        assert properties["view_style"]["enum"] == ["list", "board"]

    def test_array_field(self):
        labels = CreateTaskInput.input_schema()["properties"]["labels"]
        assert labels == {
            "type": "array",
            "items": {"type": "string"},
            "description": "Array of label names to apply to the task",
        }

    def test_completed_task_queries_require_date_range(self):
        assert sorted(CompletedTasksInput.input_schema()["required"]) == ["since", "until"]

    def test_empty_input(self):
        schema = MeInput.input_schema()
        assert schema["type"] == "object"
        assert schema["properties"] == {}


class TestValidation:
    def test_priority_out_of_range(self):
        with pytest.raises(ValidationError):
            CreateTaskInput.model_validate({"content": "x", "priority": 5})

    def test_unknown_color(self):
        with pytest.raises(ValidationError):
            CreateProjectInput.model_validate({"name": "x", "color": "plaid"})

    def test_missing_required(self):
        with pytest.raises(ValidationError):
            CreateTaskInput.model_validate({})

    def test_label_id_must_be_numeric(self):
        with pytest.raises(ValidationError):
            LabelIdInput.model_validate({"label_id": "not-a-number"})

    def test_unknown_keys_are_ignored(self):
        params = CreateTaskInput.model_validate({"content": "x", "bogus": 1})
        assert "bogus" not in params.model_dump()


class TestPresentFields:
    """Partial records built from supplied fields."""

    def test_absent_fields_are_left_out(self):
        params = UpdateTaskInput.model_validate({"task_id": "1"})
        assert params.present("content", "description", "priority") == {}

    def test_falsy_values_are_kept(self):
        params = UpdateTaskInput.model_validate({"task_id": "1", "description": "", "labels": []})
        assert params.present("content", "description", "labels") == {"description": "", "labels": []}

    def test_nested_model_is_dumped_without_absent_fields(self):
        params = CreateCommentInput.model_validate({
            "content": "See attached",
            "task_id": "7",
            "attachment": {"file_url": "https://example.com/a.pdf"},
        })
        assert params.present("content", "task_id", "project_id", "attachment") == {
            "content": "See attached",
            "task_id": "7",
            "attachment": {"file_url": "https://example.com/a.pdf"},
        }


class TestConfig:
    def test_defaults(self):
        config = ServerConfig()
        assert config.minimal_tool_set is True
        assert config.essential_tools == ESSENTIAL_TOOLS
        assert config.api_base_url == DEFAULT_API_BASE_URL

    def test_config_is_immutable(self):
        config = ServerConfig()
        with pytest.raises(ValidationError):
            config.minimal_tool_set = False

    def test_get_config_from_environment(self):
        config = get_config({
            "TODOIST_MINIMAL_TOOL_SET": "false",
            "TODOIST_API_BASE_URL": "http://localhost:9000/rest/v2",
            "TODOIST_TIMEOUT": "5",
        })
        assert config.minimal_tool_set is False
        assert config.api_base_url == "http://localhost:9000/rest/v2"
        assert config.timeout == 5.0

    @pytest.mark.parametrize("value,expected", [
        ("1", True), ("TRUE", True), ("yes", True), ("on", True),
        ("0", False), ("no", False), ("off", False), ("", True),
    ])
    def test_minimal_flag_parsing(self, value, expected):
        assert get_config({"TODOIST_MINIMAL_TOOL_SET": value}).minimal_tool_set is expected

    def test_context_repr_hides_token(self):
        context = AuthorizationContext(access_token="secret-token", email="a@b.c")
        assert "secret-token" not in repr(context)
