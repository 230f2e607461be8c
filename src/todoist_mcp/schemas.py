"""Pydantic input models for every Todoist tool.

Each model is both the validator for incoming tool arguments and the source of
the JSON Schema advertised to MCP clients. Optional fields default to ``None``,
which means "not supplied"; falsy values such as ``""``, ``0`` or ``False``
count as supplied.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.json_schema import GenerateJsonSchema

from .models import Color, ViewStyle


PRIORITY_DESCRIPTION = "1 (normal), 2 (high), 3 (very high), 4 (urgent)"
CURSOR_DESCRIPTION = "Pagination cursor from previous response for fetching next page"


def _limit_field(resource: str, maximum: int = 200) -> Any:
    return Field(
        None,
        ge=1,
        le=maximum,
        description=f"Number of {resource} to return per page (default: 50, max: {maximum})",
    )


class ToolSchemaGenerator(GenerateJsonSchema):
    """Advertise ``Optional[X] = None`` fields as plain, untitled ``X``."""

    def nullable_schema(self, schema):
        return self.generate_inner(schema["schema"])

    def default_schema(self, schema):
        json_schema = super().default_schema(schema)
        if "default" in json_schema and json_schema["default"] is None:
            del json_schema["default"]
        return json_schema

    def field_title_should_be_set(self, schema) -> bool:
        return False


class ToolInput(BaseModel):
    """Base class for tool argument models."""

    model_config = ConfigDict(extra="ignore")

    @classmethod
    def input_schema(cls) -> dict[str, Any]:
        """JSON Schema for the MCP ``inputSchema`` of the tool."""
        schema = cls.model_json_schema(schema_generator=ToolSchemaGenerator)
        schema.pop("title", None)
        return schema

    def present(self, *names: str) -> dict[str, Any]:
        """Build a partial record of the named fields that were supplied.

        A field is left out only when it is ``None``.
        """
        return self.model_dump(include=set(names), exclude_none=True)


# ============================================================================
# User
# ============================================================================

class MeInput(ToolInput):
    pass


# ============================================================================
# Projects
# ============================================================================

class CreateProjectInput(ToolInput):
    name: str = Field(..., description="Name of the project to create")
    description: Optional[str] = Field(None, description="Optional description for the project")
    parent_id: Optional[str] = Field(None, description="ID of parent project to nest this project under")
    color: Optional[Color] = Field(None, description="Color of the project icon")
    is_favorite: Optional[bool] = Field(None, description="Whether to mark this project as a favorite")
    view_style: Optional[ViewStyle] = Field(
        None, description="Project view style - list or board (kanban) view"
    )


class GetProjectsInput(ToolInput):
    cursor: Optional[str] = Field(None, description=CURSOR_DESCRIPTION)
    limit: Optional[int] = _limit_field("projects")


class ProjectIdInput(ToolInput):
    project_id: str = Field(..., description="ID of the project")


class UpdateProjectInput(ToolInput):
    project_id: str = Field(..., description="ID of the project to update")
    name: Optional[str] = Field(None, description="New name for the project")
    description: Optional[str] = Field(None, description="New description for the project")
    color: Optional[Color] = Field(None, description="New color for the project icon")
    is_favorite: Optional[bool] = Field(None, description="Whether to mark this project as a favorite")
    view_style: Optional[ViewStyle] = Field(
        None, description="Project view style - list or board (kanban) view"
    )


# ============================================================================
# Sections
# ============================================================================

class CreateSectionInput(ToolInput):
    name: str = Field(..., description="Name of the section to create")
    project_id: str = Field(..., description="ID of the project where the section will be created")
    order: Optional[int] = Field(None, description="Position of the section within the project (optional)")


class GetSectionsInput(ToolInput):
    project_id: Optional[str] = Field(None, description="Filter sections by specific project ID (optional)")
    cursor: Optional[str] = Field(None, description=CURSOR_DESCRIPTION)
    limit: Optional[int] = _limit_field("sections")


class SectionIdInput(ToolInput):
    section_id: str = Field(..., description="ID of the section")


class UpdateSectionInput(ToolInput):
    section_id: str = Field(..., description="ID of the section to update")
    name: str = Field(..., description="New name for the section")


# ============================================================================
# Tasks
# ============================================================================

class GetTasksByFilterInput(ToolInput):
    filter: str = Field(
        ...,
        description="Filter by any [supported filter](https://todoist.com/help/articles/introduction-to-filters-V98wIH). "
                    "Multiple filters (using the comma `,` operator) are not supported.",
    )


class CreateTaskInput(ToolInput):
    content: str = Field(..., description="The text content of the task - what needs to be done")
    description: Optional[str] = Field(None, description="Optional detailed description of the task")
    project_id: Optional[str] = Field(
        None, description="ID of the project to add the task to (defaults to Inbox if not specified)"
    )
    section_id: Optional[str] = Field(None, description="ID of the section within the project to add the task to")
    parent_id: Optional[str] = Field(None, description="ID of the parent task to create this as a sub-task")
    labels: Optional[list[str]] = Field(None, description="Array of label names to apply to the task")
    priority: Optional[int] = Field(None, ge=1, le=4, description=f"Task priority: {PRIORITY_DESCRIPTION}")
    due_string: Optional[str] = Field(
        None, description='Due date in natural language (e.g., "tomorrow at 3pm", "next Monday")'
    )
    due_date: Optional[str] = Field(None, description="Due date in YYYY-MM-DD format")
    due_datetime: Optional[str] = Field(
        None, description='Due date and time in ISO datetime format (e.g., "2023-12-31T15:00:00Z")'
    )
    deadline_date: Optional[str] = Field(
        None,
        description="Deadline date in YYYY-MM-DD format (when the task must be completed by, "
                    "relative to user timezone)",
    )
    assignee_id: Optional[str] = Field(
        None, description="ID of the user to assign this task to (for shared projects)"
    )


class GetTasksInput(ToolInput):
    project_id: Optional[str] = Field(None, description="Filter tasks by specific project ID")
    section_id: Optional[str] = Field(None, description="Filter tasks by specific section ID")
    parent_id: Optional[str] = Field(None, description="Filter tasks by parent task ID (get sub-tasks)")
    label: Optional[str] = Field(None, description="Filter tasks by label name")
    ids: Optional[str] = Field(None, description="Comma-separated list of specific task IDs to retrieve")
    cursor: Optional[str] = Field(None, description=CURSOR_DESCRIPTION)
    limit: Optional[int] = _limit_field("tasks")


class TaskIdInput(ToolInput):
    task_id: str = Field(..., description="ID of the task")


class UpdateTaskInput(ToolInput):
    task_id: str = Field(..., description="ID of the task to update")
    content: Optional[str] = Field(None, description="New text content of the task")
    description: Optional[str] = Field(None, description="New description of the task")
    labels: Optional[list[str]] = Field(None, description="New array of label names (replaces existing labels)")
    priority: Optional[int] = Field(None, ge=1, le=4, description=f"New priority: {PRIORITY_DESCRIPTION}")
    due_string: Optional[str] = Field(None, description="New due date in natural language")
    due_date: Optional[str] = Field(None, description="New due date in YYYY-MM-DD format")
    due_datetime: Optional[str] = Field(None, description="New due date and time in ISO datetime format")
    deadline_date: Optional[str] = Field(
        None,
        description="New deadline date in YYYY-MM-DD format (when the task must be completed by, "
                    "relative to user timezone)",
    )
    assignee_id: Optional[str] = Field(None, description="ID of the user to assign this task to")


class MoveTaskInput(ToolInput):
    task_id: str = Field(..., description="ID of the task to move")
    project_id: Optional[str] = Field(
        None,
        description="ID of the destination project (optional - provide this to move task to a different project)",
    )
    section_id: Optional[str] = Field(
        None,
        description="ID of the destination section within a project "
                    "(optional - provide this to move task to a specific section)",
    )
    parent_id: Optional[str] = Field(
        None,
        description="ID of the parent task to make this task a subtask "
                    "(optional - provide this to create a parent-child relationship)",
    )


class QuickAddTaskInput(ToolInput):
    text: str = Field(
        ...,
        description="Task text with natural language parsing - can include due dates, "
                    "project names with #, labels with @, and priorities with p1-p4",
    )
    note: Optional[str] = Field(None, description="Additional note/description for the task")
    reminder: Optional[str] = Field(None, description="When to be reminded of this task in natural language")
    auto_reminder: Optional[bool] = Field(
        None, description="Add default reminder for tasks with due times (default: false)"
    )


class CompletedTasksInput(ToolInput):
    since: str = Field(..., description="Start date for the range in YYYY-MM-DD format")
    until: str = Field(..., description="End date for the range in YYYY-MM-DD format")
    project_id: Optional[str] = Field(None, description="Filter by specific project ID")
    section_id: Optional[str] = Field(None, description="Filter by specific section ID")
    parent_id: Optional[str] = Field(None, description="Filter by parent task ID")
    filter_query: Optional[str] = Field(None, description="Filter using Todoist query syntax")
    filter_lang: Optional[str] = Field(None, description="Language for filter query (2-letter code)")
    workspace_id: Optional[int] = Field(None, description="Filter by workspace ID")
    limit: Optional[int] = Field(None, ge=1, le=50, description="Number of tasks to return (max 50, default: 50)")
    cursor: Optional[str] = Field(None, description="Pagination cursor for next page")


# ============================================================================
# Labels
# ============================================================================

class CreateLabelInput(ToolInput):
    name: str = Field(..., description="Name of the label to create")
    color: Optional[Color] = Field(None, description="Color of the label")
    order: Optional[int] = Field(None, description="Position order of the label")
    is_favorite: Optional[bool] = Field(None, description="Whether to mark this label as a favorite")


class GetLabelsInput(ToolInput):
    cursor: Optional[str] = Field(None, description=CURSOR_DESCRIPTION)
    limit: Optional[int] = _limit_field("labels")


class LabelIdInput(ToolInput):
    label_id: int = Field(..., description="ID of the label (must be a number)")


class UpdateLabelInput(ToolInput):
    label_id: int = Field(..., description="ID of the label to update (must be a number)")
    name: Optional[str] = Field(None, description="New name for the label")
    color: Optional[Color] = Field(None, description="New color for the label")
    order: Optional[int] = Field(None, description="New position order of the label")
    is_favorite: Optional[bool] = Field(None, description="Whether to mark this label as a favorite")


class GetSharedLabelsInput(ToolInput):
    omit_personal: Optional[bool] = Field(
        None, description="Whether to omit personal labels from the results (default: false)"
    )


class SharedLabelInput(ToolInput):
    name: str = Field(..., description="Name of the shared label")


class RenameSharedLabelInput(ToolInput):
    name: str = Field(..., description="Current name of the shared label to rename")
    new_name: str = Field(..., description="New name for the shared label")


# ============================================================================
# Comments
# ============================================================================

class Attachment(BaseModel):
    file_url: str = Field(..., description="URL of the file to attach")
    file_name: Optional[str] = Field(None, description="Name of the attached file")
    file_type: Optional[str] = Field(None, description="MIME type of the attached file")
    resource_type: Optional[str] = Field(None, description="Type of the attached resource")


class CreateCommentInput(ToolInput):
    content: str = Field(..., description="The text content of the comment")
    task_id: Optional[str] = Field(
        None, description="ID of the task to comment on (either task_id or project_id is required)"
    )
    project_id: Optional[str] = Field(
        None, description="ID of the project to comment on (either task_id or project_id is required)"
    )
    attachment: Optional[Attachment] = Field(None, description="Optional file attachment for the comment")


class GetCommentsInput(ToolInput):
    task_id: Optional[str] = Field(
        None, description="ID of the task to get comments for (either task_id or project_id is required)"
    )
    project_id: Optional[str] = Field(
        None, description="ID of the project to get comments for (either task_id or project_id is required)"
    )
    cursor: Optional[str] = Field(None, description=CURSOR_DESCRIPTION)
    limit: Optional[int] = _limit_field("comments")


class CommentIdInput(ToolInput):
    comment_id: str = Field(..., description="ID of the comment")


class UpdateCommentInput(ToolInput):
    comment_id: str = Field(..., description="ID of the comment to update")
    content: str = Field(..., description="New text content for the comment")
