"""Catalogue of every Todoist tool the server can expose.

This module is the single source of tool names, descriptions, argument
models and handlers. Which of them a session actually registers is decided
by ``registry.build_registry``.
"""
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

from mcp.types import Tool

from . import handlers
from . import schemas
from .client import TodoistClient
from .models import AuthorizationContext

Handler = Callable[[Any, TodoistClient, AuthorizationContext], Awaitable[Any]]


@dataclass(frozen=True)
class ToolDescriptor:
    """Static declaration of one tool.

    ``action`` completes the error text "Error <action>: ..." shown when the
    handler fails.
    """

    name: str
    description: str
    input_model: type[schemas.ToolInput]
    handler: Handler
    action: str

    @property
    def input_schema(self) -> dict[str, Any]:
        return self.input_model.input_schema()

    def to_tool(self) -> Tool:
        return Tool(name=self.name, description=self.description, inputSchema=self.input_schema)


_DESCRIPTORS: tuple[ToolDescriptor, ...] = (
    # ============================================================================
    # User Tools
    # ============================================================================
    ToolDescriptor(
        name="me",
        description="Get the user details of the current user from Todoist",
        input_model=schemas.MeInput,
        handler=handlers.handle_me,
        action="fetching user details",
    ),
    ToolDescriptor(
        name="get_tasks_by_filter",
        description="Get tasks that match a Todoist filter query",
        input_model=schemas.GetTasksByFilterInput,
        handler=handlers.handle_get_tasks_by_filter,
        action="fetching tasks",
    ),
    # ============================================================================
    # Project Tools
    # ============================================================================
    ToolDescriptor(
        name="create_project",
        description="Create a new project in Todoist. Returns the created project with its ID and properties.",
        input_model=schemas.CreateProjectInput,
        handler=handlers.handle_create_project,
        action="creating project",
    ),
    ToolDescriptor(
        name="get_projects",
        description="Get all active projects from Todoist. Returns a list of projects with their properties. "
                    "Supports pagination.",
        input_model=schemas.GetProjectsInput,
        handler=handlers.handle_get_projects,
        action="fetching projects",
    ),
    ToolDescriptor(
        name="get_project",
        description="Get a specific project by ID from Todoist. Returns detailed information about the project.",
        input_model=schemas.ProjectIdInput,
        handler=handlers.handle_get_project,
        action="fetching project",
    ),
    ToolDescriptor(
        name="update_project",
        description="Update an existing project in Todoist. Only provide the fields you want to update.",
        input_model=schemas.UpdateProjectInput,
        handler=handlers.handle_update_project,
        action="updating project",
    ),
    ToolDescriptor(
        name="delete_project",
        description="Delete a project from Todoist. "
                    "WARNING: This will permanently delete the project and all its sections and tasks.",
        input_model=schemas.ProjectIdInput,
        handler=handlers.handle_delete_project,
        action="deleting project",
    ),
    ToolDescriptor(
        name="archive_project",
        description="Archive a project in Todoist. "
                    "Archived projects are hidden from the active projects list but can be unarchived later.",
        input_model=schemas.ProjectIdInput,
        handler=handlers.handle_archive_project,
        action="archiving project",
    ),
    ToolDescriptor(
        name="unarchive_project",
        description="Unarchive a previously archived project in Todoist. "
                    "This will restore the project to the active projects list.",
        input_model=schemas.ProjectIdInput,
        handler=handlers.handle_unarchive_project,
        action="unarchiving project",
    ),
    ToolDescriptor(
        name="get_project_collaborators",
        description="Get all collaborators for a shared project in Todoist. "
                    "Returns a list of users who have access to the project.",
        input_model=schemas.ProjectIdInput,
        handler=handlers.handle_get_project_collaborators,
        action="fetching collaborators",
    ),
    # ============================================================================
    # Section Tools
    # ============================================================================
    ToolDescriptor(
        name="create_section",
        description="Create a new section within a project in Todoist. "
                    "Sections help organize tasks within projects.",
        input_model=schemas.CreateSectionInput,
        handler=handlers.handle_create_section,
        action="creating section",
    ),
    ToolDescriptor(
        name="get_sections",
        description="Get all active sections from Todoist. Can filter by project or return all sections "
                    "across all projects. Supports pagination.",
        input_model=schemas.GetSectionsInput,
        handler=handlers.handle_get_sections,
        action="fetching sections",
    ),
    ToolDescriptor(
        name="get_section",
        description="Get a specific section by ID from Todoist. Returns detailed information about the section.",
        input_model=schemas.SectionIdInput,
        handler=handlers.handle_get_section,
        action="fetching section",
    ),
    ToolDescriptor(
        name="update_section",
        description="Update an existing section in Todoist. Currently only the section name can be updated.",
        input_model=schemas.UpdateSectionInput,
        handler=handlers.handle_update_section,
        action="updating section",
    ),
    ToolDescriptor(
        name="delete_section",
        description="Delete a section from Todoist. "
                    "WARNING: This will permanently delete the section and all tasks within it.",
        input_model=schemas.SectionIdInput,
        handler=handlers.handle_delete_section,
        action="deleting section",
    ),
    # ============================================================================
    # Task Tools
    # ============================================================================
    ToolDescriptor(
        name="create_task",
        description="Create a new task in Todoist. Tasks are the core items in your to-do list "
                    "and can be organized in projects and sections.",
        input_model=schemas.CreateTaskInput,
        handler=handlers.handle_create_task,
        action="creating task",
    ),
    ToolDescriptor(
        name="get_tasks",
        description="Get all active (non-completed) tasks from Todoist. Can filter by project, section, "
                    "parent task, or label. Supports pagination.",
        input_model=schemas.GetTasksInput,
        handler=handlers.handle_get_tasks,
        action="fetching tasks",
    ),
    ToolDescriptor(
        name="get_task",
        description="Get a specific active task by ID from Todoist. Returns detailed information about "
                    "the task including its content, due date, labels, etc.",
        input_model=schemas.TaskIdInput,
        handler=handlers.handle_get_task,
        action="fetching task",
    ),
    ToolDescriptor(
        name="update_task",
        description="Update an existing task in Todoist. Only provide the fields you want to change - "
                    "all fields are optional except task_id.",
        input_model=schemas.UpdateTaskInput,
        handler=handlers.handle_update_task,
        action="updating task",
    ),
    ToolDescriptor(
        name="delete_task",
        description="Delete a task from Todoist. WARNING: This will permanently delete the task and cannot be undone.",
        input_model=schemas.TaskIdInput,
        handler=handlers.handle_delete_task,
        action="deleting task",
    ),
    ToolDescriptor(
        name="close_task",
        description="Mark a task as completed in Todoist. The task will be moved to the completed tasks list "
                    "and can be reopened later if needed.",
        input_model=schemas.TaskIdInput,
        handler=handlers.handle_close_task,
        action="completing task",
    ),
    ToolDescriptor(
        name="reopen_task",
        description="Reopen a previously completed task in Todoist. This will move the task back to your "
                    "active task list.",
        input_model=schemas.TaskIdInput,
        handler=handlers.handle_reopen_task,
        action="reopening task",
    ),
    ToolDescriptor(
        name="move_task",
        description="Move a single task to a different project, section, or make it a sub-task of another task. "
                    "You must provide at least one destination: project_id, section_id, or parent_id. "
                    "This is the primary tool for reorganizing individual tasks.",
        input_model=schemas.MoveTaskInput,
        handler=handlers.handle_move_task,
        action="moving task",
    ),
    ToolDescriptor(
        name="quick_add_task",
        description="Quickly add a task using natural language parsing. This allows you to create tasks with "
                    "due dates, projects, labels, and priorities using natural language "
                    '(e.g., "Call mom tomorrow at 5pm #personal @phone").',
        input_model=schemas.QuickAddTaskInput,
        handler=handlers.handle_quick_add_task,
        action="creating quick task",
    ),
    ToolDescriptor(
        name="get_completed_tasks_by_completion_date",
        description="Get tasks that were completed within a specific date range, based on when they were "
                    "actually completed. Supports filtering and pagination.",
        input_model=schemas.CompletedTasksInput,
        handler=handlers.handle_get_completed_tasks_by_completion_date,
        action="fetching completed tasks",
    ),
    ToolDescriptor(
        name="get_completed_tasks_by_due_date",
        description="Get completed tasks that were originally due within a specific date range. This shows "
                    "tasks by their original due date, not when they were completed.",
        input_model=schemas.CompletedTasksInput,
        handler=handlers.handle_get_completed_tasks_by_due_date,
        action="fetching completed tasks by due date",
    ),
    # ============================================================================
    # Label Tools
    # ============================================================================
    ToolDescriptor(
        name="create_label",
        description="Create a new personal label in Todoist. Labels are used to categorize and filter tasks "
                    "across projects.",
        input_model=schemas.CreateLabelInput,
        handler=handlers.handle_create_label,
        action="creating label",
    ),
    ToolDescriptor(
        name="get_labels",
        description="Get all personal labels from Todoist. Returns a list of labels with their properties. "
                    "Supports pagination.",
        input_model=schemas.GetLabelsInput,
        handler=handlers.handle_get_labels,
        action="fetching labels",
    ),
    ToolDescriptor(
        name="get_label",
        description="Get a specific label by ID from Todoist. Returns detailed information about the label.",
        input_model=schemas.LabelIdInput,
        handler=handlers.handle_get_label,
        action="fetching label",
    ),
    ToolDescriptor(
        name="update_label",
        description="Update an existing personal label in Todoist. Only provide the fields you want to change.",
        input_model=schemas.UpdateLabelInput,
        handler=handlers.handle_update_label,
        action="updating label",
    ),
    ToolDescriptor(
        name="delete_label",
        description="Delete a personal label from Todoist. "
                    "WARNING: This will remove the label from all tasks that use it.",
        input_model=schemas.LabelIdInput,
        handler=handlers.handle_delete_label,
        action="deleting label",
    ),
    ToolDescriptor(
        name="get_shared_labels",
        description="Get all shared labels available in Todoist. Shared labels are labels that can be used "
                    "across different projects and workspaces.",
        input_model=schemas.GetSharedLabelsInput,
        handler=handlers.handle_get_shared_labels,
        action="fetching shared labels",
    ),
    ToolDescriptor(
        name="remove_shared_label",
        description="Remove a shared label from your account. This will stop the shared label from appearing "
                    "in your label list.",
        input_model=schemas.SharedLabelInput,
        handler=handlers.handle_remove_shared_label,
        action="removing shared label",
    ),
    ToolDescriptor(
        name="rename_shared_label",
        description="Rename a shared label in your account. This changes how the shared label appears in "
                    "your label list.",
        input_model=schemas.RenameSharedLabelInput,
        handler=handlers.handle_rename_shared_label,
        action="renaming shared label",
    ),
    # ============================================================================
    # Comment Tools
    # ============================================================================
    ToolDescriptor(
        name="create_comment",
        description="Create a new comment on a task or project in Todoist. Comments help add context, notes, "
                    "or updates to tasks and projects. Either task_id or project_id must be provided.",
        input_model=schemas.CreateCommentInput,
        handler=handlers.handle_create_comment,
        action="creating comment",
    ),
    ToolDescriptor(
        name="get_comments",
        description="Get all comments for a specific task or project in Todoist. Either task_id or project_id "
                    "must be provided. Supports pagination.",
        input_model=schemas.GetCommentsInput,
        handler=handlers.handle_get_comments,
        action="fetching comments",
    ),
    ToolDescriptor(
        name="get_comment",
        description="Get a specific comment by ID from Todoist. Returns detailed information about the comment "
                    "including its content, author, and timestamps.",
        input_model=schemas.CommentIdInput,
        handler=handlers.handle_get_comment,
        action="fetching comment",
    ),
    ToolDescriptor(
        name="update_comment",
        description="Update the content of an existing comment in Todoist. Only the comment content can be modified.",
        input_model=schemas.UpdateCommentInput,
        handler=handlers.handle_update_comment,
        action="updating comment",
    ),
    ToolDescriptor(
        name="delete_comment",
        description="Delete a comment from Todoist. WARNING: This will permanently delete the comment and "
                    "cannot be undone.",
        input_model=schemas.CommentIdInput,
        handler=handlers.handle_delete_comment,
        action="deleting comment",
    ),
)

_BY_NAME: dict[str, ToolDescriptor] = {descriptor.name: descriptor for descriptor in _DESCRIPTORS}


def get_tool_descriptors() -> list[ToolDescriptor]:
    """Get every tool descriptor in catalogue order."""
    return list(_DESCRIPTORS)


def get_tool_descriptor(name: str) -> Optional[ToolDescriptor]:
    return _BY_NAME.get(name)
