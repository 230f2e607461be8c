"""Tool handlers for the Todoist MCP server.

All handlers follow the same pattern:
- Accept: a validated input model, a TodoistClient and the session's AuthorizationContext
- Return: a payload (JSON-serializable data or a confirmation string)
- Raise on failure; the dispatcher turns exceptions into error results

Handlers never build MCP content themselves.
"""
import logging
from typing import Any

from . import formatters
from .client import TodoistClient
from .errors import ToolPreconditionError
from .models import AuthorizationContext, Destination
from .schemas import (
    CommentIdInput,
    CompletedTasksInput,
    CreateCommentInput,
    CreateLabelInput,
    CreateProjectInput,
    CreateSectionInput,
    CreateTaskInput,
    GetCommentsInput,
    GetLabelsInput,
    GetProjectsInput,
    GetSectionsInput,
    GetSharedLabelsInput,
    GetTasksByFilterInput,
    GetTasksInput,
    LabelIdInput,
    MeInput,
    MoveTaskInput,
    ProjectIdInput,
    QuickAddTaskInput,
    RenameSharedLabelInput,
    SectionIdInput,
    SharedLabelInput,
    TaskIdInput,
    UpdateCommentInput,
    UpdateLabelInput,
    UpdateProjectInput,
    UpdateSectionInput,
    UpdateTaskInput,
)

logger = logging.getLogger("todoist-mcp.handlers")

PROJECT_FIELDS = ("name", "description", "parent_id", "color", "is_favorite", "view_style")
TASK_FIELDS = (
    "content", "description", "labels", "priority", "due_string", "due_date",
    "due_datetime", "deadline_date", "assignee_id",
)
COMPLETED_TASK_FILTERS = (
    "since", "until", "project_id", "section_id", "parent_id", "filter_query",
    "filter_lang", "workspace_id", "limit", "cursor",
)
LABEL_FIELDS = ("name", "color", "order", "is_favorite")


# ============================================================================
# User Handlers
# ============================================================================

async def handle_me(
    params: MeInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """Identity of the authorized user, taken from the session without an API call."""
    return {"email": context.email, "full_name": context.full_name}


# ============================================================================
# Project Handlers
# ============================================================================

async def handle_create_project(
    params: CreateProjectInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """Create a project and return it as Todoist stores it.

    Errors: 400 (invalid color or parent_id), 403 (project limit reached)
    """
    return await client.post("/projects", params.present(*PROJECT_FIELDS))


async def handle_get_projects(
    params: GetProjectsInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """List projects.

    Returns Todoist's page as-is: ``results`` plus ``next_cursor`` for the
    following page (null on the last one).
    """
    return await client.get("/projects", params.present("cursor", "limit"))


async def handle_get_project(
    params: ProjectIdInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """Get one project with its color, view style and favorite flag.

    Errors: 404 (not found)
    """
    return await client.get(f"/projects/{params.project_id}")


async def handle_update_project(
    params: UpdateProjectInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """Update a project, sending only the fields the caller supplied.

    Returns the updated project.
    Errors: 404 (not found), 400 (invalid field value)
    """
    return await client.post(f"/projects/{params.project_id}", params.present(*PROJECT_FIELDS))


async def handle_delete_project(
    params: ProjectIdInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """Delete a project together with its sections and tasks."""
    await client.delete(f"/projects/{params.project_id}")
    logger.info(f"Deleted project {params.project_id}")
    return "Project deleted successfully"


async def handle_archive_project(
    params: ProjectIdInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """Archive a project."""
    await client.post(f"/projects/{params.project_id}/archive")
    return "Project archived successfully"


async def handle_unarchive_project(
    params: ProjectIdInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """Restore an archived project."""
    await client.post(f"/projects/{params.project_id}/unarchive")
    return "Project unarchived successfully"


async def handle_get_project_collaborators(
    params: ProjectIdInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """List the users a project is shared with (id, name, email).

    Errors: 404 (not found), 403 (project not shared with the caller)
    """
    return await client.get(f"/projects/{params.project_id}/collaborators")


# ============================================================================
# Section Handlers
# ============================================================================

async def handle_create_section(
    params: CreateSectionInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """Create a section in a project.

    Errors: 404 (project not found)
    """
    return await client.post("/sections", params.present("name", "project_id", "order"))


async def handle_get_sections(
    params: GetSectionsInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """List sections, optionally for one project.

    Returns a ``results`` / ``next_cursor`` page.
    """
    return await client.get("/sections", params.present("project_id", "cursor", "limit"))


async def handle_get_section(
    params: SectionIdInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """Get one section.

    Errors: 404 (not found)
    """
    return await client.get(f"/sections/{params.section_id}")


async def handle_update_section(
    params: UpdateSectionInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """Rename a section and return it.

    Errors: 404 (not found)
    """
    return await client.post(f"/sections/{params.section_id}", {"name": params.name})


async def handle_delete_section(
    params: SectionIdInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """Delete a section and the tasks in it."""
    await client.delete(f"/sections/{params.section_id}")
    logger.info(f"Deleted section {params.section_id}")
    return "Section deleted successfully"


# ============================================================================
# Task Handlers
# ============================================================================

async def handle_get_tasks_by_filter(
    params: GetTasksByFilterInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """Run a Todoist filter query and keep only content, description and due date.

    The filter string is passed through untouched; Todoist parses it.
    Errors: 400 (filter syntax error)
    """
    result = await client.get("/tasks", {"filter": params.filter})
    tasks = [formatters.format_task_summary(task) for task in formatters.task_items(result)]
    logger.info(f"Filter {params.filter!r} matched {len(tasks)} tasks")
    return tasks


async def handle_create_task(
    params: CreateTaskInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """Create a task and return it, including the parsed ``due`` object.

    Tasks without project_id land in the Inbox.
    Errors: 400 (invalid due string or priority), 404 (project or section not found)
    """
    data = params.present("project_id", "section_id", "parent_id", *TASK_FIELDS)
    return await client.post("/tasks", data)


async def handle_get_tasks(
    params: GetTasksInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """List active tasks matching the given project, section, parent, label or ids.

    Returns a ``results`` / ``next_cursor`` page.
    """
    query = params.present("project_id", "section_id", "parent_id", "label", "ids", "cursor", "limit")
    return await client.get("/tasks", query)


async def handle_get_task(
    params: TaskIdInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """Get one active task.

    Errors: 404 (not found or already completed)
    """
    return await client.get(f"/tasks/{params.task_id}")


async def handle_update_task(
    params: UpdateTaskInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """Update a task, sending only the fields the caller supplied.

    Task location cannot change here; move_task covers project, section and parent.
    Returns the updated task.
    Errors: 404 (not found), 400 (invalid field value)
    """
    return await client.post(f"/tasks/{params.task_id}", params.present(*TASK_FIELDS))


async def handle_delete_task(
    params: TaskIdInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """Delete a task and its sub-tasks."""
    await client.delete(f"/tasks/{params.task_id}")
    logger.info(f"Deleted task {params.task_id}")
    return "Task deleted successfully"


async def handle_close_task(
    params: TaskIdInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """Complete a task; recurring tasks move to their next occurrence."""
    await client.post(f"/tasks/{params.task_id}/close")
    return "Task completed successfully"


async def handle_reopen_task(
    params: TaskIdInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    await client.post(f"/tasks/{params.task_id}/reopen")
    return "Task reopened successfully"


async def handle_move_task(
    params: MoveTaskInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """Move a task to another project, section or parent task.

    At least one destination is required; without one nothing is sent upstream.
    Returns a confirmation followed by the raw sync response.
    Errors: command status other than "ok" (e.g. destination not found)
    """
    destination = Destination(
        project_id=params.project_id,
        section_id=params.section_id,
        parent_id=params.parent_id,
    )
    if destination.is_empty():
        raise ToolPreconditionError(
            "At least one destination must be provided (project_id, section_id, or parent_id)"
        )

    result = await client.move_task(params.task_id, destination)
    logger.info(f"Moved task {params.task_id} to {destination.to_args()}")
    return f"Task moved successfully.\n{formatters.format_payload(result)}"


async def handle_quick_add_task(
    params: QuickAddTaskInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """Create a task from natural language; Todoist does the parsing."""
    data = params.present("text", "note", "reminder", "auto_reminder")
    return await client.post("/tasks/quick", data)


async def handle_get_completed_tasks_by_completion_date(
    params: CompletedTasksInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """List tasks completed between since and until.

    Returns ``items`` plus ``next_cursor``.
    Errors: 400 (range longer than Todoist allows)
    """
    query = params.present(*COMPLETED_TASK_FILTERS)
    return await client.get("/tasks/completed/by_completion_date", query)


async def handle_get_completed_tasks_by_due_date(
    params: CompletedTasksInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """Same as the completion-date query, windowed on the original due date."""
    query = params.present(*COMPLETED_TASK_FILTERS)
    return await client.get("/tasks/completed/by_due_date", query)


# ============================================================================
# Label Handlers
# ============================================================================

async def handle_create_label(
    params: CreateLabelInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """Create a personal label.

    Errors: 400 (name already in use)
    """
    return await client.post("/labels", params.present(*LABEL_FIELDS))


async def handle_get_labels(
    params: GetLabelsInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """List personal labels as a ``results`` / ``next_cursor`` page."""
    return await client.get("/labels", params.present("cursor", "limit"))


async def handle_get_label(
    params: LabelIdInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """Get one personal label.

    Errors: 404 (not found)
    """
    return await client.get(f"/labels/{params.label_id}")


async def handle_update_label(
    params: UpdateLabelInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """Update a personal label and return it.

    Errors: 404 (not found), 400 (name already in use)
    """
    return await client.post(f"/labels/{params.label_id}", params.present(*LABEL_FIELDS))


async def handle_delete_label(
    params: LabelIdInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """Delete a personal label; tasks lose it."""
    await client.delete(f"/labels/{params.label_id}")
    logger.info(f"Deleted label {params.label_id}")
    return "Label deleted successfully"


async def handle_get_shared_labels(
    params: GetSharedLabelsInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """List label names used on shared tasks.

    Returns a ``results`` / ``next_cursor`` page of names.
    """
    # omit_personal=False is dropped by the client's query building, which is the API default anyway
    return await client.get("/labels/shared", params.present("omit_personal"))


async def handle_remove_shared_label(
    params: SharedLabelInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """Remove a shared label from every task that carries it."""
    await client.post("/labels/shared/remove", {"name": params.name})
    return "Shared label removed successfully"


async def handle_rename_shared_label(
    params: RenameSharedLabelInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    await client.post("/labels/shared/rename", {"name": params.name, "new_name": params.new_name})
    return "Shared label renamed successfully"


# ============================================================================
# Comment Handlers
# ============================================================================

async def handle_create_comment(
    params: CreateCommentInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """Comment on a task or a project.

    Todoist rejects comments with neither task_id nor project_id; that error
    is reported as-is rather than checked here.
    Errors: 400 (no parent given), 404 (task or project not found)
    """
    data = params.present("content", "task_id", "project_id", "attachment")
    return await client.post("/comments", data)


async def handle_get_comments(
    params: GetCommentsInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """List comments on a task or a project.

    Returns a ``results`` / ``next_cursor`` page.
    Errors: 400 (neither task_id nor project_id given)
    """
    return await client.get("/comments", params.present("task_id", "project_id", "cursor", "limit"))


async def handle_get_comment(
    params: CommentIdInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """Get one comment with its attachment, if any.

    Errors: 404 (not found)
    """
    return await client.get(f"/comments/{params.comment_id}")


async def handle_update_comment(
    params: UpdateCommentInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """Replace a comment's text and return the comment.

    Errors: 404 (not found), 403 (not the author)
    """
    return await client.post(f"/comments/{params.comment_id}", {"content": params.content})


async def handle_delete_comment(
    params: CommentIdInput,
    client: TodoistClient,
    context: AuthorizationContext
) -> Any:
    """Delete a comment."""
    await client.delete(f"/comments/{params.comment_id}")
    logger.info(f"Deleted comment {params.comment_id}")
    return "Comment deleted successfully"
