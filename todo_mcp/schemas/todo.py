"""Tool input schemas for the Todo MCP server.

External field names follow the tool protocol (camelCase); the snake_case
attribute names are accepted as well.
"""
from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Literal, Optional
from uuid import UUID


class ToolInput(BaseModel):
    """Base for all tool inputs."""
    model_config = ConfigDict(populate_by_name=True)


class EmptyInput(ToolInput):
    """Input for tools that take no arguments."""
    pass


class TodoIdInput(ToolInput):
    """Identify a single todo."""
    id: UUID = Field(..., description="The UUID of the todo")

    @property
    def todo_id(self) -> str:
        return str(self.id)


class CreateTodoInput(ToolInput):
    """Schema for creating a todo."""
    title: str = Field(..., min_length=1, description="Title of the todo")
    description: str = Field(..., min_length=1, description="Markdown description of the todo")


class UpdateTodoInput(TodoIdInput):
    """Schema for updating a todo's title and/or description."""
    title: Optional[str] = Field(None, min_length=1, description="New title")
    description: Optional[str] = Field(None, min_length=1, description="New markdown description")

    @model_validator(mode="after")
    def require_a_field(self):
        if self.title is None and self.description is None:
            raise ValueError("At least one field (title or description) must be provided")
        return self


class UpdateStatusInput(TodoIdInput):
    """Schema for setting a todo's status."""
    status: Literal["New", "Done"] = Field(..., description="New status: 'New' or 'Done'")


class BulkAddTodosInput(ToolInput):
    """Schema for creating one todo per file in a folder."""
    folder_path: str = Field(..., alias="folderPath", min_length=1, description="Folder to scan recursively")
    template: Optional[str] = Field(None, min_length=1, description="Inline template injected into each description")
    template_file_path: Optional[str] = Field(
        None,
        alias="templateFilePath",
        min_length=1,
        description="Path of a file whose content is used as the template",
    )

    @model_validator(mode="after")
    def require_one_template(self):
        if (self.template is None) == (self.template_file_path is None):
            raise ValueError("Exactly one of template or templateFilePath must be provided")
        return self


class SearchByTitleInput(ToolInput):
    """Schema for searching todos by title."""
    title: str = Field(..., description="Case-insensitive text to look for in titles")


class SearchByDateInput(ToolInput):
    """Schema for searching todos by creation date."""
    date: str = Field(..., description="Creation date in YYYY-MM-DD format")
