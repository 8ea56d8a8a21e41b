"""
MCP Base Tool Interface

Provides base functionality for all MCP tools including:
- Input validation against the tool's schema
- Mapping store failures onto tool error codes
- Logging
"""

from typing import Any, Dict, Optional, Type
from sqlmodel import Session
from pydantic import ValidationError
from abc import ABC, abstractmethod
import logging

from todo_mcp.models.todo import Todo
from todo_mcp.schemas.todo import EmptyInput, ToolInput
from todo_mcp.services.todo_service import TodoService
from todo_mcp.utils.errors import TodoServiceError

logger = logging.getLogger(__name__)


class MCPToolError(Exception):
    """Base exception for MCP tool errors"""
    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class BaseMCPTool(ABC):
    """
    Base class for all MCP tools

    Provides common functionality:
    - Input validation
    - Database session and TodoService wiring
    - Error handling
    - Invocation logging
    """

    name: str = ""
    description: str = ""
    input_model: Type[ToolInput] = EmptyInput

    def __init__(self, db_session: Session):
        self.db = db_session
        self.service = TodoService(db_session)

    @classmethod
    def parameters(cls) -> Dict[str, Any]:
        """JSON schema of the tool input"""
        return cls.input_model.model_json_schema()

    def validate_input(self, params: Dict[str, Any]) -> ToolInput:
        """
        Validate raw tool arguments

        Raises:
            MCPToolError: If the arguments do not match the input schema
        """
        try:
            return self.input_model.model_validate(params)
        except ValidationError as e:
            messages = [
                f"{'.'.join(str(part) for part in err['loc']) or 'input'}: {err['msg']}"
                for err in e.errors()
            ]
            raise MCPToolError(
                code="VALIDATION_ERROR",
                message="; ".join(messages),
                details={"tool": self.name, "errors": messages}
            ) from e

    def require_todo(self, todo: Optional[Todo], todo_id: str) -> Todo:
        """Turn a missing todo into a NOT_FOUND tool error"""
        if todo is None:
            raise MCPToolError(
                code="NOT_FOUND",
                message=f"Todo {todo_id} not found",
                details={"id": todo_id}
            )
        return todo

    def log_tool_invocation(self, params: Dict[str, Any]) -> None:
        """Log MCP tool invocation; long text fields are truncated"""
        safe_params = {
            k: (v[:80] + "...") if isinstance(v, str) and len(v) > 80 else v
            for k, v in params.items()
        }
        logger.info(f"MCP Tool Invocation: {self.name} | Params: {safe_params}")

    async def run(self, **kwargs) -> Dict[str, Any]:
        """Validate the arguments and execute the tool"""
        self.log_tool_invocation(kwargs)
        params = self.validate_input(kwargs)

        try:
            return await self.execute(params)
        except MCPToolError:
            raise
        except TodoServiceError as e:
            raise MCPToolError(code=e.code, message=e.message, details=e.details) from e
        except Exception as e:
            logger.exception(f"Tool {self.name} raised an unexpected error")
            # The session is shared by every tool; drop whatever the failure left pending
            self.db.rollback()
            raise MCPToolError(
                code="INTERNAL_ERROR",
                message=f"Failed to execute {self.name}",
                details={"error": str(e)}
            ) from e

    @abstractmethod
    async def execute(self, params: ToolInput) -> Dict[str, Any]:
        """
        Execute the tool logic

        Must be implemented by subclasses

        Args:
            params: Validated tool input

        Returns:
            Tool execution result
        """
        pass


def register_tool_class(mcp_server, tool_cls: Type[BaseMCPTool], db_session: Session):
    """Register a tool class with the MCP server, bound to a database session"""
    from todo_mcp.mcp.server import MCPTool

    tool = MCPTool(
        name=tool_cls.name,
        description=tool_cls.description,
        parameters=tool_cls.parameters(),
        handler=lambda **kwargs: tool_cls(db_session).run(**kwargs)
    )

    mcp_server.register_tool(tool)


def create_error_response(error: MCPToolError) -> Dict[str, Any]:
    """
    Create a standardized error response

    Args:
        error: The MCPToolError to convert

    Returns:
        Standardized error response dictionary
    """
    return {
        "success": False,
        "error": {
            "code": error.code,
            "message": error.message,
            "details": error.details
        }
    }


def create_success_response(data: Any, message: Optional[str] = None) -> Dict[str, Any]:
    """
    Create a standardized success response

    Args:
        data: The response data
        message: Optional success message

    Returns:
        Standardized success response dictionary
    """
    response = {
        "success": True,
        "data": data
    }

    if message:
        response["message"] = message

    return response
