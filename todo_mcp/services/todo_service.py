"""Todo service: business logic over the persisted todo list."""
from dataclasses import dataclass, field
from sqlmodel import Session, delete, select, func
from sqlalchemy.exc import SQLAlchemyError
from typing import List, Optional
from uuid import uuid4

from todo_mcp.models.todo import Todo, TodoStatus, utc_now_iso
from todo_mcp.services.file_scanner import resolve_template, scan_folder, validate_folder
from todo_mcp.utils.errors import AllDuplicatesError, DuplicateTodoError
from todo_mcp.utils.logger import get_logger

logger = get_logger("todo-service")

NO_ACTIVE_TODOS_MESSAGE = "No active todos found."


@dataclass
class BulkAddFailure:
    """A file whose todo could not be inserted."""
    file_path: str
    error: str


@dataclass
class BulkAddResult:
    """Outcome of a bulk add: rows are inserted one by one, so a batch can partially succeed."""
    created: List[Todo] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    failed: List[BulkAddFailure] = field(default_factory=list)


def build_bulk_description(task_number: int, file_path: str, template: str, todo_id: str) -> str:
    """Wrap the template with the task header and completion instructions."""
    return (
        f"**Task {task_number}**\n"
        f"\n"
        f"**Task File:** {file_path}\n"
        f"\n"
        f"{template}\n"
        f"\n"
        f"**When completed, use the complete-todo MCP tool:**\n"
        f"- ID: {todo_id}"
    )


class TodoService:
    """Service class for todo CRUD, sequencing, search and bulk creation.

    The session is owned by the caller (opened at process start, closed at
    shutdown); every operation commits its own statements.
    """

    def __init__(self, session: Session):
        self.session = session

    def _next_task_number(self) -> int:
        max_task_number = self.session.exec(select(func.max(Todo.task_number))).one()
        return (max_task_number or 0) + 1

    def create_todo(
        self,
        title: str,
        description: str,
        file_path: Optional[str] = None,
        task_number: Optional[int] = None,
    ) -> Todo:
        """
        Create a new todo.

        Raises:
            DuplicateTodoError: If a todo with the same title and description exists
        """
        existing = self.session.exec(
            select(Todo).where(Todo.title == title).where(Todo.description == description)
        ).first()
        if existing:
            raise DuplicateTodoError(existing.id)

        if task_number is None:
            task_number = self._next_task_number()

        now = utc_now_iso()
        todo = Todo(
            title=title,
            description=description,
            status=TodoStatus.NEW.value,
            completed_at=None,
            created_at=now,
            updated_at=now,
            file_path=file_path,
            task_number=task_number,
        )

        self.session.add(todo)
        self.session.commit()
        self.session.refresh(todo)
        logger.info("Todo created", todo_id=todo.id, task_number=todo.task_number)
        return todo

    def get_todo(self, todo_id: str) -> Optional[Todo]:
        """Get a todo by ID, or None when it does not exist."""
        return self.session.get(Todo, todo_id)

    def get_all_todos(self) -> List[Todo]:
        return list(self.session.exec(select(Todo)).all())

    def get_active_todos(self) -> List[Todo]:
        """Todos without a completion timestamp."""
        statement = select(Todo).where(Todo.completed_at.is_(None))
        return list(self.session.exec(statement).all())

    def update_todo(
        self,
        todo_id: str,
        title: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Optional[Todo]:
        """Update title and/or description; missing fields keep their value."""
        todo = self.get_todo(todo_id)
        if not todo:
            return None

        todo.title = title or todo.title
        todo.description = description or todo.description
        todo.updated_at = utc_now_iso()

        self.session.add(todo)
        self.session.commit()
        self.session.refresh(todo)
        return todo

    def complete_todo(self, todo_id: str) -> Optional[Todo]:
        """Stamp completedAt and set the status to Done."""
        todo = self.get_todo(todo_id)
        if not todo:
            return None

        now = utc_now_iso()
        todo.completed_at = now
        todo.updated_at = now
        todo.status = TodoStatus.DONE.value

        self.session.add(todo)
        self.session.commit()
        self.session.refresh(todo)
        logger.info("Todo completed", todo_id=todo.id)
        return todo

    def delete_todo(self, todo_id: str) -> bool:
        todo = self.get_todo(todo_id)
        if not todo:
            return False

        self.session.delete(todo)
        self.session.commit()
        logger.info("Todo deleted", todo_id=todo_id)
        return True

    def update_status(self, todo_id: str, status: str) -> Optional[Todo]:
        """Set the status only; completedAt is left as it is."""
        todo = self.get_todo(todo_id)
        if not todo:
            return None

        todo.status = TodoStatus(status).value
        todo.updated_at = utc_now_iso()

        self.session.add(todo)
        self.session.commit()
        self.session.refresh(todo)
        return todo

    def search_by_title(self, title: str) -> List[Todo]:
        """Case-insensitive partial match on titles."""
        statement = select(Todo).where(Todo.title.ilike(f"%{title}%"))
        return list(self.session.exec(statement).all())

    def search_by_date(self, date_str: str) -> List[Todo]:
        """Todos whose createdAt starts with the given YYYY-MM-DD date."""
        statement = select(Todo).where(Todo.created_at.like(f"{date_str}%"))
        return list(self.session.exec(statement).all())

    def summarize_active_todos(self) -> str:
        """Markdown summary of the active todos."""
        active_todos = self.get_active_todos()

        if not active_todos:
            return NO_ACTIVE_TODOS_MESSAGE

        summary = "\n".join(f"- {todo.title}" for todo in active_todos)
        return f"# Active Todos Summary\n\nThere are {len(active_todos)} active todos:\n\n{summary}"

    def get_next_todo(self) -> Optional[Todo]:
        """The lowest-numbered todo that is not Done."""
        statement = (
            select(Todo)
            .where(Todo.status != TodoStatus.DONE.value)
            .order_by(Todo.task_number.asc())
            .limit(1)
        )
        return self.session.exec(statement).first()

    def clear_all_todos(self) -> int:
        """Delete every todo and return how many were removed."""
        deleted = self.session.exec(delete(Todo)).rowcount
        self.session.commit()
        logger.warning("All todos cleared", deleted=deleted)
        return deleted

    def _existing_file_paths(self) -> set:
        statement = select(Todo.file_path).where(Todo.file_path.is_not(None))
        return set(self.session.exec(statement).all())

    def bulk_add_todos(
        self,
        folder_path: str,
        template: Optional[str] = None,
        template_file_path: Optional[str] = None,
    ) -> BulkAddResult:
        """
        Create one todo per file found (recursively) in a folder.

        Each description is the template wrapped with a task number header,
        the file path and completion instructions naming the todo's own ID.
        Files that already have a todo are skipped. Rows are committed one at
        a time; an insert failure is recorded and the batch continues.

        Raises:
            FolderNotFoundError, NotADirectoryPathError: Bad folder path
            TemplateFileError: Template cannot be resolved
            DirectoryReadError, EmptyFolderError: Folder cannot be scanned or is empty
            AllDuplicatesError: Every file already has a todo
        """
        folder = validate_folder(folder_path)
        final_template = resolve_template(template, template_file_path)
        all_file_paths = scan_folder(folder)

        existing_paths = self._existing_file_paths()
        new_paths = [path for path in all_file_paths if path not in existing_paths]
        duplicates = [path for path in all_file_paths if path in existing_paths]

        if not new_paths:
            raise AllDuplicatesError(len(duplicates))

        if duplicates:
            logger.warning(
                f"Validation summary: Processing {len(new_paths)} files, skipped {len(duplicates)} duplicates",
                folder=folder,
            )

        result = BulkAddResult(skipped=duplicates)
        starting_task_number = self._next_task_number()

        for index, file_path in enumerate(new_paths):
            task_number = starting_task_number + index
            todo_id = str(uuid4())
            now = utc_now_iso()

            todo = Todo(
                id=todo_id,
                title=f"Task {task_number}",
                description=build_bulk_description(task_number, file_path, final_template, todo_id),
                status=TodoStatus.NEW.value,
                completed_at=None,
                created_at=now,
                updated_at=now,
                file_path=file_path,
                task_number=task_number,
            )

            # Undecodable file names surface as UnicodeEncodeError from the driver
            try:
                self.session.add(todo)
                self.session.commit()
            except (SQLAlchemyError, UnicodeError) as e:
                self.session.rollback()
                logger.exception("Failed to insert bulk todo", file_path=file_path, error=str(e))
                result.failed.append(BulkAddFailure(file_path=file_path, error=str(e)))
                continue

            self.session.refresh(todo)
            result.created.append(todo)

        logger.info(
            "Bulk add finished",
            folder=folder,
            created=len(result.created),
            skipped=len(result.skipped),
            failed=len(result.failed),
        )
        return result
