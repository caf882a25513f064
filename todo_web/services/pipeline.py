from typing import List, Optional

from ..models import Todo, filter_by_status
from .templates import render


class TodoPipeline:
    """
    Builds the to-do HTML page for one request:
    load template -> fetch todos -> optional status filter -> render.
    """

    def __init__(self, todo_source, template_store, user_id: int, template_name: str):
        self.todo_source = todo_source
        self.template_store = template_store
        self.user_id = user_id
        self.template_name = template_name

    async def list_todos(self) -> str:
        return await self._render_page(status=None)

    async def list_todos_by_status(self, status: str) -> str:
        return await self._render_page(status=status)

    async def _render_page(self, status: Optional[str]) -> str:
        template = self.template_store.load(self.template_name)
        todos: List[Todo] = await self.todo_source.fetch_todos(self.user_id)
        if status is not None:
            todos = filter_by_status(todos, status)
        return render(template, {"todos": todos})
