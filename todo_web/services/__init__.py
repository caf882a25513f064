from .pipeline import TodoPipeline
from .templates import FileTemplateStore, render
from .todo_source import HttpTodoSource

__all__ = ["TodoPipeline", "FileTemplateStore", "HttpTodoSource", "render"]
