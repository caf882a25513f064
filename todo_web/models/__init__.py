from .todo import Todo, completed_filter, filter_by_status

__all__ = ["Todo", "completed_filter", "filter_by_status"]
