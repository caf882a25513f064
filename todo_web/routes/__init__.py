from .todos import todos_bp

__all__ = ["todos_bp"]
