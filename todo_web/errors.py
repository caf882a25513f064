"""
Errors raised while building a to-do page.
"""


class TodoWebError(Exception):
    """Base class for failures in the request pipeline."""


class TemplateLoadError(TodoWebError):
    """The template file is missing or unreadable."""


class DataFetchError(TodoWebError):
    """The upstream to-do service could not be reached or sent a bad payload."""


class TemplateSyntaxError(TodoWebError):
    """The template could not be compiled or references undefined names."""
