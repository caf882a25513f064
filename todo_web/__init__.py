"""
Flask app factory for the to-do web server.
"""

import logging

from flask import Flask
from werkzeug.exceptions import InternalServerError

from .config import Config
from .errors import TodoWebError
from .routes import todos_bp
from .services import FileTemplateStore, HttpTodoSource, TodoPipeline


def create_app(config=None, todo_source=None, template_store=None):
    config = config or Config
    app = Flask(__name__, static_folder=config.STATIC_DIR, static_url_path="")
    app.config.from_object(config)

    if todo_source is None:
        todo_source = HttpTodoSource(app.config["TODOS_API_URL"], timeout=app.config["FETCH_TIMEOUT"])
    if template_store is None:
        template_store = FileTemplateStore(app.config["TEMPLATES_DIR"])

    app.extensions["todo_pipeline"] = TodoPipeline(
        todo_source,
        template_store,
        user_id=app.config["TODOS_USER_ID"],
        template_name=app.config["TODOS_TEMPLATE"],
    )

    app.register_blueprint(todos_bp)

    @app.errorhandler(TodoWebError)
    def handle_pipeline_error(e):
        logging.error(f"Error while building todo page: {e}", exc_info=True)
        return InternalServerError()

    return app
