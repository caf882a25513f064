from flask import Blueprint, Response, current_app

todos_bp = Blueprint("todos", __name__)


def _pipeline():
    return current_app.extensions["todo_pipeline"]


@todos_bp.route("/", methods=["GET"])
def index():
    return Response(current_app.config["GREETING"], mimetype="text/plain")


@todos_bp.route("/todos", methods=["GET"])
@todos_bp.route("/todos/", methods=["GET"])
async def list_todos():
    return await _pipeline().list_todos()


@todos_bp.route("/todos/<status>", methods=["GET"])
async def list_todos_by_status(status):
    # "completed" -> finished items, any other value -> unfinished items
    return await _pipeline().list_todos_by_status(status)
