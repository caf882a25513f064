from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parent


class Config:
    HOST = "127.0.0.1"
    PORT = 3000

    # Upstream to-do service
    TODOS_API_URL = "https://jsonplaceholder.typicode.com"
    TODOS_USER_ID = 1
    FETCH_TIMEOUT = 10.0

    TEMPLATES_DIR = str(PACKAGE_DIR / "templates")
    TODOS_TEMPLATE = "todos.html"
    STATIC_DIR = str(PACKAGE_DIR / "static")

    GREETING = "Hello GDG Galway!"


class TestingConfig(Config):
    TESTING = True
    TODOS_API_URL = "http://todos.test"
