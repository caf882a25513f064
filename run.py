import logging

from todo_web import create_app


def main():
    logging.basicConfig(level=logging.INFO)
    app = create_app()
    port = app.config["PORT"]
    print(f"Server listening on port {port}...")
    app.run(host=app.config["HOST"], port=port, debug=False, use_reloader=False)


if __name__ == "__main__":
    main()
