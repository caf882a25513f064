import tempfile
import unittest
from pathlib import Path

from todo_web.errors import TemplateLoadError, TemplateSyntaxError
from todo_web.services.templates import FileTemplateStore, render

LIST_TEMPLATE = "<ul>{% for todo in todos %}<li>{{ todo.title }}</li>{% endfor %}</ul>"


class RenderTestCase(unittest.TestCase):
    def test_renders_each_item(self):
        html = render(LIST_TEMPLATE, {"todos": [{"title": "A"}, {"title": "B"}]})
        self.assertEqual(html, "<ul><li>A</li><li>B</li></ul>")

    def test_empty_collection(self):
        self.assertEqual(render(LIST_TEMPLATE, {"todos": []}), "<ul></ul>")

    def test_escapes_html(self):
        html = render(LIST_TEMPLATE, {"todos": [{"title": "<script>"}]})
        self.assertIn("&lt;script&gt;", html)
        self.assertNotIn("<script>", html)

    def test_is_deterministic_and_leaves_context_alone(self):
        context = {"todos": [{"title": "A"}]}
        first = render(LIST_TEMPLATE, context)
        second = render(LIST_TEMPLATE, context)
        self.assertEqual(first, second)
        self.assertEqual(context, {"todos": [{"title": "A"}]})

    def test_malformed_template(self):
        with self.assertRaises(TemplateSyntaxError):
            render("{% for todo in todos %}<li>", {"todos": []})

    def test_undefined_name(self):
        with self.assertRaises(TemplateSyntaxError):
            render("{{ missing }}", {"todos": []})


class FileTemplateStoreTestCase(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.directory = Path(self._tmp.name)
        self.store = FileTemplateStore(self.directory)

    def tearDown(self):
        self._tmp.cleanup()

    def test_load(self):
        (self.directory / "todos.html").write_text(LIST_TEMPLATE, encoding="utf-8")
        self.assertEqual(self.store.load("todos.html"), LIST_TEMPLATE)

    def test_reads_fresh_copy_each_time(self):
        path = self.directory / "todos.html"
        path.write_text("one", encoding="utf-8")
        self.assertEqual(self.store.load("todos.html"), "one")
        path.write_text("two", encoding="utf-8")
        self.assertEqual(self.store.load("todos.html"), "two")

    def test_missing_template(self):
        with self.assertRaises(TemplateLoadError):
            self.store.load("nope.html")

    def test_undecodable_template(self):
        (self.directory / "bad.html").write_bytes(b"\xff\xfe\xfa")
        with self.assertRaises(TemplateLoadError):
            self.store.load("bad.html")


if __name__ == "__main__":
    unittest.main()
