"""
Integration tests for task routes.
Tests both client modes end to end through Django's test client.
"""
from unittest.mock import patch

from django.apps import apps
from django.test import Client, SimpleTestCase

from apps.tasks.repository import TaskRepository

HTMX = {"HTTP_HX_REQUEST": "true"}


class TaskAPITestCase(SimpleTestCase):
    """Base class wiring an isolated repository into the tasks app."""

    def setUp(self):
        self.client = Client()
        self.repository = TaskRepository()
        patcher = patch.object(apps.get_app_config("tasks"), "repository", self.repository)
        patcher.start()
        self.addCleanup(patcher.stop)


class ListTasksAPITest(TaskAPITestCase):

    def test_list_renders_full_page(self):
        self.repository.add("Buy milk")
        self.repository.add("Walk dog")

        response = self.client.get("/tasks")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response["Content-Type"], "text/html; charset=utf-8")
        body = response.content.decode()
        self.assertIn("<title>Tasks</title>", body)
        self.assertIn('<li id="task-1">', body)
        self.assertIn('<li id="task-2">', body)
        self.assertIn('id="status"', body)
        self.assertIn('hx-post="/tasks"', body)

    def test_list_is_same_for_enhanced_client(self):
        self.repository.add("Buy milk")

        plain = self.client.get("/tasks")
        enhanced = self.client.get("/tasks", **HTMX)

        self.assertEqual(enhanced.status_code, 200)
        self.assertEqual(plain.content, enhanced.content)

    def test_list_escapes_titles(self):
        self.repository.add("<b>bold</b>")

        body = self.client.get("/tasks").content.decode()

        self.assertIn("&lt;b&gt;bold&lt;/b&gt;", body)
        self.assertNotIn("<b>bold</b>", body)

    def test_responses_vary_on_hx_request(self):
        response = self.client.get("/tasks")
        self.assertIn("HX-Request", response["Vary"])

    def test_root_redirects_to_tasks(self):
        response = self.client.get("/")
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response["Location"], "/tasks")

    def test_openapi_schema_is_not_served(self):
        response = self.client.get("/openapi.json")
        self.assertEqual(response.status_code, 404)


class CreateTaskAPITest(TaskAPITestCase):

    def test_enhanced_create(self):
        response = self.client.post("/tasks", {"title": "Buy milk"}, **HTMX)

        self.assertEqual(response.status_code, 201)
        task = self.repository.all()[0]
        body = response.content.decode()
        self.assertIn(f"task-{task.id}", body)
        self.assertIn("Buy milk", body)
        self.assertIn('Task "Buy milk" added successfully.', body)
        self.assertIn("HX-Request", response["Vary"])

    def test_plain_create_redirects(self):
        response = self.client.post("/tasks", {"title": "Buy milk"})

        self.assertEqual(response.status_code, 303)
        self.assertEqual(response["Location"], "/tasks")
        self.assertEqual([t.title for t in self.repository.all()], ["Buy milk"])

    def test_plain_create_then_follow_shows_task(self):
        response = self.client.post("/tasks", {"title": "Buy milk"}, follow=True)

        self.assertEqual(response.status_code, 200)
        self.assertIn("Buy milk", response.content.decode())

    def test_enhanced_blank_title_is_rejected(self):
        response = self.client.post("/tasks", {"title": "   "}, **HTMX)

        self.assertEqual(response.status_code, 400)
        body = response.content.decode()
        self.assertIn('role="alert"', body)
        self.assertIn('aria-live="assertive"', body)
        self.assertIn("Title is required.", body)
        self.assertEqual(len(self.repository), 0)

    def test_plain_blank_title_redirects(self):
        response = self.client.post("/tasks", {"title": ""})

        self.assertEqual(response.status_code, 303)
        self.assertEqual(response["Location"], "/tasks")
        self.assertEqual(len(self.repository), 0)

    def test_missing_title_field_is_blank(self):
        response = self.client.post("/tasks", {}, **HTMX)

        self.assertEqual(response.status_code, 400)
        self.assertEqual(len(self.repository), 0)

    def test_header_value_is_case_insensitive(self):
        response = self.client.post("/tasks", {"title": "Buy milk"}, HTTP_HX_REQUEST="True")
        self.assertEqual(response.status_code, 201)

    def test_other_header_values_are_plain(self):
        response = self.client.post("/tasks", {"title": "Buy milk"}, HTTP_HX_REQUEST="false")
        self.assertEqual(response.status_code, 303)


class DeleteTaskAPITest(TaskAPITestCase):

    def test_enhanced_delete_existing(self):
        task = self.repository.add("Buy milk")

        response = self.client.post(f"/tasks/{task.id}/delete", **HTMX)

        self.assertEqual(response.status_code, 200)
        body = response.content.decode()
        self.assertIn("Task deleted.", body)
        self.assertNotIn("<li", body)
        self.assertEqual(len(self.repository), 0)

    def test_enhanced_delete_twice(self):
        task = self.repository.add("Buy milk")

        self.client.post(f"/tasks/{task.id}/delete", **HTMX)
        response = self.client.post(f"/tasks/{task.id}/delete", **HTMX)

        self.assertEqual(response.status_code, 200)
        self.assertIn("Could not delete task.", response.content.decode())

    def test_enhanced_delete_unknown(self):
        response = self.client.post("/tasks/12345/delete", **HTMX)

        self.assertEqual(response.status_code, 200)
        self.assertIn("Could not delete task.", response.content.decode())

    def test_enhanced_delete_non_numeric(self):
        self.repository.add("keep me")

        response = self.client.post("/tasks/abc/delete", **HTMX)

        self.assertEqual(response.status_code, 200)
        self.assertIn("Could not delete task.", response.content.decode())
        self.assertEqual(len(self.repository), 1)

    def test_plain_delete_redirects(self):
        task = self.repository.add("Buy milk")

        response = self.client.post(f"/tasks/{task.id}/delete")

        self.assertEqual(response.status_code, 303)
        self.assertEqual(response["Location"], "/tasks")
        self.assertEqual(len(self.repository), 0)

    def test_plain_delete_unknown_redirects(self):
        response = self.client.post("/tasks/abc/delete")

        self.assertEqual(response.status_code, 303)
        self.assertEqual(response["Location"], "/tasks")

    def test_underscored_id_does_not_delete(self):
        for n in range(10):
            self.repository.add(f"task {n}")

        response = self.client.post("/tasks/1_0/delete", **HTMX)

        self.assertEqual(response.status_code, 200)
        self.assertIn("Could not delete task.", response.content.decode())
        self.assertEqual([t.id for t in self.repository.all()], list(range(1, 11)))
