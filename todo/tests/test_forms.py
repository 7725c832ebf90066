from dataclasses import replace
from datetime import datetime, timezone as dt_timezone

from django.test import SimpleTestCase

from todo.domain import Task
from todo.forms import TaskForm, format_target_end


class TaskFormTests(SimpleTestCase):
    def test_new_task_from_posted_fields(self):
        form = TaskForm(data={
            "name": "krant opzeggen",
            "description": "krant opzeggen",
            "targetEnd": "2025-09-30T00:00",
        })
        self.assertTrue(form.is_valid(), form.errors)
        self.assertEqual(
            form.to_model(),
            Task.new_task(
                "krant opzeggen",
                "krant opzeggen",
                datetime(2025, 9, 30, tzinfo=dt_timezone.utc),
            ),
        )

    def test_name_and_description_are_required(self):
        form = TaskForm(data={"name": "  ", "targetEnd": ""})
        self.assertFalse(form.is_valid())
        self.assertIn("name", form.errors)
        self.assertIn("description", form.errors)

    def test_blank_extra_information_is_absent(self):
        form = TaskForm(data={"name": "a", "description": "b", "extraInformation": "   "})
        self.assertTrue(form.is_valid(), form.errors)
        task = form.to_model()
        self.assertIsNone(task.extra_information)
        self.assertIsNone(task.target_end)
        self.assertFalse(task.closed)

    def test_target_end_is_utc_and_truncated_to_seconds(self):
        form = TaskForm(data={
            "id": "2",
            "name": "a",
            "description": "b",
            "targetEnd": "2025-09-30T10:15:30.750",
            "closed": "on",
        })
        self.assertTrue(form.is_valid(), form.errors)
        task = form.to_model()
        self.assertEqual(task.id, 2)
        self.assertTrue(task.closed)
        self.assertEqual(task.target_end, datetime(2025, 9, 30, 10, 15, 30, tzinfo=dt_timezone.utc))

    def test_unparsable_target_end(self):
        form = TaskForm(data={"name": "a", "description": "b", "targetEnd": "next week"})
        self.assertFalse(form.is_valid())
        self.assertIn("targetEnd", form.errors)

    def test_from_model_shows_whole_seconds(self):
        task = Task(
            id=3,
            name="a",
            description="b",
            target_end=datetime(2025, 9, 30, 10, 15, 30, 123456, tzinfo=dt_timezone.utc),
        )
        form = TaskForm.from_model(task)
        self.assertFalse(form.is_bound)
        self.assertEqual(form.initial["targetEnd"], "2025-09-30T10:15:30")
        self.assertEqual(form.initial["id"], 3)

    def test_round_trip(self):
        precise = datetime(2025, 9, 30, 10, 15, 30, 987654, tzinfo=dt_timezone.utc)
        tasks = [
            Task(id=1, name="a", description="b", target_end=precise, extra_information="c", closed=True),
            Task(id=2, name="d", description="e"),
            Task(id=3, name="a ", description=" b", extra_information="  note\n"),
            Task.new_task("f", "g", precise.replace(microsecond=0)),
        ]
        for task in tasks:
            with self.subTest(task=task):
                form = TaskForm(data=TaskForm.data_from_model(task))
                self.assertTrue(form.is_valid(), form.errors)
                expected_end = task.target_end.replace(microsecond=0) if task.target_end else None
                self.assertEqual(form.to_model(), replace(task, target_end=expected_end))

    def test_text_is_kept_as_entered(self):
        form = TaskForm(data={"name": " a ", "description": "b  ", "extraInformation": "\n note"})
        self.assertTrue(form.is_valid(), form.errors)
        task = form.to_model()
        self.assertEqual(task.name, " a ")
        self.assertEqual(task.description, "b  ")
        self.assertEqual(task.extra_information, "\n note")

    def test_format_target_end(self):
        self.assertIsNone(format_target_end(None))
        self.assertEqual(
            format_target_end(datetime(2025, 1, 2, 3, 4, 5, 600000, tzinfo=dt_timezone.utc)),
            "2025-01-02T03:04:05",
        )
