# tests/test_task_models.py

from __future__ import annotations

import pytest

from saitama_chat.tasks.task_models import Deadline, Event, TaskKind, Todo, build_task


def test_render_formats_per_kind() -> None:
    assert Todo("read book").render() == "[T][ ] read book"
    assert Deadline("return book", "Sunday").render() == "[D][ ] return book (by: Sunday)"
    assert Event("project meeting", "Mon 2-4pm").render() == "[E][ ] project meeting (at: Mon 2-4pm)"


def test_mark_done_is_idempotent() -> None:
    task = Deadline("return book", "Sunday")
    assert not task.is_done()

    task.mark_done()
    first = task.render()
    task.mark_done()

    assert task.is_done()
    assert task.render() == first == "[D][X] return book (by: Sunday)"
    assert str(task) == first


def test_description_is_trimmed_and_required() -> None:
    assert Todo("  jog  ").description == "jog"
    with pytest.raises(ValueError):
        Todo("   ")
    with pytest.raises(ValueError):
        Event("", "noon")


def test_marker_per_kind() -> None:
    assert Todo("a").marker is None
    assert Deadline("a", " Friday ").marker == "Friday"
    assert Event("a", "noon").marker == "noon"


def test_build_task_restores_variant_and_done_flag() -> None:
    task = build_task(TaskKind.EVENT, "party", "8pm", done=True)
    assert isinstance(task, Event)
    assert task.render() == "[E][X] party (at: 8pm)"


def test_kind_from_db() -> None:
    assert TaskKind.from_db("deadline") is TaskKind.DEADLINE
    assert TaskKind.from_db("TODO") is TaskKind.TODO
    assert TaskKind.from_db("reminder") is None
    assert TaskKind.from_db(None) is None
