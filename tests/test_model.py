import pytest

from wbsplan.model import (
    TaskPriority,
    TaskStatus,
    WBSItem,
    WBSProject,
    priority_from_string,
    priority_to_string,
    status_from_string,
    status_to_string,
)


def test_item_defaults():
    item = WBSItem()
    assert item.task_name == "新しいタスク"
    assert item.status is TaskStatus.NOT_STARTED
    assert item.priority is TaskPriority.MEDIUM
    assert item.estimated_hours == 0.0
    assert item.level == 0
    assert item.children == []
    assert item.parent is None


def test_status_labels_from_source():
    item = WBSItem("x")
    labels = []
    for status in TaskStatus:
        item.status = status
        labels.append(item.status_string())
    assert labels == ["未開始", "進行中", "完了", "保留", "キャンセル"]


def test_priority_labels_from_source():
    item = WBSItem("x")
    labels = []
    for prio in TaskPriority:
        item.priority = prio
        labels.append(item.priority_string())
    assert labels == ["低", "中", "高", "緊急"]


@pytest.mark.parametrize("status", list(TaskStatus))
def test_status_string_round_trip(status):
    assert status_from_string(status_to_string(status)) is status


@pytest.mark.parametrize("priority", list(TaskPriority))
def test_priority_string_round_trip(priority):
    assert priority_from_string(priority_to_string(priority)) is priority


def test_unknown_labels_raise():
    with pytest.raises(ValueError):
        status_from_string("unknown")
    with pytest.raises(ValueError):
        priority_from_string("unknown")


def test_project_defaults():
    project = WBSProject()
    assert project.project_name == "新規WBSプロジェクト"
    assert project.root_task.task_name == project.project_name
    assert project.root_task.id == "1"
    assert project.root_task.level == 0


def test_named_project_root_carries_name():
    project = WBSProject("サンプルWBSプロジェクト")
    assert project.root_task.task_name == "サンプルWBSプロジェクト"


def test_add_child_numbers_and_links():
    project = WBSProject()
    first = WBSItem("要件定義")
    second = WBSItem("設計")
    project.add_root_task(first)
    project.add_root_task(second)
    assert first.id == "1.1"
    assert second.id == "1.2"
    assert first.parent is project.root_task
    assert second.level == project.root_task.level + 1
    sub = WBSItem("基本設計")
    second.add_child(sub)
    assert sub.id == "1.2.1"
    assert sub.level == second.level + 1
    assert sub.parent is second


def test_progress_percentage():
    item = WBSItem("a", estimated_hours=0.0, actual_hours=5.0)
    assert item.progress_percentage() == 0.0
    item.estimated_hours = 8.0
    item.actual_hours = 8.0
    assert item.progress_percentage() == 100.0


def test_totals_cover_whole_subtree():
    root = WBSItem("root", estimated_hours=1.0, actual_hours=0.5)
    a = WBSItem("a", estimated_hours=40.0, actual_hours=10.0)
    b = WBSItem("b", estimated_hours=60.0, actual_hours=20.0)
    c = WBSItem("c", estimated_hours=30.0, actual_hours=7.0)
    root.add_child(a)
    root.add_child(b)
    b.add_child(c)
    assert root.total_estimated_hours() == pytest.approx(
        root.estimated_hours + a.estimated_hours + b.estimated_hours + c.estimated_hours
    )
    assert b.total_actual_hours() == pytest.approx(b.actual_hours + c.actual_hours)


def test_walk_is_preorder():
    root = WBSItem("root")
    a, b, c = WBSItem("a"), WBSItem("b"), WBSItem("c")
    root.add_child(a)
    root.add_child(b)
    a.add_child(c)
    assert [item.task_name for item in root.walk()] == ["root", "a", "c", "b"]


def test_remove_child_and_missing_child():
    root = WBSItem("root")
    a = WBSItem("a")
    root.add_child(a)
    root.remove_child(a)
    assert root.children == []
    assert a.parent is None
    with pytest.raises(ValueError):
        root.remove_child(a)


def test_generate_id_renumbers_after_removal():
    project = WBSProject()
    first, second = WBSItem("first"), WBSItem("second")
    project.add_root_task(first)
    project.add_root_task(second)
    sub = WBSItem("sub")
    second.add_child(sub)
    project.root_task.remove_child(first)
    project.root_task.generate_id()
    assert second.id == "1.1"
    assert sub.id.startswith(second.id + ".")
    assert sub.level == second.level + 1


def test_project_overall_progress():
    project = WBSProject()
    assert project.overall_progress() == 0.0
    task = WBSItem("t", estimated_hours=20.0, actual_hours=20.0)
    project.add_root_task(task)
    assert project.total_estimated_hours() == task.estimated_hours
    assert project.total_actual_hours() == task.actual_hours
    assert project.overall_progress() == 100.0