"""Command-line front end for viewing and editing project files."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator, Optional, Sequence

from wbsplan.config import get_last_opened_file, save_last_opened_file
from wbsplan.model import (
    DEFAULT_TASK_NAME,
    TaskPriority,
    TaskStatus,
    WBSItem,
    WBSProject,
    priority_from_string,
    status_from_string,
)
from wbsplan.xmlio import ProjectFileError, load_project, save_project

SAMPLE_PROJECT_NAME = "サンプルWBSプロジェクト"
NEW_SUBTASK_NAME = "新しいサブタスク"


def sample_project() -> WBSProject:
    """Return the demonstration project shown when nothing has been opened."""
    project = WBSProject(SAMPLE_PROJECT_NAME)
    requirements = WBSItem(
        "要件定義",
        description="システム要件の定義と分析",
        estimated_hours=40.0,
        status=TaskStatus.COMPLETED,
        assigned_to="田中",
    )
    project.root_task.add_child(requirements)
    design = WBSItem(
        "設計",
        description="システム設計書の作成",
        estimated_hours=60.0,
        status=TaskStatus.IN_PROGRESS,
        assigned_to="佐藤",
    )
    project.root_task.add_child(design)
    basic_design = WBSItem(
        "基本設計",
        description="基本設計書の作成",
        estimated_hours=30.0,
        status=TaskStatus.COMPLETED,
        assigned_to="佐藤",
    )
    design.add_child(basic_design)
    return project


def task_details(item: WBSItem) -> list[tuple[str, str]]:
    """Return the labelled detail rows shown for a task."""
    return [
        ("タスク名", item.task_name),
        ("ID", item.id),
        ("説明", item.description),
        ("ステータス", item.status_string()),
        ("優先度", item.priority_string()),
        ("予定時間", f"{item.estimated_hours:f}時間"),
        ("実績時間", f"{item.actual_hours:f}時間"),
        ("進捗率", f"{int(item.progress_percentage())}%"),
        ("担当者", item.assigned_to),
    ]


def tree_lines(project: WBSProject) -> list[str]:
    """Return one indented line per task, parents before their subtasks."""

    def visit(item: WBSItem, depth: int) -> Iterator[str]:
        yield f"{'  ' * depth}{item.id} - {item.task_name} ({item.status_string()})"
        for child in item.children:
            yield from visit(child, depth + 1)

    return list(visit(project.root_task, 0))


def _find_task(project: WBSProject, task_id: str) -> WBSItem:
    for item in project.root_task.walk():
        if item.id == task_id:
            return item
    raise LookupError(f"no task with id {task_id!r}")


def _status_arg(text: str) -> TaskStatus:
    try:
        return status_from_string(text)
    except ValueError:
        pass
    try:
        return TaskStatus[text.upper().replace("-", "_")]
    except KeyError:
        raise argparse.ArgumentTypeError(f"unknown status: {text!r}") from None


def _priority_arg(text: str) -> TaskPriority:
    try:
        return priority_from_string(text)
    except ValueError:
        pass
    try:
        return TaskPriority[text.upper()]
    except KeyError:
        raise argparse.ArgumentTypeError(f"unknown priority: {text!r}") from None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wbsplan", description="View and edit work breakdown structures."
    )
    parser.add_argument("--config", help="settings file to use")
    commands = parser.add_subparsers(dest="command", required=True)

    new = commands.add_parser("new", help="create an empty project file")
    new.add_argument("file")
    new.add_argument("--name", help="project name")

    sample = commands.add_parser("sample", help="write the sample project")
    sample.add_argument("file")

    show = commands.add_parser("show", help="print the task tree")
    show.add_argument("file", nargs="?")

    add_task = commands.add_parser("add-task", help="add a top-level task")
    add_task.add_argument("file")
    add_task.add_argument("--name", default=DEFAULT_TASK_NAME)

    add_subtask = commands.add_parser("add-subtask", help="add a subtask")
    add_subtask.add_argument("file")
    add_subtask.add_argument("parent_id")
    add_subtask.add_argument("--name", default=NEW_SUBTASK_NAME)

    edit = commands.add_parser("edit", help="change a task's fields")
    edit.add_argument("file")
    edit.add_argument("task_id")
    edit.add_argument("--name")
    edit.add_argument("--description")
    edit.add_argument("--assigned-to")
    edit.add_argument("--status", type=_status_arg)
    edit.add_argument("--priority", type=_priority_arg)
    edit.add_argument("--estimated", type=float)
    edit.add_argument("--actual", type=float)

    details = commands.add_parser("details", help="print a task's details")
    details.add_argument("file")
    details.add_argument("task_id")

    commands.add_parser("last", help="print the last opened file")
    return parser


def _load(path: str, config: Optional[str]) -> WBSProject:
    project = load_project(path)
    save_last_opened_file(path, config)
    return project


def _save(project: WBSProject, path: str, config: Optional[str]) -> None:
    save_project(project, path)
    save_last_opened_file(path, config)


def _run(args: argparse.Namespace) -> None:
    config = args.config
    if args.command == "new":
        project = WBSProject(args.name) if args.name else WBSProject()
        _save(project, args.file, config)
    elif args.command == "sample":
        _save(sample_project(), args.file, config)
    elif args.command == "show":
        project = _load(args.file, config) if args.file else sample_project()
        for line in tree_lines(project):
            print(line)
    elif args.command == "add-task":
        project = _load(args.file, config)
        project.root_task.add_child(WBSItem(args.name))
        _save(project, args.file, config)
        print("新しいタスクを追加しました。")
    elif args.command == "add-subtask":
        project = _load(args.file, config)
        _find_task(project, args.parent_id).add_child(WBSItem(args.name))
        _save(project, args.file, config)
        print("新しいサブタスクを追加しました。")
    elif args.command == "edit":
        project = _load(args.file, config)
        item = _find_task(project, args.task_id)
        updates = {
            "task_name": args.name,
            "description": args.description,
            "assigned_to": args.assigned_to,
            "status": args.status,
            "priority": args.priority,
            "estimated_hours": args.estimated,
            "actual_hours": args.actual,
        }
        for attribute, value in updates.items():
            if value is not None:
                setattr(item, attribute, value)
        _save(project, args.file, config)
    elif args.command == "details":
        project = _load(args.file, config)
        for label, value in task_details(_find_task(project, args.task_id)):
            print(f"{label}\t{value}")
    elif args.command == "last":
        last = get_last_opened_file(config)
        if last:
            print(last)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line; return the process exit status."""
    args = _build_parser().parse_args(argv)
    try:
        _run(args)
    except (ProjectFileError, LookupError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())