"""Work breakdown structure: tasks, their hierarchy and project-wide totals."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import IntEnum
from typing import Iterator, Optional

DEFAULT_TASK_NAME = "新しいタスク"
DEFAULT_PROJECT_NAME = "新規WBSプロジェクト"
ROOT_ID = "1"


class TaskStatus(IntEnum):
    """How far along a task is."""

    NOT_STARTED = 0
    IN_PROGRESS = 1
    COMPLETED = 2
    ON_HOLD = 3
    CANCELLED = 4

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


class TaskPriority(IntEnum):
    """How urgent or important a task is."""

    LOW = 0
    MEDIUM = 1
    HIGH = 2
    URGENT = 3

    @property
    def label(self) -> str:
        return _PRIORITY_LABELS[self]


_STATUS_LABELS = {
    TaskStatus.NOT_STARTED: "未開始",
    TaskStatus.IN_PROGRESS: "進行中",
    TaskStatus.COMPLETED: "完了",
    TaskStatus.ON_HOLD: "保留",
    TaskStatus.CANCELLED: "キャンセル",
}

_PRIORITY_LABELS = {
    TaskPriority.LOW: "低",
    TaskPriority.MEDIUM: "中",
    TaskPriority.HIGH: "高",
    TaskPriority.URGENT: "緊急",
}

_STATUS_BY_LABEL = {label: status for status, label in _STATUS_LABELS.items()}
_PRIORITY_BY_LABEL = {label: prio for prio, label in _PRIORITY_LABELS.items()}


def status_to_string(status: TaskStatus) -> str:
    """Return the Japanese label of a status."""
    return TaskStatus(status).label


def status_from_string(text: str) -> TaskStatus:
    """Return the status named by a Japanese label."""
    try:
        return _STATUS_BY_LABEL[text]
    except KeyError:
        raise ValueError(f"unknown task status: {text!r}") from None


def priority_to_string(priority: TaskPriority) -> str:
    """Return the Japanese label of a priority."""
    return TaskPriority(priority).label


def priority_from_string(text: str) -> TaskPriority:
    """Return the priority named by a Japanese label."""
    try:
        return _PRIORITY_BY_LABEL[text]
    except KeyError:
        raise ValueError(f"unknown task priority: {text!r}") from None


def _utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None, microsecond=0)


@dataclass(eq=False)
class WBSItem:
    """A single task in the breakdown, with its subtasks."""

    task_name: str = DEFAULT_TASK_NAME
    id: str = ""
    description: str = ""
    assigned_to: str = ""
    status: TaskStatus = TaskStatus.NOT_STARTED
    priority: TaskPriority = TaskPriority.MEDIUM
    estimated_hours: float = 0.0
    actual_hours: float = 0.0
    start_date: datetime = field(default_factory=_utc_now)
    end_date: datetime = field(default_factory=_utc_now)
    level: int = 0
    children: list[WBSItem] = field(default_factory=list, repr=False)
    parent: Optional[WBSItem] = field(default=None, repr=False)

    def add_child(self, child: WBSItem) -> None:
        """Attach a subtask, setting its parent, level and numbered id."""
        child.parent = self
        child.level = self.level + 1
        child.id = f"{self.id}.{len(self.children) + 1}"
        self.children.append(child)

    def remove_child(self, child: WBSItem) -> None:
        """Detach a subtask; raise ValueError if it is not a child of this task."""
        for index, existing in enumerate(self.children):
            if existing is child:
                del self.children[index]
                child.parent = None
                return
        raise ValueError(f"{child.task_name!r} is not a child of {self.task_name!r}")

    def status_string(self) -> str:
        return self.status.label

    def priority_string(self) -> str:
        return self.priority.label

    def progress_percentage(self) -> float:
        """Actual hours as a percentage of estimated hours; 0 with no estimate."""
        if self.estimated_hours == 0.0:
            return 0.0
        return self.actual_hours / self.estimated_hours * 100.0

    def total_estimated_hours(self) -> float:
        """Estimated hours of this task and every task below it."""
        return sum(item.estimated_hours for item in self.walk())

    def total_actual_hours(self) -> float:
        """Actual hours of this task and every task below it."""
        return sum(item.actual_hours for item in self.walk())

    def generate_id(self) -> None:
        """Number this task from its parent's id and position, then its subtasks."""
        if self.parent is None:
            if not self.id:
                self.id = ROOT_ID
            self.level = 0
        else:
            position = next(
                index for index, sibling in enumerate(self.parent.children, 1)
                if sibling is self
            )
            self.id = f"{self.parent.id}.{position}"
            self.level = self.parent.level + 1
        for child in self.children:
            child.generate_id()

    def walk(self) -> Iterator[WBSItem]:
        """Yield this task and all tasks below it, depth first, parents first."""
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass(eq=False)
class WBSProject:
    """A project: its name, description and the root of its task tree."""

    project_name: str = DEFAULT_PROJECT_NAME
    description: str = ""
    root_task: Optional[WBSItem] = None

    def __post_init__(self) -> None:
        if self.root_task is None:
            self.root_task = WBSItem(self.project_name, id=ROOT_ID, level=0)

    def add_root_task(self, task: WBSItem) -> None:
        """Add a top-level task under the project's root."""
        self.root_task.add_child(task)

    def total_estimated_hours(self) -> float:
        return self.root_task.total_estimated_hours()

    def total_actual_hours(self) -> float:
        return self.root_task.total_actual_hours()

    def overall_progress(self) -> float:
        """Actual hours over estimated hours across all tasks, as a percentage."""
        estimated = self.total_estimated_hours()
        if estimated == 0.0:
            return 0.0
        return self.total_actual_hours() / estimated * 100.0