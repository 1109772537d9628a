"""Reading and writing projects as XML documents."""

from __future__ import annotations

import os
import re
from datetime import datetime, timezone
from typing import Optional, Union

from wbsplan.model import TaskPriority, TaskStatus, WBSItem, WBSProject

LOADED_PROJECT_NAME = "読み込まれたプロジェクト"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'

_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&apos;",
}

# Entities are resolved in this order, with "&amp;" last so that an escaped
# ampersand is not read as the start of another entity.
_UNESCAPE_ORDER = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&apos;", "'"),
    ("&amp;", "&"),
)

_TIMESTAMP = re.compile(
    r"(\d{1,4})-(\d{1,2})-(\d{1,2})T(\d{1,2}):(\d{1,2}):(\d{1,2})"
)

PathLike = Union[str, "os.PathLike[str]"]


class ProjectFileError(Exception):
    """A project file could not be read, parsed or written."""


def xml_escape(text: str) -> str:
    """Replace the five XML special characters with their entities."""
    return "".join(_ESCAPES.get(char, char) for char in text)


def xml_unescape(text: str) -> str:
    """Turn the five predefined XML entities back into characters."""
    for entity, char in _UNESCAPE_ORDER:
        text = text.replace(entity, char)
    return text


def format_timestamp(moment: datetime) -> str:
    """Format a moment as YYYY-MM-DDTHH:MM:SS, dropping fractions of a second."""
    return (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )


def parse_timestamp(text: str) -> datetime:
    """Parse YYYY-MM-DDTHH:MM:SS; a string shorter than that gives the current UTC time.

    Raises ValueError when a long enough string is not a valid timestamp.
    """
    if len(text) < 19:
        return datetime.now(timezone.utc).replace(tzinfo=None, microsecond=0)
    match = _TIMESTAMP.match(text)
    if match is None:
        raise ValueError(f"not a timestamp: {text!r}")
    year, month, day, hour, minute, second = (int(part) for part in match.groups())
    return datetime(year, month, day, hour, minute, second)


def extract_xml_value(xml: str, tag: str, start: int = 0) -> str:
    """Return the unescaped text between the first <tag> at or after start and its </tag>.

    Returns an empty string when either tag is missing.
    """
    open_tag = f"<{tag}>"
    close_tag = f"</{tag}>"
    begin = xml.find(open_tag, start)
    if begin == -1:
        return ""
    begin += len(open_tag)
    end = xml.find(close_tag, begin)
    if end == -1:
        return ""
    return xml_unescape(xml[begin:end])


def _find_closing(xml: str, tag: str, start: int) -> int:
    """Index of the close tag matching an open tag whose content begins at start."""
    open_tag = f"<{tag}>"
    close_tag = f"</{tag}>"
    depth = 1
    position = start
    while True:
        close = xml.find(close_tag, position)
        if close == -1:
            return -1
        opening = xml.find(open_tag, position)
        if opening != -1 and opening < close:
            depth += 1
            position = opening + len(open_tag)
            continue
        depth -= 1
        if depth == 0:
            return close
        position = close + len(close_tag)


def _format_hours(hours: float) -> str:
    return f"{hours:f}"


def item_to_xml(item: Optional[WBSItem], indent: int = 0) -> str:
    """Serialise a task and its subtasks as a <Task> element."""
    if item is None:
        return ""
    pad = " " * (indent * 2)
    fields = (
        ("ID", xml_escape(item.id)),
        ("Name", xml_escape(item.task_name)),
        ("Description", xml_escape(item.description)),
        ("AssignedTo", xml_escape(item.assigned_to)),
        ("Status", str(int(item.status))),
        ("Priority", str(int(item.priority))),
        ("EstimatedHours", _format_hours(item.estimated_hours)),
        ("ActualHours", _format_hours(item.actual_hours)),
        ("StartDate", format_timestamp(item.start_date)),
        ("EndDate", format_timestamp(item.end_date)),
        ("Level", str(item.level)),
    )
    parts = [f"{pad}<Task>\n"]
    parts.extend(f"{pad}  <{name}>{value}</{name}>\n" for name, value in fields)
    if item.children:
        parts.append(f"{pad}  <Children>\n")
        parts.extend(item_to_xml(child, indent + 2) for child in item.children)
        parts.append(f"{pad}  </Children>\n")
    parts.append(f"{pad}</Task>\n")
    return "".join(parts)


def project_to_xml(project: WBSProject) -> str:
    """Serialise a whole project as an XML document."""
    return (
        XML_DECLARATION
        + "<WBSProject>\n"
        + f"  <ProjectName>{xml_escape(project.project_name)}</ProjectName>\n"
        + f"  <Description>{xml_escape(project.description)}</Description>\n"
        + "  <RootTask>\n"
        + item_to_xml(project.root_task, 2)
        + "  </RootTask>\n"
        + "</WBSProject>\n"
    )


def parse_task(xml: str, pos: int = 0) -> tuple[Optional[WBSItem], int]:
    """Parse the first <Task> element at or after pos.

    Returns the task with its subtasks and the position just past its end tag,
    or (None, pos) when no complete task is found. Raises ValueError on fields
    that cannot be converted.
    """
    open_tag, close_tag = "<Task>", "</Task>"
    start = xml.find(open_tag, pos)
    if start == -1:
        return None, pos
    end = _find_closing(xml, "Task", start + len(open_tag))
    if end == -1:
        return None, pos
    next_pos = end + len(close_tag)
    body = xml[start:next_pos]

    item = WBSItem()
    item.id = extract_xml_value(body, "ID")
    item.task_name = extract_xml_value(body, "Name")
    item.description = extract_xml_value(body, "Description")
    item.assigned_to = extract_xml_value(body, "AssignedTo")

    if text := extract_xml_value(body, "Status"):
        item.status = TaskStatus(int(text.strip()))
    if text := extract_xml_value(body, "Priority"):
        item.priority = TaskPriority(int(text.strip()))
    if text := extract_xml_value(body, "EstimatedHours"):
        item.estimated_hours = float(text)
    if text := extract_xml_value(body, "ActualHours"):
        item.actual_hours = float(text)
    if text := extract_xml_value(body, "StartDate"):
        item.start_date = parse_timestamp(text)
    if text := extract_xml_value(body, "EndDate"):
        item.end_date = parse_timestamp(text)
    if text := extract_xml_value(body, "Level"):
        item.level = int(text.strip())

    children_open = body.find("<Children>")
    if children_open != -1:
        content_start = children_open + len("<Children>")
        children_close = _find_closing(body, "Children", content_start)
        if children_close != -1:
            children_xml = body[content_start:children_close]
            child_pos = 0
            while True:
                child, child_pos = parse_task(children_xml, child_pos)
                if child is None:
                    break
                child.parent = item
                item.children.append(child)

    return item, next_pos


def project_from_xml(xml: str) -> WBSProject:
    """Build a project from an XML document; raise ProjectFileError if it is malformed."""
    try:
        name = extract_xml_value(xml, "ProjectName") or LOADED_PROJECT_NAME
        project = WBSProject(name, extract_xml_value(xml, "Description"))
        root_open = xml.find("<RootTask>")
        if root_open != -1:
            root_close = xml.find("</RootTask>")
            if root_close != -1:
                root_xml = xml[root_open + len("<RootTask>"):root_close]
                root, _ = parse_task(root_xml, 0)
                if root is not None:
                    root.task_name = name
                    project.root_task = root
    except ValueError as exc:
        raise ProjectFileError(f"malformed project document: {exc}") from exc
    return project


def save_project(project: WBSProject, path: PathLike) -> None:
    """Write a project to a UTF-8 XML file."""
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(project_to_xml(project))
    except OSError as exc:
        raise ProjectFileError(f"cannot write {os.fspath(path)!r}: {exc}") from exc


def load_project(path: PathLike) -> WBSProject:
    """Read a project from a UTF-8 XML file."""
    try:
        with open(path, encoding="utf-8") as handle:
            content = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ProjectFileError(f"cannot read {os.fspath(path)!r}: {exc}") from exc
    return project_from_xml(content)