# wbsplan

Manage a project as a Work Breakdown Structure: a tree of tasks, each with
an owner, a status, a priority, estimated and actual hours, and planned
start and end times. Projects are stored as UTF-8 XML files.

## Install

    pip install .

For running the tests:

    pip install .[test]
    pytest

## Library use

```python
from wbsplan.model import WBSItem, WBSProject, TaskStatus
from wbsplan.xmlio import save_project, load_project

project = WBSProject("新システム開発")
design = WBSItem("設計")
design.estimated_hours = 60.0
design.status = TaskStatus.IN_PROGRESS
project.add_root_task(design)          # design.id becomes "1.1"

build = WBSItem("実装")
design.add_child(build)                # build.id becomes "1.1.1"

print(project.total_estimated_hours())
print(project.overall_progress())

save_project(project, "project.xml")
again = load_project("project.xml")
```

### `wbsplan.model`

- `TaskStatus` (`NOT_STARTED`, `IN_PROGRESS`, `COMPLETED`, `ON_HOLD`,
  `CANCELLED`) and `TaskPriority` (`LOW`, `MEDIUM`, `HIGH`, `URGENT`) are
  integer enums; each member has a Japanese `label`.
- `WBSItem` is one task. `add_child` sets the child's parent, its level
  (one below the parent) and its id (the parent's id plus `.N`, where `N`
  is its position). `remove_child` detaches a subtask and raises
  `ValueError` if it is not a child. `generate_id` renumbers a task and
  everything under it from its parent's id and position. `walk` yields the
  task and all tasks below it, parents first. `progress_percentage` is
  actual hours over estimated hours times 100, or 0 with no estimate;
  `total_estimated_hours` and `total_actual_hours` sum over the subtree.
- `WBSProject` holds a name, a description and a root task (id `"1"`,
  named after the project). `add_root_task` adds a top-level task;
  `total_estimated_hours`, `total_actual_hours` and `overall_progress`
  cover the whole tree.
- `status_to_string`, `status_from_string`, `priority_to_string` and
  `priority_from_string` convert between enum members and the Japanese
  labels (`未開始`, `進行中`, `完了`, `保留`, `キャンセル` and `低`, `中`,
  `高`, `緊急`); the `from_string` functions raise `ValueError` for an
  unknown label.

### `wbsplan.xmlio`

- `project_to_xml` / `project_from_xml` convert a project to and from an
  XML document; `save_project` / `load_project` do the same with a file.
- `item_to_xml` and `parse_task` handle a single `<Task>` element with its
  subtasks.
- `xml_escape`, `xml_unescape`, `extract_xml_value`, `format_timestamp`
  and `parse_timestamp` are the helpers underneath. Timestamps are written
  as `YYYY-MM-DDTHH:MM:SS`; hours are written with six decimals.
- When a document is loaded, the root task is renamed to the project name,
  and a missing project name becomes `読み込まれたプロジェクト`.
- Files that cannot be read, written or parsed raise `ProjectFileError`.

### `wbsplan.config`

`save_last_opened_file` and `get_last_opened_file` remember the last
project file in a settings file (`LastOpenedFile=<path>`). By default this
is `wbsplan/config.txt` under `%APPDATA%`, `$XDG_CONFIG_HOME` or
`~/.config`; `config_file_path` returns that path, and both helpers accept
another path.

## Command line

    wbsplan show

prints the task tree of the built-in sample project. Other commands:

    wbsplan new FILE [--name NAME]           create an empty project file
    wbsplan sample FILE                      write the sample project to FILE
    wbsplan show [FILE]                      print the task tree
    wbsplan add-task FILE [--name NAME]      add a top-level task
    wbsplan add-subtask FILE PARENT_ID [--name NAME]
    wbsplan edit FILE TASK_ID [--name ...] [--description ...]
                 [--assigned-to ...] [--status ...] [--priority ...]
                 [--estimated HOURS] [--actual HOURS]
    wbsplan details FILE TASK_ID             print a task's detail rows
    wbsplan last                             print the last opened file

`--status` and `--priority` take either the Japanese label or the member
name (`in_progress`, `high`, ...). Every command that reads or writes a
file records it as the last opened file; `--config PATH` (before the
command) uses another settings file. Errors such as an unreadable file or
an unknown task id are printed to standard error and give exit status 1.

## What it does not do

There is no graphical window; projects are viewed and edited through the
command line or the library. The command line has no way to delete a
task (the library's `WBSItem.remove_child` does), and it does not
renumber the remaining tasks afterwards unless `generate_id` is called.