from pathlib import Path

from wbsplan.config import (
    config_file_path,
    get_last_opened_file,
    save_last_opened_file,
)


def test_config_file_path_creates_directory(tmp_path):
    path = config_file_path(tmp_path)
    assert path == tmp_path / "wbsplan" / "config.txt"
    assert path.parent.is_dir()


def test_config_file_path_falls_back_when_directory_cannot_be_made(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    assert config_file_path(blocker) == Path("config.txt")


def test_round_trip(tmp_path):
    config = tmp_path / "config.txt"
    save_last_opened_file("/projects/plan.xml", config)
    assert get_last_opened_file(config) == "/projects/plan.xml"


def test_file_format(tmp_path):
    config = tmp_path / "config.txt"
    save_last_opened_file("plan.xml", config)
    assert config.read_text(encoding="utf-8") == "LastOpenedFile=plan.xml\n"


def test_save_overwrites_previous_entry(tmp_path):
    config = tmp_path / "config.txt"
    save_last_opened_file("first.xml", config)
    save_last_opened_file("second.xml", config)
    assert get_last_opened_file(config) == "second.xml"
    assert config.read_text(encoding="utf-8").count("LastOpenedFile=") == 1


def test_missing_file_gives_empty_string(tmp_path):
    assert get_last_opened_file(tmp_path / "absent.txt") == ""


def test_key_found_after_other_lines(tmp_path):
    config = tmp_path / "config.txt"
    config.write_text("Other=1\nLastOpenedFile=deep/plan.xml\n", encoding="utf-8")
    assert get_last_opened_file(config) == "deep/plan.xml"


def test_file_without_key_gives_empty_string(tmp_path):
    config = tmp_path / "config.txt"
    config.write_text("Other=1\n", encoding="utf-8")
    assert get_last_opened_file(config) == ""


def test_unwritable_target_is_ignored(tmp_path):
    save_last_opened_file("plan.xml", tmp_path)
    assert get_last_opened_file(tmp_path) == ""


def test_path_with_japanese_characters(tmp_path):
    config = tmp_path / "config.txt"
    save_last_opened_file("計画/プロジェクト.xml", config)
    assert get_last_opened_file(config) == "計画/プロジェクト.xml"