import pytest

from quakecore.entry_defines import EntryDefines, entries_define_from_path
from quakecore.errors import QuakeError

LIST_YAML = """
- type: todo
  display: Todo
  fields:
    - title: Title
- type: blog
  display: Blog
  fields:
    - title: Title
- type: todo
  display: Second
  fields:
    - title: Title
"""

FILE_YAML = """
entries:
  - type: todo
    display: Todo
    fields:
      - title: Title
      - content: Body
  - type: blog
    display: Blog
    fields:
      - title: Title
"""


def test_find_returns_first_match():
    defines = EntryDefines.from_yaml(LIST_YAML)
    found = defines.find("todo")
    assert found.display == "Todo"
    assert defines.find("blog").entry_type == "blog"


def test_find_missing_is_none():
    assert EntryDefines.from_yaml(LIST_YAML).find("story") is None


def test_from_path(tmp_path):
    path = tmp_path / "entries-define.yaml"
    path.write_text(FILE_YAML, encoding="utf-8")
    defines = EntryDefines.from_path(path)
    assert [d.entry_type for d in defines.entries] == ["todo", "blog"]
    assert defines.entries[0].fields == [{"title": "Title"}, {"content": "Body"}]


def test_entries_define_from_path(tmp_path):
    path = tmp_path / "entries-define.yaml"
    path.write_text(FILE_YAML, encoding="utf-8")
    entries = entries_define_from_path(path)
    assert entries == EntryDefines.from_path(path).entries


def test_from_path_without_entries_key(tmp_path):
    path = tmp_path / "entries-define.yaml"
    path.write_text(LIST_YAML, encoding="utf-8")
    with pytest.raises(QuakeError):
        EntryDefines.from_path(path)


def test_from_path_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        entries_define_from_path(tmp_path / "absent.yaml")