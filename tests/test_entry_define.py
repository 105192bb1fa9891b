import pytest

from quakecore.entry_define import EntryDefine, FlowField, parse_entry_defines
from quakecore.errors import QuakeError
from quakecore.meta import FieldKind, MetaField

TODO_YAML = """
- type: todo
  display: Todo
  fields:
    - title: Title
    - content: Body
    - author: Author
"""

STORY_YAML = """
- type: story
  display: Story
  fields:
    - title: Title
    - author: String
    - content: Body
    - status: Flow
    - priority: Flow
    - created_date: Date
    - updated_date: Date
  actions: ~
  flows:
    - field: status
      items: ['Todo', 'Doing', 'Done']
  states:
    - field: priority
      items: ['Low', 'Medium', 'High']

"""


def todo():
    return parse_entry_defines(TODO_YAML)[0]


def test_parse_yaml():
    define = todo()
    assert len(define.fields) == 3
    field_types = define.to_field_type()
    assert field_types["title"] == MetaField(FieldKind.TITLE, "Title")


def test_update_fields():
    values = {
        "title": "Hello",
        "author": "Phodal HUANG",
        "date": "2021-11-24 19:14:10",
        "content": "sample",
        "new_field": "sample",
    }
    merged = todo().merge_to_fields(values)
    assert merged["new_field"] == "sample"
    assert list(merged) == ["title", "content", "author", "date", "new_field"]


def test_merge_fills_missing_declared_fields():
    merged = todo().merge_to_fields({"title": "Hello"})
    assert merged == {"title": "Hello", "content": "", "author": ""}


def test_parse_flowy():
    define = parse_entry_defines(STORY_YAML)[0]
    assert define.actions is None
    flows = define.create_flows_and_states()
    assert flows["status"] == "Todo"
    assert flows["priority"] == "Low"

    final = define.create_default_fields("hello")
    assert final["status"] == "Todo"
    assert final["priority"] == "Low"
    assert final["title"] == "hello"
    assert final["created_date"] == final["updated_date"]


def test_title_and_date_keys():
    result = todo().create_title_and_date("hi")
    assert list(result) == ["title", "created_date", "updated_date"]
    assert result["title"] == "hi"


def test_dict_round_trip():
    define = parse_entry_defines(STORY_YAML)[0]
    data = define.to_dict()
    assert "actions" not in data
    assert data["type"] == "story"
    assert EntryDefine.from_dict(data) == define


def test_empty_flow_items_raise():
    define = EntryDefine(entry_type="x", flows=[FlowField(field="status", items=[])])
    with pytest.raises(QuakeError):
        define.create_flows_and_states()


def test_missing_field_raises():
    with pytest.raises(QuakeError):
        parse_entry_defines("- type: todo\n  display: Todo\n")


def test_not_a_list_raises():
    with pytest.raises(QuakeError):
        parse_entry_defines("type: todo")