# quakecore

Building blocks for a plain-text knowledge manager that keeps its entries
(todos, blog posts, notes, …) as markdown files with YAML front matter.

## What it offers

- **Entry files** (`quakecore.entry_file`): `EntryFile.parse` reads a
  markdown file with front matter into an `EntryFile`; its fields can be
  read and edited (`field`, `add_field`, `update_field`, `set_fields`,
  `insert_id`, `update_content`), status changes recorded with `change`, and
  `str(entry)` writes the file out again. `to_dict` and `to_json` give the
  fields followed by `id`, `content` and, if any, `quake_change`. The helpers
  `file_prefix`, `file_name` and `id_from_name` handle the
  `0001-some-title.md` naming scheme.
- **Status changes** (`quakecore.quake_change`): `QuakeChange.parse` reads
  lines such as `2021-12-09 09:40:28 "Spike" -> "Todo"` and `str()` writes
  them back.
- **Entry definitions** (`quakecore.entry_define`, `quakecore.entry_defines`):
  `parse_entry_defines` reads a YAML list of entry types;
  `EntryDefines.from_path` and `entries_define_from_path` read a file holding
  an `entries` list. `EntryDefines.find` looks up a type, and
  `EntryDefine.create_default_fields` builds the fields of a new entry
  (title, created and updated dates, first value of every flow and state).
- **Field kinds** (`quakecore.meta`): `parse_field_type` maps type names such
  as `Title`, `Date` or `Flow` to a `MetaField`.
- **Workspace layout** (`quakecore.entry_paths`, `quakecore.entry_node_info`):
  `EntryPaths.init` gives the paths of a type's directory and creates it;
  `entry_info_from_path` loads a type's index counter, creating the file
  with index 0 if it is missing.
- **Configuration** (`quakecore.config`): `load_config` parses the YAML of a
  `.quake` file into a `QuakeConfig`.
- **Slugs and dates** (`quakecore.slug`, `quakecore.quake_time`): `slugify`
  for file names, `date_now`, and `replace_to_unix`, which rewrites dates in
  a filter expression to Unix timestamps (times without a zone are taken as
  UTC).
- **Wiki links** (`quakecore.references`, `quakecore.md_processor`):
  `NoteReference.parse` splits `file#section|label`; `transform` turns
  `[[note]]` and `![[note]]` references into `[label](file)` links, leaving
  code spans and fenced code blocks alone.
- **Actions and transflows** (`quakecore.quake`, `quakecore.flow`): a
  `SourceUnit` of declarations becomes `QuakeActionNode` and
  `QuakeTransflowNode` objects; `Transflow.from_node` turns a transflow node
  into flows plus the definitions of the entry types it uses, and
  `load_transflows` reads them from `transflows.yaml`.
- **Code generation** (`quakecore.js_codegen`): `gen_transform` and
  `gen_element` emit the JavaScript functions that fetch, merge or map the
  data and hand it to a web component described by a
  `quakecore.web_component.WebComponentElement`.

## Installing

```
pip install quakecore
```

## Examples

```python
from quakecore.entry_file import EntryFile, file_name

text = """---
title: hello, world
created_date: 2021.11.23
---

sample
"""

entry = EntryFile.parse(text, 1)
entry.update_field("title", "Hello, World")
entry.change("Todo", "Doing")
print(entry.field("title"))       # Hello, World
print(str(entry))                 # the file again, with a quake_change list
print(file_name(1, "hello"))      # 0001-hello.md
```

```python
from quakecore.quake_time import replace_to_unix

replace_to_unix("created_date > 2021-12-09")   # 'created_date > 1639008000'
```

```python
from quakecore.entry_define import parse_entry_defines
from quakecore.flow import Transflow
from quakecore.js_codegen import gen_transform
from quakecore.quake import Endway, Parameter, QuakeTransflowNode, SourceUnit, TransflowDecl

defines = parse_entry_defines("""
- type: todo
  display: Todo
  fields:
    - title: Title
- type: blog
  display: Blog
  fields:
    - title: Title
""")

unit = SourceUnit(parts=[
    TransflowDecl(
        name="show_calendar",
        flows=[Endway(sources=[Parameter("todo"), Parameter("blog")],
                      component="quake-calendar")],
    )
])
node = QuakeTransflowNode.from_unit(unit)
print(gen_transform(Transflow.from_node(defines, node))[0])
# function from_todo_blog_to_quake_calendar(todos, blogs) {
#   let results = [];
#   results = results.concat(todos);
#   results = results.concat(blogs);
#   return results;
# }
```

Errors are raised as `quakecore.errors.QuakeError` and
`quakecore.errors.QuakeParserError`.

## What it does not do

- It has no parser for the action and transflow language: text such as
  `todo.add: write docs` is not read from a string. Callers build the
  `SourceUnit` of `ActionDecl`, `TransflowDecl` and `SimpleLayoutDecl`
  objects themselves.
- It is a library only: there is no command-line tool, no server and no
  editor integration, and apart from the node-info file and the type
  directory it writes nothing to disk; reading and saving entry files is up
  to the caller.
- `md_processor.transform` only rewrites wiki references; it does not
  render or reformat the rest of the markdown.

## Running the tests

```
pip install -e ".[test]"
pytest
```