from quakecore.entry_paths import ENTRIES_CSV, ENTRIES_DEFINE, TRANSFLOW, EntryPaths


def test_init_creates_directory(tmp_path):
    paths = EntryPaths.init(tmp_path, "todo")
    assert paths.base == tmp_path / "todo"
    assert paths.base.is_dir()


def test_init_paths(tmp_path):
    paths = EntryPaths.init(tmp_path, "todo")
    assert paths.entries_csv == tmp_path / "todo" / "entries.csv"
    assert paths.entry_node_info == tmp_path / "todo" / "entry-node-info.yaml"
    assert paths.entries_define == tmp_path / "entries-define.yaml"
    assert paths.transflows == tmp_path / "transflows.yaml"


def test_init_existing_directory(tmp_path):
    (tmp_path / "blog").mkdir()
    (tmp_path / "blog" / "keep.md").write_text("x", encoding="utf-8")
    paths = EntryPaths.init(tmp_path, "blog")
    assert (paths.base / "keep.md").read_text(encoding="utf-8") == "x"


def test_constants_match_paths(tmp_path):
    paths = EntryPaths.init(tmp_path, "todo")
    assert paths.entries_csv.name == ENTRIES_CSV
    assert paths.entries_define.name == ENTRIES_DEFINE
    assert paths.transflows.name == TRANSFLOW