import re

import pytest

from animstudio.project_manager import ProjectData, ProjectManager, RecentProject


def open_project(manager, tmp_path, pid, name):
    manager.data = ProjectData(pid, name, str(tmp_path / f"{name}.proj"))
    manager.update_recent_projects()


def test_defaults(tmp_path):
    pm = ProjectManager("proj", directory=tmp_path)
    assert pm.file_extension == "proj"
    assert pm.recent_file_name == "recent"
    assert pm.max_recent_projects == 5
    assert pm.recent_projects == []
    assert pm.is_running is True


def test_quit(tmp_path):
    pm = ProjectManager("proj", directory=tmp_path)
    pm.quit()
    assert pm.is_running is False


@pytest.mark.parametrize(
    "name, filepath, ready",
    [("", "", False), ("n", "", False), ("", "f", False), ("n", "f", True)],
)
def test_is_ready(tmp_path, name, filepath, ready):
    pm = ProjectManager("proj", directory=tmp_path)
    pm.data.name = name
    pm.data.filepath = filepath
    assert pm.is_ready() is ready


def test_generate_uid_format(tmp_path):
    pm = ProjectManager("proj", directory=tmp_path)
    uid = pm.generate_uid()
    match = re.fullmatch(r"(\d+)_(\d{6})", uid)
    assert match is not None
    assert 100000 <= int(match.group(2)) <= 999999


def test_serialize_round_trip(tmp_path):
    pm = ProjectManager("proj", directory=tmp_path)
    path = str(tmp_path / "demo.proj")
    pm.data = ProjectData("id-1", "Demo", path)
    pm.serialize()

    other = ProjectManager("proj", directory=tmp_path)
    other.deserialize(path)
    assert other.data == ProjectData("id-1", "Demo", path)


def test_serialize_generates_uid(tmp_path):
    pm = ProjectManager("proj", directory=tmp_path)
    path = str(tmp_path / "demo.proj")
    pm.data = ProjectData("", "Demo", path)
    pm.serialize(True)
    assert re.fullmatch(r"\d+_\d{6}", pm.data.id)

    other = ProjectManager("proj", directory=tmp_path)
    other.deserialize(path)
    assert other.data.id == pm.data.id


def test_deserialize_missing_file(tmp_path):
    pm = ProjectManager("proj", directory=tmp_path)
    with pytest.raises(FileNotFoundError):
        pm.deserialize(tmp_path / "missing.proj")


def test_recent_most_recent_first_and_deduplicated(tmp_path):
    pm = ProjectManager("proj", directory=tmp_path)
    open_project(pm, tmp_path, "a", "A")
    open_project(pm, tmp_path, "b", "B")
    open_project(pm, tmp_path, "a", "A")
    assert [p.id for p in pm.recent_projects] == ["a", "b"]


def test_recent_truncated_to_max(tmp_path):
    pm = ProjectManager("proj", max_recent_projects=2, directory=tmp_path)
    for pid in ["a", "b", "c"]:
        open_project(pm, tmp_path, pid, pid.upper())
    assert [p.id for p in pm.recent_projects] == ["c", "b"]


def test_recent_persisted_and_reloaded(tmp_path):
    pm = ProjectManager("proj", directory=tmp_path)
    open_project(pm, tmp_path, "a", "A")
    open_project(pm, tmp_path, "b", "B")

    reloaded = ProjectManager("proj", directory=tmp_path)
    assert reloaded.recent_projects == pm.recent_projects
    assert reloaded.recent_projects[0] == RecentProject("b", "B", str(tmp_path / "B.proj"))


def test_reload_respects_max(tmp_path):
    pm = ProjectManager("proj", directory=tmp_path)
    for pid in ["a", "b", "c"]:
        open_project(pm, tmp_path, pid, pid.upper())

    small = ProjectManager("proj", max_recent_projects=2, directory=tmp_path)
    assert [p.id for p in small.recent_projects] == ["c", "b"]


def test_custom_recent_file_name(tmp_path):
    pm = ProjectManager("proj", recent_file_name="history", directory=tmp_path)
    open_project(pm, tmp_path, "a", "A")
    assert (tmp_path / "history").exists()
    assert not (tmp_path / "recent").exists()