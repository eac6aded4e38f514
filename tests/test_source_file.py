"""Tests for resolving declared project files."""

from pathlib import Path
import xml.etree.ElementTree as ET

from returns.pipeline import is_successful

from pycompdb.domain.errors import MalformedDeclaration
from pycompdb.domain.providers import Workspace
from pycompdb.domain.source_file import parse_source_file, source_files_from_xml


def _source_file(xml: str, project="/p", folders=("/p",)):
    workspace = Workspace(folders=[Path(f) for f in folders])
    return parse_source_file(ET.fromstring(xml), Path(project), workspace).unwrap()


def test_project_dir_is_substituted():
    sf = _source_file("<file><name>$PROJ_DIR$/src/a.c</name></file>")
    assert sf.path == "$PROJ_DIR$/src/a.c"
    assert sf.absolute_path == Path("/p/src/a.c")
    assert sf.workspace_path == Path("src/a.c")


def test_every_project_dir_occurrence_is_substituted():
    sf = _source_file("<file><name>$PROJ_DIR$/x/$PROJ_DIR$/a.c</name></file>")
    assert sf.absolute_path == Path("/p/x/p/a.c")


def test_dot_segments_are_normalised():
    sf = _source_file("<file><name>$PROJ_DIR$/./src/../../lib/b.c</name></file>")
    assert sf.absolute_path == Path("/lib/b.c")
    assert sf.workspace_path == Path("../lib/b.c")


def test_workspace_path_without_workspace_is_absolute():
    sf = _source_file("<file><name>$PROJ_DIR$/src/a.c</name></file>", folders=())
    assert sf.workspace_path == sf.absolute_path == Path("/p/src/a.c")


def test_workspace_path_uses_first_folder():
    sf = _source_file(
        "<file><name>$PROJ_DIR$/src/a.c</name></file>", folders=("/p/src", "/p")
    )
    assert sf.workspace_path == Path("a.c")


def test_workspace_path_follows_workspace_changes():
    workspace = Workspace(folders=[Path("/p")])
    sf = parse_source_file(
        ET.fromstring("<file><name>$PROJ_DIR$/src/a.c</name></file>"), Path("/p"), workspace
    ).unwrap()
    assert sf.workspace_path == Path("src/a.c")

    workspace.folders = [Path("/p/src")]
    assert sf.workspace_path == Path("a.c")


def test_empty_name_gives_empty_path():
    assert _source_file("<file><name/></file>").path == ""


def test_missing_name_is_malformed():
    result = parse_source_file(ET.fromstring("<file/>"), Path("/p"), Workspace())
    assert not is_successful(result)
    assert isinstance(result.failure(), MalformedDeclaration)


def test_wrong_tag_is_malformed():
    result = parse_source_file(
        ET.fromstring("<group><name>src</name></group>"), Path("/p"), Workspace()
    )
    assert isinstance(result.failure(), MalformedDeclaration)


def test_malformed_declarations_are_dropped():
    xml = ET.fromstring(
        """\
<project>
  <file><name>$PROJ_DIR$/a.c</name></file>
  <group>
    <name>drivers</name>
    <file><name>$PROJ_DIR$/drivers/uart.c</name></file>
    <file><path>broken.c</path></file>
  </group>
  <file><name>$PROJ_DIR$/z.c</name></file>
</project>
"""
    )
    files = source_files_from_xml(xml, Path("/p"), Workspace(folders=[Path("/p")]))
    assert [str(f.workspace_path) for f in files] == ["a.c", "drivers/uart.c", "z.c"]
