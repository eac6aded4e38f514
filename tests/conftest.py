"""Shared pytest fixtures for pycompdb tests."""

from pathlib import Path

import pytest

PROJECT_XML = """\
<?xml version="1.0" encoding="UTF-8"?>
<project>
  <fileVersion>3</fileVersion>
  <configuration>
    <name>Debug</name>
    <toolchain><name>ARM</name></toolchain>
    <settings>
      <name>ICCARM</name>
      <data>
        <option>
          <name>CCDefines</name>
          <state>FOO=1</state>
          <state>DEBUG</state>
          <state></state>
        </option>
        <option>
          <name>CCIncludePath2</name>
          <state>$PROJ_DIR$/inc</state>
        </option>
        <option>
          <name>PreInclude</name>
          <state>$PROJ_DIR$/inc/config.h</state>
        </option>
      </data>
    </settings>
  </configuration>
  <configuration>
    <name>Release</name>
    <settings>
      <name>ICCARM</name>
      <data>
        <option>
          <name>CCDefines</name>
          <state>NDEBUG</state>
        </option>
      </data>
    </settings>
  </configuration>
  <group>
    <name>src</name>
    <file><name>$PROJ_DIR$/src/main.c</name></file>
    <file><name>$PROJ_DIR$/src/driver.cpp</name></file>
    <file><name>$PROJ_DIR$/inc/config.h</name></file>
    <file></file>
  </group>
  <file><name>$PROJ_DIR$/startup.s</name></file>
</project>
"""

CONFIG_TOML = """\
[pycompdb]
project = "app.ewp"
config = "Debug"
c_standard = "c11"
cpp_standard = "c++17"
defines = ["BAZ"]

[files.associations]
"*.s" = "asm"

[compiler]
name = "iccarm"
defines = ["__ICCARM__=1"]
include_paths = ["/opt/iar/arm/inc"]
"""


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    (tmp_path / "app.ewp").write_text(PROJECT_XML)
    (tmp_path / "pycompdb.toml").write_text(CONFIG_TOML)
    return tmp_path
