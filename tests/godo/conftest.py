import json
from pathlib import Path
import sys
import textwrap

import pytest

FAKE_JAVAC = """\
import sys
from pathlib import Path

args = sys.argv[1:]
sources = Path(args[0].removeprefix("@")).read_text().splitlines()
classes = Path(args[args.index("-d") + 1])
for source in sources:
    print(f"compiling {source}")
    (classes / Path(source).with_suffix(".class").name).write_text("")
"""

FAILING_JAVAC = """\
import sys

print("Main.java:1: error: class, interface, or enum expected", file=sys.stderr)
sys.exit(1)
"""


def write_config(project: Path, script: Path) -> None:
    (project / "godo.toml").write_text(
        textwrap.dedent(
            f"""\
            [godo]
            javac = [{json.dumps(sys.executable)}, {json.dumps(str(script))}]
            """
        )
    )


@pytest.fixture
def project(tmp_path: Path) -> Path:
    project = tmp_path / "project"
    (project / "src" / "com" / "example").mkdir(parents=True)
    (project / "src" / "Main.java").write_text("class Main {}\n")
    (project / "src" / "com" / "example" / "Util.java").write_text("class Util {}\n")
    (project / "src" / "com" / "example" / "notes.txt").write_text("not java\n")
    return project


@pytest.fixture
def fake_javac(tmp_path: Path, project: Path) -> Path:
    script = tmp_path / "fake_javac.py"
    script.write_text(FAKE_JAVAC)
    write_config(project, script)
    return script


@pytest.fixture
def failing_javac(tmp_path: Path, project: Path) -> Path:
    script = tmp_path / "failing_javac.py"
    script.write_text(FAILING_JAVAC)
    write_config(project, script)
    return script
