import io
import stat

import pytest

from wish.shell import ShellSession


@pytest.fixture
def session():
    """A session with the default search path and a captured error stream."""
    return ShellSession(search_path=["/bin", "/usr/bin"], stderr=io.StringIO())


@pytest.fixture
def make_script(tmp_path):
    """Write an executable shell script into tmp_path/bin."""
    bindir = tmp_path / "bin"
    bindir.mkdir()

    def _make(name, body):
        script = bindir / name
        script.write_text("#!/bin/sh\n" + body + "\n")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    _make.dir = str(bindir)
    return _make
