import errno

import pytest

from errkit.app import main
from errkit.errors import format_error


@pytest.fixture(autouse=True)
def _workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("EF_DUMPCORE", raising=False)
    return tmp_path


def test_missing_file_reports_enoent(capsys):
    with pytest.raises(SystemExit) as info:
        main()
    assert info.value.code == 1
    err = capsys.readouterr().err
    assert err == format_error("", errno.ENOENT)
    assert "[ENOENT " in err


def test_existing_file_succeeds(_workdir, capsys):
    (_workdir / "aa").write_text("content")
    assert main([]) == 0
    assert capsys.readouterr().err == ""