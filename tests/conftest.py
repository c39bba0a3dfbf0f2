import pytest


@pytest.fixture(autouse=True)
def isolate_config_discovery(tmp_path, monkeypatch):
    """Keep the user's real ``.commit-wizard.json`` out of every test.

    The home directory and the working directory both point at empty
    temporary directories, so configuration discovery only finds files
    that a test writes itself.
    """
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.chdir(work)
    yield
