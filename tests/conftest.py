import pytest

import config


@pytest.fixture
def db_file(tmp_path, monkeypatch):
    path = tmp_path / "data" / "test.db"
    monkeypatch.setattr(config, "DB_PATH", str(path))
    return path
