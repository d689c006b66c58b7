import pytest


@pytest.fixture(autouse=True)
def clean_gameforge_env(monkeypatch):
    # setenv 先记录原值，load_dotenv 写入的变量在测试结束后会被还原
    for name in ("GAMEFORGE_VARIANTS", "GAMEFORGE_LOCALE", "GAMEFORGE_VERBOSE"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
