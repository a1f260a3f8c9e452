import subprocess
from typing import Any

import pytest


class FakeGh:
    """
    ``gh api`` の代わりに、登録したレスポンスを返す。
    実行されたコマンドは ``commands`` に記録される。
    """

    def __init__(self) -> None:
        self.responses: dict[tuple[str, str], tuple[int, str]] = {}
        self.commands: list[list[str]] = []

    def add_response(self, method: str, endpoint: str, stdout: str = "", returncode: int = 0) -> None:
        self.responses[(method, endpoint)] = (returncode, stdout)

    def run(self, command: list[str], **kwargs: Any) -> subprocess.CompletedProcess:
        self.commands.append(command)
        index = command.index("--method")
        method, endpoint = command[index + 1], command[index + 2]
        returncode, stdout = self.responses.get((method, endpoint), (0, ""))
        return subprocess.CompletedProcess(command, returncode, stdout=stdout)


@pytest.fixture(autouse=True)
def unset_default_organization(monkeypatch):
    monkeypatch.delenv("GH_ORG", raising=False)


@pytest.fixture
def fake_gh(monkeypatch) -> FakeGh:
    fake = FakeGh()
    monkeypatch.setattr("ghorgcli.common.gh.shutil.which", lambda name: f"/usr/bin/{name}")
    monkeypatch.setattr("ghorgcli.common.gh.subprocess.run", fake.run)
    return fake
