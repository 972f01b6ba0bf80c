import os

import pytest

from jira_action.main import configure_logging

configure_logging()

BASE_URL = "https://your-domain.atlassian.net"


@pytest.fixture(autouse=True)
def clean_runner_env(monkeypatch):
    for name in list(os.environ):
        if name.startswith("INPUT_") or name in ("GITHUB_OUTPUT", "RUNNER_DEBUG"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def set_inputs(monkeypatch):
    def _set(**values: str) -> None:
        for name, value in values.items():
            monkeypatch.setenv(f"INPUT_{name.upper()}", value)

    return _set


@pytest.fixture
def connection_inputs(set_inputs):
    def _set(operation: str, base_url: str = BASE_URL) -> None:
        set_inputs(
            jira_base_url=base_url,
            jira_email="test@example.com",
            jira_api_token="test-token",
            operation=operation,
        )

    return _set


@pytest.fixture
def output_file(tmp_path, monkeypatch):
    path = tmp_path / "github_output"
    path.write_text("")
    monkeypatch.setenv("GITHUB_OUTPUT", str(path))
    return path


def read_outputs(path) -> dict[str, str]:
    outputs = {}
    lines = path.read_text(encoding="utf-8").splitlines()
    i = 0
    while i < len(lines):
        name, delimiter = lines[i].split("<<", 1)
        end = lines.index(delimiter, i + 1)
        outputs[name] = "\n".join(lines[i + 1 : end])
        i = end + 1
    return outputs
