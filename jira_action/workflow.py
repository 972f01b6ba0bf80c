"""Binding to the CI runner: named inputs, named outputs, failure and debug
annotations.

Inputs arrive as ``INPUT_<NAME>`` environment variables. Outputs are appended
to the file named by ``GITHUB_OUTPUT``; runners that predate that file get the
legacy ``::set-output`` command on stdout instead.
"""

import json
import os
import sys
import uuid

from jira_action.errors import ConfigurationError


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _escape_property(value: str) -> str:
    return _escape_data(value).replace(":", "%3A").replace(",", "%2C")


def _to_command_value(value) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def issue_command(command: str, message: str, **properties: str) -> None:
    props = ",".join(f"{k}={_escape_property(v)}" for k, v in properties.items())
    head = f"::{command} {props}" if props else f"::{command}"
    sys.stdout.write(f"{head}::{_escape_data(message)}\n")
    sys.stdout.flush()


def get_input(name: str, required: bool = False) -> str:
    value = os.environ.get(f"INPUT_{name.replace(' ', '_').upper()}", "")
    if required and not value:
        raise ConfigurationError(f"Input required and not supplied: {name}")
    return value.strip()


def set_output(name: str, value) -> None:
    text = _to_command_value(value)
    path = os.environ.get("GITHUB_OUTPUT")
    if not path:
        issue_command("set-output", text, name=name)
        return
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    if delimiter in name or delimiter in text:
        raise ValueError(f"Unexpected input: value should not contain the delimiter {delimiter}")
    with open(path, "a", encoding="utf-8") as fh:
        fh.write(f"{name}<<{delimiter}\n{text}\n{delimiter}\n")


def set_failed(message: str) -> None:
    issue_command("error", message)


def debug(message: str) -> None:
    issue_command("debug", message)
