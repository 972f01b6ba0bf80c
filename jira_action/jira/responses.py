from typing import Any

from jira_action.errors import JiraApiError
from jira_action.jira.schemas import HttpOutcome, OperationResult


def is_success(outcome: HttpOutcome) -> bool:
    return 200 <= outcome.status_code < 300


def ensure_success(outcome: HttpOutcome, action: str) -> Any:
    if not is_success(outcome):
        raise JiraApiError(action, outcome.status_code, outcome.result)
    return outcome.result


def issue_id_of(body: Any) -> str | None:
    if isinstance(body, dict):
        return body.get("id")
    return None


def created_issue(body: Any) -> OperationResult:
    key = body.get("key") if isinstance(body, dict) else None
    return OperationResult(issue_key=key, issue_id=issue_id_of(body), data=body)


def issue_result(issue_key: str, body: Any) -> OperationResult:
    return OperationResult(issue_key=issue_key, issue_id=issue_id_of(body), data=body)


def keyed_result(issue_key: str, body: Any) -> OperationResult:
    return OperationResult(issue_key=issue_key, data=body)


def data_result(body: Any) -> OperationResult:
    return OperationResult(data=body)
