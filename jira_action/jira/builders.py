"""Request bodies and endpoint paths for each operation."""

import json

from jira_action.errors import InvalidInputError
from jira_action.jira.schemas import (
    AddCommentParams,
    CreateIssueParams,
    CreateVersionParams,
    TransitionIssueParams,
    UpdateIssueParams,
)

API_PREFIX = "/rest/api/3"


def issue_path(issue_key: str) -> str:
    return f"{API_PREFIX}/issue/{issue_key}"


def project_path(project_key: str) -> str:
    return f"{API_PREFIX}/project/{project_key}"


def adf_document(text: str) -> dict:
    """Wrap plain text in a single-paragraph Atlassian Document Format doc."""
    return {
        "type": "doc",
        "version": 1,
        "content": [
            {
                "type": "paragraph",
                "content": [{"type": "text", "text": text}],
            }
        ],
    }


def parse_fields_json(raw: str) -> dict:
    try:
        fields = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise InvalidInputError(f"Invalid fields_json: {exc}") from exc
    if fields is None:
        return {}
    if not isinstance(fields, dict):
        raise InvalidInputError(
            f"Invalid fields_json: expected a JSON object, got {type(fields).__name__}"
        )
    return fields


def _merge_fields(fields: dict, description: str, fields_json: str) -> dict:
    if description:
        fields["description"] = description
    if fields_json:
        fields = {**fields, **parse_fields_json(fields_json)}
    return fields


def create_issue_body(params: CreateIssueParams) -> dict:
    fields = {
        "project": {"key": params.project_key},
        "issuetype": {"name": params.issue_type},
        "summary": params.summary,
    }
    return {"fields": _merge_fields(fields, params.description, params.fields_json)}


def update_issue_body(params: UpdateIssueParams) -> dict:
    return {"fields": _merge_fields({}, params.description, params.fields_json)}


def transition_body(params: TransitionIssueParams) -> dict:
    return {"transition": {"id": params.transition_id}}


def comment_body(params: AddCommentParams) -> dict:
    return {"body": adf_document(params.comment)}


def version_body(params: CreateVersionParams) -> dict:
    body: dict = {"name": params.version_name, "projectId": params.project_id}
    if params.version_description:
        body["description"] = params.version_description
    # Flags are sent even when the input was left empty.
    body["archived"] = params.version_archived
    body["released"] = params.version_released
    if params.version_start_date:
        body["startDate"] = params.version_start_date
    if params.version_release_date:
        body["releaseDate"] = params.version_release_date
    return body
