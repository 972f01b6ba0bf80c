from typing import Any, Literal

from pydantic import BaseModel, field_validator


# --- Transport ---

class HttpOutcome(BaseModel):
    status_code: int
    result: Any = None


class OperationResult(BaseModel):
    issue_key: str | None = None
    issue_id: str | None = None
    data: Any = None

    @field_validator("issue_id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Any) -> str | None:
        return None if value is None else str(value)


# --- Operation parameters ---

class CreateIssueParams(BaseModel):
    operation: Literal["create_issue"] = "create_issue"
    project_key: str
    issue_type: str
    summary: str
    description: str = ""
    fields_json: str = ""


class UpdateIssueParams(BaseModel):
    operation: Literal["update_issue"] = "update_issue"
    issue_key: str
    description: str = ""
    fields_json: str = ""


class TransitionIssueParams(BaseModel):
    operation: Literal["transition_issue"] = "transition_issue"
    issue_key: str
    transition_id: str


class AddCommentParams(BaseModel):
    operation: Literal["add_comment"] = "add_comment"
    issue_key: str
    comment: str


class GetIssueParams(BaseModel):
    operation: Literal["get_issue"] = "get_issue"
    issue_key: str


class GetProjectParams(BaseModel):
    operation: Literal["get_project"] = "get_project"
    project_key: str


class CreateVersionParams(BaseModel):
    operation: Literal["create_version"] = "create_version"
    project_id: str
    version_name: str
    version_description: str = ""
    version_start_date: str = ""
    version_release_date: str = ""
    version_archived: bool = False
    version_released: bool = False

    @field_validator("version_archived", "version_released", mode="before")
    @classmethod
    def _literal_true(cls, value: Any) -> bool:
        # Only the exact string "true" switches the flag on.
        if isinstance(value, str):
            return value == "true"
        return value is True
