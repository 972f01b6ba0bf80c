"""Operation pipelines and the dispatcher that selects one per run.

Every pipeline follows the same shape: build a body, call one endpoint, check
the status, and turn the response into an ``OperationResult``.
``update_issue`` and ``transition_issue`` additionally read the issue back
after a successful write so the result reflects its new state.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Callable, Literal, TypeVar

import structlog
from pydantic import BaseModel

from jira_action import workflow
from jira_action.config import DEFAULT_HEADERS
from jira_action.errors import ConfigurationError
from jira_action.jira import builders, responses
from jira_action.jira.client import JiraHttpClient
from jira_action.jira.schemas import (
    AddCommentParams,
    CreateIssueParams,
    CreateVersionParams,
    GetIssueParams,
    GetProjectParams,
    OperationResult,
    TransitionIssueParams,
    UpdateIssueParams,
)

log = structlog.get_logger()

P = TypeVar("P", bound=BaseModel)
Method = Literal["GET", "POST", "PUT"]


@dataclass(frozen=True)
class JiraContext:
    client: JiraHttpClient
    base_url: str
    headers: dict = field(default_factory=lambda: dict(DEFAULT_HEADERS))

    def url(self, path: str) -> str:
        return f"{self.base_url}{path}"


def read_params(model: type[P], get_input: Callable[..., str]) -> P:
    values = {
        name: get_input(name, required=info.is_required())
        for name, info in model.model_fields.items()
        if name != "operation"
    }
    return model(**values)


async def _send(
    ctx: JiraContext,
    method: Method,
    path: str,
    action: str,
    body: Any = None,
) -> Any:
    url = ctx.url(path)
    workflow.debug(f"{method} {url} ({action})")
    if body is not None:
        rendered = json.dumps(body, separators=(",", ":"), ensure_ascii=False)
        workflow.debug(f"Request body: {rendered}")

    if method == "GET":
        outcome = await ctx.client.get_json(url, ctx.headers)
    elif method == "POST":
        outcome = await ctx.client.post_json(url, body, ctx.headers)
    else:
        outcome = await ctx.client.put_json(url, body, ctx.headers)

    if not responses.is_success(outcome):
        log.warning("jira_rejected", action=action, status=outcome.status_code)
    return responses.ensure_success(outcome, action)


async def _pipeline(
    ctx: JiraContext,
    method: Method,
    path: str,
    action: str,
    extract: Callable[[Any], OperationResult],
    body: Any = None,
) -> OperationResult:
    return extract(await _send(ctx, method, path, action, body))


async def _read_back(ctx: JiraContext, issue_key: str) -> OperationResult:
    # Status of the read-back is not checked; the write already succeeded.
    url = ctx.url(builders.issue_path(issue_key))
    outcome = await ctx.client.get_json(url, ctx.headers)
    return responses.issue_result(issue_key, outcome.result)


async def create_issue(ctx: JiraContext, params: CreateIssueParams) -> OperationResult:
    body = builders.create_issue_body(params)
    return await _pipeline(
        ctx, "POST", f"{builders.API_PREFIX}/issue", "create issue",
        responses.created_issue, body,
    )


async def update_issue(ctx: JiraContext, params: UpdateIssueParams) -> OperationResult:
    body = builders.update_issue_body(params)
    await _send(ctx, "PUT", builders.issue_path(params.issue_key), "update issue", body)
    return await _read_back(ctx, params.issue_key)


async def transition_issue(
    ctx: JiraContext, params: TransitionIssueParams
) -> OperationResult:
    body = builders.transition_body(params)
    path = f"{builders.issue_path(params.issue_key)}/transitions"
    await _send(ctx, "POST", path, "transition issue", body)
    return await _read_back(ctx, params.issue_key)


async def add_comment(ctx: JiraContext, params: AddCommentParams) -> OperationResult:
    body = builders.comment_body(params)
    return await _pipeline(
        ctx, "POST", f"{builders.issue_path(params.issue_key)}/comment", "add comment",
        lambda data: responses.keyed_result(params.issue_key, data), body,
    )


async def get_issue(ctx: JiraContext, params: GetIssueParams) -> OperationResult:
    return await _pipeline(
        ctx, "GET", builders.issue_path(params.issue_key), "get issue",
        lambda data: responses.issue_result(params.issue_key, data),
    )


async def get_project(ctx: JiraContext, params: GetProjectParams) -> OperationResult:
    return await _pipeline(
        ctx, "GET", builders.project_path(params.project_key), "get project",
        responses.data_result,
    )


async def create_version(
    ctx: JiraContext, params: CreateVersionParams
) -> OperationResult:
    body = builders.version_body(params)
    return await _pipeline(
        ctx, "POST", f"{builders.API_PREFIX}/version", "create version",
        responses.data_result, body,
    )


async def dispatch(
    operation: str,
    ctx: JiraContext,
    get_input: Callable[..., str] = workflow.get_input,
) -> OperationResult:
    match operation:
        case "create_issue":
            return await create_issue(ctx, read_params(CreateIssueParams, get_input))
        case "update_issue":
            return await update_issue(ctx, read_params(UpdateIssueParams, get_input))
        case "transition_issue":
            return await transition_issue(
                ctx, read_params(TransitionIssueParams, get_input)
            )
        case "add_comment":
            return await add_comment(ctx, read_params(AddCommentParams, get_input))
        case "get_issue":
            return await get_issue(ctx, read_params(GetIssueParams, get_input))
        case "get_project":
            return await get_project(ctx, read_params(GetProjectParams, get_input))
        case "create_version":
            return await create_version(
                ctx, read_params(CreateVersionParams, get_input)
            )
        case _:
            raise ConfigurationError(f"Unsupported operation: {operation}")
