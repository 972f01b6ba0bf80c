import asyncio
import json
import logging
import os
import sys
import traceback

import httpx
import structlog

from jira_action import workflow
from jira_action.config import DEFAULT_HEADERS, load_settings
from jira_action.errors import JiraActionError
from jira_action.jira.client import JiraHttpClient
from jira_action.jira.operations import JiraContext, dispatch
from jira_action.jira.schemas import OperationResult


def configure_logging() -> None:
    level = logging.DEBUG if os.environ.get("RUNNER_DEBUG") == "1" else logging.INFO
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


log = structlog.get_logger()


def emit_outputs(result: OperationResult) -> None:
    workflow.set_output("status", "success")
    if result.issue_key:
        workflow.set_output("issue_key", result.issue_key)
    if result.issue_id:
        workflow.set_output("issue_id", result.issue_id)
    response = json.dumps(result.data, separators=(",", ":"), ensure_ascii=False)
    workflow.set_output("response", response)


async def run(transport: httpx.AsyncBaseTransport | None = None) -> int:
    """Run the configured operation once and report it to the runner.

    Returns the process exit code: 0 on success, 1 when the run failed.
    """
    try:
        settings = load_settings()
        structlog.contextvars.bind_contextvars(operation=settings.operation)
        async with JiraHttpClient(
            settings.jira_email,
            settings.jira_api_token,
            timeout=settings.http_timeout,
            user_agent=settings.user_agent,
            transport=transport,
        ) as client:
            ctx = JiraContext(
                client=client, base_url=settings.base_url, headers=dict(DEFAULT_HEADERS)
            )
            result = await dispatch(settings.operation, ctx)
        emit_outputs(result)
        log.info("operation_succeeded", issue_key=result.issue_key)
        return 0
    except Exception as exc:
        workflow.set_output("status", "error")
        workflow.set_failed(str(exc) or "An unknown error occurred")
        workflow.debug(f"Error stack: {traceback.format_exc()}")
        kind = "known" if isinstance(exc, JiraActionError) else "unknown"
        log.error("operation_failed", error=str(exc), error_type=type(exc).__name__, kind=kind)
        return 1
    finally:
        structlog.contextvars.clear_contextvars()


def main() -> int:
    configure_logging()
    return asyncio.run(run())
