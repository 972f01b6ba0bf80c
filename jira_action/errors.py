import json


class JiraActionError(Exception):
    pass


class ConfigurationError(JiraActionError):
    """A required input is missing or the operation is not recognised."""


class InvalidInputError(JiraActionError):
    """An input is present but cannot be parsed."""


class JiraApiError(JiraActionError):
    """Jira answered with a status code outside 2xx."""

    def __init__(self, action: str, status_code: int, body) -> None:
        self.action = action
        self.status_code = status_code
        self.body = body
        rendered = json.dumps(body, separators=(",", ":"), ensure_ascii=False)
        super().__init__(f"Failed to {action}: {status_code} {rendered}")
