from application.pr_flow.contracts import (
    PullRequestData,
    PullRequestFlowConfig,
    PullRequestFlowDependencies,
    PullRequestFlowResult,
)
from application.pr_flow.use_case import run_pull_request_flow

__all__ = [
    "PullRequestData",
    "PullRequestFlowConfig",
    "PullRequestFlowDependencies",
    "PullRequestFlowResult",
    "run_pull_request_flow",
]
