from dataclasses import dataclass
from typing import Callable, TypedDict

from application.ports import AIProvider
from domain.models import ChangeSet, GenerationRequest, GenerationResult, ReviewState


class PullRequestData(TypedDict):
    html_url: str


def _noop_observe_change_set(_: ChangeSet) -> None:
    return None


def _noop_observe_generation_result(_: GenerationResult) -> None:
    return None


def _noop_observe_step(_: str, __: str, detail: str | None = None) -> None:
    return None


def _noop_notify(_: str) -> None:
    return None


@dataclass(frozen=True)
class PullRequestFlowConfig:
    target_branch: str
    current_branch: str
    remote: str = "origin"


@dataclass(frozen=True)
class PullRequestFlowDependencies:
    push_branch: Callable[[str], None]
    resolve_change_set: Callable[[str, str], ChangeSet]
    build_prompt: Callable[[ChangeSet], GenerationRequest]
    ai_provider: AIProvider
    parse_response: Callable[[str], GenerationResult]
    review_description: Callable[[GenerationResult], ReviewState]
    create_pr: Callable[..., PullRequestData]
    notify: Callable[[str], None] = _noop_notify
    observe_change_set: Callable[[ChangeSet], None] = _noop_observe_change_set
    observe_generation_result: Callable[[GenerationResult], None] = _noop_observe_generation_result
    observe_step: Callable[[str, str, str | None], None] = _noop_observe_step


@dataclass(frozen=True)
class PullRequestFlowResult:
    status: str
    message: str
    base: str | None = None
    head: str | None = None
    pr_title: str | None = None
    pr_body: str | None = None
    pr_url: str | None = None
    error: str | None = None
