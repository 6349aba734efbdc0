import logging
from functools import partial
from pathlib import Path

from application.pr_flow import PullRequestFlowConfig, PullRequestFlowDependencies
from application.review import ReviewLoop
from domain.description import build_prompt, parse_generated_text
from infrastructure.ai.provider_factory import build_ai_provider_runtime
from infrastructure.config.settings import Settings
from infrastructure.github.gh_client import GhCliClient
from infrastructure.observability.logging_utils import log_event, register_sensitive_values
from infrastructure.observability.workflow_observer import (
    observe_change_set,
    observe_generation_result,
    observe_workflow_step,
)
from infrastructure.repo.change_set_resolver import build_change_set_resolver
from infrastructure.repo.operations import push_branch
from infrastructure.terminal.editor import edit_text
from infrastructure.terminal.prompt import ask_choice, show


logger = logging.getLogger(__name__)


def build_flow_config(
    settings: Settings,
    *,
    target_branch: str,
    current_branch: str,
) -> PullRequestFlowConfig:
    return PullRequestFlowConfig(
        target_branch=target_branch,
        current_branch=current_branch,
        remote=settings.remote,
    )


def build_review_loop(settings: Settings) -> ReviewLoop:
    return ReviewLoop(
        ask_choice=ask_choice,
        edit_text=partial(edit_text, editor=settings.editor),
        show=show,
    )


def build_flow_dependencies(
    settings: Settings,
    *,
    gh_client: GhCliClient,
    repository_directory: Path | None = None,
) -> PullRequestFlowDependencies:
    ai_runtime = build_ai_provider_runtime(settings)
    register_sensitive_values(ai_runtime.api_key)
    log_event(
        logger,
        logging.INFO,
        "workflow.ai.provider.selected",
        provider=ai_runtime.provider,
        model=ai_runtime.model,
    )

    review_loop = build_review_loop(settings)
    return PullRequestFlowDependencies(
        push_branch=partial(push_branch, remote=settings.remote, cwd=repository_directory),
        resolve_change_set=build_change_set_resolver(remote=settings.remote, cwd=repository_directory),
        build_prompt=partial(build_prompt, language=settings.description_language),
        ai_provider=ai_runtime.adapter,
        parse_response=parse_generated_text,
        review_description=review_loop.run,
        create_pr=gh_client.create_pr,
        notify=show,
        observe_change_set=observe_change_set,
        observe_generation_result=observe_generation_result,
        observe_step=observe_workflow_step,
    )
