from domain.errors import GenerationEmptyResponseError, PrDraftError
from domain.models import ChangeSet, GenerationResult, ReviewState

from application.pr_flow.contracts import (
    PullRequestFlowConfig,
    PullRequestFlowDependencies,
    PullRequestFlowResult,
)


def push_current_branch(
    config: PullRequestFlowConfig,
    dependencies: PullRequestFlowDependencies,
) -> None:
    # Garante que o remoto tenha os commits mais recentes antes de abrir o PR.
    dependencies.notify(f"🚀 Pushing changes to {config.remote}/{config.current_branch}...")
    dependencies.push_branch(config.current_branch)


def resolve_change_set(
    config: PullRequestFlowConfig,
    dependencies: PullRequestFlowDependencies,
) -> ChangeSet:
    dependencies.notify(
        f"🔍 Analyzing changes between {config.target_branch} and {config.current_branch}..."
    )
    change_set = dependencies.resolve_change_set(config.target_branch, config.current_branch)
    if change_set.merge_base:
        dependencies.notify(f"✅ Merge base found: {change_set.merge_base}")
    else:
        dependencies.notify("⚠️ Could not find merge base. Using simple diff.")
    dependencies.observe_change_set(change_set)
    return change_set


def generate_description_text(
    change_set: ChangeSet,
    dependencies: PullRequestFlowDependencies,
) -> str:
    generation_request = dependencies.build_prompt(change_set)
    dependencies.notify("🤖 Asking Gemini...")
    generated_text = dependencies.ai_provider.generate_text(generation_request.prompt_text)
    # Resposta vazia (transporte ou JSON invalido) encerra a execucao.
    if not generated_text.strip():
        raise GenerationEmptyResponseError("Failed to get response from Gemini.")
    return generated_text


def parse_description(
    generated_text: str,
    dependencies: PullRequestFlowDependencies,
) -> GenerationResult:
    generation_result = dependencies.parse_response(generated_text)
    dependencies.observe_generation_result(generation_result)
    return generation_result


def build_aborted_result(
    config: PullRequestFlowConfig,
    review_state: ReviewState,
) -> PullRequestFlowResult:
    return PullRequestFlowResult(
        status="aborted",
        message="Aborted.",
        base=config.target_branch,
        head=config.current_branch,
        pr_title=review_state.current_title,
        pr_body=review_state.current_body,
    )


def submit_pull_request(
    config: PullRequestFlowConfig,
    dependencies: PullRequestFlowDependencies,
    review_state: ReviewState,
) -> PullRequestFlowResult:
    # Nunca submete sem titulo e corpo aprovados.
    if not review_state.is_approved:
        raise PrDraftError("Refusing to create a PR before both title and body are approved.")

    dependencies.notify("")
    dependencies.notify("🚀 Creating Pull Request...")
    dependencies.notify(f"   Base: {config.target_branch}")
    dependencies.notify(f"   Head: {config.current_branch}")
    dependencies.notify(f"   Title: {review_state.current_title}")
    dependencies.notify("")

    pull_request = dependencies.create_pr(
        head=config.current_branch,
        base=config.target_branch,
        title=review_state.current_title,
        body=review_state.current_body,
    )
    return PullRequestFlowResult(
        status="success",
        message="PR Created Successfully!",
        base=config.target_branch,
        head=config.current_branch,
        pr_title=review_state.current_title,
        pr_body=review_state.current_body,
        pr_url=pull_request.get("html_url") or None,
    )
