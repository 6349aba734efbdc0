from application.pr_flow.contracts import (
    PullRequestFlowConfig,
    PullRequestFlowDependencies,
    PullRequestFlowResult,
)
from application.pr_flow.steps import (
    build_aborted_result,
    generate_description_text,
    parse_description,
    push_current_branch,
    resolve_change_set,
    submit_pull_request,
)


def run_pull_request_flow(
    config: PullRequestFlowConfig,
    dependencies: PullRequestFlowDependencies,
    *,
    raise_on_error: bool = True,
) -> PullRequestFlowResult:
    try:
        dependencies.observe_step("push_branch", "start")
        push_current_branch(config, dependencies)
        dependencies.observe_step("push_branch", "success", detail=config.current_branch)

        dependencies.observe_step("resolve_change_set", "start")
        change_set = resolve_change_set(config, dependencies)
        dependencies.observe_step(
            "resolve_change_set",
            "success",
            detail=change_set.revision_range,
        )

        dependencies.observe_step("generate_description", "start")
        generated_text = generate_description_text(change_set, dependencies)
        dependencies.observe_step("generate_description", "success")

        dependencies.observe_step("parse_description", "start")
        generation_result = parse_description(generated_text, dependencies)
        dependencies.observe_step(
            "parse_description",
            "success",
            detail=f"delimiter_found={str(generation_result.delimiter_found).lower()}",
        )

        dependencies.observe_step("review", "start")
        review_state = dependencies.review_description(generation_result)
        if review_state.aborted:
            dependencies.observe_step("review", "success", detail="aborted by user")
            return build_aborted_result(config, review_state)
        dependencies.observe_step("review", "success", detail="approved")

        dependencies.observe_step("create_pr", "start")
        result = submit_pull_request(config, dependencies, review_state)
        dependencies.observe_step("create_pr", "success", detail=result.pr_url)
        return result
    except Exception as error:
        dependencies.observe_step("finalize", "error", detail=str(error))
        if raise_on_error:
            raise
        return PullRequestFlowResult(
            status="error",
            message="Pull request flow execution failed",
            base=config.target_branch,
            head=config.current_branch,
            error=str(error),
        )
