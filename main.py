import argparse
import logging
import sys
import uuid
from typing import Sequence

from application.pr_flow import run_pull_request_flow
from domain.errors import PrDraftError
from infrastructure.cli.workflow_factory import build_flow_config, build_flow_dependencies
from infrastructure.config.settings import DEFAULT_TARGET_BRANCH, Settings, load_environment
from infrastructure.github.gh_client import GhCliClient
from infrastructure.observability.context import reset_run_id, set_run_id
from infrastructure.observability.logging_utils import configure_logging, log_event, safe_message
from infrastructure.repo.operations import current_branch


logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pr-draft",
        description="Generate a pull request title and description with Gemini and open it with gh.",
    )
    parser.add_argument(
        "target_branch",
        nargs="?",
        default=DEFAULT_TARGET_BRANCH,
        help=f"branch the pull request targets (default: {DEFAULT_TARGET_BRANCH})",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    load_environment()
    configure_logging()
    token = set_run_id(uuid.uuid4().hex[:8])
    try:
        log_event(logger, logging.INFO, "cli.workflow.start", target_branch=args.target_branch)
        try:
            gh_client = GhCliClient()
            gh_client.ensure_installed()
            settings = Settings.from_env()
            flow_config = build_flow_config(
                settings,
                target_branch=args.target_branch,
                current_branch=current_branch(),
            )
            flow_dependencies = build_flow_dependencies(settings, gh_client=gh_client)
            result = run_pull_request_flow(flow_config, flow_dependencies)
        except PrDraftError as error:
            error_message = safe_message(str(error))
            log_event(logger, logging.ERROR, "cli.workflow.failed", error=error_message)
            print(f"❌ Error: {error_message}", file=sys.stderr)
            return 1

        log_event(logger, logging.INFO, "cli.workflow.end", status=result.status, message=result.message)
        if result.status == "aborted":
            print(result.message)
            return 0

        print(f"✅ {result.message}")
        if result.pr_url:
            print(f"🔗 {result.pr_url}")
        return 0
    finally:
        reset_run_id(token)


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
