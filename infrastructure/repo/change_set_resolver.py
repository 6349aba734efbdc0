import logging
import subprocess
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import Callable, Sequence

from domain.models import ChangeSet
from infrastructure.observability.logging_utils import log_event
from infrastructure.repo.operations import ensure_success, run_capture


logger = logging.getLogger(__name__)

GitRunner = Callable[[Sequence[str]], subprocess.CompletedProcess[str]]


@dataclass(frozen=True)
class MergeBaseStrategy:
    name: str
    refs: Callable[[str, str, str], tuple[str, str]]


def _remote_tracking_refs(target_branch: str, head_branch: str, remote: str) -> tuple[str, str]:
    return f"{remote}/{target_branch}", f"{remote}/{head_branch}"


def _local_refs(target_branch: str, head_branch: str, _: str) -> tuple[str, str]:
    return target_branch, head_branch


# Ordem importa: refs remotas primeiro, depois branches locais.
MERGE_BASE_STRATEGIES: tuple[MergeBaseStrategy, ...] = (
    MergeBaseStrategy(name="remote_tracking", refs=_remote_tracking_refs),
    MergeBaseStrategy(name="local", refs=_local_refs),
)


def fetch_branches(
    target_branch: str,
    head_branch: str,
    *,
    remote: str = "origin",
    run_git: GitRunner = run_capture,
) -> None:
    for branch in (target_branch, head_branch):
        result = run_git(["git", "fetch", remote, branch])
        if result.returncode != 0:
            log_event(logger, logging.WARNING, "repo.fetch.failed", remote=remote, branch=branch)


def _try_strategy(
    strategy: MergeBaseStrategy,
    target_branch: str,
    head_branch: str,
    *,
    remote: str,
    run_git: GitRunner,
) -> str | None:
    base_ref, head_ref = strategy.refs(target_branch, head_branch, remote)
    result = run_git(["git", "merge-base", base_ref, head_ref])
    if result.returncode != 0:
        return None
    return result.stdout.strip() or None


def resolve_merge_base(
    target_branch: str,
    head_branch: str,
    *,
    remote: str = "origin",
    run_git: GitRunner = run_capture,
    strategies: Sequence[MergeBaseStrategy] = MERGE_BASE_STRATEGIES,
) -> str | None:
    for strategy in strategies:
        merge_base = _try_strategy(
            strategy,
            target_branch,
            head_branch,
            remote=remote,
            run_git=run_git,
        )
        if merge_base:
            log_event(
                logger,
                logging.INFO,
                "repo.merge_base.found",
                strategy=strategy.name,
                merge_base=merge_base,
            )
            return merge_base
        log_event(logger, logging.INFO, "repo.merge_base.strategy_failed", strategy=strategy.name)

    log_event(
        logger,
        logging.WARNING,
        "repo.merge_base.unavailable",
        target=target_branch,
        head=head_branch,
    )
    return None


def _checked_stdout(command: Sequence[str], run_git: GitRunner) -> str:
    return ensure_success(command, run_git(command))


def collect_change_set(
    target_branch: str,
    head_branch: str,
    *,
    remote: str = "origin",
    run_git: GitRunner = run_capture,
) -> ChangeSet:
    fetch_branches(target_branch, head_branch, remote=remote, run_git=run_git)
    merge_base = resolve_merge_base(target_branch, head_branch, remote=remote, run_git=run_git)
    revision_range = f"{merge_base or target_branch}..{head_branch}"

    commit_log_output = _checked_stdout(["git", "log", revision_range, "--oneline"], run_git)
    diff_stat = _checked_stdout(["git", "diff", "--stat", revision_range], run_git)
    diff_body = _checked_stdout(["git", "diff", revision_range], run_git)

    return ChangeSet(
        base_ref=target_branch,
        head_ref=head_branch,
        merge_base=merge_base,
        commit_log=tuple(line for line in commit_log_output.splitlines() if line.strip()),
        diff_stat=diff_stat.rstrip("\n"),
        diff_body=diff_body.rstrip("\n"),
    )


def build_change_set_resolver(
    *,
    remote: str = "origin",
    cwd: Path | None = None,
) -> Callable[[str, str], ChangeSet]:
    return partial(
        collect_change_set,
        remote=remote,
        run_git=partial(run_capture, cwd=cwd),
    )
