import logging
import subprocess
from pathlib import Path
from typing import Sequence

from domain.errors import GitCommandError, PrDraftError, PushFailedError
from infrastructure.observability.logging_utils import log_event, safe_message


logger = logging.getLogger(__name__)


def _execute_command(command: Sequence[str], cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    return subprocess.run(command, cwd=cwd, capture_output=True, text=True)


def ensure_success(
    command: Sequence[str],
    result: subprocess.CompletedProcess[str],
    *,
    error_type: type[PrDraftError] = GitCommandError,
) -> str:
    if result.returncode == 0:
        return result.stdout or ""

    stdout = safe_message(result.stdout.strip()) if result.stdout else ""
    stderr = safe_message(result.stderr.strip()) if result.stderr else ""
    if stdout:
        log_event(logger, logging.ERROR, "repo.command.stdout", output=stdout)
    if stderr:
        log_event(logger, logging.ERROR, "repo.command.stderr", output=stderr)
    raise error_type(
        safe_message(
            f"Command failed (exit_code={result.returncode}): {' '.join(command)}"
        )
    )


def run(
    command: Sequence[str],
    cwd: Path | None = None,
    *,
    error_type: type[PrDraftError] = GitCommandError,
) -> str:
    log_event(logger, logging.INFO, "repo.command.run", command=list(command), cwd=str(cwd) if cwd else None)
    result = _execute_command(command, cwd=cwd)
    return ensure_success(command, result, error_type=error_type)


def run_capture(
    command: Sequence[str],
    cwd: Path | None = None,
) -> subprocess.CompletedProcess[str]:
    log_event(
        logger,
        logging.INFO,
        "repo.command.run_capture",
        command=list(command),
        cwd=str(cwd) if cwd else None,
    )
    return _execute_command(command, cwd=cwd)


def current_branch(cwd: Path | None = None) -> str:
    branch = run(["git", "branch", "--show-current"], cwd=cwd).strip()
    if not branch:
        raise GitCommandError("Could not determine the current branch (detached HEAD?)")
    return branch


def push_branch(branch: str, *, remote: str = "origin", cwd: Path | None = None) -> None:
    try:
        run(["git", "push", remote, branch], cwd=cwd, error_type=PushFailedError)
    except PushFailedError as error:
        raise PushFailedError(
            f"Failed to push changes to {remote}/{branch}. "
            f"Please check your network or git configuration. ({error})"
        ) from error
