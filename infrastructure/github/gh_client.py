import logging
import shutil
from pathlib import Path

from domain.errors import MissingDependencyError, SubmissionFailedError
from infrastructure.observability.logging_utils import log_event, safe_message
from infrastructure.repo.operations import run_capture


logger = logging.getLogger(__name__)


class GhCliClient:
    def __init__(self, *, executable: str = "gh", cwd: Path | None = None) -> None:
        self.executable = executable
        self.cwd = cwd

    def ensure_installed(self) -> None:
        if shutil.which(self.executable) is None:
            raise MissingDependencyError(
                f"'{self.executable}' CLI is not installed. "
                "Please install it: https://cli.github.com/"
            )

    def create_pr(self, head: str, base: str, title: str, body: str) -> dict[str, str]:
        log_event(logger, logging.INFO, "github.pr.create", head=head, base=base, title=title)
        command = [
            self.executable,
            "pr",
            "create",
            "--base",
            base,
            "--head",
            head,
            "--title",
            title,
            "--body",
            body,
        ]
        result = run_capture(command, cwd=self.cwd)
        if result.returncode != 0:
            error_details = safe_message((result.stderr or result.stdout or "").strip())
            log_event(
                logger,
                logging.ERROR,
                "github.pr.create_failed",
                exit_code=result.returncode,
                details=error_details,
            )
            raise SubmissionFailedError(
                f"Failed to create PR (exit_code={result.returncode}): {error_details}"
            )

        # gh imprime a URL do PR criado como ultima linha do stdout.
        output_lines = [line.strip() for line in (result.stdout or "").splitlines() if line.strip()]
        html_url = output_lines[-1] if output_lines else ""
        log_event(logger, logging.INFO, "github.pr.created", url=html_url)
        return {"html_url": html_url}
