import logging

from domain.description import DIFF_CHAR_LIMIT
from domain.models import ChangeSet, GenerationResult
from infrastructure.observability.logging_utils import log_event


logger = logging.getLogger(__name__)


def observe_change_set(change_set: ChangeSet) -> None:
    log_event(
        logger,
        logging.INFO,
        "workflow.change_set.resolved",
        base=change_set.base_ref,
        head=change_set.head_ref,
        merge_base=change_set.merge_base,
        revision_range=change_set.revision_range,
        commits_count=len(change_set.commit_log),
        diff_chars=len(change_set.diff_body),
        diff_truncated=len(change_set.diff_body) > DIFF_CHAR_LIMIT,
    )


def observe_generation_result(result: GenerationResult) -> None:
    if not result.delimiter_found:
        # Corpo veio do fallback (tudo apos a linha 1); pode conter ruido do modelo.
        log_event(
            logger,
            logging.WARNING,
            "workflow.generation.delimiter_missing",
            body_chars=len(result.body),
        )
    if not result.title:
        log_event(logger, logging.WARNING, "workflow.generation.title_missing")
    log_event(
        logger,
        logging.INFO,
        "workflow.generation.parsed",
        title_chars=len(result.title),
        body_chars=len(result.body),
    )


def observe_workflow_step(step: str, status: str, detail: str | None = None) -> None:
    level = logging.ERROR if status == "error" else logging.INFO
    log_event(
        logger,
        level,
        "workflow.step",
        step=step,
        status=status,
        detail=detail,
    )
