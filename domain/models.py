from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class ChangeSet:
    base_ref: str
    head_ref: str
    merge_base: str | None
    commit_log: tuple[str, ...]
    diff_stat: str
    diff_body: str

    @property
    def revision_range(self) -> str:
        return f"{self.merge_base or self.base_ref}..{self.head_ref}"


@dataclass(frozen=True)
class GenerationRequest:
    prompt_text: str


@dataclass(frozen=True)
class GenerationResult:
    title: str
    body: str
    delimiter_found: bool = True


class FieldState(Enum):
    PRESENTED = "presented"
    EDITING = "editing"
    APPROVED = "approved"
    ABORTED = "aborted"


@dataclass
class ReviewState:
    current_title: str
    current_body: str
    title_approved: bool = False
    body_approved: bool = False
    aborted: bool = False

    @property
    def is_approved(self) -> bool:
        return self.title_approved and self.body_approved and not self.aborted
