from dataclasses import dataclass
from typing import Callable

from domain.models import FieldState, GenerationResult, ReviewState


_BANNER = "=" * 50
_RULE = "-" * 50
_INVALID_CHOICE_MESSAGE = "Please answer y, n, or q."

_CHOICE_TRANSITIONS = {
    "y": FieldState.APPROVED,
    "n": FieldState.EDITING,
    "q": FieldState.ABORTED,
}
_TERMINAL_STATES = {FieldState.APPROVED, FieldState.ABORTED}


@dataclass(frozen=True)
class FieldReviewOutcome:
    state: FieldState
    content: str


class ReviewLoop:
    """Interactive approve / edit / quit cycle over the generated title and body.

    Each field runs its own small state machine::

        PRESENTED --y--> APPROVED
        PRESENTED --n--> EDITING --(editor closed)--> PRESENTED
        PRESENTED --q--> ABORTED

    The title has to be approved before the body is shown. Collaborators are
    injected so the loop never touches the terminal by itself.
    """

    def __init__(
        self,
        *,
        ask_choice: Callable[[str], str],
        edit_text: Callable[[str], str],
        show: Callable[[str], None] = print,
    ) -> None:
        self.ask_choice = ask_choice
        self.edit_text = edit_text
        self.show = show

    def run(self, result: GenerationResult) -> ReviewState:
        review_state = ReviewState(current_title=result.title, current_body=result.body)

        title_outcome = self.review_field("title", review_state.current_title)
        review_state.current_title = title_outcome.content
        if title_outcome.state is FieldState.ABORTED:
            review_state.aborted = True
            return review_state
        review_state.title_approved = True

        body_outcome = self.review_field("body", review_state.current_body)
        review_state.current_body = body_outcome.content
        if body_outcome.state is FieldState.ABORTED:
            review_state.aborted = True
            return review_state
        review_state.body_approved = True
        return review_state

    def review_field(self, label: str, content: str) -> FieldReviewOutcome:
        state = FieldState.PRESENTED
        self._present(label, content)
        while state not in _TERMINAL_STATES:
            if state is FieldState.PRESENTED:
                state = self._next_state(
                    self.ask_choice(f"Is this {label} okay? [y]es / [n]o (edit) / [q]uit: ")
                )
            elif state is FieldState.EDITING:
                self.show("Opening editor...")
                content = self.edit_text(content)
                self._present(label, content)
                state = FieldState.PRESENTED
        return FieldReviewOutcome(state=state, content=content)

    def _next_state(self, choice: str) -> FieldState:
        next_state = _CHOICE_TRANSITIONS.get(choice.strip().lower())
        if next_state is None:
            self.show(_INVALID_CHOICE_MESSAGE)
            return FieldState.PRESENTED
        return next_state

    def _present(self, label: str, content: str) -> None:
        self.show("")
        self.show(_BANNER)
        self.show(f"👀 Review {label.capitalize()}:")
        self.show(_RULE)
        self.show(content)
        self.show(_RULE)
        self.show("")
