import logging
import os
import shlex
import subprocess
import tempfile
from pathlib import Path
from typing import Callable

from domain.errors import EditorError
from infrastructure.observability.logging_utils import log_event


logger = logging.getLogger(__name__)

CONTROLLING_TERMINAL = "/dev/tty"

EditorLauncher = Callable[[list[str]], int]


def launch_on_terminal(command: list[str]) -> int:
    # O editor fala direto com o terminal, nunca com os pipes da ferramenta.
    with open(CONTROLLING_TERMINAL, "r") as terminal_in, open(CONTROLLING_TERMINAL, "w") as terminal_out:
        completed = subprocess.run(command, stdin=terminal_in, stdout=terminal_out)
    return completed.returncode


def edit_text(
    content: str,
    *,
    editor: str = "vim",
    launcher: EditorLauncher = launch_on_terminal,
) -> str:
    """Open ``content`` in ``editor`` and return the saved text.

    The scratch file is removed after reading, whatever the editor outcome.
    """
    file_descriptor, scratch_name = tempfile.mkstemp(suffix=".md", prefix="pr-draft-")
    scratch_path = Path(scratch_name)
    try:
        with os.fdopen(file_descriptor, "w", encoding="utf-8") as scratch_file:
            scratch_file.write(content + "\n")

        command = [*shlex.split(editor), str(scratch_path)]
        log_event(logger, logging.INFO, "terminal.editor.open", editor=editor)
        try:
            exit_code = launcher(command)
        except OSError as error:
            raise EditorError(f"Could not start editor '{editor}': {error}") from error

        if exit_code != 0:
            log_event(logger, logging.WARNING, "terminal.editor.nonzero_exit", editor=editor, exit_code=exit_code)

        return scratch_path.read_text(encoding="utf-8").rstrip("\n")
    finally:
        scratch_path.unlink(missing_ok=True)
