import unittest
from pathlib import Path

from domain.errors import EditorError
from infrastructure.terminal.editor import edit_text


class EditTextTests(unittest.TestCase):
    def test_returns_saved_content_and_removes_scratch_file(self) -> None:
        seen_commands: list[list[str]] = []

        def fake_launcher(command: list[str]) -> int:
            seen_commands.append(command)
            scratch_path = Path(command[-1])
            self.assertEqual(scratch_path.read_text(encoding="utf-8"), "original title\n")
            scratch_path.write_text("edited title\n\n", encoding="utf-8")
            return 0

        edited = edit_text("original title", editor="nano", launcher=fake_launcher)

        self.assertEqual(edited, "edited title")
        self.assertEqual(seen_commands[0][0], "nano")
        self.assertFalse(Path(seen_commands[0][-1]).exists())

    def test_editor_with_arguments_is_split_like_a_shell(self) -> None:
        seen_commands: list[list[str]] = []

        def fake_launcher(command: list[str]) -> int:
            seen_commands.append(command)
            return 0

        edit_text("body", editor="code --wait", launcher=fake_launcher)

        self.assertEqual(seen_commands[0][:2], ["code", "--wait"])
        self.assertTrue(seen_commands[0][2].endswith(".md"))

    def test_nonzero_editor_exit_still_reads_file(self) -> None:
        def fake_launcher(command: list[str]) -> int:
            Path(command[-1]).write_text("partially edited", encoding="utf-8")
            return 1

        self.assertEqual(edit_text("body", launcher=fake_launcher), "partially edited")

    def test_missing_editor_raises_and_cleans_up(self) -> None:
        scratch_paths: list[Path] = []

        def fake_launcher(command: list[str]) -> int:
            scratch_paths.append(Path(command[-1]))
            raise FileNotFoundError(2, "No such file or directory", command[0])

        with self.assertRaises(EditorError) as raised_error:
            edit_text("body", editor="no-such-editor", launcher=fake_launcher)

        self.assertIn("no-such-editor", str(raised_error.exception))
        self.assertFalse(scratch_paths[0].exists())


if __name__ == "__main__":
    unittest.main()
