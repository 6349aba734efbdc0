import unittest

from domain.description import parse_generated_text


class ResponseParserTests(unittest.TestCase):
    def test_parses_title_and_body_around_delimiter(self) -> None:
        result = parse_generated_text("TITLE: Fix bug\n\n---\nBody text")

        self.assertEqual(result.title, "Fix bug")
        self.assertEqual(result.body, "Body text")
        self.assertTrue(result.delimiter_found)

    def test_missing_title_line_yields_empty_title(self) -> None:
        result = parse_generated_text("Fix bug\n\n---\nBody text")

        self.assertEqual(result.title, "")
        self.assertEqual(result.body, "Body text")

    def test_keeps_multiline_markdown_body_verbatim(self) -> None:
        text = (
            "TITLE: feat: 로그인 추가\n"
            "\n"
            "---\n"
            "## 📝 Summary\n"
            "로그인 기능 추가\n"
            "\n"
            "## 🛠️ Changes\n"
            "- 세션 저장\n"
            "---\n"
            "- trailing rule stays in body\n"
        )

        result = parse_generated_text(text)

        self.assertEqual(result.title, "feat: 로그인 추가")
        self.assertEqual(
            result.body,
            "## 📝 Summary\n로그인 기능 추가\n\n## 🛠️ Changes\n- 세션 저장\n---\n- trailing rule stays in body",
        )

    def test_uses_first_title_line_only(self) -> None:
        result = parse_generated_text("TITLE: first\nTITLE: second\n---\nbody")

        self.assertEqual(result.title, "first")

    def test_title_prefix_must_start_the_line(self) -> None:
        result = parse_generated_text("  TITLE: indented\n---\nbody")

        self.assertEqual(result.title, "")

    def test_missing_delimiter_falls_back_to_everything_after_first_line(self) -> None:
        result = parse_generated_text("TITLE: Fix bug\nline two\nline three\n")

        self.assertEqual(result.title, "Fix bug")
        self.assertEqual(result.body, "line two\nline three")
        self.assertFalse(result.delimiter_found)

    def test_delimiter_must_match_the_whole_line(self) -> None:
        result = parse_generated_text("TITLE: t\n--- \n----\n---\nreal body")

        self.assertEqual(result.body, "real body")

    def test_empty_text_yields_empty_result(self) -> None:
        result = parse_generated_text("")

        self.assertEqual(result.title, "")
        self.assertEqual(result.body, "")
        self.assertFalse(result.delimiter_found)


if __name__ == "__main__":
    unittest.main()
