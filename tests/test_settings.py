import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from domain.errors import ConfigurationError, MissingCredentialError
from infrastructure.config.settings import Settings, load_environment


class SettingsTests(unittest.TestCase):
    def test_missing_api_key_is_a_credential_error(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(MissingCredentialError) as raised_error:
                Settings.from_env()

        self.assertIn("GEMINI_API_KEY not found", str(raised_error.exception))

    def test_defaults(self) -> None:
        with mock.patch.dict(os.environ, {"GEMINI_API_KEY": "k"}, clear=True):
            settings = Settings.from_env()

        self.assertEqual(settings.gemini_model, "gemini-2.5-flash-lite")
        self.assertEqual(settings.gemini_timeout_seconds, 60.0)
        self.assertEqual(settings.gemini_max_retries, 1)
        self.assertEqual(settings.editor, "vim")
        self.assertEqual(settings.description_language, "Korean")
        self.assertEqual(settings.remote, "origin")
        self.assertNotIn("'k'", repr(settings))

    def test_overrides_from_environment(self) -> None:
        environment = {
            "GEMINI_API_KEY": "k",
            "GEMINI_MODEL": "gemini-2.5-pro",
            "GEMINI_TIMEOUT_SECONDS": "12.5",
            "GEMINI_MAX_RETRIES": "0",
            "EDITOR": "nvim",
            "PR_DESCRIPTION_LANGUAGE": "English",
            "GIT_REMOTE": "upstream",
        }
        with mock.patch.dict(os.environ, environment, clear=True):
            settings = Settings.from_env()

        self.assertEqual(settings.gemini_model, "gemini-2.5-pro")
        self.assertEqual(settings.gemini_timeout_seconds, 12.5)
        self.assertEqual(settings.gemini_max_retries, 0)
        self.assertEqual(settings.editor, "nvim")
        self.assertEqual(settings.description_language, "English")
        self.assertEqual(settings.remote, "upstream")

    def test_invalid_number_is_a_configuration_error(self) -> None:
        with mock.patch.dict(os.environ, {"GEMINI_API_KEY": "k", "GEMINI_TIMEOUT_SECONDS": "soon"}, clear=True):
            with self.assertRaises(ConfigurationError):
                Settings.from_env()

    def test_timeout_must_be_finite_and_positive(self) -> None:
        for raw_timeout in ("0", "-5", "nan", "inf"):
            with self.subTest(timeout=raw_timeout):
                environment = {"GEMINI_API_KEY": "k", "GEMINI_TIMEOUT_SECONDS": raw_timeout}
                with mock.patch.dict(os.environ, environment, clear=True):
                    with self.assertRaises(ConfigurationError) as raised_error:
                        Settings.from_env()

                self.assertIn("GEMINI_TIMEOUT_SECONDS", str(raised_error.exception))

    def test_backoff_may_be_zero_but_not_negative(self) -> None:
        environment = {"GEMINI_API_KEY": "k", "GEMINI_RETRY_BACKOFF_SECONDS": "0"}
        with mock.patch.dict(os.environ, environment, clear=True):
            settings = Settings.from_env()
        self.assertEqual(settings.gemini_retry_backoff_seconds, 0.0)

        for raw_backoff in ("-1", "nan"):
            with self.subTest(backoff=raw_backoff):
                environment = {"GEMINI_API_KEY": "k", "GEMINI_RETRY_BACKOFF_SECONDS": raw_backoff}
                with mock.patch.dict(os.environ, environment, clear=True):
                    with self.assertRaises(ConfigurationError):
                        Settings.from_env()

    def test_negative_retries_are_rejected(self) -> None:
        with mock.patch.dict(os.environ, {"GEMINI_API_KEY": "k", "GEMINI_MAX_RETRIES": "-1"}, clear=True):
            with self.assertRaises(ConfigurationError):
                Settings.from_env()

    def test_env_file_does_not_override_process_environment(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_directory:
            tool_directory = Path(tmp_directory)
            (tool_directory / ".env").write_text(
                "# comment\nGEMINI_API_KEY=from-file\nGEMINI_MODEL=file-model\n",
                encoding="utf-8",
            )
            with mock.patch.dict(os.environ, {"GEMINI_API_KEY": "from-shell"}, clear=True):
                load_environment(tool_directory)
                self.assertEqual(os.environ["GEMINI_API_KEY"], "from-shell")
                self.assertEqual(os.environ["GEMINI_MODEL"], "file-model")


if __name__ == "__main__":
    unittest.main()
