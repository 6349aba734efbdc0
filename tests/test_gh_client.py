import subprocess
import unittest
from unittest import mock

from domain.errors import MissingDependencyError, SubmissionFailedError
from infrastructure.github.gh_client import GhCliClient


class GhCliClientTests(unittest.TestCase):
    def test_ensure_installed_raises_when_gh_is_missing(self) -> None:
        with mock.patch("infrastructure.github.gh_client.shutil.which", return_value=None):
            with self.assertRaises(MissingDependencyError) as raised_error:
                GhCliClient().ensure_installed()

        self.assertIn("'gh' CLI is not installed", str(raised_error.exception))

    def test_ensure_installed_accepts_gh_on_path(self) -> None:
        with mock.patch("infrastructure.github.gh_client.shutil.which", return_value="/usr/bin/gh"):
            GhCliClient().ensure_installed()

    def test_create_pr_passes_base_head_title_body(self) -> None:
        completed = subprocess.CompletedProcess(
            [],
            0,
            stdout="Creating pull request...\nhttps://github.com/acme/app/pull/7\n",
            stderr="",
        )
        with mock.patch("infrastructure.github.gh_client.run_capture", return_value=completed) as run_capture:
            pull_request = GhCliClient().create_pr(
                head="feature/x",
                base="develop",
                title="feat: login",
                body="## Summary\n- multi\n- line",
            )

        self.assertEqual(pull_request, {"html_url": "https://github.com/acme/app/pull/7"})
        command = run_capture.call_args.args[0]
        self.assertEqual(
            command,
            [
                "gh",
                "pr",
                "create",
                "--base",
                "develop",
                "--head",
                "feature/x",
                "--title",
                "feat: login",
                "--body",
                "## Summary\n- multi\n- line",
            ],
        )

    def test_create_pr_failure_raises_submission_error(self) -> None:
        completed = subprocess.CompletedProcess([], 1, stdout="", stderr="pull request already exists")
        with mock.patch("infrastructure.github.gh_client.run_capture", return_value=completed):
            with self.assertRaises(SubmissionFailedError) as raised_error:
                GhCliClient().create_pr(head="feature/x", base="develop", title="t", body="b")

        self.assertIn("already exists", str(raised_error.exception))


if __name__ == "__main__":
    unittest.main()
