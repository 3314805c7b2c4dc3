"""Tests for github/actions.py - runner context."""

from __future__ import annotations

from pathlib import Path

from relvars.core.result import Err, Ok
from relvars.github.actions import DEFAULT_API_URL, GitHubActionsContext
from relvars.release.errors import MissingEnvError, OutputWriteError
from relvars.release.ports import CIContext


def _context(env: dict[str, str]) -> tuple[GitHubActionsContext, list[str]]:
    echoed: list[str] = []
    return GitHubActionsContext(env, echo=echoed.append), echoed


class TestReading:
    def test_run_metadata(self) -> None:
        ctx, _ = _context(
            {
                "GITHUB_REF_TYPE": "branch",
                "GITHUB_REF_NAME": "releases/trigger",
                "GITHUB_RUN_ID": "123456",
                "GITHUB_REPOSITORY": "octocat/Hello-World",
                "GITHUB_API_URL": "https://ghe.example.com/api/v3",
            }
        )
        assert ctx.is_ref_type_branch()
        assert ctx.get_ref_name() == "releases/trigger"
        assert ctx.get_run_id() == "123456"
        assert ctx.get_repository_slug() == "octocat/Hello-World"
        assert ctx.get_api_url() == "https://ghe.example.com/api/v3"

    def test_tag_ref_is_not_branch(self) -> None:
        ctx, _ = _context({"GITHUB_REF_TYPE": "tag"})
        assert not ctx.is_ref_type_branch()

    def test_api_url_default(self) -> None:
        ctx, _ = _context({})
        assert ctx.get_api_url() == DEFAULT_API_URL

    def test_inputs(self) -> None:
        ctx, _ = _context({"INPUT_PACKAGE_VERSION": " 1.0.0 ", "INPUT_EMPTY": ""})
        assert ctx.get_input("package_version") == "1.0.0"
        assert ctx.get_input("empty") is None
        assert ctx.get_input("missing") is None

    def test_required_env(self) -> None:
        ctx, _ = _context({"GITHUB_TOKEN": "t", "BLANK": "  "})
        assert ctx.get_required_env("GITHUB_TOKEN") == Ok("t")
        assert ctx.get_required_env("BLANK") == Err(MissingEnvError(name="BLANK"))
        assert ctx.get_required_env("NOPE") == Err(MissingEnvError(name="NOPE"))

    def test_satisfies_protocol(self) -> None:
        ctx, _ = _context({})
        assert isinstance(ctx, CIContext)


class TestOutputs:
    def test_outputs_written_only_on_flush(self, tmp_path: Path) -> None:
        out = tmp_path / "output"
        ctx, echoed = _context({"GITHUB_OUTPUT": str(out)})

        ctx.set_output("version", "1.0.0")
        ctx.set_output("git_tag", "v1.0.0")
        assert not out.exists()

        assert ctx.flush_outputs() == Ok(None)
        assert out.read_text(encoding="utf-8") == "version=1.0.0\ngit_tag=v1.0.0\n"
        assert echoed == []

    def test_flush_appends_and_clears_queue(self, tmp_path: Path) -> None:
        out = tmp_path / "output"
        out.write_text("earlier=step\n", encoding="utf-8")
        ctx, _ = _context({"GITHUB_OUTPUT": str(out)})

        ctx.set_output("version", "1.0.0")
        assert ctx.flush_outputs() == Ok(None)
        assert ctx.flush_outputs() == Ok(None)

        assert out.read_text(encoding="utf-8") == "earlier=step\nversion=1.0.0\n"

    def test_multiline_value_uses_delimiter(self, tmp_path: Path) -> None:
        out = tmp_path / "output"
        ctx, _ = _context({"GITHUB_OUTPUT": str(out)})

        ctx.set_output("notes", "a\nb")
        assert ctx.flush_outputs() == Ok(None)

        lines = out.read_text(encoding="utf-8").splitlines()
        assert lines[0].startswith("notes<<ghadelimiter_")
        delimiter = lines[0].removeprefix("notes<<")
        assert lines[1:] == ["a", "b", delimiter]

    def test_optional_output_skipped_when_none(self, tmp_path: Path) -> None:
        out = tmp_path / "output"
        ctx, _ = _context({"GITHUB_OUTPUT": str(out)})

        ctx.set_optional_output("version_suffix", None)
        ctx.set_optional_output("version_build", "abc")
        assert ctx.flush_outputs() == Ok(None)

        assert out.read_text(encoding="utf-8") == "version_build=abc\n"

    def test_flush_without_output_file_is_missing_env(self) -> None:
        ctx, echoed = _context({})
        ctx.set_output("version", "1.0.0")

        assert ctx.flush_outputs() == Err(MissingEnvError(name="GITHUB_OUTPUT"))
        assert echoed == []

    def test_flush_to_unwritable_path(self, tmp_path: Path) -> None:
        out = tmp_path / "missing-dir" / "output"
        ctx, _ = _context({"GITHUB_OUTPUT": str(out)})
        ctx.set_output("version", "1.0.0")

        result = ctx.flush_outputs()

        assert isinstance(result, Err)
        assert isinstance(result.error, OutputWriteError)
        assert result.error.path == str(out)
        assert not out.exists()


class TestWorkflowCommands:
    def test_debug(self) -> None:
        ctx, echoed = _context({})
        ctx.debug("github api url connection: ok.")
        assert echoed == ["::debug::github api url connection: ok."]

    def test_error_escapes_newlines(self) -> None:
        ctx, echoed = _context({})
        ctx.error("line one\nline two 100%")
        assert echoed == ["::error::line one%0Aline two 100%25"]
