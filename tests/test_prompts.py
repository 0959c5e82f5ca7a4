"""Unit tests for the console conversation (template_setup.prompts)."""

from __future__ import annotations

import pytest

pytestmark = pytest.mark.unit


class TestAsk:
    def test_returns_line_without_newline(self, make_prompter):
        prompter = make_prompter("hello world")
        assert prompter.ask("Greeting?") == "hello world"

    def test_prints_query_and_marker(self, make_prompter):
        prompter = make_prompter("x")
        prompter.ask("Project name?")
        assert "Project name?\n=>" in prompter.console.file.getvalue()

    def test_answers_are_consumed_in_order(self, make_prompter):
        prompter = make_prompter("first", "second")
        assert prompter.ask("1?") == "first"
        assert prompter.ask("2?") == "second"

    def test_end_of_input_is_empty_answer(self, make_prompter):
        prompter = make_prompter()
        assert prompter.ask("Anything?") == ""

    def test_empty_answer_accepted(self, make_prompter):
        assert make_prompter("").ask("Anything?") == ""

    def test_query_brackets_are_not_markup(self, make_prompter):
        prompter = make_prompter("x")
        prompter.ask("Username? (https://github.com/[bold]<username>)")
        assert "[bold]<username>" in prompter.console.file.getvalue()


class TestConfirm:
    @pytest.mark.parametrize("answer", ["y", "Y"])
    def test_affirmative(self, make_prompter, answer):
        assert make_prompter(answer).confirm("Confirm?") is True

    @pytest.mark.parametrize("answer", ["n", "", "yes", " y", "no"])
    def test_everything_else_is_no(self, make_prompter, answer):
        assert make_prompter(answer).confirm("Confirm?") is False

    def test_appends_choices(self, make_prompter):
        prompter = make_prompter("y")
        prompter.confirm("Confirm?")
        assert "Confirm? (y/n)" in prompter.console.file.getvalue()


class TestOutput:
    def test_status_helpers(self, prompter):
        prompter.print_info("info line")
        prompter.print_success("success line")
        prompter.print_warning("warning line")
        prompter.print_error("error [line]")
        output = prompter.console.file.getvalue()
        for text in ("info line", "success line", "warning line", "error [line]"):
            assert text in output

    def test_summary_table(self, prompter):
        prompter.print_summary_table({"Name": "Ada", "Email": "ada@x.org"})
        output = prompter.console.file.getvalue()
        assert "Name" in output
        assert "ada@x.org" in output

    def test_step_rule(self, prompter):
        prompter.print_step("Writing files")
        assert "Writing files" in prompter.console.file.getvalue()

    def test_close(self, prompter):
        assert prompter.closed is False
        prompter.close()
        assert prompter.closed is True
