"""Integration tests for the course finder CLI"""

import yaml
from typer.testing import CliRunner

from coursefinder.cli import app

runner = CliRunner()


class TestRunCommand:
    """Test scripted quiz runs over the bundled questionnaire"""

    def test_reaches_result_with_feedback(self):
        """Test answering through to a personalized recommendation"""
        result = runner.invoke(app, ["run", "--name", "Alice", "--answers", "early,centre"])

        assert result.exit_code == 0
        assert "Love it, Alice!" in result.stdout
        assert "Perfect match, Alice!" in result.stdout
        assert "Bachelor of Early Childhood Education" in result.stdout

    def test_unsure_goes_straight_to_result(self):
        """Test option leading to an outcome skips feedback"""
        result = runner.invoke(app, ["run", "--name", "Alice", "--answers", "unsure"])

        assert result.exit_code == 0
        assert "Teaching Taster Day" in result.stdout
        assert "on the right track" not in result.stdout

    def test_back_changes_answer(self):
        """Test going back and taking another branch"""
        result = runner.invoke(
            app,
            ["run", "--name", "Alice", "--answers", "early,back,primary,general"]
        )

        assert result.exit_code == 0
        assert "Bachelor of Education (Primary)" in result.stdout

    def test_restart_after_result(self):
        """Test starting over from the result screen"""
        result = runner.invoke(
            app,
            ["run", "--name", "Alice", "--answers", "unsure,restart,secondary,arts"]
        )

        assert result.exit_code == 0
        assert "Secondary Arts Teacher" in result.stdout

    def test_unknown_option_is_ignored(self):
        """Test answer that is not offered leaves the question unchanged"""
        result = runner.invoke(app, ["run", "--name", "Alice", "--answers", "zzz"])

        assert result.exit_code == 0
        assert "'zzz' is not an option here" in result.stdout

    def test_parent_message(self):
        """Test parents see the configured message"""
        result = runner.invoke(
            app,
            ["run", "--name", "Pat", "--year", "parent", "--answers", "quit"]
        )

        assert result.exit_code == 0
        assert "Thanks for helping out!" in result.stdout

    def test_missing_transition_shows_content_error(self, tmp_path, scenario_data):
        """Test broken questionnaire ends in the content error screen"""
        del scenario_data["questions"][0]["next"]["a"]
        questions = tmp_path / "questions.yaml"
        questions.write_text(yaml.safe_dump(scenario_data))

        result = runner.invoke(
            app,
            ["run", "-q", str(questions), "--name", "Alice", "--answers", "a"]
        )

        assert result.exit_code == 0
        assert "Content error" in result.stdout

    def test_bracketed_name(self):
        """Test name containing markup is shown literally"""
        result = runner.invoke(app, ["run", "--name", "[/x]", "--answers", "early,centre"])

        assert result.exit_code == 0
        assert "Perfect match, [/x]!" in result.stdout

    def test_missing_questions_file(self, tmp_path):
        """Test load failure exits with an error panel"""
        result = runner.invoke(
            app,
            ["run", "-q", str(tmp_path / "missing.yaml"), "--name", "Alice", "--answers", ""]
        )

        assert result.exit_code == 1
        assert "Failed to load quiz data" in result.stdout


class TestCheckCommand:
    """Test questionnaire summary"""

    def test_check_bundled_documents(self, data_dir):
        """Test check summarizes the bundled questionnaire"""
        result = runner.invoke(app, [
            "check",
            str(data_dir / "questions.yaml"),
            "--programs", str(data_dir / "programs.yaml"),
            "--config", str(data_dir / "config.yaml")
        ])

        assert result.exit_code == 0
        assert "q_age_group" in result.stdout
        assert "weighted-sum" in result.stdout
        assert "Documents loaded and entry question is ready" in result.stdout

    def test_check_unknown_entry(self, tmp_path, scenario_data):
        """Test check fails when the entry question does not exist"""
        scenario_data["meta"]["entry"] = "q_nope"
        questions = tmp_path / "questions.yaml"
        questions.write_text(yaml.safe_dump(scenario_data))

        result = runner.invoke(app, ["check", str(questions)])

        assert result.exit_code == 1
        assert "Content error" in result.stdout


class TestVersionCommand:
    """Test version output"""

    def test_version(self):
        """Test version command prints the CLI version"""
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "Course Finder Version" in result.stdout
