"""Integration tests for loading questionnaire documents from disk"""

import json

import pytest

from coursefinder.core.navigator import NavigationEngine
from coursefinder.exceptions import DataLoadError
from coursefinder.parsers import DocumentParser, load_documents_async


class TestBundledDocuments:
    """Test loading the bundled sample questionnaire"""

    @pytest.mark.asyncio
    async def test_load_all_documents(self, data_dir):
        """Test questions, programs and config load together"""
        documents = await load_documents_async(
            data_dir / "questions.yaml",
            data_dir / "programs.yaml",
            data_dir / "config.yaml"
        )

        assert documents.questions.meta.entry == "q_age_group"
        assert len(documents.programs) == 8
        assert documents.config.feedback.enabled is True

        engine = NavigationEngine.from_documents(documents)
        engine.begin_session("Sam")
        assert engine.current_question().id == "q_age_group"

    @pytest.mark.asyncio
    async def test_every_outcome_resolves(self, data_dir):
        """Test every bundled outcome has a course"""
        documents = await load_documents_async(
            data_dir / "questions.yaml",
            data_dir / "programs.yaml"
        )
        engine = NavigationEngine.from_documents(documents)

        for outcome in documents.questions.outcomes:
            assert engine.graph.resolve_outcome(outcome.id).course.title

    @pytest.mark.asyncio
    async def test_without_config_feedback_is_off(self, data_dir):
        """Test missing config document disables feedback"""
        documents = await load_documents_async(data_dir / "questions.yaml")
        engine = NavigationEngine.from_documents(documents)
        engine.start()
        engine.select_option("early")

        assert documents.programs == []
        assert engine.is_feedback_applicable() is False


class TestDocumentFormats:
    """Test YAML and JSON documents"""

    @pytest.mark.asyncio
    async def test_json_questions(self, tmp_path, scenario_data):
        """Test JSON document is decoded by suffix"""
        path = tmp_path / "questions.json"
        path.write_text(json.dumps(scenario_data))

        document = await DocumentParser().parse_questions(path)

        assert [q.id for q in document.questions] == ["q1", "q2"]
        assert document.outcomes[1].program_id == "p2"

    @pytest.mark.asyncio
    async def test_programs_mapping(self, tmp_path):
        """Test programs document wrapped in a 'programs' key"""
        path = tmp_path / "programs.yaml"
        path.write_text(
            "programs:\n"
            "  - id: p1\n"
            "    title: One\n"
            "    campus: City\n"
            "    url: https://example.edu/1\n"
        )

        programs = await DocumentParser().parse_programs(path)

        assert programs[0].id == "p1"

    @pytest.mark.asyncio
    async def test_empty_config(self, tmp_path):
        """Test empty config document uses defaults"""
        path = tmp_path / "config.yaml"
        path.write_text("")

        config = await DocumentParser().parse_config(path)

        assert config.feedback.enabled is False


class TestLoadErrors:
    """Test load failures become DataLoadError"""

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path):
        """Test missing document"""
        with pytest.raises(DataLoadError) as exc_info:
            await load_documents_async(tmp_path / "missing.yaml")

        assert exc_info.value.reason == "file not found"
        assert "missing.yaml" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_missing_optional_document(self, tmp_path, data_dir):
        """Test missing programs document fails the whole load"""
        with pytest.raises(DataLoadError):
            await load_documents_async(data_dir / "questions.yaml", tmp_path / "nope.yaml")

    @pytest.mark.asyncio
    async def test_invalid_yaml_reports_line(self, tmp_path):
        """Test YAML syntax error carries its line number"""
        path = tmp_path / "questions.yaml"
        path.write_text("questions: []\n  broken: value\n")

        with pytest.raises(DataLoadError) as exc_info:
            await DocumentParser().parse_questions(path)

        assert "YAML parsing error" in exc_info.value.reason
        assert exc_info.value.line_number == 2

    @pytest.mark.asyncio
    async def test_invalid_json_reports_line(self, tmp_path):
        """Test JSON syntax error carries its line number"""
        path = tmp_path / "questions.json"
        path.write_text('{\n  "questions": [,]\n}\n')

        with pytest.raises(DataLoadError) as exc_info:
            await DocumentParser().parse_questions(path)

        assert "JSON parsing error" in exc_info.value.reason
        assert exc_info.value.line_number == 2

    @pytest.mark.asyncio
    async def test_validation_error_reports_line(self, tmp_path):
        """Test schema violation points at the offending key"""
        path = tmp_path / "questions.yaml"
        path.write_text(
            "meta:\n"
            "  entry: q1\n"
            "  maxSteps: 0\n"
            "questions: []\n"
        )

        with pytest.raises(DataLoadError) as exc_info:
            await DocumentParser().parse_questions(path)

        assert "meta.maxSteps" in exc_info.value.reason
        assert exc_info.value.line_number == 3

    @pytest.mark.asyncio
    async def test_missing_required_field(self, tmp_path):
        """Test question without text is rejected"""
        path = tmp_path / "questions.yaml"
        path.write_text(
            "questions:\n"
            "  - id: q1\n"
            "    options: []\n"
        )

        with pytest.raises(DataLoadError) as exc_info:
            await DocumentParser().parse_questions(path)

        assert "questions.0.text" in exc_info.value.reason
        assert exc_info.value.line_number == 2

    @pytest.mark.asyncio
    async def test_invalid_encoding(self, tmp_path):
        """Test document that is not UTF-8 is a load failure"""
        path = tmp_path / "questions.yaml"
        path.write_bytes(b"questions: []\n# \xff\xfe\n")

        with pytest.raises(DataLoadError) as exc_info:
            await load_documents_async(path)

        assert exc_info.value.reason.startswith("invalid encoding")
        assert "questions.yaml" in exc_info.value.message
