"""Pytest configuration, Hypothesis settings and shared questionnaire fixtures"""
import copy
from pathlib import Path

import pytest
from hypothesis import settings, Verbosity

from coursefinder.core.graph import QuestionGraph
from coursefinder.core.navigator import NavigationEngine
from coursefinder.models.documents import AppConfig, Program, QuestionsDocument

# Configure Hypothesis for property-based testing
settings.register_profile("default", max_examples=100, verbosity=Verbosity.normal)
settings.register_profile("ci", max_examples=1000, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=10, verbosity=Verbosity.verbose)

# Load default profile
settings.load_profile("default")

DATA_DIR = Path(__file__).parent.parent / "coursefinder" / "data"


SCENARIO = {
    "meta": {"entry": "q1"},
    "questions": [
        {
            "id": "q1",
            "text": "First question",
            "options": [{"id": "a", "label": "A"}, {"id": "b", "label": "B"}],
            "next": {"a": "q2", "b": "out_1"}
        },
        {
            "id": "q2",
            "text": "Second question",
            "options": [{"id": "c", "label": "C"}],
            "next": {"c": "out_2"}
        }
    ],
    "outcomes": [
        {
            "id": "out_1",
            "title": "Outcome one",
            "blurb": "First blurb",
            "course": {"title": "Course one", "campus": "City", "url": "https://example.edu/1"}
        },
        {
            "id": "out_2",
            "title": "Outcome two",
            "blurb": "Second blurb",
            "programId": "p2"
        }
    ]
}

PROGRAMS = [
    {"id": "p2", "title": "Program two", "campus": "Riverside", "url": "https://example.edu/2"}
]


@pytest.fixture
def scenario_data():
    """Raw two-question scenario document"""
    return copy.deepcopy(SCENARIO)


@pytest.fixture
def make_graph():
    """Factory building a QuestionGraph from raw document data"""
    def _make(data, programs=None):
        document = QuestionsDocument.model_validate(data)
        program_list = [Program.model_validate(p) for p in (programs if programs is not None else PROGRAMS)]
        return QuestionGraph(document, program_list)
    return _make


@pytest.fixture
def make_engine(make_graph):
    """Factory building a NavigationEngine from raw document and config data"""
    def _make(data, config=None, programs=None):
        graph = make_graph(data, programs)
        app_config = AppConfig.model_validate(config) if config is not None else None
        return NavigationEngine(graph, config=app_config)
    return _make


@pytest.fixture
def scenario_engine(make_engine, scenario_data):
    """Engine over the two-question scenario"""
    return make_engine(scenario_data)


@pytest.fixture
def data_dir():
    """Directory of bundled sample documents"""
    return DATA_DIR
