import pytest
from source_formatter.models import FormatResult

from srcfmt_cli.registry import FormatEngineRegistry


class RecordingEngine:
    """Engine double: returns ``output`` as the formatted text and records calls."""

    def __init__(self, output=None, errors=None):
        self.output = output
        self.errors = errors or []
        self.calls = []

    def format(self, path, content):
        self.calls.append((path, content))
        if self.errors:
            return FormatResult(source=content, modified=False, errors=self.errors)
        if self.output is None or self.output == content:
            return FormatResult(source=content, modified=False)
        return FormatResult(source=self.output, modified=True)


@pytest.fixture
def java_engine_double():
    return RecordingEngine(output="formatted java\n")


@pytest.fixture
def groovy_engine_double():
    return RecordingEngine(output="formatted groovy\n")


@pytest.fixture
def registry(java_engine_double, groovy_engine_double):
    reg = FormatEngineRegistry()
    reg.register("java", "java", java_engine_double)
    reg.register("groovy", "groovy", groovy_engine_double)
    return reg


@pytest.fixture
def make_engine():
    return RecordingEngine
