import pytest
from source_formatter.engine import FormatterEngine
from source_formatter.languages import GROOVY, JAVA
from source_formatter.models import FormatterConfig
from source_formatter.rules.blank_lines import BlankLineRule

def format_blank_lines(source, profile=JAVA, **config_args):
    config = FormatterConfig(**config_args)
    engine = FormatterEngine(config, profile)
    engine.add_rule(BlankLineRule(config))
    return engine.format_string(source)

def test_collapse_blank_runs():
    result = format_blank_lines("a();\n\n\n\nb();\n")
    assert result.source == "a();\n\nb();\n"

def test_max_blank_lines_configurable():
    result = format_blank_lines("a();\n\n\n\nb();\n", max_blank_lines=2)
    assert result.source == "a();\n\n\nb();\n"

def test_leading_blank_lines_removed():
    result = format_blank_lines("\n\nclass A {}\n")
    assert result.source == "class A {}\n"

def test_block_boundaries():
    source = "class A {\n\n    int x;\n\n}\n"
    result = format_blank_lines(source)
    assert result.source == "class A {\n    int x;\n}\n"

def test_trailing_blank_lines_dropped():
    result = format_blank_lines("a();\n\n\n")
    assert result.source == "a();\n"

def test_blank_lines_inside_multiline_string_kept():
    source = "def s = '''\n\n\n\nend'''\n"
    result = format_blank_lines(source, GROOVY)
    assert result.source == source
    assert result.modified is False

def test_already_correct():
    source = "a();\n\nb();\n"
    result = format_blank_lines(source)
    assert result.modified is False
