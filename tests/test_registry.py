from pathlib import Path

import pytest

from srcfmt_cli.models import RunConfiguration
from srcfmt_cli.registry import build_default_registry, extension_of


@pytest.mark.parametrize("path, expected", [
    ("Foo.java", "java"),
    ("src/Bar.groovy", "groovy"),
    ("archive.tar.gz", "gz"),
    ("Makefile", ""),
    (Path("dir.v2") / "README", ""),
    (".java", "java"),
])
def test_extension_of(path, expected):
    assert extension_of(path) == expected


def test_engine_for_both_enabled(registry, java_engine_double, groovy_engine_double):
    config = RunConfiguration.from_flags()
    assert registry.engine_for("java", config) is java_engine_double
    assert registry.engine_for("groovy", config) is groovy_engine_double


def test_engine_for_disabled_language(registry, java_engine_double):
    java_only = RunConfiguration.from_flags(java=True)
    assert registry.engine_for("java", java_only) is java_engine_double
    assert registry.engine_for("groovy", java_only) is None

    groovy_only = RunConfiguration.from_flags(groovy=True)
    assert registry.engine_for("java", groovy_only) is None


@pytest.mark.parametrize("extension", ["txt", "", "JAVA", "javax"])
def test_engine_for_unknown_extension(registry, extension):
    assert registry.engine_for(extension, RunConfiguration.from_flags()) is None


def test_default_registry_has_real_engines():
    registry = build_default_registry()
    config = RunConfiguration.from_flags()

    java = registry.engine_for("java", config)
    groovy = registry.engine_for("groovy", config)

    assert java.profile.name == "java"
    assert groovy.profile.name == "groovy"
