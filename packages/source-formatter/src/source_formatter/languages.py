from dataclasses import dataclass
from typing import Optional, Tuple

from .engine import FormatterEngine
from .models import FormatterConfig
from .rules import BlankLineRule, IndentationRule, SpacingRule, WhitespaceCleanupRule


@dataclass(frozen=True)
class LanguageProfile:
    name: str
    extension: str
    control_keywords: Tuple[str, ...]
    triple_quotes: Tuple[str, ...] = ()


JAVA = LanguageProfile(
    name="java",
    extension="java",
    control_keywords=("if", "for", "while", "switch", "catch", "synchronized", "try"),
    triple_quotes=('"""',),
)

GROOVY = LanguageProfile(
    name="groovy",
    extension="groovy",
    control_keywords=("if", "for", "while", "switch", "catch", "synchronized"),
    triple_quotes=('"""', "'''"),
)


def build_engine(profile: LanguageProfile, config: Optional[FormatterConfig] = None) -> FormatterEngine:
    config = config or FormatterConfig()
    engine = FormatterEngine(config, profile)
    # Indentation must see the final brace and blank-line layout
    engine.add_rule(SpacingRule(config))
    engine.add_rule(BlankLineRule(config))
    engine.add_rule(IndentationRule(config))
    engine.add_rule(WhitespaceCleanupRule(config))
    return engine


def java_engine(config: Optional[FormatterConfig] = None) -> FormatterEngine:
    return build_engine(JAVA, config)


def groovy_engine(config: Optional[FormatterConfig] = None) -> FormatterEngine:
    return build_engine(GROOVY, config)
