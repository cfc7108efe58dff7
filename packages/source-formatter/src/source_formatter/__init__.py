from .engine import FormatterEngine
from .languages import GROOVY, JAVA, LanguageProfile, groovy_engine, java_engine
from .models import FormatResult, FormatterConfig

__all__ = [
    "FormatterEngine",
    "FormatResult",
    "FormatterConfig",
    "LanguageProfile",
    "JAVA",
    "GROOVY",
    "java_engine",
    "groovy_engine",
]
