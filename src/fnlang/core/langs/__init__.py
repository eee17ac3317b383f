from fnlang.core.langs.abc import BaseLangHelper, LangHelper, LangIdentity
from fnlang.core.langs.java import JavaLangHelper
from fnlang.core.langs.registry import LangRegistry, default_registry

__all__ = [
    "BaseLangHelper",
    "JavaLangHelper",
    "LangHelper",
    "LangIdentity",
    "LangRegistry",
    "default_registry",
]
