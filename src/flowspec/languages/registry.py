"""Registry of language adapters.

The registry is an explicit value: build it once with
``create_default_registry()`` and pass it to whatever needs adapter lookup.
"""

from __future__ import annotations

from flowspec.core.errors import ModelError
from flowspec.languages.base import Language, LanguageAdapter
from flowspec.languages.python import create_python_adapter
from flowspec.languages.ruby import create_ruby_adapter
from flowspec.languages.static import create_static_adapter


class LanguageRegistry:
    """Registry of language adapters."""

    def __init__(self) -> None:
        self._adapters: dict[Language, LanguageAdapter] = {}

    def register(self, language: Language, adapter: LanguageAdapter) -> None:
        """Register an adapter, replacing any previous one for the language."""
        self._adapters[language] = adapter

    def get(self, language: Language | str) -> LanguageAdapter | None:
        """Get adapter by language, or None if unknown."""
        try:
            return self._adapters.get(Language(language))
        except ValueError:
            return None

    def require(self, language: Language | str) -> LanguageAdapter:
        """Get adapter by language.

        Raises:
            ModelError: If no adapter is registered for the language.
        """
        adapter = self.get(language)
        if adapter is None:
            raise ModelError.unsupported_language(str(getattr(language, "value", language)))
        return adapter

    def languages(self) -> list[Language]:
        return list(self._adapters)

    def clear(self) -> None:
        """Clear all registered adapters."""
        self._adapters.clear()


def create_default_registry() -> LanguageRegistry:
    registry = LanguageRegistry()
    registry.register(Language.JAVA, create_static_adapter("java"))
    registry.register(Language.CSHARP, create_static_adapter("csharp"))
    registry.register(Language.PYTHON, create_python_adapter())
    registry.register(Language.RUBY, create_ruby_adapter())
    return registry
