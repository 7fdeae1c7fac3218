"""Abstract machine-translation provider interface.

Business logic never imports a concrete provider directly.
The concrete provider is instantiated once in the FastAPI lifespan
and injected everywhere via Depends().
"""

from abc import ABC, abstractmethod


class TranslationProvider(ABC):
    """Abstract base class for external translation services."""

    @abstractmethod
    async def translate(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
    ) -> str | None:
        """Translate text between two ISO 639-1 languages.

        Args:
            text: The text to translate.
            source_lang: Detected language of ``text``.
            target_lang: Language to translate into.

        Returns:
            The translated string, or None when the service answered
            without one.

        Raises:
            Any transport or decoding error. Callers decide how to degrade.
        """
        ...

    async def close(self) -> None:
        """Release network resources. Default: nothing to release."""
        return None
