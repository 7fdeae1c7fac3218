"""Fixed bilingual table of common chat phrases.

Keyed by "{source}-{target}", then by the lowercased, trimmed phrase.
Only en/ru are covered; every other pair goes to the translation provider.
"""

COMMON_PHRASES: dict[str, dict[str, str]] = {
    "en-ru": {
        "hello": "Привет",
        "hi": "Привет",
        "hey": "Привет",
        "good morning": "Доброе утро",
        "good evening": "Добрый вечер",
        "good night": "Спокойной ночи",
        "how are you": "Как дела",
        "thank you": "Спасибо",
        "thanks": "Спасибо",
        "yes": "Да",
        "no": "Нет",
        "bye": "Пока",
        "goodbye": "До свидания",
    },
    "ru-en": {
        "привет": "Hello",
        "здравствуйте": "Hello",
        "доброе утро": "Good morning",
        "добрый вечер": "Good evening",
        "спокойной ночи": "Good night",
        "как дела": "How are you",
        "спасибо": "Thank you",
        "да": "Yes",
        "нет": "No",
        "пока": "Bye",
        "до свидания": "Goodbye",
    },
}


def lookup_phrase(text: str, source_lang: str, target_lang: str) -> str | None:
    """Return the stored translation of a common phrase, or None."""
    table = COMMON_PHRASES.get(f"{source_lang}-{target_lang}")
    if not table:
        return None
    return table.get(text.lower().strip())
