"""
Internationalization Messages

Fixed user-facing strings returned instead of a snippet.
"""

DEFAULT_LANGUAGE = "en"

MESSAGES = {
    "en": {
        "empty_query": "Empty query",
        "no_results": "Nothing was found for your query",
        "load_failed": "Could not load document: {path}",
        "timing": "Snippet creation time (ms): {elapsed:.3f}",
    },
    "ru": {
        "empty_query": "Пустой запрос",
        "no_results": "По вашему запросу ничего не найдено",
        "load_failed": "Не удалось загрузить файл: {path}",
        "timing": "Время создания сниппета (мс): {elapsed:.3f}",
    },
}


def get_message(key: str, lang: str | None = None) -> str:
    """Look up a message, falling back to English for unknown languages."""
    table = MESSAGES.get(lang or DEFAULT_LANGUAGE, MESSAGES[DEFAULT_LANGUAGE])
    return table[key]
