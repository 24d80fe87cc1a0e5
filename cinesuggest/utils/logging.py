"""
Log-line helpers.

Loggers themselves come from ``logging.getLogger(__name__)`` and are
configured once in ``cinesuggest.main``. User text only reaches a log line
through ``preview``; the API key never does.
"""


def preview(text: str, limit: int = 50) -> str:
    """Shorten user-supplied text for log lines."""
    text = text.replace("\n", " ")
    if len(text) <= limit:
        return text
    return text[:limit] + "..."
