"""Language Strings — centralized locale-specific text for API responses.

Invariants:
    - All strings are pure data (no IO, no computation beyond lookup)
    - Every error code and the success message exist for every Locale
    - Unknown codes fall back to the generic internal error text

Design Decisions:
    - Keyed by error code, not by exception class: codes are the stable contract
      shared with logs and tests
    - Ukrainian strings kept verbatim from the first deployment so existing
      clients matching on them keep working
"""

from glitchstore.core.domain_types import Locale

INTERNAL_ERROR_CODE = "INTERNAL_ERROR"


_ERROR_MESSAGES: dict[Locale, dict[str, str]] = {
    Locale.EN: {
        "MISSING_FIELDS": "Missing required fields",
        "INVALID_TYPE": "Invalid data type",
        "TEXT_TOO_LONG": "Text too long",
        "CSS_TOO_LONG": "CSS too long",
        "EMPTY_REQUEST": "Empty request",
        "PAYLOAD_TOO_LARGE": "Payload too large",
        "INVALID_JSON": "Invalid JSON",
        "ENCODE_FAILED": "Failed to encode JSON",
        "WRITE_FAILED": "Failed to write data",
        "COMMIT_FAILED": "Failed to complete saving",
        "NOT_FOUND": "No saved document",
        "READ_FAILED": "Failed to read file",
        "EMPTY_FILE": "File is empty",
        "CORRUPT_DATA": "Corrupted data",
        "INVALID_STRUCTURE": "Invalid data structure",
        "METHOD_NOT_ALLOWED": "Method not supported",
        INTERNAL_ERROR_CODE: "An unexpected error occurred",
    },
    Locale.UK: {
        "MISSING_FIELDS": "Відсутні обов'язкові поля",
        "INVALID_TYPE": "Невірний тип даних",
        "TEXT_TOO_LONG": "Текст занадто довгий",
        "CSS_TOO_LONG": "CSS занадто великий",
        "EMPTY_REQUEST": "Порожній запит",
        "PAYLOAD_TOO_LARGE": "Дані занадто великі",
        "INVALID_JSON": "Невалідний JSON",
        "ENCODE_FAILED": "Помилка кодування JSON",
        "WRITE_FAILED": "Не вдалося записати дані",
        "COMMIT_FAILED": "Не вдалося завершити збереження",
        "NOT_FOUND": "Збережений документ відсутній",
        "READ_FAILED": "Не вдалося прочитати файл",
        "EMPTY_FILE": "Файл порожній",
        "CORRUPT_DATA": "Пошкоджені дані",
        "INVALID_STRUCTURE": "Невалідна структура даних",
        "METHOD_NOT_ALLOWED": "Метод не підтримується",
        INTERNAL_ERROR_CODE: "Сталася неочікувана помилка",
    },
}

_SAVE_SUCCESS: dict[Locale, str] = {
    Locale.EN: "Data saved successfully",
    Locale.UK: "Дані успішно збережено",
}


def get_error_message(code: str, locale: Locale) -> str:
    """User-facing message for an error code in the given locale."""
    messages = _ERROR_MESSAGES[locale]
    return messages.get(code, messages[INTERNAL_ERROR_CODE])


def get_save_success_message(locale: Locale) -> str:
    return _SAVE_SUCCESS[locale]
