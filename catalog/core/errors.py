"""
Исключения предметной области каталога.

Сервисы поднимают эти исключения, а обработчики в main.py
переводят их в HTTP ответы вида {"detail": "..."}.
"""


class CatalogError(Exception):
    """Базовая ошибка каталога (HTTP 500)."""

    status_code = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(CatalogError):
    """Некорректные или отсутствующие данные запроса (HTTP 400)."""

    status_code = 400


class NotFoundError(CatalogError):
    """Запрошенная запись не существует (HTTP 404)."""

    status_code = 404


class ConflictError(CatalogError):
    """Нарушение уникальности (HTTP 409)."""

    status_code = 409
