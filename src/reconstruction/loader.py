"""
Loader — чтение входного JSON документа

Ошибки файловой системы и синтаксиса JSON переводятся в типизированные
ошибки core (InputNotFound / InputUnreadable / InvalidJSON).
"""

import json
from pathlib import Path
from typing import Any, Dict

from src.core.errors import InputNotFound, InputUnreadable, InvalidJSON
from src.core.math import parse_in_base


def load_document(path: str | Path) -> Dict[str, Any]:
    """
    Загрузка документа с диска.

    Raises:
        InputNotFound: Файл не существует
        InputUnreadable: Ошибка чтения (права, каталог, кодировка)
        InvalidJSON: Некорректный JSON
    """
    path = Path(path)
    if not path.exists():
        raise InputNotFound(str(path))

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputUnreadable(str(path), str(e)) from e

    return parse_document(raw)


def _parse_json_int(text: str) -> int:
    """Целые литералы JSON любой длины (без лимита int_max_str_digits)."""
    return parse_in_base(text, 10)


def parse_document(raw: str) -> Dict[str, Any]:
    """
    Декодирование JSON текста.

    Целые литералы декодируются точно, сколько бы цифр они ни содержали.

    Raises:
        InvalidJSON: Некорректный JSON
    """
    try:
        return json.loads(raw, parse_int=_parse_json_int)
    except ValueError as e:
        # JSONDecodeError — подкласс ValueError
        raise InvalidJSON(str(e)) from e
