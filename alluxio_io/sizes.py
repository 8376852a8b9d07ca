"""Разбор размеров файлов вида 128B, 1.5MB, 2GB"""

import re

from .errors import InvalidSize
from .modes import SIZE_UNITS

SIZE_PATTERN = re.compile(r"^(\d+(?:\.\d+)?)([kKmMgG]?[bB])$", re.ASCII)

# Верхняя граница знакового 64-битного целого
MAX_BYTES = 2 ** 63 - 1
FRACTION_DIGITS = 30


def is_valid_size(size: str) -> bool:
    return SIZE_PATTERN.fullmatch(size) is not None


def validate_size(size: str, option: str = None):
    """Проверка формата размера, InvalidSize если не подходит"""
    if not is_valid_size(size):
        raise InvalidSize(option)


def size_to_bytes(size: str) -> int:
    """
    Перевод размера в байты.
    Считается в целых числах: дробная часть отбрасывается после умножения
    (усечение к нулю, не округление), без потери точности на больших значениях.
    """
    match = SIZE_PATTERN.fullmatch(size)
    if match is None:
        raise InvalidSize()

    whole, _, fraction = match.group(1).partition(".")
    unit = match.group(2).lower()

    # Слишком большие значения насыщаются, как при приведении double к long
    whole = whole.lstrip("0") or "0"
    if len(whole) > len(str(MAX_BYTES)):
        return MAX_BYTES

    # 1 / 2^30 записывается 30 знаками после запятой, дальше знаки на результат не влияют
    fraction = fraction[:FRACTION_DIGITS]
    numerator = int(whole + fraction) << (SIZE_UNITS.index(unit) * 10)
    return min(numerator // 10 ** len(fraction), MAX_BYTES)
