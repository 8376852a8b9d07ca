"""Ошибки разбора аргументов командной строки"""

from typing import Optional


class ConfigError(ValueError):
    """Базовая ошибка: аргументы не удалось превратить в TestConfig"""

    def __init__(self, message: str, option: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.option = option


class MissingCommand(ConfigError):
    """Не указана команда write/read/clean"""

    def __init__(self, message: str = "A command is required."):
        super().__init__(message)


class MissingRequiredOption(ConfigError):
    """Не указана обязательная опция команды"""

    def __init__(self, option: str):
        super().__init__(f"Missing option --{option}", option)


class UnknownOption(ConfigError):
    """Опция не относится к выбранной команде"""


class InvalidSize(ConfigError):
    """Размер не соответствует формату <число><B|KB|MB|GB>"""

    def __init__(self, option: Optional[str] = None):
        super().__init__("The size must be valid", option)


class InvalidEnumValue(ConfigError):
    """Значение вне фиксированного набора"""


class InvalidNumber(ConfigError):
    """Значение числовой опции не является целым числом"""

    def __init__(self, option: str, value: str):
        super().__init__(
            f"Option --{option} expects a number but was given '{value}'", option
        )
