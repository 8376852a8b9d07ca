"""Режимы теста и допустимые значения опций"""

from enum import Enum


class TestMode(Enum):
    """Режимы работы TestAlluxioIO"""
    WRITE = 'write'
    READ = 'read'
    CLEAN = 'clean'
    # TODO: подключить append и truncate к отдельным командам
    APPEND = 'append'
    TRUNCATE = 'truncate'
    UNDEFINED = 'not-defined'

    @property
    def command(self) -> str:
        return self.value


class WriteBehavior:
    """Поведение кэша при записи"""
    MUST_CACHE = "MUST_CACHE"
    CACHE_THROUGH = "CACHE_THROUGH"
    THROUGH = "THROUGH"
    ASYNC_THROUGH = "ASYNC_THROUGH"

    ALL = (MUST_CACHE, CACHE_THROUGH, THROUGH, ASYNC_THROUGH)


class ReadBehavior:
    """Поведение кэша при чтении"""
    CACHE_PROMOTE = "CACHE_PROMOTE"
    CACHE = "CACHE"
    NO_CACHE = "NO_CACHE"

    ALL = (CACHE_PROMOTE, CACHE, NO_CACHE)


class Compression:
    """Кодеки сжатия"""
    LZ4 = "lz4"
    SNAPPY = "snappy"
    GZIP = "gzip"
    BZIP2 = "bzip2"

    ALL = (LZ4, SNAPPY, GZIP, BZIP2)


# Порядок важен: индекс единицы задает степень 2^(10 * i)
SIZE_UNITS = ("b", "kb", "mb", "gb")
