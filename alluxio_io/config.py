"""Конфигурация теста"""

from dataclasses import dataclass, asdict
from typing import Optional

from .modes import TestMode, ReadBehavior, WriteBehavior

DEFAULT_BENCHMARK_DIR = "/benchmarks/TestAlluxioIO"


@dataclass(frozen=True)
class TestConfig:
    """Параметры одного запуска TestAlluxioIO"""
    mode: TestMode = TestMode.UNDEFINED
    num_files: int = 4
    file_size: int = 128  # байты
    benchmark_dir: str = DEFAULT_BENCHMARK_DIR
    read_behavior: str = ReadBehavior.CACHE_PROMOTE
    write_behavior: str = WriteBehavior.MUST_CACHE
    compression: Optional[str] = None

    def to_dict(self):
        data = asdict(self)
        data['mode'] = self.mode.command
        return data
