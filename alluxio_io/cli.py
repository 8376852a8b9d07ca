"""Точка входа CLI TestAlluxioIO"""

import sys
from typing import Callable, Optional, Sequence

from .config import TestConfig
from .logger import set_logger
from .resolver import PROG, ResolveStatus, parse_and_run


def format_size(size_bytes):
    """Форматирование размера в человекочитаемый вид"""
    for unit in ['B', 'KB', 'MB', 'GB']:
        if size_bytes < 1024.0:
            return f"{size_bytes:.2f} {unit}"
        size_bytes /= 1024.0
    return f"{size_bytes:.2f} TB"


def print_config(config: TestConfig):
    """Обработчик по умолчанию: печать итоговой конфигурации"""
    print("=" * 80)
    print(f"TEST ALLUXIO I/O: {config.mode.command.upper()}")
    print("=" * 80)
    print(f"Directory:      {config.benchmark_dir}")
    if config.mode.command != 'clean':
        print(f"Files:          {config.num_files}")
        print(f"File size:      {config.file_size} bytes ({format_size(config.file_size)})")
        if config.mode.command == 'write':
            print(f"Write behavior: {config.write_behavior}")
        else:
            print(f"Read behavior:  {config.read_behavior}")
        print(f"Compression:    {config.compression or 'none'}")
    print("=" * 80)


def main(argv: Optional[Sequence[str]] = None,
         run: Callable[[TestConfig], None] = print_config) -> int:
    """Разбор аргументов и запуск; возвращает код выхода"""
    logger = set_logger()
    args = sys.argv[1:] if argv is None else list(argv)

    resolution = parse_and_run(args, run)
    if resolution.status is ResolveStatus.FAILURE:
        logger.debug(f"Parse failure for {args}")
        print(f"Error: {resolution.message}", file=sys.stderr)
        print(f"Try {PROG} --help for more information.", file=sys.stderr)
        return 1
    return 0
