#!/usr/bin/env python3
"""
TestAlluxioIO
Разбор параметров теста записи/чтения/очистки
"""
import sys

from alluxio_io.cli import main


if __name__ == '__main__':
    sys.exit(main())
