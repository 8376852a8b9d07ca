"""Разбор аргументов командной строки TestAlluxioIO в TestConfig"""

import argparse
import logging
import re
import sys
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional, Sequence, Tuple

from . import __version__
from .config import TestConfig, DEFAULT_BENCHMARK_DIR
from .errors import (
    ConfigError,
    InvalidEnumValue,
    InvalidNumber,
    MissingCommand,
    MissingRequiredOption,
    UnknownOption,
)
from .modes import TestMode, WriteBehavior, ReadBehavior, Compression
from .sizes import validate_size, size_to_bytes

logger = logging.getLogger(__name__)

PROG = "TestAlluxioIO"
HEADER = f"Test Alluxio I/O {__version__}"

INT_PATTERN = re.compile(r"^[+-]?\d+$", re.ASCII)
INT_MIN, INT_MAX = -2 ** 31, 2 ** 31 - 1


class OptionKind:
    """Типы значений опций"""
    INT = "int"
    SIZE = "size"
    STRING = "string"
    CHOICE = "choice"


@dataclass(frozen=True)
class OptionSpec:
    """Описание одной опции команды"""
    name: str
    field: str
    kind: str
    required: bool
    value_name: str
    help: str
    choices: Tuple[str, ...] = ()
    choice_error: str = ""


@dataclass(frozen=True)
class CommandSpec:
    """Описание команды и ее опций"""
    mode: TestMode
    description: str
    options: Tuple[OptionSpec, ...]


def _write_behavior_option() -> OptionSpec:
    values = "|".join(WriteBehavior.ALL)
    return OptionSpec(
        "writeBehavior", "write_behavior", OptionKind.CHOICE, False, "<behavior>",
        f"The data write behavior when writing a new file ({values}). Default to {WriteBehavior.MUST_CACHE}",
        WriteBehavior.ALL, f"Behavior must be one of: {values}",
    )


def _read_behavior_option() -> OptionSpec:
    values = "|".join(ReadBehavior.ALL)
    return OptionSpec(
        "readBehavior", "read_behavior", OptionKind.CHOICE, False, "<behavior>",
        f"The data read behavior when reading a new file ({values}). Default to {ReadBehavior.CACHE_PROMOTE}",
        ReadBehavior.ALL, f"Behavior must be one of: {values}",
    )


def _compression_option() -> OptionSpec:
    values = "|".join(Compression.ALL)
    return OptionSpec(
        "compression", "compression", OptionKind.CHOICE, False, "<codec>",
        f"The compression codec to use ({values})",
        Compression.ALL, f"Compression codec must be one of: {values}",
    )


# Порядок опций задает порядок проверки значений
SCHEMA: Tuple[CommandSpec, ...] = (
    CommandSpec(
        TestMode.WRITE,
        "Runs a test writing to the cluster. The written files are located in Alluxio under the folder "
        "defined by the option <outputDir>. If the folder already exists, it will be first deleted.",
        (
            OptionSpec("numFiles", "num_files", OptionKind.INT, True, "<value>",
                       "Number of files to write. Default to 4."),
            OptionSpec("fileSize", "file_size", OptionKind.SIZE, True, "<value>",
                       "Size of each file to write (B|KB|MB|GB). Default to 128B."),
            OptionSpec("outputDir", "benchmark_dir", OptionKind.STRING, True, "<file>",
                       f"Name of the directory to place the resultant files. Default to {DEFAULT_BENCHMARK_DIR}"),
            _write_behavior_option(),
            _compression_option(),
        ),
    ),
    CommandSpec(
        TestMode.READ,
        "Runs a test reading from the cluster. It is convenient to run test with command write first, so that "
        "some files are prepared for read test. If the test is run with this command before it is run with "
        "command write, an error message will be shown up.",
        (
            OptionSpec("numFiles", "num_files", OptionKind.INT, True, "<value>",
                       "Number of files to read. Default to 4."),
            OptionSpec("fileSize", "file_size", OptionKind.SIZE, True, "<value>",
                       "Size of each file to read (B|KB|MB|GB). Default to 128B."),
            OptionSpec("inputDir", "benchmark_dir", OptionKind.STRING, True, "<file>",
                       f"Name of the directory where to find the files to read. Default to {DEFAULT_BENCHMARK_DIR}"),
            _read_behavior_option(),
            _compression_option(),
        ),
    ),
    CommandSpec(
        TestMode.CLEAN,
        "Remove previous test data. This command deletes de output directory.",
        (
            OptionSpec("outputDir", "benchmark_dir", OptionKind.STRING, True, "<file>",
                       f"Name of the directory to clean. Default to {DEFAULT_BENCHMARK_DIR}"),
        ),
    ),
)

COMMAND_SPECS = {spec.mode.command: spec for spec in SCHEMA}


class ResolveStatus(Enum):
    """Итог разбора аргументов"""
    SUCCESS = 'success'
    FAILURE = 'failure'
    HELP = 'help'
    VERSION = 'version'


@dataclass(frozen=True)
class Resolution:
    """Результат resolve(): конфигурация, ошибка или запрос help/version"""
    status: ResolveStatus
    config: Optional[TestConfig] = None
    error: Optional[ConfigError] = None

    @property
    def ok(self) -> bool:
        return self.status is ResolveStatus.SUCCESS

    @property
    def message(self) -> Optional[str]:
        return self.error.message if self.error else None


class _HelpRequested(Exception):
    pass


class _VersionRequested(Exception):
    pass


class _HelpAction(argparse.Action):
    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS, help=None):
        super().__init__(option_strings=option_strings, dest=dest, default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        raise _HelpRequested()


class _VersionAction(_HelpAction):
    def __call__(self, parser, namespace, values, option_string=None):
        raise _VersionRequested()


class ResolverParser(argparse.ArgumentParser):
    """ArgumentParser, который при ошибке бросает ConfigError вместо выхода"""

    def error(self, message):
        raise ConfigError(message)


def _add_builtin_flags(parser: argparse.ArgumentParser):
    parser.add_argument("--help", action=_HelpAction, help="prints this usage text")
    parser.add_argument("--version", action=_VersionAction, help="prints the version")


def build_parser() -> Tuple[ResolverParser, dict]:
    """Создание нового парсера; возвращает корневой парсер и парсеры команд"""
    parser = ResolverParser(
        prog=PROG,
        description=HEADER,
        add_help=False,
        allow_abbrev=False,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    _add_builtin_flags(parser)

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")
    command_parsers = {}
    for spec in SCHEMA:
        command = spec.mode.command
        sub = subparsers.add_parser(
            command,
            help=spec.description,
            description=spec.description,
            add_help=False,
            allow_abbrev=False,
        )
        for option in spec.options:
            sub.add_argument(
                f"--{option.name}",
                dest=option.name,
                metavar=option.value_name,
                default=None,
                help=option.help,
            )
        _add_builtin_flags(sub)
        command_parsers[command] = sub

    return parser, command_parsers


def format_usage(parser: ResolverParser, command_parsers: dict) -> str:
    """Полный текст справки: общая часть и все команды"""
    sections = [parser.format_help()]
    for command, sub in command_parsers.items():
        sections.append(f"Command: {command}\n" + sub.format_help())
    return "\n".join(sections)


def _attach_values(tokens: Sequence[str], spec: CommandSpec):
    """
    Склеивание '--name value' в '--name=value' для известных опций.
    Значения, начинающиеся с '-', иначе argparse принимает за опции.
    """
    names = {f"--{option.name}" for option in spec.options}
    result = []
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token in names:
            if i + 1 >= len(tokens):
                raise ConfigError(f"Missing value after {token}", token[2:])
            result.append(f"{token}={tokens[i + 1]}")
            i += 2
        else:
            result.append(token)
            i += 1
    return result


def _convert(option: OptionSpec, value: str):
    """Проверка и преобразование значения опции"""
    if option.kind == OptionKind.INT:
        if not INT_PATTERN.fullmatch(value):
            raise InvalidNumber(option.name, value)
        number = int(value)
        if not INT_MIN <= number <= INT_MAX:
            raise InvalidNumber(option.name, value)
        return number

    if option.kind == OptionKind.SIZE:
        validate_size(value, option.name)
        return size_to_bytes(value)

    if option.kind == OptionKind.CHOICE and value not in option.choices:
        raise InvalidEnumValue(option.choice_error, option.name)

    return value


def _unknown(token: str) -> UnknownOption:
    if token.startswith("-"):
        return UnknownOption(f"Unknown option {token}", token.lstrip("-").split("=", 1)[0])
    return UnknownOption(f"Unknown argument '{token}'")


def _resolve_config(args: Sequence[str]) -> TestConfig:
    tokens = list(args)
    parser, command_parsers = build_parser()

    if not tokens:
        raise MissingCommand()

    spec = COMMAND_SPECS.get(tokens[0])
    if spec is None:
        if tokens[0] in ("--help", "--version"):
            parser.parse_known_args(tokens[:1])
        raise MissingCommand()

    prepared = [tokens[0]] + _attach_values(tokens[1:], spec)
    namespace, extras = parser.parse_known_args(prepared)
    if extras:
        raise _unknown(extras[0])

    config = TestConfig(mode=spec.mode)
    for option in spec.options:
        value = getattr(namespace, option.name, None)
        if value is None:
            if option.required:
                raise MissingRequiredOption(option.name)
            continue
        config = replace(config, **{option.field: _convert(option, value)})

    return config


def resolve(args: Sequence[str], out=None) -> Resolution:
    """
    Разбор аргументов в TestConfig.

    Args:
        args: аргументы командной строки без имени программы
        out: поток для вывода help/version (по умолчанию sys.stdout)

    Returns:
        Resolution со статусом SUCCESS, FAILURE, HELP или VERSION
    """
    if out is None:
        out = sys.stdout
    try:
        config = _resolve_config(args)
    except _HelpRequested:
        parser, command_parsers = build_parser()
        out.write(format_usage(parser, command_parsers))
        return Resolution(ResolveStatus.HELP)
    except _VersionRequested:
        out.write(f"{HEADER}\n")
        return Resolution(ResolveStatus.VERSION)
    except ConfigError as e:
        logger.debug(f"Failed to resolve {list(args)}: {e.message}")
        return Resolution(ResolveStatus.FAILURE, error=e)

    logger.debug(f"Resolved {config.mode.command}: {config}")
    return Resolution(ResolveStatus.SUCCESS, config=config)


def parse_and_run(args: Sequence[str], run: Callable[[TestConfig], None], out=None) -> Resolution:
    """Разбор аргументов и вызов run(config) ровно один раз при успехе"""
    resolution = resolve(args, out)
    if resolution.ok:
        run(resolution.config)
    return resolution
