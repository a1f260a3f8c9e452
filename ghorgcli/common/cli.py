"""
Command Line Interfaceの共通部分
"""

from __future__ import annotations

import argparse
import logging
import logging.config
import os
import pkgutil
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Optional

import yaml

from ghorgcli.common.enums import FormatArgument, HelpMode
from ghorgcli.common.exceptions import GhOrgCliException, UsageError
from ghorgcli.common.facade import GitHubOrganizationFacade
from ghorgcli.common.gh import GhApi
from ghorgcli.common.help import PROGRAM_NAME, print_help
from ghorgcli.common.utils import print_raw, print_table

logger = logging.getLogger(__name__)

ORGANIZATION_ENV_NAME = "GH_ORG"
"""デフォルトの組織名を指定する環境変数"""


class ExitCode:
    """
    BashのExit Codes
    https://tldp.org/LDP/abs/html/exitcodes.html
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    """一般的なエラー全般。コマンドの使い方の誤りも含む。"""
    COMMAND_NOT_FOUND = 127
    """``gh`` などの外部コマンドが見つからない"""


@dataclass(frozen=True)
class Settings:
    """
    プロセス全体で共通の設定。起動時に1回だけ生成して、各コマンドに渡す。
    """

    default_organization: Optional[str] = None
    """ ``--org`` が指定されなかったときの組織名"""

    @classmethod
    def from_env(cls) -> Settings:
        return cls(default_organization=os.environ.get(ORGANIZATION_ENV_NAME))


@dataclass(frozen=True)
class Flag:
    """
    ``--name`` または ``--name=VALUE`` 形式のオプション
    """

    name: str
    dest: str
    takes_value: bool = True
    """Trueなら ``--name=VALUE`` 形式、Falseなら ``--name`` 形式"""
    default: Any = None


class CommandArgumentParser:
    """
    サブコマンドのコマンドライン引数を解析する。

    引数は左から順に読み、以下のいずれかで位置引数の読み込みに切り替わる。
    以降の引数は ``-`` で始まっていても位置引数として扱う。

    * ``--``
    * ``-`` で始まらない最初の引数（ ``intermixed=True`` の場合は切り替えず、オプションの読み込みを続ける）

    Args:
        command_name: コマンド名
        positionals: 必須の位置引数の名前
        optional_positionals: 省略可能な位置引数の名前
        intermixed: Trueなら、位置引数の後ろに指定されたオプションも解釈する
    """

    def __init__(
        self,
        command_name: str,
        *,
        positionals: Sequence[str] = (),
        optional_positionals: Sequence[str] = (),
        intermixed: bool = False,
    ) -> None:
        self.command_name = command_name
        self.positionals = list(positionals)
        self.optional_positionals = list(optional_positionals)
        self.intermixed = intermixed
        self._flags: dict[str, Flag] = {}

        self.add_flag("--org", dest="organization")
        self.add_flag("--format", dest="format", default=FormatArgument.PLAIN.value)
        self.add_flag("--debug", dest="debug", takes_value=False, default=False)

    def add_flag(self, name: str, *, dest: Optional[str] = None, takes_value: bool = True, default: Any = None) -> None:  # noqa: ANN401
        """
        オプションを追加する。

        Args:
            name: ``--names`` のようなオプション名
            dest: 解析結果の属性名。未指定ならオプション名から生成する（ ``--team-ids`` なら ``team_ids`` ）
            takes_value: Trueなら ``--name=VALUE`` 形式
            default: オプションが指定されなかったときの値
        """
        if dest is None:
            dest = name.lstrip("-").replace("-", "_")
        self._flags[name] = Flag(name=name, dest=dest, takes_value=takes_value, default=default)

    @property
    def usage(self) -> str:
        names = [*self.positionals, *(f"[{e}]" for e in self.optional_positionals)]
        return " ".join([PROGRAM_NAME, self.command_name, "[options]", *names])

    def _parse_flag(self, argument: str, namespace: argparse.Namespace) -> None:
        name, separator, value = argument.partition("=")
        flag = self._flags.get(name)
        if flag is None or flag.takes_value != (separator == "="):
            raise UsageError(f"{self.command_name}: invalid option: {argument}")

        setattr(namespace, flag.dest, value if flag.takes_value else True)

    def _validate(self, namespace: argparse.Namespace, settings: Settings) -> None:
        if namespace.organization is None:
            namespace.organization = settings.default_organization
        if not namespace.organization:
            raise UsageError(f"{self.command_name}: must specify --org or set {ORGANIZATION_ENV_NAME}")

        count = len(namespace.positionals)
        if not len(self.positionals) <= count <= len(self.positionals) + len(self.optional_positionals):
            raise UsageError(f"{self.command_name}: wrong number of arguments ({count}); usage: {self.usage}")

    def parse_args(self, arguments: Sequence[str], settings: Settings) -> argparse.Namespace:
        """
        コマンドライン引数を解析する。

        ``-h`` または ``--help`` が見つかった時点で解析を打ち切り、 ``help`` 属性を設定して返す。
        この場合は組織名や位置引数の検証を行わない。

        Args:
            arguments: コマンド名より後ろのコマンドライン引数
            settings: 組織名のデフォルト値などの設定

        Returns:
            解析結果。 ``organization`` , ``format`` , ``debug`` , ``help`` , ``positionals`` とコマンド固有の属性を持つ。

        Raises:
            UsageError: 不明なオプション、組織名の未指定、位置引数の個数の誤り
        """
        namespace = argparse.Namespace(help=None)
        for flag in self._flags.values():
            setattr(namespace, flag.dest, flag.default)

        positionals: list[str] = []
        index = 0
        while index < len(arguments):
            argument = arguments[index]
            index += 1

            if argument == "--":
                positionals.extend(arguments[index:])
                break

            if argument == "-h":
                namespace.help = HelpMode.USAGE
                return namespace

            if argument == "--help":
                namespace.help = HelpMode.FULL
                return namespace

            if not argument.startswith("-"):
                positionals.append(argument)
                if self.intermixed:
                    continue
                positionals.extend(arguments[index:])
                break

            self._parse_flag(argument, namespace)

        namespace.positionals = positionals
        self._validate(namespace, settings)
        return namespace


def load_logging_config_from_args(args: argparse.Namespace) -> None:
    """
    パッケージに含まれるlogging設定ファイルを読み込む。
    ``--debug`` が指定されている場合は、ghorgcliのログレベルをDEBUGにする。

    Args:
        args: Command引数情報
    """
    data = pkgutil.get_data("ghorgcli", "data/logging.yaml")
    if data is None:
        raise GhOrgCliException("ghorgcli/data/logging.yaml が読み込めませんでした")

    logging_config = yaml.safe_load(data.decode("utf-8"))
    if args.debug:
        logging_config["loggers"]["ghorgcli"]["level"] = "DEBUG"

    logging.config.dictConfig(logging_config)


class CommandLine:
    """
    CLI用のクラス
    """

    #: GitHubOrganizationFacadeインスタンス
    facade: GitHubOrganizationFacade

    #: 出力フォーマット
    str_format: str

    def __init__(self, facade: GitHubOrganizationFacade, args: argparse.Namespace) -> None:
        self.facade = facade
        self.args = args
        self.str_format = args.format

    def print_table(self, header: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
        print_table(header, rows, format=self.str_format)

    def print_raw(self, content: str) -> None:
        print_raw(content)

    def main(self) -> None:
        raise NotImplementedError


def run_command(
    parser: CommandArgumentParser,
    command_class: type[CommandLine],
    arguments: Sequence[str],
    settings: Settings,
) -> int:
    """
    コマンドライン引数を解析して、コマンドを実行する。

    Returns:
        終了ステータス
    """
    args = parser.parse_args(arguments, settings)
    if args.help is not None:
        print_help(parser.command_name, usage_only=args.help == HelpMode.USAGE)
        return ExitCode.SUCCESS

    load_logging_config_from_args(args)
    logger.debug(f"command={parser.command_name}, args={args}")
    facade = GitHubOrganizationFacade(GhApi())
    command_class(facade, args).main()
    return ExitCode.SUCCESS
