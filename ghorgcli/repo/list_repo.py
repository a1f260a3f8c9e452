from __future__ import annotations

import logging
from collections.abc import Sequence

import jmespath

from ghorgcli.common.cli import CommandArgumentParser, CommandLine, Settings, run_command
from ghorgcli.common.enums import Command

logger = logging.getLogger(__name__)


class ListRepo(CommandLine):
    """
    組織のリポジトリ一覧を出力する。
    """

    QUERY = jmespath.compile("[].name")

    def main(self) -> None:
        repo_list = self.facade.get_organization_repos(self.args.organization)
        logger.debug(f"リポジトリ一覧の件数: {len(repo_list)}")

        repo_names: list[str] = self.QUERY.search(repo_list) or []
        self.print_table(["name"], [[name] for name in repo_names])


def main(arguments: Sequence[str], settings: Settings) -> int:
    return run_command(add_parser(), ListRepo, arguments, settings)


def add_parser() -> CommandArgumentParser:
    return CommandArgumentParser(Command.REPO_LIST.value)
