from __future__ import annotations

import logging
from collections.abc import Sequence

import jmespath

from ghorgcli.common.cli import CommandArgumentParser, CommandLine, Settings, run_command
from ghorgcli.common.enums import Command

logger = logging.getLogger(__name__)


class ListTeamRepo(CommandLine):
    """
    チームがアクセスできるリポジトリの一覧を出力する。
    """

    QUERY = jmespath.compile("[].name")

    def main(self) -> None:
        team_slug = self.args.positionals[0]
        repo_list = self.facade.get_team_repos(self.args.organization, team_slug)
        logger.debug(f"チーム'{team_slug}'のリポジトリ一覧の件数: {len(repo_list)}")

        repo_names: list[str] = self.QUERY.search(repo_list) or []
        self.print_table(["name"], [[name] for name in repo_names])


def main(arguments: Sequence[str], settings: Settings) -> int:
    return run_command(add_parser(), ListTeamRepo, arguments, settings)


def add_parser() -> CommandArgumentParser:
    return CommandArgumentParser(Command.TEAM_REPO_LIST.value, positionals=["TEAM"])
