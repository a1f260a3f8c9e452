from __future__ import annotations

import logging
from collections.abc import Sequence

import jmespath

from ghorgcli.common.cli import CommandArgumentParser, CommandLine, Settings, run_command
from ghorgcli.common.enums import Command

logger = logging.getLogger(__name__)


class ListTeam(CommandLine):
    """
    組織のチーム一覧を、slugとIDの組で出力する。
    """

    QUERY = jmespath.compile("[].[slug, to_string(id)]")

    def main(self) -> None:
        team_list = self.facade.get_organization_teams(self.args.organization)
        logger.debug(f"チーム一覧の件数: {len(team_list)}")

        rows: list[list[str]] = self.QUERY.search(team_list) or []
        self.print_table(["slug", "id"], rows)


def main(arguments: Sequence[str], settings: Settings) -> int:
    return run_command(add_parser(), ListTeam, arguments, settings)


def add_parser() -> CommandArgumentParser:
    return CommandArgumentParser(Command.TEAM_LIST.value)
