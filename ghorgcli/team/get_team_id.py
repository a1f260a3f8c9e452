from __future__ import annotations

import logging
from collections.abc import Sequence

import jmespath

from ghorgcli.common.cli import CommandArgumentParser, CommandLine, Settings, run_command
from ghorgcli.common.enums import Command
from ghorgcli.common.exceptions import GhOrgCliException
from ghorgcli.common.utils import output_string

logger = logging.getLogger(__name__)


class GetTeamId(CommandLine):
    """
    チームのslugから、チームIDを出力する。
    """

    QUERY = jmespath.compile("id")

    def main(self) -> None:
        team_slug = self.args.positionals[0]
        team = self.facade.get_team(self.args.organization, team_slug)
        team_id = self.QUERY.search(team)
        if team_id is None:
            raise GhOrgCliException(f"team-get-id: team '{team_slug}' has no id in the response")
        output_string(str(team_id))


def main(arguments: Sequence[str], settings: Settings) -> int:
    return run_command(add_parser(), GetTeamId, arguments, settings)


def add_parser() -> CommandArgumentParser:
    return CommandArgumentParser(Command.TEAM_GET_ID.value, positionals=["TEAM"])
