from __future__ import annotations

import logging
from collections.abc import Sequence

from ghorgcli.common.cli import CommandArgumentParser, CommandLine, Settings, run_command
from ghorgcli.common.enums import Command

logger = logging.getLogger(__name__)

DEFAULT_PERMISSION = "push"


class AddTeamToRepo(CommandLine):
    """
    チームにリポジトリの権限を付与する。
    """

    def main(self) -> None:
        args = self.args
        team_slug, repo_name = args.positionals
        logger.info(f"チーム'{team_slug}'にリポジトリ'{args.organization}/{repo_name}'の権限'{args.permission}'を付与します。")
        content = self.facade.add_team_repo_permission(args.organization, team_slug, repo_name, permission=args.permission)
        self.print_raw(content)


def main(arguments: Sequence[str], settings: Settings) -> int:
    return run_command(add_parser(), AddTeamToRepo, arguments, settings)


def parse_args(parser: CommandArgumentParser) -> None:
    parser.add_flag("--permission", default=DEFAULT_PERMISSION)


def add_parser() -> CommandArgumentParser:
    parser = CommandArgumentParser(Command.TEAM_ADD_TO_REPO.value, positionals=["TEAM", "REPO"])
    parse_args(parser)
    return parser
