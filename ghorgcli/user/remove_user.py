from __future__ import annotations

import logging
from collections.abc import Sequence

from ghorgcli.common.cli import CommandArgumentParser, CommandLine, Settings, run_command
from ghorgcli.common.enums import Command

logger = logging.getLogger(__name__)


class RemoveUser(CommandLine):
    """
    組織からメンバーを脱退させる。
    """

    def main(self) -> None:
        username = self.args.positionals[0]
        logger.info(f"組織'{self.args.organization}'から'{username}'を脱退させます。")
        self.print_raw(self.facade.delete_organization_membership(self.args.organization, username))


def main(arguments: Sequence[str], settings: Settings) -> int:
    return run_command(add_parser(), RemoveUser, arguments, settings)


def add_parser() -> CommandArgumentParser:
    return CommandArgumentParser(Command.USER_REMOVE.value, positionals=["USERNAME"])
