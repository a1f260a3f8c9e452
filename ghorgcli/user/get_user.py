from __future__ import annotations

import logging
from collections.abc import Sequence

from ghorgcli.common.cli import CommandArgumentParser, CommandLine, Settings, run_command
from ghorgcli.common.enums import Command

logger = logging.getLogger(__name__)


class GetUser(CommandLine):
    def main(self) -> None:
        username = self.args.positionals[0] if len(self.args.positionals) > 0 else None
        self.print_raw(self.facade.get_user_content(username))


def main(arguments: Sequence[str], settings: Settings) -> int:
    return run_command(add_parser(), GetUser, arguments, settings)


def add_parser() -> CommandArgumentParser:
    return CommandArgumentParser(Command.USER_GET.value, optional_positionals=["USERNAME"])
