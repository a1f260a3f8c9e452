from __future__ import annotations

import logging
from collections.abc import Sequence

import jmespath

from ghorgcli.common.cli import CommandArgumentParser, CommandLine, Settings, run_command
from ghorgcli.common.enums import Command

logger = logging.getLogger(__name__)

NO_NAME = "(No Name)"
"""表示名が設定されていないユーザーの表示名"""


class ListUser(CommandLine):
    """
    組織メンバーの一覧を出力する。
    ``--names`` が指定された場合は、メンバーごとにユーザー情報を取得して表示名も出力する。
    """

    QUERY = jmespath.compile("[].login")

    def get_display_name(self, username: str) -> str:
        user = self.facade.get_user(username)
        name = user.get("name") if user is not None else None
        if not name:
            return NO_NAME
        return name

    def main(self) -> None:
        member_list = self.facade.get_organization_members(self.args.organization)
        logger.debug(f"組織メンバー一覧の件数: {len(member_list)}")

        usernames: list[str] = self.QUERY.search(member_list) or []
        if not self.args.names:
            self.print_table(["username"], [[username] for username in usernames])
            return

        # メンバーごとに1回ずつ、順番にリクエストする
        rows = [[username, self.get_display_name(username)] for username in usernames]
        self.print_table(["username", "name"], rows)


def main(arguments: Sequence[str], settings: Settings) -> int:
    return run_command(add_parser(), ListUser, arguments, settings)


def parse_args(parser: CommandArgumentParser) -> None:
    parser.add_flag("--names", takes_value=False, default=False)


def add_parser() -> CommandArgumentParser:
    parser = CommandArgumentParser(Command.USER_LIST.value)
    parse_args(parser)
    return parser
