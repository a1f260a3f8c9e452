from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Optional

from ghorgcli.common.cli import CommandArgumentParser, CommandLine, Settings, run_command
from ghorgcli.common.enums import Command

logger = logging.getLogger(__name__)

DEFAULT_ROLE = "direct_member"


def get_team_ids(str_team_ids: Optional[str]) -> list[str]:
    """
    ``--team-ids`` に指定されたカンマ区切りの文字列を、チームIDのリストに変換する。
    空の要素は除く。
    """
    if str_team_ids is None:
        return []
    return [e.strip() for e in str_team_ids.split(",") if e.strip() != ""]


class InviteUser(CommandLine):
    """
    メールアドレス宛てに、組織への招待を送る。
    """

    def main(self) -> None:
        args = self.args
        email = args.positionals[0]
        team_ids = get_team_ids(args.team_ids)

        logger.info(f"'{email}'を組織'{args.organization}'に招待して、ロール'{args.role}'を付与します。 :: team_ids={team_ids}")
        content = self.facade.invite_organization_member(args.organization, email, role=args.role, team_ids=team_ids)
        self.print_raw(content)


def main(arguments: Sequence[str], settings: Settings) -> int:
    return run_command(add_parser(), InviteUser, arguments, settings)


def parse_args(parser: CommandArgumentParser) -> None:
    parser.add_flag("--role", default=DEFAULT_ROLE)
    parser.add_flag("--team-ids")


def add_parser() -> CommandArgumentParser:
    # `user-invite EMAIL --role=admin` のように、メールアドレスの後ろにオプションを書けるようにする
    parser = CommandArgumentParser(Command.USER_INVITE.value, positionals=["EMAIL"], intermixed=True)
    parse_args(parser)
    return parser
