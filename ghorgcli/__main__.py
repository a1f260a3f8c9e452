from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import Callable, Optional

import more_itertools

import ghorgcli
import ghorgcli.repo.list_repo
import ghorgcli.team.add_team_to_repo
import ghorgcli.team.get_team_id
import ghorgcli.team.list_team
import ghorgcli.team.list_team_repo
import ghorgcli.user.get_user
import ghorgcli.user.invite_user
import ghorgcli.user.list_user
import ghorgcli.user.remove_user
from ghorgcli.common.cli import ExitCode, Settings
from ghorgcli.common.enums import Command
from ghorgcli.common.exceptions import GhApiError, GhOrgCliException, UsageError
from ghorgcli.common.help import PROGRAM_NAME, print_help
from ghorgcli.common.utils import print_raw

logger = logging.getLogger(__name__)

HELP_TOKENS = {"-h", "--help", Command.HELP.value}
VERSION_TOKENS = {"-V", "--version", Command.VERSION.value}

CommandHandler = Callable[[Sequence[str], Settings], int]

COMMAND_HANDLERS: dict[Command, CommandHandler] = {
    Command.REPO_LIST: ghorgcli.repo.list_repo.main,
    Command.USER_LIST: ghorgcli.user.list_user.main,
    Command.USER_GET: ghorgcli.user.get_user.main,
    Command.USER_INVITE: ghorgcli.user.invite_user.main,
    Command.USER_REMOVE: ghorgcli.user.remove_user.main,
    Command.TEAM_LIST: ghorgcli.team.list_team.main,
    Command.TEAM_GET_ID: ghorgcli.team.get_team_id.main,
    Command.TEAM_ADD_TO_REPO: ghorgcli.team.add_team_to_repo.main,
    Command.TEAM_REPO_LIST: ghorgcli.team.list_team_repo.main,
}
"""``help`` と ``version`` 以外のコマンドと、その処理"""


def print_version() -> None:
    print(f"{PROGRAM_NAME} v{ghorgcli.__version__}")  # noqa: T201
    print(ghorgcli.__url__)  # noqa: T201


def print_error(message: str) -> None:
    print(f"{PROGRAM_NAME}: {message}", file=sys.stderr)  # noqa: T201


def to_command(token: str) -> Command:
    """
    第1引数をコマンドに変換する。空文字はヘルプとみなす。

    Raises:
        UsageError: 不明なオプションまたは不明なコマンド
    """
    if token == "" or token in HELP_TOKENS:
        return Command.HELP
    if token in VERSION_TOKENS:
        return Command.VERSION

    command = more_itertools.first_true(Command, pred=lambda e: e.value == token)
    if command is not None:
        return command

    if token.startswith("-"):
        raise UsageError(f"invalid option: {token}")
    raise UsageError(f"invalid command: {token}")


def dispatch(arguments: Sequence[str], settings: Settings) -> int:
    token = arguments[0] if len(arguments) > 0 else ""
    command = to_command(token)
    if command == Command.HELP:
        print_help(arguments[1] if len(arguments) > 1 else None)
        return ExitCode.SUCCESS

    if command == Command.VERSION:
        print_version()
        return ExitCode.SUCCESS

    return COMMAND_HANDLERS[command](arguments[1:], settings)


def main(arguments: Optional[list[str]] = None) -> int:
    """
    ghorgコマンドのメイン処理

    Args:
        arguments: コマンドライン引数。テストコード用

    Returns:
        終了ステータス
    """
    if arguments is None:
        arguments = sys.argv[1:]

    settings = Settings.from_env()
    try:
        return dispatch(arguments, settings)

    except GhApiError as e:
        # エラー内容はghが標準エラーに出力済み。レスポンスボディはそのまま標準出力に出力する
        logger.debug(e)
        print_raw(e.output)
        return e.exit_code

    except GhOrgCliException as e:
        print_error(str(e))
        return e.exit_code


if __name__ == "__main__":
    sys.exit(main())
