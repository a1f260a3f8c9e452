from enum import Enum


class FormatArgument(Enum):
    """
    表示するフォーマット ``--format`` で指定できる値

    Attributes:
        PLAIN: 列の幅を揃えた表形式
        TSV: タブ区切り
        CSV: タブ区切り（TSVと同じ出力）
        JSON: JSON形式

    """

    #: 列の幅を揃えた表形式
    PLAIN = "plain"

    #: タブ区切り形式
    TSV = "tsv"

    #: ``tsv`` と同じタブ区切り形式
    CSV = "csv"

    #: JSON形式
    JSON = "json"


class Command(Enum):
    """
    ``ghorg`` の第1引数に指定できるコマンド
    """

    REPO_LIST = "repo-list"
    USER_LIST = "user-list"
    USER_GET = "user-get"
    USER_INVITE = "user-invite"
    USER_REMOVE = "user-remove"
    TEAM_LIST = "team-list"
    TEAM_GET_ID = "team-get-id"
    TEAM_ADD_TO_REPO = "team-add-to-repo"
    TEAM_REPO_LIST = "team-repo-list"

    HELP = "help"
    VERSION = "version"


class HelpMode(Enum):
    """``-h`` と ``--help`` の違い"""

    USAGE = "usage"
    """1行目の使い方だけを表示する"""
    FULL = "full"
    """ヘルプ全体を表示する"""
