"""
ghorgcli.common.exceptions

ghorgcliで発生する例外の一覧
"""


class GhOrgCliException(Exception):  # noqa: N818
    """
    ghorgcliに関するException
    """

    exit_code: int = 1
    """コマンドの終了ステータス"""


class UsageError(GhOrgCliException):
    """
    コマンドラインの使い方が誤っているときのエラー。
    組織名の未指定、位置引数の個数の誤り、不明なオプションなど。
    """


class HelpNotFoundError(GhOrgCliException):
    """
    ヘルプの対象となるコマンドが存在しないときのエラー
    """

    def __init__(self, command_name: str) -> None:
        self.command_name = command_name
        super().__init__(f"help: command not found: {command_name}")


class ExternalCommandNotFoundError(GhOrgCliException):
    """
    ``gh`` などの外部コマンドがインストールされていないときのエラー
    """

    exit_code = 127

    def __init__(self, command: str, install_hint: str) -> None:
        self.command = command
        super().__init__(f"'{command}' is not installed: {install_hint}")


class GhApiError(GhOrgCliException):
    """
    ``gh api`` が0以外の終了ステータスを返したときのエラー。
    ``gh`` はエラー内容を標準エラーに、レスポンスボディを標準出力に出力する。
    標準出力は ``output`` に保持して、呼び出し元でそのまま出力する。
    """

    def __init__(self, method: str, endpoint: str, returncode: int, output: str = "") -> None:
        self.method = method
        self.endpoint = endpoint
        self.exit_code = returncode
        self.output = output
        super().__init__(f"'gh api --method {method} {endpoint}' exited with status {returncode}")
