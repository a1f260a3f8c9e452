"""
GitHub CLI（ ``gh api`` ）を呼び出して、GitHub REST APIにアクセスする。
認証は ``gh`` に任せる。
"""

from __future__ import annotations

import json
import logging
import shutil
import subprocess
from collections.abc import Sequence
from typing import Any, Optional

import more_itertools

from ghorgcli.common.exceptions import ExternalCommandNotFoundError, GhApiError

logger = logging.getLogger(__name__)

GH_INSTALL_HINT = "install GitHub CLI: https://cli.github.com/"

Fields = Sequence[tuple[str, str]]
"""(key, value)のシーケンス。同じkeyを複数回指定できる。"""


def decode_json_stream(text: str) -> Any:  # noqa: ANN401
    """
    ``gh api`` の出力をPythonオブジェクトに変換する。

    ``--paginate`` を指定すると、ページごとのJSONが連結されて出力される。
    すべてのページを読み込み、リストのページは1個のリストにまとめる。

    Args:
        text: ``gh api`` の標準出力

    Returns:
        JSONの値。出力が空ならNone。
    """
    decoder = json.JSONDecoder()
    documents = []
    index = 0
    length = len(text)
    while True:
        while index < length and text[index].isspace():
            index += 1
        if index >= length:
            break
        document, index = decoder.raw_decode(text, index)
        documents.append(document)

    if len(documents) == 0:
        return None
    if len(documents) == 1:
        return documents[0]
    if all(isinstance(e, list) for e in documents):
        return list(more_itertools.flatten(documents))
    return documents


class GhApi:
    """
    ``gh api`` のラッパー

    Args:
        executable: GitHub CLIのコマンド名
    """

    def __init__(self, executable: str = "gh") -> None:
        self.executable = executable
        self._executable_path: Optional[str] = None

    def _get_executable_path(self) -> str:
        # 最初のリクエスト時に存在を確認する
        if self._executable_path is None:
            path = shutil.which(self.executable)
            if path is None:
                raise ExternalCommandNotFoundError(self.executable, GH_INSTALL_HINT)
            self._executable_path = path
        return self._executable_path

    def build_command(
        self,
        method: str,
        endpoint: str,
        *,
        fields: Optional[Fields] = None,
        typed_fields: Optional[Fields] = None,
        paginate: bool = False,
    ) -> list[str]:
        """
        ``gh api`` のコマンドを生成する。

        Args:
            method: HTTPメソッド
            endpoint: ``orgs/{org}/repos`` のようなREST APIのパス
            fields: 文字列として渡すパラメータ（ ``-f`` ）
            typed_fields: 数値などの型を解釈して渡すパラメータ（ ``-F`` ）
            paginate: Trueならすべてのページを取得する

        """
        command = [self._get_executable_path(), "api", "--method", method, endpoint]
        for key, value in fields or []:
            command.extend(["-f", f"{key}={value}"])
        for key, value in typed_fields or []:
            command.extend(["-F", f"{key}={value}"])
        if paginate:
            command.append("--paginate")
        return command

    def request(
        self,
        method: str,
        endpoint: str,
        *,
        fields: Optional[Fields] = None,
        typed_fields: Optional[Fields] = None,
        paginate: bool = False,
    ) -> str:
        """
        ``gh api`` を実行して、レスポンスボディを返す。
        ``gh`` のエラー出力は、そのまま標準エラーに出力される。
        失敗時のレスポンスボディは ``GhApiError.output`` に保持される。

        Raises:
            ExternalCommandNotFoundError: ``gh`` がインストールされていない
            GhApiError: ``gh`` が0以外の終了ステータスを返した
        """
        command = self.build_command(method, endpoint, fields=fields, typed_fields=typed_fields, paginate=paginate)
        logger.debug(f"command={command}")
        result = subprocess.run(command, stdout=subprocess.PIPE, text=True, check=False)  # noqa: S603
        logger.debug(f"returncode={result.returncode}, {method} {endpoint}")
        if result.returncode != 0:
            raise GhApiError(method, endpoint, result.returncode, output=result.stdout)
        return result.stdout

    def request_json(
        self,
        method: str,
        endpoint: str,
        *,
        fields: Optional[Fields] = None,
        typed_fields: Optional[Fields] = None,
        paginate: bool = False,
    ) -> Any:  # noqa: ANN401
        """
        ``gh api`` を実行して、レスポンスボディをJSONとして読み込む。
        ページングした場合は、すべてのページが1個のリストにまとめられる。
        """
        text = self.request(method, endpoint, fields=fields, typed_fields=typed_fields, paginate=paginate)
        return decode_json_stream(text)
