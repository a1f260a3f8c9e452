"""
コマンドのヘルプを出力する。

ヘルプは ``ghorgcli/data/help.yaml`` に記載されている。
各ドキュメントの1行目は ``Usage: ghorg <command> ...`` の形式で、 ``<command>`` の部分でドキュメントを引く。
"""

from __future__ import annotations

import functools
import pkgutil
import re
import sys
from dataclasses import dataclass
from typing import Optional, TextIO

import yaml

from ghorgcli.common.exceptions import GhOrgCliException, HelpNotFoundError

PROGRAM_NAME = "ghorg"

TOP_LEVEL_HELP_NAME = ""
"""コマンドを指定しないときのヘルプのキー"""

BOLD = "\033[1m"
RESET = "\033[0m"

_HEADING_PATTERN = re.compile(r"[A-Z]+( [A-Z]+)*")


@dataclass(frozen=True)
class HelpDocument:
    command_name: str
    synopsis: str
    """1行目の使い方"""
    text: str
    """ヘルプ全体"""


def parse_help_document(text: str) -> HelpDocument:
    """
    1個のヘルプドキュメントを読み込む。1行目の ``Usage: ghorg`` の次の単語をコマンド名とみなす。
    ``[<command>]`` のように角括弧や山括弧で始まる場合は、トップレベルのヘルプとみなす。
    """
    text = text.rstrip("\n")
    synopsis = text.split("\n", 1)[0]
    tokens = synopsis.split()
    if tokens[:2] != ["Usage:", PROGRAM_NAME]:
        raise GhOrgCliException(f"ヘルプの1行目が'Usage: {PROGRAM_NAME}'で始まっていません。 :: {synopsis}")

    if len(tokens) < 3 or tokens[2][0] in "[<":
        command_name = TOP_LEVEL_HELP_NAME
    else:
        command_name = tokens[2]
    return HelpDocument(command_name=command_name, synopsis=synopsis, text=text)


@functools.lru_cache(maxsize=None)
def get_help_documents() -> dict[str, HelpDocument]:
    """
    パッケージに含まれるヘルプを読み込み、コマンド名をキーにしたdictを返す。
    """
    data = pkgutil.get_data("ghorgcli", "data/help.yaml")
    if data is None:
        raise GhOrgCliException("ghorgcli/data/help.yaml が読み込めませんでした")

    documents = [parse_help_document(e) for e in yaml.safe_load(data.decode("utf-8"))]
    return {e.command_name: e for e in documents}


def emphasize_headings(text: str) -> str:
    """大文字の単語だけで構成される行（ ``OPTIONS`` など）を太字にする。"""
    lines = [f"{BOLD}{line}{RESET}" if _HEADING_PATTERN.fullmatch(line) else line for line in text.split("\n")]
    return "\n".join(lines)


def print_help(command_name: Optional[str] = None, *, usage_only: bool = False, output: Optional[TextIO] = None) -> None:
    """
    コマンドのヘルプを出力する。

    Args:
        command_name: 対象のコマンド名。Noneまたは空文字ならトップレベルのヘルプ。
        usage_only: Trueなら1行目の使い方だけを出力する
        output: 出力先。Noneなら標準出力。端末の場合だけ見出しを太字にする。

    Raises:
        HelpNotFoundError: コマンドのヘルプが存在しない
    """
    if output is None:
        output = sys.stdout

    document = get_help_documents().get(command_name or TOP_LEVEL_HELP_NAME)
    if document is None:
        raise HelpNotFoundError(command_name)  # type: ignore[arg-type]

    text = document.synopsis if usage_only else document.text
    if output.isatty():
        text = emphasize_headings(text)
    print(text, file=output)  # noqa: T201
