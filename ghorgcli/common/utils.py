import json
import logging
from collections.abc import Sequence
from typing import Any

from ghorgcli.common.enums import FormatArgument

logger = logging.getLogger(__name__)

COLUMN_SEPARATOR = "  "
"""``plain`` フォーマットで列と列の間に入れる空白"""


def output_string(target: str) -> None:
    """
    文字列を標準出力に出力する。

    Args:
        target: 出力対象の文字列
    """
    print(target)  # noqa: T201


def print_raw(target: str) -> None:
    """
    APIのレスポンスボディを加工せずに出力する。空文字の場合は何も出力しない。
    """
    if target == "":
        return
    print(target, end="" if target.endswith("\n") else "\n")  # noqa: T201


def print_json(target: Any) -> None:  # noqa: ANN401
    """
    JSONを出力する。

    Args:
        target: 出力対象のJSON

    """
    output_string(json.dumps(target, ensure_ascii=False))


def align_columns(text: str) -> str:
    """
    タブ区切りの行を、列ごとに幅を揃える。
    列の幅は、その列に含まれる値の最大幅。各行の最後の列には空白を付けない。

    Args:
        text: タブ区切りの文字列

    Returns:
        列の幅が揃った文字列
    """
    rows = [line.split("\t") for line in text.split("\n")]
    widths: list[int] = []
    for row in rows:
        for index, value in enumerate(row):
            if index < len(widths):
                widths[index] = max(widths[index], len(value))
            else:
                widths.append(len(value))

    lines = []
    for row in rows:
        padded = [value.ljust(widths[index]) for index, value in enumerate(row[:-1])]
        lines.append(COLUMN_SEPARATOR.join([*padded, row[-1]]))
    return "\n".join(lines)


def format_tab_separated_text(text: str, format: str) -> str:  # noqa: A002
    """
    ``--format`` にしたがって、タブ区切りの文字列を整形する。
    ``plain`` 以外（ ``tsv`` , ``csv`` , ``json`` , 不明な値）は、そのまま返す。
    """
    if format == FormatArgument.PLAIN.value:
        return align_columns(text)
    return text


def print_table(header: Sequence[str], rows: Sequence[Sequence[str]], format: str) -> None:  # noqa: A002
    """
    ヘッダ行と行の一覧を、 ``--format`` にしたがって出力する。
    末尾には空行を出力する。

    ``json`` の場合は、ヘッダをキーにしたオブジェクトのリストを出力する。

    Args:
        header: ヘッダ行
        rows: 行の一覧
        format: ``--format`` の値
    """
    if format == FormatArgument.JSON.value:
        print_json([dict(zip(header, row)) for row in rows])
        return

    lines = ["\t".join(header)]
    lines.extend("\t".join(row) for row in rows)
    lines.append("")
    output_string(format_tab_separated_text("\n".join(lines), format))
