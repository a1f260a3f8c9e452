import io

import pytest

from ghorgcli.common.enums import Command
from ghorgcli.common.exceptions import GhOrgCliException, HelpNotFoundError
from ghorgcli.common.help import (
    TOP_LEVEL_HELP_NAME,
    emphasize_headings,
    get_help_documents,
    parse_help_document,
    print_help,
)


class TtyStringIO(io.StringIO):
    def isatty(self) -> bool:
        return True


def test_parse_help_document():
    document = parse_help_document("Usage: ghorg team-get-id [--org=ORG] TEAM\n\nNAME\n    team-get-id\n")
    assert document.command_name == "team-get-id"
    assert document.synopsis == "Usage: ghorg team-get-id [--org=ORG] TEAM"
    assert document.text == "Usage: ghorg team-get-id [--org=ORG] TEAM\n\nNAME\n    team-get-id"

    assert parse_help_document("Usage: ghorg [<command>]").command_name == TOP_LEVEL_HELP_NAME

    with pytest.raises(GhOrgCliException):
        parse_help_document("NAME\n    foo")


def test_every_command_has_help():
    expected = {e.value for e in Command if e not in {Command.HELP, Command.VERSION}} | {TOP_LEVEL_HELP_NAME}
    assert set(get_help_documents()) == expected


def test_print_help_usage_only():
    output = io.StringIO()
    print_help("repo-list", usage_only=True, output=output)
    assert output.getvalue() == "Usage: ghorg repo-list [--org=ORG] [--format=FORMAT]\n"


def test_print_help_full():
    output = io.StringIO()
    print_help("user-list", output=output)
    text = output.getvalue()
    assert text.startswith("Usage: ghorg user-list")
    assert "\nOPTIONS\n" in text
    assert "\033[1m" not in text


def test_print_help_top_level():
    output = io.StringIO()
    print_help(None, output=output)
    assert output.getvalue().startswith("Usage: ghorg [<command>]")


def test_print_help_bold_headings_on_terminal():
    output = TtyStringIO()
    print_help("team-list", output=output)
    assert "\033[1mOPTIONS\033[0m" in output.getvalue()


def test_print_help_not_found():
    # 前方一致ではヒットしない
    with pytest.raises(HelpNotFoundError, match="command not found: repo"):
        print_help("repo", output=io.StringIO())


def test_emphasize_headings():
    text = "Usage: ghorg x\nNAME\n    x - y\nENVIRONMENT VARIABLES\nGH_ORG"
    assert emphasize_headings(text).split("\n") == [
        "Usage: ghorg x",
        "\033[1mNAME\033[0m",
        "    x - y",
        "\033[1mENVIRONMENT VARIABLES\033[0m",
        "GH_ORG",
    ]
