import json

import pytest

from ghorgcli.__main__ import main

REPOS = json.dumps([{"name": "alpha", "private": False}, {"name": "beta", "private": True}])


class TestRepoList:
    def test_plain(self, capsys, fake_gh):
        fake_gh.add_response("GET", "orgs/acme/repos", REPOS)
        assert main(["repo-list", "--org=acme"]) == 0
        assert capsys.readouterr().out == "name\nalpha\nbeta\n\n"
        assert fake_gh.commands == [["/usr/bin/gh", "api", "--method", "GET", "orgs/acme/repos", "--paginate"]]

    @pytest.mark.parametrize("str_format", ["tsv", "csv", "unknown"])
    def test_passthrough_formats(self, capsys, fake_gh, str_format):
        fake_gh.add_response("GET", "orgs/acme/repos", REPOS)
        assert main(["repo-list", "--org=acme", f"--format={str_format}"]) == 0
        assert capsys.readouterr().out == "name\nalpha\nbeta\n\n"

    def test_json(self, capsys, fake_gh):
        fake_gh.add_response("GET", "orgs/acme/repos", REPOS)
        assert main(["repo-list", "--org=acme", "--format=json"]) == 0
        assert json.loads(capsys.readouterr().out) == [{"name": "alpha"}, {"name": "beta"}]

    def test_multiple_pages(self, capsys, fake_gh):
        fake_gh.add_response("GET", "orgs/acme/repos", '[{"name": "alpha"}]\n[{"name": "beta"}]\n')
        assert main(["repo-list", "--org=acme", "--format=tsv"]) == 0
        assert capsys.readouterr().out == "name\nalpha\nbeta\n\n"

    def test_no_repos(self, capsys, fake_gh):
        fake_gh.add_response("GET", "orgs/acme/repos", "[]")
        assert main(["repo-list", "--org=acme"]) == 0
        assert capsys.readouterr().out == "name\n\n"

    def test_positional_is_rejected(self, capsys, fake_gh):
        assert main(["repo-list", "--org=acme", "extra"]) == 1
        assert "repo-list: wrong number of arguments" in capsys.readouterr().err
        assert fake_gh.commands == []
