import pytest

from ghorgcli.common.exceptions import ExternalCommandNotFoundError, GhApiError
from ghorgcli.common.gh import GhApi, decode_json_stream


class TestDecodeJsonStream:
    def test_empty(self):
        assert decode_json_stream("") is None
        assert decode_json_stream("\n") is None

    def test_single_document(self):
        assert decode_json_stream('{"id": 42}\n') == {"id": 42}
        assert decode_json_stream('[{"name": "alpha"}]') == [{"name": "alpha"}]

    def test_pages_are_merged(self):
        text = '[{"name": "alpha"}]\n[{"name": "beta"}, {"name": "gamma"}]\n'
        assert decode_json_stream(text) == [{"name": "alpha"}, {"name": "beta"}, {"name": "gamma"}]

    def test_pages_without_separator(self):
        assert decode_json_stream("[1,2][3]") == [1, 2, 3]


class TestGhApi:
    def test_build_command(self, fake_gh):
        command = GhApi().build_command(
            "POST",
            "orgs/acme/invitations",
            fields=[("email", "a@example.com")],
            typed_fields=[("team_ids[]", "12")],
        )
        assert command == ["/usr/bin/gh", "api", "--method", "POST", "orgs/acme/invitations", "-f", "email=a@example.com", "-F", "team_ids[]=12"]

    def test_request_json_with_paginate(self, fake_gh):
        fake_gh.add_response("GET", "orgs/acme/repos", '[{"name": "alpha"}][{"name": "beta"}]')
        assert GhApi().request_json("GET", "orgs/acme/repos", paginate=True) == [{"name": "alpha"}, {"name": "beta"}]
        assert fake_gh.commands == [["/usr/bin/gh", "api", "--method", "GET", "orgs/acme/repos", "--paginate"]]

    def test_request_error(self, fake_gh):
        fake_gh.add_response("GET", "users/nobody", '{"message": "Not Found"}', returncode=4)
        with pytest.raises(GhApiError) as e:
            GhApi().request("GET", "users/nobody")
        assert e.value.exit_code == 4
        assert e.value.output == '{"message": "Not Found"}'

    def test_gh_not_installed(self, monkeypatch):
        monkeypatch.setattr("ghorgcli.common.gh.shutil.which", lambda name: None)
        service = GhApi()
        with pytest.raises(ExternalCommandNotFoundError) as e:
            service.request("GET", "user")
        assert e.value.exit_code == 127
        assert "https://cli.github.com/" in str(e.value)
