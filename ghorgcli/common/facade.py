import logging
from collections.abc import Collection
from typing import Any, Optional

from ghorgcli.common.gh import GhApi

logger = logging.getLogger(__name__)


class GitHubOrganizationFacade:
    """
    GitHub組織に関するREST APIを、コマンドから使いやすい形で提供する。
    一覧取得のAPIは、すべてのページを取得する。
    """

    def __init__(self, service: GhApi) -> None:
        self.service = service

    ##################
    # リポジトリ
    ##################
    def get_organization_repos(self, organization_name: str) -> list[dict[str, Any]]:
        """組織のリポジトリ一覧を取得する。"""
        return self.service.request_json("GET", f"orgs/{organization_name}/repos", paginate=True) or []

    ##################
    # ユーザー
    ##################
    def get_organization_members(self, organization_name: str) -> list[dict[str, Any]]:
        """組織メンバーの一覧を取得する。"""
        return self.service.request_json("GET", f"orgs/{organization_name}/members", paginate=True) or []

    def get_user(self, username: str) -> dict[str, Any]:
        return self.service.request_json("GET", f"users/{username}")

    def get_user_content(self, username: Optional[str] = None) -> str:
        """
        ユーザー情報をJSON文字列で取得する。

        Args:
            username: 対象のユーザー名。Noneなら認証済みのユーザー自身。
        """
        if username is None:
            return self.service.request("GET", "user")
        return self.service.request("GET", f"users/{username}")

    def invite_organization_member(
        self,
        organization_name: str,
        email: str,
        role: str,
        team_ids: Optional[Collection[str]] = None,
    ) -> str:
        """
        メールアドレス宛てに組織への招待を作成する。

        Args:
            organization_name: 招待先の組織名
            email: 招待するユーザーのメールアドレス
            role: 招待するユーザーのロール
            team_ids: 招待と同時に追加するチームのIDの一覧

        Returns:
            レスポンスボディ（JSON文字列）
        """
        fields = [("email", email), ("role", role)]
        typed_fields = [("team_ids[]", team_id) for team_id in team_ids or []]
        return self.service.request("POST", f"orgs/{organization_name}/invitations", fields=fields, typed_fields=typed_fields)

    def delete_organization_membership(self, organization_name: str, username: str) -> str:
        return self.service.request("DELETE", f"orgs/{organization_name}/memberships/{username}")

    ##################
    # チーム
    ##################
    def get_organization_teams(self, organization_name: str) -> list[dict[str, Any]]:
        return self.service.request_json("GET", f"orgs/{organization_name}/teams", paginate=True) or []

    def get_team(self, organization_name: str, team_slug: str) -> dict[str, Any]:
        return self.service.request_json("GET", f"orgs/{organization_name}/teams/{team_slug}")

    def add_team_repo_permission(self, organization_name: str, team_slug: str, repo_name: str, permission: str) -> str:
        """
        チームにリポジトリの権限を付与する。リポジトリは同じ組織のものとみなす。

        Returns:
            レスポンスボディ。成功時は通常空文字。
        """
        return self.service.request(
            "PUT",
            f"orgs/{organization_name}/teams/{team_slug}/repos/{organization_name}/{repo_name}",
            fields=[("permission", permission)],
        )

    def get_team_repos(self, organization_name: str, team_slug: str) -> list[dict[str, Any]]:
        return self.service.request_json("GET", f"orgs/{organization_name}/teams/{team_slug}/repos", paginate=True) or []
