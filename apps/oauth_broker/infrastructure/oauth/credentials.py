"""OAuth Client Credentials.

프로바이더별 client id/secret 설정입니다.
호출 시점마다 환경변수에서 다시 읽으므로 프로세스 시작 후 주입된 시크릿도 반영됩니다.

예시:
    GITHUB_CLIENT_ID → GitHubCredentials.client_id
    BITBUCKET_CLIENT_SECRET → BitbucketCredentials.client_secret
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientCredentials(BaseSettings):
    """OAuth 클라이언트 자격 증명."""

    client_id: str = ""
    client_secret: str = ""

    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore")

    @property
    def is_configured(self) -> bool:
        """client id가 설정되어 있는지 여부 (빈 문자열은 미설정)."""
        return bool(self.client_id.strip())


class GitHubCredentials(ClientCredentials):
    model_config = SettingsConfigDict(env_prefix="GITHUB_")


class GitLabCredentials(ClientCredentials):
    model_config = SettingsConfigDict(env_prefix="GITLAB_")


class BitbucketCredentials(ClientCredentials):
    model_config = SettingsConfigDict(env_prefix="BITBUCKET_")
