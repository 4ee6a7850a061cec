"""OAuthCallbackInteractor 단위 테스트."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from apps.oauth_broker.application.oauth.commands.callback import OAuthCallbackInteractor
from apps.oauth_broker.application.oauth.dto import OAuthCallbackRequest, TokenBundle
from apps.oauth_broker.application.oauth.exceptions import (
    InvalidRequestError,
    ProviderDeniedError,
    ProviderNotFoundError,
)
from apps.oauth_broker.application.oauth.ports import PendingAuthorization
from apps.oauth_broker.application.oauth.services import OAuthFlowResult


class TestOAuthCallbackInteractor:
    """OAuthCallbackInteractor 테스트."""

    @pytest.fixture
    def tokens(self) -> TokenBundle:
        return TokenBundle(access_token="a1", refresh_token="r1", expires_at=1500)

    @pytest.fixture
    def mock_oauth_service(self, tokens: TokenBundle) -> MagicMock:
        """Mock OAuthFlowService."""
        service = MagicMock()
        service.validate_and_exchange = AsyncMock(
            return_value=OAuthFlowResult(
                pending=PendingAuthorization(redirect="http://x/done", provider="gitlab"),
                tokens=tokens,
            )
        )
        return service

    @pytest.fixture
    def mock_provider_gateway(self) -> MagicMock:
        gateway = MagicMock()
        gateway.supports.side_effect = lambda name: name in {"github", "gitlab", "bitbucket"}
        return gateway

    @pytest.fixture
    def interactor(
        self,
        mock_oauth_service: MagicMock,
        mock_provider_gateway: MagicMock,
    ) -> OAuthCallbackInteractor:
        return OAuthCallbackInteractor(mock_oauth_service, mock_provider_gateway)

    @pytest.mark.asyncio
    async def test_execute_success(
        self,
        interactor: OAuthCallbackInteractor,
        mock_oauth_service: MagicMock,
        tokens: TokenBundle,
    ) -> None:
        result = await interactor.execute(
            OAuthCallbackRequest(provider="gitlab", code="c1", state="s1")
        )

        assert result.redirect == "http://x/done"
        assert result.provider == "gitlab"
        assert result.tokens == tokens
        mock_oauth_service.validate_and_exchange.assert_awaited_once_with(
            provider="gitlab", code="c1", state="s1"
        )

    @pytest.mark.asyncio
    async def test_provider_error_short_circuits(
        self,
        interactor: OAuthCallbackInteractor,
        mock_oauth_service: MagicMock,
    ) -> None:
        """프로바이더 error는 state 조회 전에 400으로 끝남."""
        with pytest.raises(ProviderDeniedError) as exc_info:
            await interactor.execute(
                OAuthCallbackRequest(
                    provider="github", code="c1", state="s1", error="access_denied"
                )
            )

        assert "access_denied" in exc_info.value.message
        mock_oauth_service.validate_and_exchange.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("code", "state"),
        [(None, "s1"), ("c1", None), (None, None), ("", "s1")],
    )
    async def test_missing_code_or_state(
        self,
        interactor: OAuthCallbackInteractor,
        mock_oauth_service: MagicMock,
        code: str | None,
        state: str | None,
    ) -> None:
        with pytest.raises(InvalidRequestError, match="missing code or state"):
            await interactor.execute(OAuthCallbackRequest(provider="github", code=code, state=state))

        mock_oauth_service.validate_and_exchange.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_provider(
        self,
        interactor: OAuthCallbackInteractor,
        mock_oauth_service: MagicMock,
    ) -> None:
        with pytest.raises(ProviderNotFoundError):
            await interactor.execute(OAuthCallbackRequest(provider="acme", code="c", state="s"))

        mock_oauth_service.validate_and_exchange.assert_not_called()
