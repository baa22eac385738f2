"""Unit tests for NavigationController."""

import itertools

import httpx
import pytest

from pdfchat.api.client import BackendClient
from pdfchat.config import ClientConfig
from pdfchat.models.schemas import Page, Session
from pdfchat.navigation import NavigationController
from pdfchat.session.manager import AuthSessionManager
from pdfchat.session.store import SessionStore


def issue_token(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json={"access_token": "T1", "token_type": "bearer"})


@pytest.fixture
def auth() -> AuthSessionManager:
    config = ClientConfig(api_base_url="http://test")
    client = BackendClient(config, transport=httpx.MockTransport(issue_token))
    manager = AuthSessionManager(SessionStore({}), client)
    manager.restore()
    return manager


class TestNavigate:
    """Tests for user-requested transitions."""

    def test_starts_on_landing(self, auth: AuthSessionManager) -> None:
        assert NavigationController(auth).page is Page.LANDING

    @pytest.mark.parametrize("target", [Page.LANDING, Page.LOGIN, Page.SIGNUP])
    def test_public_pages_always_reachable(self, auth: AuthSessionManager, target: Page) -> None:
        nav = NavigationController(auth)
        for start in (Page.LANDING, Page.LOGIN, Page.SIGNUP):
            nav.navigate(start)
            assert nav.navigate(target) is target

    def test_dashboard_without_session_redirects_to_login(self, auth: AuthSessionManager) -> None:
        nav = NavigationController(auth)

        assert nav.navigate(Page.DASHBOARD) is Page.LOGIN
        assert nav.page is Page.LOGIN

    async def test_dashboard_with_session_is_honored(self, auth: AuthSessionManager) -> None:
        nav = NavigationController(auth)
        await auth.login("alice", "secret")
        nav.navigate(Page.LANDING)

        assert nav.navigate(Page.DASHBOARD) is Page.DASHBOARD

    def test_accepts_page_names(self, auth: AuthSessionManager) -> None:
        nav = NavigationController(auth)

        assert nav.navigate("signup") is Page.SIGNUP

    def test_rejects_unknown_page(self, auth: AuthSessionManager) -> None:
        with pytest.raises(ValueError):
            NavigationController(auth).navigate("settings")

    def test_signed_out_sequences_never_reach_dashboard(self, auth: AuthSessionManager) -> None:
        nav = NavigationController(auth)
        for sequence in itertools.product(list(Page), repeat=3):
            for target in sequence:
                nav.navigate(target)
                assert nav.page is not Page.DASHBOARD


class TestSessionRules:
    """Tests for transitions forced by session changes."""

    async def test_login_forces_dashboard(self, auth: AuthSessionManager) -> None:
        nav = NavigationController(auth)
        nav.navigate(Page.LOGIN)
        await auth.login("alice", "secret")

        assert nav.page is Page.DASHBOARD

    async def test_logout_from_dashboard_forces_landing(self, auth: AuthSessionManager) -> None:
        nav = NavigationController(auth)
        await auth.login("alice", "secret")
        auth.logout()

        assert nav.page is Page.LANDING

    async def test_logout_elsewhere_keeps_page(self, auth: AuthSessionManager) -> None:
        nav = NavigationController(auth)
        await auth.login("alice", "secret")
        nav.navigate(Page.SIGNUP)
        auth.logout()

        assert nav.page is Page.SIGNUP

    async def test_restored_session_starts_on_dashboard(self) -> None:
        storage: dict[str, str] = {}
        SessionStore(storage).save(Session(token="T1", username="alice"))
        config = ClientConfig(api_base_url="http://test")
        async with BackendClient(config, transport=httpx.MockTransport(issue_token)) as client:
            auth = AuthSessionManager(SessionStore(storage), client)
            nav = NavigationController(auth)
            assert nav.page is Page.LANDING

            auth.restore()

            assert nav.page is Page.DASHBOARD

    async def test_observers_see_each_change_once(self, auth: AuthSessionManager) -> None:
        nav = NavigationController(auth)
        seen: list[Page] = []
        unsubscribe = nav.subscribe(seen.append)

        nav.navigate(Page.LOGIN)
        nav.navigate(Page.LOGIN)
        await auth.login("alice", "secret")
        auth.logout()
        unsubscribe()
        nav.navigate(Page.SIGNUP)

        assert seen == [Page.LOGIN, Page.DASHBOARD, Page.LANDING]
