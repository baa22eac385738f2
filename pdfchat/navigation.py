"""Page state machine driven by session presence."""

import logging
from collections.abc import Callable

from pdfchat.models.schemas import Page, Session
from pdfchat.observers import ObserverList
from pdfchat.session.manager import AuthSessionManager

logger = logging.getLogger(__name__)

PageObserver = Callable[[Page], None]


class NavigationController:
    """Decides which page is shown.

    Transitions to the public pages are always honored. The dashboard is
    reachable only with a session; a session appearing forces the dashboard
    and a session disappearing forces the dashboard back to the landing page.
    """

    def __init__(self, auth: AuthSessionManager) -> None:
        self._auth = auth
        self._page = Page.LANDING
        self._observers = ObserverList()
        if auth.is_authenticated:
            self._page = Page.DASHBOARD
        auth.subscribe(self._on_session_change)

    @property
    def page(self) -> Page:
        return self._page

    def subscribe(self, observer: PageObserver) -> Callable[[], None]:
        return self._observers.add(observer)

    def navigate(self, target: Page | str) -> Page:
        """Move to ``target``, redirecting a dashboard request to login when signed out.

        Returns:
            The page actually shown.
        """
        target = Page(target)
        if target is Page.DASHBOARD and not self._auth.is_authenticated:
            logger.debug("Dashboard requested without a session; redirecting to login")
            target = Page.LOGIN
        self._set_page(target)
        return self._page

    def _on_session_change(self, session: Session | None) -> None:
        # Every non-empty notification is a newly created session
        if session is not None:
            self._set_page(Page.DASHBOARD)
        elif self._page is Page.DASHBOARD:
            self._set_page(Page.LANDING)

    def _set_page(self, page: Page) -> None:
        if page is self._page:
            return
        self._page = page
        self._observers.notify(page)
