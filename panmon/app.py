"""Main application class for the dashboard TUI."""

from __future__ import annotations

from textual.app import App
from textual.binding import Binding

from panmon.constants import APP_TITLE
from panmon.controllers.status import StatusFetcher, StatusPoller
from panmon.keyboard.app import APP_BINDINGS
from panmon.models.state.app_settings import AppSettings


class PanmonApp(App[None]):
    """Terminal dashboard for a Panchaea server."""

    TITLE = APP_TITLE
    CSS_PATH = "css/app.tcss"
    BINDINGS: list[Binding] = APP_BINDINGS

    settings: AppSettings

    def __init__(
        self,
        settings: AppSettings | None = None,
        fetcher: StatusFetcher | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.settings = settings or AppSettings()
        self.sub_title = self.settings.endpoint
        self.fetcher = fetcher or StatusFetcher(
            self.settings.endpoint,
            timeout=self.settings.request_timeout,
        )
        self.poller = StatusPoller(
            self.fetcher,
            interval=self.settings.poll_interval,
            notification_timeout=self.settings.notification_timeout,
        )

    def on_mount(self) -> None:
        """Called when app is mounted."""
        from panmon.screens import DashboardScreen

        self.push_screen(DashboardScreen(self.poller))

    def action_show_help(self) -> None:
        """Show help dialog."""
        self.notify(
            "Keybindings:\n"
            "  r: Refresh now\n"
            "  w: Toggle warnings\n"
            "  e: Toggle errors\n"
            "  ?: Help\n"
            "  q: Quit",
            severity="information",
            title="Help",
        )

    async def on_unmount(self) -> None:
        """Release the HTTP client when the app exits."""
        await self.fetcher.aclose()


__all__ = [
    "PanmonApp",
]
