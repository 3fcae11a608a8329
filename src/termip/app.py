#!/usr/bin/env python3
"""
termip - IP Geolocation Dashboard

Looks up where an IP address or hostname lives and shows it on a world map.

FLOW:
- The lookup runs on a textual thread worker as soon as the app starts
- The screen first shows "Fetching details"
- Once the lookup resolves, the map gets a crosshair and the details panel
  lists the location fields (or an error notice)
- Any key quits
"""

import logging
from typing import Optional, Tuple

from textual import events, work
from textual.app import App, ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static
from rich.text import Text

from termip.channel import Receiver, oneshot
from termip.exceptions import ChannelClosed, LookupFailed
from termip.fetcher import Fetch, fetch_details, fetch_worker
from termip.models import Failure, Pending, SessionState, Success
from termip.render import DETAILS_TITLE, MAP_TITLE, Frame, Layer, rasterize, render

log = logging.getLogger("termip.app")


# =============================================================================
# OUTCOME HANDLING
# =============================================================================

def await_outcome(receiver: Receiver) -> SessionState:
    """Block until the fetch worker reports, and resolve the session state."""
    try:
        outcome = receiver.recv()
    except ChannelClosed:
        return Failure("fetch worker exited without reporting")

    if isinstance(outcome, LookupFailed):
        return Failure(outcome.reason)
    return Success(outcome)


# =============================================================================
# UI COMPONENTS
# =============================================================================

class MapCanvas(Static):
    """World map drawn in braille, sized to the widget."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.border_title = MAP_TITLE
        self.shapes: Tuple[Layer, ...] = ()

    def show(self, shapes: Tuple[Layer, ...]) -> None:
        self.shapes = shapes
        self.refresh()

    def render(self) -> Text:
        width, height = self.content_size
        return rasterize(self.shapes, width, height).to_text()


class DetailsPanel(Static):
    """Lookup details, one field per line."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.border_title = DETAILS_TITLE
        self.detail_lines: Tuple[str, ...] = ()

    def show(self, lines: Tuple[str, ...]) -> None:
        self.detail_lines = lines
        self.refresh()

    def render(self) -> Text:
        return Text("\n".join(self.detail_lines))


# =============================================================================
# MAIN APPLICATION
# =============================================================================

class TermIpApp(App):
    """
    Session controller.

    State goes Pending -> Success or Pending -> Failure exactly once, and the
    screen is painted once per state.
    """

    TITLE = "termip"
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    Screen {
        background: #000000;
    }

    #dashboard {
        margin: 1;
        height: 1fr;
    }

    #map {
        width: 70%;
        height: 100%;
        border: solid white;
    }

    #details {
        width: 30%;
        height: 100%;
        border: solid white;
    }
    """

    def __init__(self, target: str, fetch: Fetch = fetch_details):
        super().__init__()
        self.target = target
        self.state: SessionState = Pending()
        self.frame: Optional[Frame] = None
        self._fetch = fetch
        self._dismissed = False

    def compose(self) -> ComposeResult:
        with Horizontal(id="dashboard"):
            yield MapCanvas(id="map")
            yield DetailsPanel(id="details")

    def on_mount(self) -> None:
        """Show the pending frame and start the lookup."""
        log.debug("Looking up '%s'", self.target)
        self._paint()
        self._lookup()

    @work(thread=True, name="lookup")
    def _lookup(self) -> None:
        """Fetch on this worker thread, then hand the outcome to the event loop."""
        sender, receiver = oneshot()
        try:
            fetch_worker(self.target, sender, self._fetch)
        except Exception:
            # The channel is closed by now, so this resolves to Failure
            log.exception("Lookup for '%s' crashed", self.target)
        self.call_from_thread(self._resolve, await_outcome(receiver))

    def _resolve(self, state: SessionState) -> None:
        log.info("Lookup for '%s' finished: %s", self.target, state.status.value)
        self.state = state
        self._paint()
        if self._dismissed:
            self.exit(return_code=0)

    def _paint(self) -> None:
        self.frame = render(self.state)
        self.query_one(MapCanvas).show(self.frame.map_layers)
        self.query_one(DetailsPanel).show(self.frame.details)

    # === INPUT HANDLING ===

    def on_key(self, event: events.Key) -> None:
        """Any key quits once the result is on screen."""
        event.stop()
        if isinstance(self.state, Pending):
            # Held until the final frame has been shown
            self._dismissed = True
            return
        self.exit(return_code=0)


# =============================================================================
# ENTRY POINT
# =============================================================================

def run(target: str) -> int:
    """Run the dashboard for *target* and return the process exit code."""
    app = TermIpApp(target)
    app.run()
    return app.return_code or 0
