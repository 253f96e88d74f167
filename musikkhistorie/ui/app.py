"""Main Flet application: the window the session plays behind."""

import logging

import flet as ft

from musikkhistorie.config import WINDOW_TITLE
from musikkhistorie.services.playback_session import PlaybackSession
from musikkhistorie.ui.theme import BG
from musikkhistorie.version import __version__

logger = logging.getLogger("musikkhistorie.ui")


def build_page(page: ft.Page, cfg: dict) -> None:
    """Apply title, size and background from config to ``page``."""
    page.title = WINDOW_TITLE
    page.bgcolor = BG
    page.window.width = cfg["window_width"]
    page.window.height = cfg["window_height"]
    page.window.resizable = bool(cfg["window_resizable"])
    page.window.full_screen = bool(cfg["fullscreen"])
    page.update()


def run_app(session: PlaybackSession, cfg: dict) -> None:
    """Open the window and block until it is closed, then stop playback."""
    logger.info("Opening window (v%s)", __version__)

    def main(page: ft.Page):
        build_page(page, cfg)

    try:
        ft.app(target=main)
    finally:
        session.stop()
        logger.info("Window closed")
