"""NiceGUI implementations of the clipboard, save and link ports.

All calls act on the client of the current UI context, so they must run
inside a page handler.
"""

from __future__ import annotations

import io
import json
import logging
from contextlib import contextmanager
from typing import BinaryIO, Iterator

from nicegui import ui

from infralib.domain.ports import ClipboardPort, LinkPort, SavePort

LOGGER = logging.getLogger(__name__)

CLIPBOARD_TIMEOUT_S = 5.0


class BrowserClipboard(ClipboardPort):
    """Write through ``navigator.clipboard`` and wait for the browser to confirm.

    The Clipboard API rejects writes outside secure contexts or without a user
    gesture; such rejections surface as ``RuntimeError``.
    """

    async def write_text(self, text: str) -> None:
        script = (
            "navigator.clipboard"
            f" ? navigator.clipboard.writeText({json.dumps(text)}).then(() => true, () => false)"
            " : false"
        )
        written = await ui.run_javascript(script, timeout=CLIPBOARD_TIMEOUT_S)
        if written is not True:
            raise RuntimeError("Browser rejected the clipboard write")


class BrowserSave(SavePort):
    """Buffer the content in memory and hand it to the browser as a download."""

    @contextmanager
    def open_blob(self, filename: str, media_type: str = "application/octet-stream") -> Iterator[BinaryIO]:
        buffer = io.BytesIO()
        try:
            yield buffer
            ui.download(buffer.getvalue(), filename=filename, media_type=media_type)
            LOGGER.debug("Browser download started: %s (%d bytes)", filename, buffer.tell())
        finally:
            buffer.close()


class BrowserLink(LinkPort):
    def open_url(self, url: str, *, new_tab: bool = True) -> None:
        ui.navigate.to(url, new_tab=new_tab)


__all__ = ["BrowserClipboard", "BrowserLink", "BrowserSave"]
