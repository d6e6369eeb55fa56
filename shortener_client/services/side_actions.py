"""
Best-effort copy and open actions for a short URL.

Neither action reports failure to the user: a clipboard that cannot be
written or a browser that cannot be launched is logged and ignored.
"""

import asyncio
import logging
import shutil
import subprocess
import threading
import webbrowser
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Sequence, Tuple

from shortener_client.exceptions import ClipboardError


logger = logging.getLogger(__name__)

# Tried in order; the first one installed wins
CLIPBOARD_COMMANDS: Tuple[Tuple[str, ...], ...] = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip",),
)


class ClipboardStrategy(ABC):
    """Abstract clipboard backend"""
    
    @abstractmethod
    def write_text(self, text: str) -> None:
        """
        Put text on the clipboard.
        
        Raises:
            ClipboardError: If the text could not be written
        """
        pass


class SystemClipboard(ClipboardStrategy):
    """Pipes text into the platform's clipboard command"""
    
    def __init__(self, commands: Sequence[Sequence[str]] = CLIPBOARD_COMMANDS, timeout: float = 2.0):
        self.commands = commands
        self.timeout = timeout
    
    def _find_command(self) -> List[str]:
        for command in self.commands:
            if shutil.which(command[0]):
                return list(command)
        raise ClipboardError("No clipboard command available")
    
    def write_text(self, text: str) -> None:
        command = self._find_command()
        try:
            subprocess.run(command, input=text, text=True, check=True, timeout=self.timeout)
        except (OSError, subprocess.SubprocessError) as e:
            raise ClipboardError(f"{command[0]} failed: {e}") from e


class InMemoryClipboard(ClipboardStrategy):
    """Keeps the last copied text; for headless runs and tests"""
    
    def __init__(self):
        self.text: Optional[str] = None
    
    def write_text(self, text: str) -> None:
        self.text = text


async def copy_to_clipboard(text: str, clipboard: ClipboardStrategy) -> bool:
    """
    Copy text without blocking the event loop.
    
    Returns:
        True if the text was copied. Failures return False and are
        never raised.
    """
    try:
        await asyncio.to_thread(clipboard.write_text, text)
    except ClipboardError as e:
        logger.debug("Clipboard write ignored: %s", e)
        return False
    return True


def open_in_new_tab(url: str, opener: Callable[[str], bool] = webbrowser.open_new_tab) -> threading.Thread:
    """
    Open url in a new browser tab from a daemon thread.
    
    Returns immediately; the returned thread is only useful to tests that
    want to join it.
    """
    def _open():
        try:
            opened = opener(url)
        except (webbrowser.Error, OSError) as e:
            logger.debug("Opening %s ignored: %s", url, e)
            return
        if not opened:
            logger.debug("No browser available to open %s", url)
    
    thread = threading.Thread(target=_open, name="open-in-new-tab", daemon=True)
    thread.start()
    return thread
