"""System clipboard output."""

import pyperclip

from dir2clip.exceptions import ClipboardUnavailableError


def copy_to_clipboard(text: str) -> None:
    """Replace the clipboard contents with text.

    Raises:
        ClipboardUnavailableError: If pyperclip finds no clipboard mechanism.
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardUnavailableError(str(e)) from e
