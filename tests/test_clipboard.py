"""Tests for clipboard output."""

from unittest.mock import patch

import pyperclip
import pytest

from dir2clip.clipboard import copy_to_clipboard
from dir2clip.exceptions import ClipboardUnavailableError


def test_copy_to_clipboard():
    """Test that text is handed to pyperclip unchanged."""
    with patch("dir2clip.clipboard.pyperclip.copy") as mock_copy:
        copy_to_clipboard("snapshot text")
    mock_copy.assert_called_once_with("snapshot text")


def test_copy_to_clipboard_unavailable():
    """Test that a missing clipboard mechanism becomes ClipboardUnavailableError."""
    with patch("dir2clip.clipboard.pyperclip.copy", side_effect=pyperclip.PyperclipException("no mechanism")):
        with pytest.raises(ClipboardUnavailableError, match="no mechanism"):
            copy_to_clipboard("text")
