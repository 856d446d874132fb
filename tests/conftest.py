"""
Shared pytest fixtures and configuration for glyphweight tests.
"""

import pytest

from glyphweight import CharacterFlyweightFactory, CharacterFormatting, TextEditor


class RecordingSink:
    """Collects rendered descriptions instead of logging them."""

    def __init__(self):
        self.lines = []

    def __call__(self, line):
        self.lines.append(line)


@pytest.fixture
def basic_formatting():
    return CharacterFormatting(
        font_family="Arial",
        font_size=12,
        is_bold=False,
        is_italic=False,
        is_underline=False,
        color="black",
    )


@pytest.fixture
def bold_formatting(basic_formatting):
    return CharacterFormatting(
        font_family=basic_formatting.font_family,
        font_size=basic_formatting.font_size,
        is_bold=True,
        is_italic=False,
        is_underline=False,
        color=basic_formatting.color,
    )


@pytest.fixture
def factory():
    """Provide a fresh factory so pools never leak between tests."""
    return CharacterFlyweightFactory()


@pytest.fixture
def recording_sink():
    return RecordingSink()


@pytest.fixture
def editor(factory, recording_sink):
    return TextEditor(factory, sink=recording_sink)


@pytest.fixture
def hello_editor(editor, basic_formatting):
    """Editor holding "Hello" at (0,0) .. (40,0) in plain Arial."""
    for index, char in enumerate("Hello"):
        editor.add_character(char, basic_formatting, index * 10, 0)
    return editor
