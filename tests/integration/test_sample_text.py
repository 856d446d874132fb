"""Integration tests running the full add -> share -> render -> query flow."""

import logging

import pytest

from glyphweight import CharacterFlyweightFactory, create_sample_text


@pytest.mark.integration
def test_sample_text_shares_flyweights(recording_sink):
    """'Hello' plain plus 'World' bold: ten characters on nine flyweights"""
    editor = create_sample_text(sink=recording_sink)

    stats = editor.get_stats()
    assert editor.count() == 10
    assert stats.unique_count == 9
    assert stats.created_count == 9
    assert stats.reuse_count == 1
    assert stats.total_memory == 9 * 74


@pytest.mark.integration
def test_sample_text_renders_both_lines_in_order(recording_sink):
    editor = create_sample_text(sink=recording_sink)

    editor.render_text()

    chars = [line.split("'")[1] for line in recording_sink.lines]
    assert "".join(chars) == "HelloWorld"
    assert all(" bold" in line for line in recording_sink.lines[5:])
    assert not any(" bold" in line for line in recording_sink.lines[:5])


@pytest.mark.integration
def test_sample_text_lookup_at_thirty_zero(recording_sink):
    editor = create_sample_text(sink=recording_sink)

    found = editor.find_characters_at(30, 0)

    assert [context.flyweight.char for context in found] == ["l"]
    assert not found[0].flyweight.formatting.is_bold


@pytest.mark.integration
def test_sample_text_reuses_injected_factory():
    factory = CharacterFlyweightFactory()

    create_sample_text(factory)
    create_sample_text(factory)

    stats = factory.get_stats()
    assert stats.created_count == 9
    assert stats.reuse_count == 1 + 10


@pytest.mark.integration
def test_sample_text_logs_summary(caplog):
    with caplog.at_level(logging.INFO, logger="glyphweight.editor"):
        create_sample_text()

    assert (
        "Created 10 characters using 9 flyweights (created 9, reused 1) using 666 bytes"
        in caplog.messages
    )


@pytest.mark.integration
def test_moving_shared_characters_keeps_pool_intact(recording_sink):
    editor = create_sample_text(sink=recording_sink)
    first_l, second_l = editor.find_at(lambda p: p.y == 0)[2:4]

    second_l.move_to(200, 200)
    editor.render_text()

    assert first_l.flyweight is second_l.flyweight
    assert first_l.position.x == 20
    assert "Character 'l' at position (200,200)" in recording_sink.lines[3]
    assert editor.get_stats().unique_count == 9
