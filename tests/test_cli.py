"""Tests for the python -m glyphweight demonstration runner."""

import pytest
from rich.console import Console

from glyphweight import TextEditor
from glyphweight.__main__ import (
    PARAGRAPH_FORMATTINGS,
    SAMPLE_PARAGRAPH,
    main,
    run_efficiency,
    stats_table,
)


@pytest.mark.unit
@pytest.mark.cli
def test_sample_demo_prints_render_lookup_and_stats(capsys):
    assert main(["sample"]) == 0

    out = capsys.readouterr().out
    assert "Character 'H' at position (0,0)" in out
    assert "Found character: 'l'" in out
    assert "Unique flyweights" in out


@pytest.mark.unit
@pytest.mark.cli
def test_sample_is_the_default_demo(capsys):
    assert main([]) == 0

    assert "Flyweight Pattern Example" in capsys.readouterr().out


@pytest.mark.unit
@pytest.mark.cli
def test_efficiency_demo_reports_savings(capsys):
    assert main(["efficiency", "--log-level", "DEBUG"]) == 0

    out = capsys.readouterr().out
    assert "Memory efficiency" in out
    assert "Saving" in out


@pytest.mark.unit
@pytest.mark.cli
def test_efficiency_editor_pools_paragraph():
    editor = run_efficiency(Console(file=None, quiet=True))

    stats = editor.get_stats()
    assert editor.count() == len(SAMPLE_PARAGRAPH)
    assert stats.unique_count < editor.count()
    assert stats.created_count + stats.reuse_count == len(SAMPLE_PARAGRAPH)
    assert stats.unique_count <= len(set(SAMPLE_PARAGRAPH)) * len(PARAGRAPH_FORMATTINGS)
    assert stats.total_memory < editor.unshared_memory()


@pytest.mark.unit
@pytest.mark.cli
def test_stats_table_handles_empty_editor():
    table = stats_table(TextEditor(), "Empty")

    assert table.row_count == 7


@pytest.mark.unit
@pytest.mark.cli
def test_unknown_demo_is_rejected():
    with pytest.raises(SystemExit):
        main(["nope"])
