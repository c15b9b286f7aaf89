"""Unit tests for shared utilities (sitegen.utils)."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from sitegen.models import Section
from sitegen.utils import (
    load_json,
    print_error,
    print_sections_table,
    print_success,
    print_summary_table,
    print_warning,
    save_json,
    slugify,
)


class TestSlugify:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Hero", "hero"),
            ("Our Team", "our-team"),
            ("  FAQ & Help!  ", "faq-help"),
            ("Pricing (2024)", "pricing-2024"),
            ("already-slugged", "already-slugged"),
        ],
    )
    def test_slugify(self, name, expected):
        assert slugify(name) == expected


class TestJsonIO:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_save_creates_parents(self, tmp_path: Path):
        target = tmp_path / "a" / "b" / "data.json"
        await save_json({"key": "välue"}, target)
        assert json.loads(target.read_text(encoding="utf-8")) == {"key": "välue"}

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_load_round_trip(self, tmp_path: Path):
        target = tmp_path / "data.json"
        await save_json({"websites": []}, target)
        assert load_json(target) == {"websites": []}

    @pytest.mark.unit
    def test_load_wraps_non_dict(self, tmp_path: Path):
        target = tmp_path / "list.json"
        target.write_text("[1, 2]", encoding="utf-8")
        assert load_json(target) == {"_root": [1, 2]}

    @pytest.mark.unit
    def test_load_missing_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_json(tmp_path / "missing.json")


class TestConsoleOutput:
    @pytest.mark.unit
    def test_messages(self, capsys):
        print_success("done")
        print_warning("careful")
        print_error("broken")
        out = capsys.readouterr().out
        assert "done" in out
        assert "careful" in out
        assert "broken" in out

    @pytest.mark.unit
    def test_sections_table(self, capsys):
        print_sections_table([Section(name="Hero", content="Hi")], title="Page")
        out = capsys.readouterr().out
        assert "Page" in out
        assert "Hero" in out

    @pytest.mark.unit
    def test_summary_table(self, capsys):
        print_summary_table({"Idea": "bakery"})
        out = capsys.readouterr().out
        assert "Idea" in out
        assert "bakery" in out
