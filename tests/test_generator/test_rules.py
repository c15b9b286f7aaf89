"""Tests for the rule table and generate_sections (sitegen.generator.rules)."""

from __future__ import annotations

import pytest

from sitegen.exceptions import InvalidInputError
from sitegen.generator.rules import (
    CONTACT_CONTENT,
    DEFAULT_BUSINESS_NAME,
    SECTION_TEMPLATES,
    about_paragraph,
    extract_business_name,
    find_template,
    generate_sections,
    hero_tagline,
    middle_section,
)


# ---------------------------------------------------------------------------
# Business name extraction
# ---------------------------------------------------------------------------


class TestExtractBusinessName:
    @pytest.mark.unit
    def test_words_between_last_a_and_following_for(self):
        assert extract_business_name("a cozy bakery for my town") == "cozy bakery"

    @pytest.mark.unit
    def test_for_before_last_a_falls_back(self):
        # First "for" (index 2) precedes the last "a" (index 3).
        assert extract_business_name("a website for a cozy bakery") == DEFAULT_BUSINESS_NAME

    @pytest.mark.unit
    def test_no_pattern_falls_back(self):
        assert extract_business_name("random idea") == DEFAULT_BUSINESS_NAME

    @pytest.mark.unit
    def test_only_for_present(self):
        assert extract_business_name("website for bakers") == DEFAULT_BUSINESS_NAME

    @pytest.mark.unit
    def test_tokens_are_case_sensitive(self):
        assert extract_business_name("A Cozy Bakery For Town") == DEFAULT_BUSINESS_NAME

    @pytest.mark.unit
    def test_input_case_preserved(self):
        assert extract_business_name("build a Sunny Side Cafe for locals") == "Sunny Side Cafe"

    @pytest.mark.unit
    def test_adjacent_a_for_gives_empty_name(self):
        assert extract_business_name("just a for now") == ""
        assert extract_business_name("a for me") == ""

    @pytest.mark.unit
    def test_adjacent_a_for_hero_has_empty_name(self):
        hero = generate_sections("a for me")[0]
        assert hero.content.startswith("Welcome to ! ")

    @pytest.mark.unit
    def test_multiple_tokens_use_first_for_and_last_a(self):
        # Last "a" is at index 6, first "for" at index 2: no name.
        assert extract_business_name("a bakery for a cafe for a friend") == DEFAULT_BUSINESS_NAME
        # Last "a" at index 3, first "for" at index 6.
        assert extract_business_name("make a site a fun shop for kids for real") == "fun shop"


# ---------------------------------------------------------------------------
# Keyword tables
# ---------------------------------------------------------------------------


class TestKeywordTables:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "idea,expected",
        [
            ("bakery", "Freshly baked goods"),
            ("restaurant", "culinary excellence"),
            ("portfolio", "Showcasing creativity"),
            ("agency", "drive results"),
            ("shop", "Quality products"),
            ("store", "Quality products"),
            ("plumbing", "trusted partner"),
        ],
    )
    def test_hero_tagline(self, idea, expected):
        assert expected in hero_tagline(idea)

    @pytest.mark.unit
    def test_hero_tagline_first_match_wins(self):
        assert "Freshly baked" in hero_tagline("restaurant and bakery")

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "idea,expected",
        [
            ("bakery", "family-owned bakery"),
            ("restaurant", "memorable dining"),
            ("portfolio", "creative visions"),
            ("agency", "team of experts"),
            ("shop", "exceptional value"),
        ],
    )
    def test_about_paragraph(self, idea, expected):
        assert expected in about_paragraph(idea)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "idea,expected",
        [
            ("cafe", "Menu"),
            ("restaurant", "Menu"),
            ("designer", "Portfolio"),
            ("artist", "Portfolio"),
            ("ecommerce", "Products"),
            ("store", "Products"),
            ("consulting", "Services"),
        ],
    )
    def test_middle_section(self, idea, expected):
        assert middle_section(idea).name == expected


# ---------------------------------------------------------------------------
# generate_sections
# ---------------------------------------------------------------------------


class TestGenerateSections:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "idea",
        ["bakery", "x", "a cozy bakery for my town", "PORTFOLIO for an Artist", "  padded idea  "],
    )
    def test_always_three_non_empty_sections(self, idea):
        sections = generate_sections(idea)
        assert len(sections) == 3
        for section in sections:
            assert section.name.strip()
            assert section.content.strip()

    @pytest.mark.unit
    @pytest.mark.parametrize("idea", ["", "   ", "\t\n"])
    def test_blank_idea_rejected(self, idea):
        with pytest.raises(InvalidInputError):
            generate_sections(idea)

    @pytest.mark.unit
    def test_fixed_order(self):
        names = [s.name for s in generate_sections("consulting firm")]
        assert names == ["Hero", "About", "Services"]

    @pytest.mark.unit
    def test_contact_is_truncated_away(self):
        for idea in ["bakery", "portfolio", "shop", "anything else"]:
            sections = generate_sections(idea)
            assert all(s.name != "Contact" for s in sections)
            assert all(s.content != CONTACT_CONTENT for s in sections)

    @pytest.mark.unit
    def test_keyword_priority_first_match_wins(self):
        sections = generate_sections("bakery and portfolio shop")
        assert sections[2].name == "Menu"

    @pytest.mark.unit
    def test_portfolio_beats_shop(self):
        assert generate_sections("designer shop")[2].name == "Portfolio"

    @pytest.mark.unit
    def test_matching_is_case_insensitive(self):
        sections = generate_sections("My BAKERY")
        assert sections[2].name == "Menu"
        assert "Freshly baked" in sections[0].content

    @pytest.mark.unit
    def test_hero_embeds_business_name(self):
        hero = generate_sections("a cozy bakery for my town")[0]
        assert hero.content.startswith("Welcome to cozy bakery! ")

    @pytest.mark.unit
    def test_hero_default_name(self):
        hero = generate_sections("random idea")[0]
        assert hero.content == (
            "Welcome to Your Business! Your trusted partner for exceptional quality and service."
        )

    @pytest.mark.unit
    def test_deterministic(self):
        assert generate_sections("agency for a brand") == generate_sections("agency for a brand")


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------


class TestTemplates:
    @pytest.mark.unit
    def test_catalog_order(self):
        names = [t.name for t in SECTION_TEMPLATES]
        assert names[0] == "Hero"
        assert names[-1] == "Custom"
        assert len(names) == 11

    @pytest.mark.unit
    def test_find_template_ignores_case(self):
        assert find_template("faq").name == "FAQ"
        assert find_template(" pricing ").name == "Pricing"

    @pytest.mark.unit
    def test_find_template_unknown(self):
        assert find_template("Newsletter") is None
