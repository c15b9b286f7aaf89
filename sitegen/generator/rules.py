"""Deterministic rule table and the rule-based section generator.

Every lookup is a case-insensitive substring test against the idea, checked
in a fixed order where the first match wins. No AI calls and no I/O.
"""

from __future__ import annotations

from ..exceptions import InvalidInputError
from ..models import Section, SectionTemplate

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

DEFAULT_BUSINESS_NAME = "Your Business"
GENERATED_SECTION_COUNT = 3
MIDDLE_SECTION_INDEX = 2

_HERO_TAGLINES: list[tuple[tuple[str, ...], str]] = [
    (("bakery",), "Freshly baked goods made with love and traditional recipes."),
    (("restaurant",), "Experience culinary excellence with our chef-crafted dishes."),
    (("portfolio",), "Showcasing creativity and professional expertise."),
    (("agency",), "Professional services that drive results for your business."),
    (("shop", "store"), "Quality products curated just for you."),
]
_DEFAULT_HERO_TAGLINE = "Your trusted partner for exceptional quality and service."

_ABOUT_PARAGRAPHS: list[tuple[tuple[str, ...], str]] = [
    (
        ("bakery",),
        "Our family-owned bakery has been serving the community for years with "
        "authentic recipes passed down through generations.",
    ),
    (
        ("restaurant",),
        "We are passionate about creating memorable dining experiences with fresh, "
        "locally-sourced ingredients.",
    ),
    (
        ("portfolio",),
        "With years of experience and a passion for innovation, we bring creative "
        "visions to life.",
    ),
    (
        ("agency",),
        "Our team of experts combines strategy, creativity, and technology to "
        "deliver outstanding results.",
    ),
]
_DEFAULT_ABOUT_PARAGRAPH = (
    "We are dedicated to providing exceptional value and building lasting "
    "relationships with our customers."
)

CONTACT_CONTENT = (
    "Get in touch with us today! We'd love to hear from you and discuss how we "
    "can help with your needs."
)

_MIDDLE_SECTIONS: list[tuple[tuple[str, ...], Section]] = [
    (
        ("restaurant", "bakery", "cafe"),
        Section(
            name="Menu",
            content="Discover our delicious offerings, crafted with the finest "
            "ingredients and served with passion.",
        ),
    ),
    (
        ("portfolio", "designer", "artist"),
        Section(
            name="Portfolio",
            content="Explore our latest work and creative projects that showcase "
            "our skills and artistic vision.",
        ),
    ),
    (
        ("shop", "store", "ecommerce"),
        Section(
            name="Products",
            content="Browse our carefully curated selection of products designed "
            "to meet your needs and exceed your expectations.",
        ),
    ),
]
_DEFAULT_MIDDLE_SECTION = Section(
    name="Services",
    content="We provide exceptional services tailored to your specific needs with "
    "professional expertise and dedication.",
)

SECTION_TEMPLATES: list[SectionTemplate] = [
    SectionTemplate(
        name="Hero",
        placeholder="Welcome to our amazing service! We provide exceptional quality "
        "and outstanding customer experience.",
    ),
    SectionTemplate(
        name="About",
        placeholder="Learn more about our company, our mission, and what makes us "
        "unique in the industry.",
    ),
    SectionTemplate(
        name="Services",
        placeholder="Discover our comprehensive range of services designed to meet "
        "all your needs.",
    ),
    SectionTemplate(
        name="Portfolio",
        placeholder="Explore our latest work and see examples of our expertise and "
        "creativity.",
    ),
    SectionTemplate(
        name="Testimonials",
        placeholder="Read what our satisfied customers have to say about their "
        "experience with us.",
    ),
    SectionTemplate(
        name="Contact",
        placeholder="Get in touch with us today. We'd love to hear from you and "
        "discuss your needs.",
    ),
    SectionTemplate(
        name="FAQ",
        placeholder="Find answers to commonly asked questions about our services "
        "and processes.",
    ),
    SectionTemplate(
        name="Team",
        placeholder="Meet our talented team of professionals who are dedicated to "
        "your success.",
    ),
    SectionTemplate(
        name="Pricing",
        placeholder="Choose from our flexible pricing plans designed to fit your "
        "budget and requirements.",
    ),
    SectionTemplate(
        name="Blog",
        placeholder="Stay updated with our latest insights, tips, and industry news.",
    ),
    SectionTemplate(
        name="Custom",
        placeholder="Create your own custom section with personalized content.",
    ),
]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _first_match(
    idea_lower: str,
    table: list[tuple[tuple[str, ...], str]],
    default: str,
) -> str:
    for keywords, value in table:
        if any(keyword in idea_lower for keyword in keywords):
            return value
    return default


def extract_business_name(idea: str) -> str:
    """Pull a business name out of the idea with the index heuristic.

    Splits on single spaces and, when the first ``"for"`` comes after the last
    ``"a"``, returns the words strictly between them, which may be empty when
    the two tokens are adjacent. Tokens are matched exactly (case-sensitive),
    so ``"A"`` and ``"For"`` do not count.
    """
    words = idea.split(" ")
    if "for" in words and "a" in words:
        for_index = words.index("for")
        a_index = len(words) - 1 - words[::-1].index("a")
        if for_index > a_index:
            return " ".join(words[a_index + 1:for_index])
    return DEFAULT_BUSINESS_NAME


def hero_tagline(idea_lower: str) -> str:
    return _first_match(idea_lower, _HERO_TAGLINES, _DEFAULT_HERO_TAGLINE)


def about_paragraph(idea_lower: str) -> str:
    return _first_match(idea_lower, _ABOUT_PARAGRAPHS, _DEFAULT_ABOUT_PARAGRAPH)


def middle_section(idea_lower: str) -> Section:
    """Pick the business-specific section inserted after About."""
    for keywords, section in _MIDDLE_SECTIONS:
        if any(keyword in idea_lower for keyword in keywords):
            return section
    return _DEFAULT_MIDDLE_SECTION


def find_template(name: str) -> SectionTemplate | None:
    """Look up a catalog template by name, ignoring case."""
    wanted = name.strip().lower()
    for template in SECTION_TEMPLATES:
        if template.name.lower() == wanted:
            return template
    return None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def generate_sections(idea: str) -> list[Section]:
    """Generate the website sections for an idea from the rule table.

    Builds Hero, About, and Contact, inserts the business-specific section at
    index 2, then keeps only the first three. Contact is therefore never part
    of the result.

    Args:
        idea: The business idea. Callers are expected to strip it.

    Returns:
        Exactly three sections: Hero, About, and Menu/Portfolio/Products/Services.

    Raises:
        InvalidInputError: If ``idea`` is empty or whitespace only.
    """
    if not idea or not idea.strip():
        raise InvalidInputError("Website idea is required")

    idea_lower = idea.lower()
    sections = [
        Section(
            name="Hero",
            content=f"Welcome to {extract_business_name(idea)}! {hero_tagline(idea_lower)}",
        ),
        Section(name="About", content=about_paragraph(idea_lower)),
        Section(name="Contact", content=CONTACT_CONTENT),
    ]
    sections.insert(MIDDLE_SECTION_INDEX, middle_section(idea_lower))
    return sections[:GENERATED_SECTION_COUNT]
