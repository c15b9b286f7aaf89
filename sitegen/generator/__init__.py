"""sitegen section generation.

Maps a free-text business idea to an ordered list of website sections, either
from the deterministic rule table or from a language model with the rule
table as fallback.

Usage::

    from sitegen.generator import create_generator, generate_sections

    sections = generate_sections("a cozy bakery for my town")
    generator = create_generator(Config.from_env())
    sections = await generator.generate("portfolio for a designer")
"""

from sitegen.generator.rules import (
    SECTION_TEMPLATES,
    extract_business_name,
    find_template,
    generate_sections,
)
from sitegen.generator.section_generator import SectionGenerator, create_generator
from sitegen.generator.strategies import (
    GenerationStrategy,
    RemoteModelStrategy,
    RuleBasedStrategy,
    build_prompt,
    parse_sections,
)

__all__ = [
    "SECTION_TEMPLATES",
    "GenerationStrategy",
    "RemoteModelStrategy",
    "RuleBasedStrategy",
    "SectionGenerator",
    "build_prompt",
    "create_generator",
    "extract_business_name",
    "find_template",
    "generate_sections",
    "parse_sections",
]
