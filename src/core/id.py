"""ID Generation System.

ULID-based identifiers for builder entities.

- Node ids are generated at insertion time and never reused or derived
  from content.
- Prefixes make ids readable in logs and generated style identifiers
  (``button_el_01J...``).
- ULID characters are alphanumeric, so prefixed ids are valid JS identifiers.
"""

from typing import NewType
from ulid import ULID

NodeID = NewType("NodeID", str)
"""Canvas node identifier"""

TemplateID = NewType("TemplateID", str)
"""Stored template identifier"""

GenerationID = NewType("GenerationID", str)
"""Export run identifier"""


class Prefix:
    """ID prefix constants."""

    NODE = "el"
    TEMPLATE = "tpl"
    GENERATION = "gen"


class Generator:
    """ULID generator."""

    def generate(self) -> str:
        """Generate a new ULID."""
        return str(ULID())

    def generate_with_prefix(self, prefix: str) -> str:
        """Generate ULID with type prefix."""
        return f"{prefix}_{self.generate()}"


_generator = Generator()


def new_node_id() -> NodeID:
    """Generate new node ID."""
    return NodeID(_generator.generate_with_prefix(Prefix.NODE))


def new_template_id() -> TemplateID:
    """Generate new template ID."""
    return TemplateID(_generator.generate_with_prefix(Prefix.TEMPLATE))


def new_generation_id() -> GenerationID:
    """Generate new generation ID."""
    return GenerationID(_generator.generate_with_prefix(Prefix.GENERATION))
