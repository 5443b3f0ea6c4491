from enum import StrEnum


class Category(StrEnum):
    """Fixed set of listing categories offered by the marketplace."""

    TOOLBOXES_KITS = "toolboxes_kits"
    POWER_TOOLS = "power_tools"
    BENCHES_TABLES = "benches_tables"
    CONCRETE_MASONRY = "concrete_masonry"
    DRYWALL_PLASTER = "drywall_plaster"
    CARPENTRY_FRAMING = "carpentry_framing"
    PLUMBING = "plumbing"
    ELECTRICAL = "electrical"
    LANDSCAPING = "landscaping"
    LADDERS_SCAFFOLDING = "ladders_scaffolding"
    MATERIAL_HANDLING = "material_handling"
    OTHER = "other"

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]

    @classmethod
    def parse(cls, value: object) -> "Category":
        """Return the matching category, falling back to OTHER for anything unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


CATEGORY_LABELS: dict[Category, str] = {
    Category.TOOLBOXES_KITS: "Toolboxes & Kits",
    Category.POWER_TOOLS: "Power Tools",
    Category.BENCHES_TABLES: "Benches & Tables",
    Category.CONCRETE_MASONRY: "Concrete & Masonry",
    Category.DRYWALL_PLASTER: "Drywall & Plaster",
    Category.CARPENTRY_FRAMING: "Carpentry & Framing",
    Category.PLUMBING: "Plumbing",
    Category.ELECTRICAL: "Electrical",
    Category.LANDSCAPING: "Landscaping",
    Category.LADDERS_SCAFFOLDING: "Ladders & Scaffolding",
    Category.MATERIAL_HANDLING: "Material Handling",
    Category.OTHER: "Other",
}


def category_label(value: str) -> str:
    return Category.parse(value).label
