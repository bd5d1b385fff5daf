"""Simple city entities: mall products and schools."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Product:
    """A product sold in a mall."""

    product_id: str = ""
    name: str = ""
    category: str = ""
    price: float = 0.0
    mall_id: str = ""

    def is_valid(self) -> bool:
        """A product needs an id, a name and a non-negative price."""
        return bool(self.product_id) and bool(self.name) and self.price >= 0.0

    def describe(self) -> str:
        """Return a multi-line description of the product."""
        return "\n".join(
            [
                f"Product ID: {self.product_id}",
                f"Name: {self.name}",
                f"Category: {self.category}",
                f"Price: {self.price:g}",
                f"Mall ID: {self.mall_id}",
            ]
        )


@dataclass
class School:
    """A school with the subjects it offers."""

    school_id: str = ""
    name: str = ""
    sector: str = ""
    rating: float = 0.0
    subjects: list[str] = field(default_factory=list)

    def add_subject(self, subject: str) -> None:
        """Append a subject to the list of offered subjects."""
        self.subjects.append(subject)

    def offers_subject(self, subject: str) -> bool:
        """Whether the subject is offered (exact, case-sensitive match)."""
        return subject in self.subjects

    def describe(self) -> str:
        """Return a multi-line description of the school."""
        subjects = ", ".join(self.subjects) if self.subjects else "None"
        return "\n".join(
            [
                f"School ID: {self.school_id}",
                f"Name: {self.name}",
                f"Sector: {self.sector}",
                f"Rating: {self.rating:g}",
                f"Subjects: {subjects}",
            ]
        )