"""City housing structure: sectors, streets, houses and family trees."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class Citizen:
    """A registered citizen identified by CNIC."""

    cnic: str = ""
    name: str = ""
    age: int = 0
    gender: str = ""
    occupation: str = ""


@dataclass
class FamilyNode:
    """A citizen in a family tree together with their children."""

    citizen: Citizen
    children: list[FamilyNode] = field(default_factory=list)

    def walk(self) -> Iterator[FamilyNode]:
        """Yield this node and all descendants in pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()


class FamilyTree:
    """The family living in one house, rooted at the head of the family."""

    def __init__(self) -> None:
        self.root: FamilyNode | None = None

    @property
    def head(self) -> Citizen | None:
        """The head of the family, if one has been set."""
        return self.root.citizen if self.root else None

    def set_head(self, citizen: Citizen) -> None:
        """Start a new family with the given head, discarding any previous one."""
        self.root = FamilyNode(citizen)

    def find(self, cnic: str) -> FamilyNode | None:
        """Return the node of the family member with this CNIC, if any."""
        if self.root is None:
            return None
        return next((node for node in self.root.walk() if node.citizen.cnic == cnic), None)

    def add_member(self, parent_cnic: str, citizen: Citizen) -> bool:
        """Add a child under the member with ``parent_cnic``.

        Returns False, leaving the tree unchanged, when the parent is not
        in this family.
        """
        parent = self.find(parent_cnic)
        if parent is None:
            return False
        parent.children.append(FamilyNode(citizen))
        return True

    def members(self) -> Iterator[Citizen]:
        """Yield every family member, head first, in pre-order."""
        if self.root is not None:
            for node in self.root.walk():
                yield node.citizen

    def render(self) -> str:
        """Return the family as an indented tree."""
        lines: list[str] = []

        def visit(node: FamilyNode, level: int) -> None:
            lines.append(f"{'  ' * level}- {node.citizen.name} ({node.citizen.cnic})")
            for child in node.children:
                visit(child, level + 1)

        if self.root is not None:
            visit(self.root, 0)
        return "".join(line + "\n" for line in lines)

    def __len__(self) -> int:
        return sum(1 for _ in self.members())


@dataclass
class House:
    """A numbered house and the family living in it."""

    number: int
    family: FamilyTree = field(default_factory=FamilyTree)


@dataclass
class Street:
    """A numbered street holding houses in insertion order."""

    number: int
    houses: dict[int, House] = field(default_factory=dict)

    def add_house(self, number: int) -> House:
        """Add a house unless it exists; return the house with that number."""
        return self.houses.setdefault(number, House(number))

    def find_house(self, number: int) -> House | None:
        """Return the house with that number, if any."""
        return self.houses.get(number)

    def population(self) -> int:
        """Number of people living on this street."""
        return sum(len(house.family) for house in self.houses.values())


@dataclass
class Sector:
    """A named sector of the city holding streets in insertion order."""

    name: str
    streets: dict[int, Street] = field(default_factory=dict)

    def add_street(self, number: int) -> Street:
        """Add a street unless it exists; return the street with that number."""
        return self.streets.setdefault(number, Street(number))

    def find_street(self, number: int) -> Street | None:
        """Return the street with that number, if any."""
        return self.streets.get(number)

    def houses(self) -> Iterator[House]:
        """Yield every house in the sector, street by street."""
        for street in self.streets.values():
            yield from street.houses.values()

    def population(self) -> int:
        """Number of people living in this sector."""
        return sum(street.population() for street in self.streets.values())


@dataclass
class City:
    """The root of the housing hierarchy: city, sectors, streets, houses."""

    name: str = "Islamabad"
    sectors: dict[str, Sector] = field(default_factory=dict)

    def add_sector(self, name: str) -> Sector:
        """Add a sector unless it exists; return the sector with that name."""
        return self.sectors.setdefault(name, Sector(name))

    def find_sector(self, name: str) -> Sector | None:
        """Return the sector with that name, if any."""
        return self.sectors.get(name)

    def houses(self) -> Iterator[House]:
        """Yield every house in the city, sector by sector."""
        for sector in self.sectors.values():
            yield from sector.houses()

    def render_hierarchy(self) -> str:
        """Return the sector/street/house hierarchy as indented text."""
        lines = [f"{self.name} City Population Structure:"]
        for sector in self.sectors.values():
            lines.append(f"[Sector] {sector.name}")
            for street in sector.streets.values():
                lines.append(f"  [Street #{street.number}]")
                for house in street.houses.values():
                    line = f"    [House #{house.number}]"
                    head = house.family.head
                    if head is not None:
                        line += f" - Family Head: {head.name}"
                    lines.append(line)
        return "".join(line + "\n" for line in lines)