"""Population management: families, citizen lookup and demographic reports."""

from __future__ import annotations

import argparse
import csv
import logging
import re
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from itertools import islice
from typing import TextIO

from citygrid.housing import Citizen, City, House, Sector, Street

logger = logging.getLogger(__name__)

MAX_POPULATION = 10000
MAX_OCCUPATIONS = 100
MAX_ROWS = 1000
ROW_FIELDS = 8

_MENU = (
    "==== Population & Housing Menu ====\n"
    "1. Add Sector\n2. Add Street\n3. Add House\n4. Add Family\n5. Add Family Member\n"
    "6. Print City Hierarchy\n7. Search Citizen by CNIC\n8. Generate Age Report\n"
    "9. Generate Gender Ratio\n10. Occupation Breakdown\n11. Population Density\n"
    "12. Total Population\n0. Exit\n"
)

_WORD_PATTERN = re.compile(r"\S+")


@dataclass(frozen=True)
class AgeDistribution:
    """Citizens counted by age band."""

    under_18: int = 0
    adults: int = 0
    seniors: int = 0

    def __str__(self) -> str:
        return (
            "Age Distribution:\n"
            f"Under 18: {self.under_18}, Adults (18-59): {self.adults}, "
            f"Seniors (60+): {self.seniors}"
        )


@dataclass(frozen=True)
class GenderRatio:
    """Citizens counted by gender."""

    male: int = 0
    female: int = 0
    other: int = 0

    def __str__(self) -> str:
        return (
            "Gender Ratio:\n"
            f"Males: {self.male}, Females: {self.female}, Others: {self.other}"
        )


def _digits(text: str) -> int:
    """Read the decimal digits of ``text`` as a number, ignoring everything else."""
    digits = "".join(ch for ch in text if "0" <= ch <= "9")
    return int(digits) if digits else 0


class _Prompter:
    """Reads whitespace-separated words and whole lines from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._rest = ""

    def word(self) -> str:
        while not self._rest.strip():
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._rest = line
        match = _WORD_PATTERN.search(self._rest)
        assert match is not None
        self._rest = self._rest[match.end():]
        return match.group()

    def integer(self) -> int:
        return int(self.word())

    def line(self) -> str:
        # Skip the single separator left after the previous word.
        rest = self._rest[1:]
        if not rest:
            rest = self._stream.readline()
            if not rest:
                raise EOFError
        text, _, _ = rest.partition("\n")
        self._rest = ""
        return text

    def discard_line(self) -> None:
        self._rest = ""


class PopulationManager:
    """Keeps the city's housing hierarchy and a registry of citizens by CNIC."""

    def __init__(self, city_name: str = "Islamabad") -> None:
        self.city = City(city_name)
        self._registry: dict[str, Citizen] = {}

    # -- structure -------------------------------------------------------

    def add_sector(self, name: str) -> Sector:
        """Add a sector unless it exists; return it."""
        return self.city.add_sector(name)

    def add_street(self, sector_name: str, street_number: int) -> Street | None:
        """Add a street to an existing sector; None if the sector is unknown."""
        sector = self.city.find_sector(sector_name)
        if sector is None:
            return None
        return sector.add_street(street_number)

    def _find_street(self, sector_name: str, street_number: int) -> Street | None:
        sector = self.city.find_sector(sector_name)
        return sector.find_street(street_number) if sector else None

    def _find_house(
        self, sector_name: str, street_number: int, house_number: int
    ) -> House | None:
        street = self._find_street(sector_name, street_number)
        return street.find_house(house_number) if street else None

    def add_house(
        self, sector_name: str, street_number: int, house_number: int
    ) -> House | None:
        """Add a house to an existing street; None if the street is unknown."""
        street = self._find_street(sector_name, street_number)
        if street is None:
            return None
        return street.add_house(house_number)

    # -- families --------------------------------------------------------

    def add_family(
        self, sector_name: str, street_number: int, house_number: int, head: Citizen
    ) -> bool:
        """Settle a family headed by ``head`` in an existing house.

        Returns False when the house does not exist.
        """
        house = self._find_house(sector_name, street_number, house_number)
        if house is None:
            return False
        house.family.set_head(head)
        self._registry[head.cnic] = head
        return True

    def add_family_member(self, parent_cnic: str, member: Citizen) -> bool:
        """Add ``member`` as a child of ``parent_cnic`` wherever that parent lives.

        The member is registered for lookup either way; the result tells
        whether a parent was found.
        """
        added = False
        for house in self.city.houses():
            if house.family.add_member(parent_cnic, member):
                added = True
        self._registry[member.cnic] = member
        return added

    # -- lookup ----------------------------------------------------------

    def search_citizen(self, cnic: str) -> Citizen | None:
        """Return the registered citizen with this CNIC, if any."""
        return self._registry.get(cnic)

    def citizen_info(self, cnic: str) -> str:
        """Describe a citizen on one line, or report that none was found."""
        citizen = self.search_citizen(cnic)
        if citizen is None:
            return "Citizen not found!"
        return (
            f"CNIC: {citizen.cnic}, Name: {citizen.name}, Age: {citizen.age}, "
            f"Gender: {citizen.gender}, Occupation: {citizen.occupation}"
        )

    def hierarchy(self) -> str:
        """Return the city hierarchy as indented text."""
        return self.city.render_hierarchy()

    def citizens(self) -> Iterator[Citizen]:
        """Yield every citizen living in a house, sector by sector."""
        for house in self.city.houses():
            yield from house.family.members()

    def _population_sample(self) -> Iterator[Citizen]:
        return islice(self.citizens(), MAX_POPULATION)

    # -- reports ---------------------------------------------------------

    def age_distribution(self) -> AgeDistribution:
        """Count citizens under 18, from 18 to 59, and 60 or older."""
        under, adults, seniors = 0, 0, 0
        for citizen in self._population_sample():
            if citizen.age < 18:
                under += 1
            elif citizen.age < 60:
                adults += 1
            else:
                seniors += 1
        return AgeDistribution(under, adults, seniors)

    def gender_ratio(self) -> GenderRatio:
        """Count citizens by gender ("Male", "Female" or anything else)."""
        male, female, other = 0, 0, 0
        for citizen in self._population_sample():
            if citizen.gender == "Male":
                male += 1
            elif citizen.gender == "Female":
                female += 1
            else:
                other += 1
        return GenderRatio(male, female, other)

    def occupation_breakdown(self) -> dict[str, int]:
        """Count citizens per occupation in order of first appearance."""
        counts: dict[str, int] = {}
        for citizen in self._population_sample():
            occupation = citizen.occupation
            if occupation in counts:
                counts[occupation] += 1
            elif len(counts) < MAX_OCCUPATIONS:
                counts[occupation] = 1
        return counts

    def sector_populations(self) -> dict[str, int]:
        """Number of residents per sector, in sector order."""
        return {name: sector.population() for name, sector in self.city.sectors.items()}

    def total_population(self) -> int:
        """Number of residents in the whole city."""
        return sum(self.sector_populations().values())

    # -- bulk loading ----------------------------------------------------

    def load_population_rows(self, rows: Iterable[Sequence[str]]) -> int:
        """Load rows of CNIC, Name, Gender, Age, Sector, Street, HouseNo, Occupation.

        Missing sectors, streets and houses are created. Each citizen becomes
        the head of an empty house; citizens of occupied houses and rows with
        too few fields are skipped. Returns the number of citizens added.
        """
        added = 0
        for index, row in enumerate(islice(rows, MAX_ROWS), start=1):
            fields = list(row)
            if len(fields) < ROW_FIELDS:
                logger.warning(
                    "Skipping incomplete row %d (expected %d fields, got %d)",
                    index,
                    ROW_FIELDS,
                    len(fields),
                )
                continue
            cnic, name, gender, age, sector_name, street, house_no, occupation = (
                fields[:ROW_FIELDS]
            )
            street_number = _digits(street)
            house_number = _digits(house_no)
            house = (
                self.add_sector(sector_name)
                .add_street(street_number)
                .add_house(house_number)
            )
            if house.family.head is None:
                citizen = Citizen(cnic, name, _digits(age), gender, occupation)
                self.add_family(sector_name, street_number, house_number, citizen)
                added += 1
            else:
                logger.info(
                    "House %d already has a family; skipping %s", house_number, name
                )
        return added

    # -- interactive menu ------------------------------------------------

    def _read_citizen(self, prompt: _Prompter, out: TextIO, cnic: str) -> Citizen:
        out.write("Name: ")
        name = prompt.line()
        out.write("Age: ")
        age = prompt.integer()
        out.write("Gender: ")
        gender = prompt.word()
        out.write("Occupation: ")
        occupation = prompt.line()
        return Citizen(cnic, name, age, gender, occupation)

    def _handle(self, choice: int, prompt: _Prompter, out: TextIO) -> None:
        match choice:
            case 1:
                out.write("Sector name: ")
                self.add_sector(prompt.word())
                out.write("Sector added successfully!\n")
            case 2:
                out.write("Sector name: ")
                sector = prompt.word()
                out.write("Street #: ")
                self.add_street(sector, prompt.integer())
                out.write("Street added successfully!\n")
            case 3:
                out.write("Sector name: ")
                sector = prompt.word()
                out.write("Street #: ")
                street = prompt.integer()
                out.write("House #: ")
                self.add_house(sector, street, prompt.integer())
                out.write("House added successfully!\n")
            case 4:
                out.write("Sector name: ")
                sector = prompt.word()
                out.write("Street #: ")
                street = prompt.integer()
                out.write("House #: ")
                house = prompt.integer()
                out.write("Family head CNIC: ")
                cnic = prompt.word()
                head = self._read_citizen(prompt, out, cnic)
                self.add_family(sector, street, house, head)
                out.write("Family added successfully!\n")
            case 5:
                out.write("Parent CNIC: ")
                parent = prompt.word()
                out.write("Member CNIC: ")
                cnic = prompt.word()
                member = self._read_citizen(prompt, out, cnic)
                self.add_family_member(parent, member)
                out.write("Family member added successfully!\n")
            case 6:
                out.write(self.hierarchy())
            case 7:
                out.write("CNIC: ")
                out.write(self.citizen_info(prompt.word()) + "\n")
            case 8:
                out.write(f"{self.age_distribution()}\n")
            case 9:
                out.write(f"{self.gender_ratio()}\n")
            case 10:
                out.write("Occupation Breakdown:\n")
                for occupation, count in self.occupation_breakdown().items():
                    out.write(f"{occupation} : {count}\n")
            case 11:
                out.write("Population Density per Sector:\n")
                for name, count in self.sector_populations().items():
                    out.write(f"Sector {name} : {count} people\n")
            case 12:
                out.write(f"Total Population: {self.total_population()} people\n")
            case _:
                out.write("Invalid option!\n")

    def run(
        self, input_stream: TextIO | None = None, output_stream: TextIO | None = None
    ) -> None:
        """Run the interactive menu until the user chooses 0 or input ends."""
        prompt = _Prompter(input_stream or sys.stdin)
        out = output_stream or sys.stdout
        while True:
            out.write(_MENU)
            out.write("Enter choice: ")
            try:
                choice_text = prompt.word()
            except EOFError:
                return
            try:
                choice = int(choice_text)
            except ValueError:
                prompt.discard_line()
                continue
            if choice == 0:
                out.write("Exiting...\n")
                return
            try:
                self._handle(choice, prompt, out)
            except EOFError:
                return
            except ValueError:
                prompt.discard_line()
                out.write("Invalid number!\n")


def load_sample_data(manager: PopulationManager) -> None:
    """Fill ``manager`` with five sectors, five houses and eight citizens."""
    places = [
        ("G-10", 22, 180),
        ("F-8", 5, 12),
        ("G-9", 17, 90),
        ("F-6", 9, 33),
        ("Blue Area", 1, 5),
    ]
    for sector, _, _ in places:
        manager.add_sector(sector)
    for sector, street, _ in places:
        manager.add_street(sector, street)
    for sector, street, house in places:
        manager.add_house(sector, street, house)

    heads = [
        Citizen("61101-1111111-1", "Ahmed Khan", 45, "Male", "Engineer"),
        Citizen("61101-2222222-2", "Fatima Zahra", 38, "Female", "Teacher"),
        Citizen("61101-3333333-3", "Ali Raza", 29, "Male", "Doctor"),
        Citizen("61101-4444444-4", "Sara Malik", 22, "Female", "Student"),
        Citizen("61101-5555555-5", "Hamza Noor", 50, "Male", "Business"),
    ]
    for (sector, street, house), head in zip(places, heads):
        manager.add_family(sector, street, house, head)

    manager.add_family_member(
        "61101-1111111-1",
        Citizen("61101-1111111-2", "Ayesha Khan", 20, "Female", "Student"),
    )
    manager.add_family_member(
        "61101-1111111-1",
        Citizen("61101-1111111-3", "Bilal Khan", 18, "Male", "Student"),
    )
    manager.add_family_member(
        "61101-2222222-2",
        Citizen("61101-2222222-3", "Zain Zahra", 15, "Male", "Student"),
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Start the population menu, optionally preloaded with data."""
    parser = argparse.ArgumentParser(
        prog="citygrid-population",
        description="Manage the city's population and housing.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--sample", action="store_true", help="load sample data")
    source.add_argument(
        "--csv",
        metavar="FILE",
        help="load a population CSV whose first row is a header",
    )
    args = parser.parse_args(argv)

    manager = PopulationManager()
    if args.sample:
        load_sample_data(manager)
        print("[OK] Sample data loaded: 5 sectors, 5 houses, 8 citizens")
        print(manager.hierarchy(), end="")
    elif args.csv:
        try:
            with open(args.csv, newline="", encoding="utf-8") as handle:
                rows = list(csv.reader(handle))
        except OSError as exc:
            print(f"Failed to load population data: {exc}", file=sys.stderr)
            return 1
        added = manager.load_population_rows(rows[1:])
        print(f"Population data loaded: {added} citizens")
    manager.run()
    return 0