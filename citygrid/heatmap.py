"""Population density heatmaps built from per-sector population counts."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from os import PathLike

MAX_SECTORS = 100

RESET = "\033[0m"

_BACKGROUND = {
    "VeryHigh": "\033[41m",
    "High": "\033[43m",
    "Medium": "\033[42m",
    "Low": "\033[44m",
    "VeryLow": "\033[46m",
}

_FOREGROUND = {
    "VeryHigh": "\033[91m",
    "High": "\033[93m",
    "Medium": "\033[92m",
    "Low": "\033[94m",
    "VeryLow": "\033[96m",
}

_RULE = "========================================"

SectorPopulations = Mapping[str, int] | Iterable[tuple[str, int]]


class DensityLevel(str, Enum):
    """Density band of a sector relative to the most populated sector."""

    VERY_HIGH = "VeryHigh"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
    VERY_LOW = "VeryLow"
    EMPTY = "Empty"


_SYMBOLS = {
    DensityLevel.VERY_HIGH: "*****",
    DensityLevel.HIGH: "**** ",
    DensityLevel.MEDIUM: "***  ",
    DensityLevel.LOW: "**   ",
    DensityLevel.VERY_LOW: "*    ",
    DensityLevel.EMPTY: "     ",
}


@dataclass(frozen=True)
class DensityAnalysis:
    """Summary of how population is spread over sectors."""

    most_populated: tuple[str, int]
    least_populated: tuple[str, int]
    average: float
    distribution: dict[DensityLevel, int] = field(default_factory=dict)


def _percentage(population: int, max_pop: int) -> float:
    if max_pop == 0:
        return 0.0
    return population / max_pop * 100.0


def _collect(sector_populations: SectorPopulations) -> list[tuple[str, int]]:
    items = (
        sector_populations.items()
        if isinstance(sector_populations, Mapping)
        else sector_populations
    )
    collected: list[tuple[str, int]] = []
    for name, population in items:
        if len(collected) >= MAX_SECTORS:
            break
        collected.append((name, int(population)))
    return collected


def density_level(population: int, max_pop: int) -> DensityLevel:
    """Classify a population against the maximum sector population."""
    percentage = _percentage(population, max_pop)
    if percentage >= 80.0:
        return DensityLevel.VERY_HIGH
    if percentage >= 60.0:
        return DensityLevel.HIGH
    if percentage >= 40.0:
        return DensityLevel.MEDIUM
    if percentage >= 20.0:
        return DensityLevel.LOW
    if percentage > 0.0:
        return DensityLevel.VERY_LOW
    return DensityLevel.EMPTY


def heatmap_symbol(population: int, max_pop: int) -> str:
    """Return the five-character star bar for a population."""
    if max_pop == 0 or population == 0:
        return _SYMBOLS[DensityLevel.EMPTY]
    return _SYMBOLS[density_level(population, max_pop)]


def _band(percentage: float) -> str:
    # Colour bands have no separate "empty" band; zero falls into the lowest.
    if percentage >= 80.0:
        return "VeryHigh"
    if percentage >= 60.0:
        return "High"
    if percentage >= 40.0:
        return "Medium"
    if percentage >= 20.0:
        return "Low"
    return "VeryLow"


def heatmap_legend() -> str:
    """Return the legend explaining the star symbols."""
    lines = [
        "",
        _RULE,
        "     POPULATION DENSITY LEGEND",
        _RULE,
        "***** = Very High (80-100%)",
        "****  = High (60-80%)",
        "***   = Medium (40-60%)",
        "**    = Low (20-40%)",
        "*     = Very Low (0-20%)",
        "      = Empty (0%)",
        _RULE,
    ]
    return "\n".join(lines) + "\n"


def color_heatmap(sector_populations: SectorPopulations) -> str:
    """Render a heatmap table with coloured backgrounds per density band."""
    lines = ["", _RULE, "             POPULATION HEATMAP", _RULE]
    sectors = _collect(sector_populations)
    if not sectors:
        lines.append("No sectors available for heatmap.")
        return "\n".join(lines) + "\n"

    max_pop = max(0, *(pop for _, pop in sectors))
    total = sum(pop for _, pop in sectors)
    if max_pop == 0:
        lines.append("No population data available.")
        return "\n".join(lines) + "\n"

    lines += [
        "",
        "Color Legend:",
        f"{_BACKGROUND['VeryHigh']}   {RESET} Very High (80-100%)",
        f"{_BACKGROUND['High']}   {RESET} High (60-80%)",
        f"{_BACKGROUND['Medium']}   {RESET} Medium (40-60%)",
        f"{_BACKGROUND['Low']}   {RESET} Low (20-40%)",
        f"{_BACKGROUND['VeryLow']}   {RESET} Very Low (0-20%)",
        "",
        "Sector Name          Population  Density",
        "-------------------------------------------",
    ]
    for name, pop in sectors:
        percentage = _percentage(pop, max_pop)
        colour = _BACKGROUND[_band(percentage)]
        gap = " " * (10 - (2 if pop >= 10 else 1))
        lines.append(
            f"{colour} {name.ljust(18)}  {pop}{gap}{int(percentage)}%{RESET}"
        )
    lines += [
        "-------------------------------------------",
        f"Total Population: {total}",
        _RULE,
    ]
    return "\n".join(lines) + "\n"


def _pad_population(pop: int) -> str:
    if pop < 10:
        return "   "
    if pop < 100:
        return "  "
    if pop < 1000:
        return " "
    return ""


def sector_heatmap(sector_populations: SectorPopulations) -> str:
    """Render a heatmap table with coloured star bars per sector."""
    lines = ["", _RULE, "   POPULATION DENSITY HEATMAP", _RULE]
    sectors = _collect(sector_populations)
    if not sectors:
        lines.append("No sectors available for heatmap.")
        return "\n".join(lines) + "\n"

    max_pop = max(0, *(pop for _, pop in sectors))
    total = sum(pop for _, pop in sectors)
    if max_pop == 0:
        lines.append("No population data available for heatmap.")
        return "\n".join(lines) + "\n"

    lines += [
        "",
        "Sector Name          | Population | Density Bar",
        "---------------------+------------+------------------",
    ]
    for name, pop in sectors:
        percentage = _percentage(pop, max_pop)
        colour = _FOREGROUND[_band(percentage)]
        lines.append(
            f"{name.ljust(20)} | {_pad_population(pop)}{pop}      "
            f" | {colour}{heatmap_symbol(pop, max_pop)}{RESET}"
            f" ({int(percentage)}%)"
        )
    lines += [
        "---------------------+------------+------------------",
        f"Total Population: {total} | Max: {max_pop}",
        _RULE,
    ]
    return "\n".join(lines) + "\n"


def density_analysis(sector_populations: SectorPopulations) -> DensityAnalysis:
    """Find the extremes, the average and the density distribution.

    Raises ValueError when there are no sectors.
    """
    sectors = _collect(sector_populations)
    if not sectors:
        raise ValueError("no sectors available")

    most = max(sectors, key=lambda item: item[1])
    least = min(sectors, key=lambda item: item[1])
    average = sum(pop for _, pop in sectors) / len(sectors)

    distribution = {level: 0 for level in DensityLevel}
    for _, pop in sectors:
        distribution[density_level(pop, most[1])] += 1

    return DensityAnalysis(
        most_populated=most,
        least_populated=least,
        average=average,
        distribution=distribution,
    )


def export_heatmap(
    sector_populations: SectorPopulations, path: str | PathLike[str]
) -> int:
    """Write the heatmap as CSV and return the number of sector rows written.

    Raises ValueError when there are no sectors; OSError if the file
    cannot be written.
    """
    sectors = _collect(sector_populations)
    if not sectors:
        raise ValueError("no sectors available for export")

    max_pop = max(0, *(pop for _, pop in sectors))
    with open(path, "w", encoding="utf-8", newline="") as out:
        out.write("Sector,Population,DensityLevel,DensityPercentage\n")
        for name, pop in sectors:
            level = density_level(pop, max_pop)
            percentage = int(_percentage(pop, max_pop))
            out.write(f"{name},{pop},{level.value},{percentage}\n")
    return len(sectors)