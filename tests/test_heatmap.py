import csv

import pytest

from citygrid.heatmap import (
    RESET,
    DensityLevel,
    color_heatmap,
    density_analysis,
    density_level,
    export_heatmap,
    heatmap_legend,
    heatmap_symbol,
    sector_heatmap,
)

SECTORS = [("G-10", 10), ("F-8", 5), ("G-9", 1), ("Blue Area", 0)]


@pytest.mark.parametrize(
    "population, expected",
    [
        (10, "*****"),
        (8, "*****"),
        (6, "**** "),
        (4, "***  "),
        (2, "**   "),
        (1, "*    "),
        (0, "     "),
    ],
)
def test_heatmap_symbol_bands(population, expected):
    assert heatmap_symbol(population, 10) == expected


def test_heatmap_symbol_zero_max_is_blank():
    assert heatmap_symbol(5, 0) == "     "


@pytest.mark.parametrize(
    "population, expected",
    [
        (10, DensityLevel.VERY_HIGH),
        (6, DensityLevel.HIGH),
        (4, DensityLevel.MEDIUM),
        (2, DensityLevel.LOW),
        (1, DensityLevel.VERY_LOW),
        (0, DensityLevel.EMPTY),
    ],
)
def test_density_level_bands(population, expected):
    assert density_level(population, 10) is expected


def test_density_level_values_match_csv_names():
    assert density_level(10, 10).value == "VeryHigh"
    assert density_level(0, 0).value == "Empty"


def test_symbol_and_level_agree():
    for pop in range(0, 21):
        level = density_level(pop, 20)
        blank = heatmap_symbol(pop, 20).strip() == ""
        assert blank == (level is DensityLevel.EMPTY)


def test_legend_lines():
    legend = heatmap_legend()
    assert "***** = Very High (80-100%)" in legend
    assert "      = Empty (0%)" in legend


def test_color_heatmap_lists_every_sector():
    text = color_heatmap(SECTORS)
    for name, _ in SECTORS:
        assert name in text
    assert f"Total Population: {sum(p for _, p in SECTORS)}" in text
    assert "\033[41m G-10" in text
    assert text.count(RESET) >= len(SECTORS)


def test_color_heatmap_accepts_mapping():
    assert color_heatmap(dict(SECTORS)) == color_heatmap(SECTORS)


def test_color_heatmap_empty_and_zero():
    assert "No sectors available for heatmap." in color_heatmap([])
    assert "No population data available." in color_heatmap([("A", 0)])


def test_sector_heatmap_rows():
    text = sector_heatmap(SECTORS)
    assert "Max: 10" in text
    assert "G-10".ljust(20) + " |" in text
    assert "*****" in text
    assert "No population data available for heatmap." in sector_heatmap([("A", 0)])
    assert "No sectors available for heatmap." in sector_heatmap({})


def test_density_analysis_extremes():
    result = density_analysis(SECTORS)
    assert result.most_populated == ("G-10", 10)
    assert result.least_populated == ("Blue Area", 0)
    assert result.average == sum(p for _, p in SECTORS) / len(SECTORS)
    assert sum(result.distribution.values()) == len(SECTORS)
    assert result.distribution[DensityLevel.EMPTY] == 1
    assert result.distribution[DensityLevel.VERY_HIGH] == 1


def test_density_analysis_first_extreme_wins():
    result = density_analysis([("A", 3), ("B", 3)])
    assert result.most_populated == ("A", 3)
    assert result.least_populated == ("A", 3)


def test_density_analysis_all_zero_is_empty():
    result = density_analysis([("A", 0), ("B", 0)])
    assert result.distribution[DensityLevel.EMPTY] == 2


def test_density_analysis_requires_sectors():
    with pytest.raises(ValueError):
        density_analysis([])


def test_export_heatmap_round_trip(tmp_path):
    path = tmp_path / "heat.csv"
    count = export_heatmap(SECTORS, path)
    assert count == len(SECTORS)
    with open(path, newline="", encoding="utf-8") as handle:
        rows = list(csv.reader(handle))
    assert rows[0] == ["Sector", "Population", "DensityLevel", "DensityPercentage"]
    assert [row[0] for row in rows[1:]] == [name for name, _ in SECTORS]
    assert rows[1][2] == "VeryHigh"
    assert rows[-1][2] == "Empty"
    assert [int(row[1]) for row in rows[1:]] == [pop for _, pop in SECTORS]


def test_export_heatmap_caps_sector_count(tmp_path):
    many = [(f"S{i}", i) for i in range(150)]
    assert export_heatmap(many, tmp_path / "many.csv") == 100


def test_export_heatmap_requires_sectors(tmp_path):
    with pytest.raises(ValueError):
        export_heatmap([], tmp_path / "none.csv")


def test_export_heatmap_bad_directory(tmp_path):
    with pytest.raises(OSError):
        export_heatmap(SECTORS, tmp_path / "missing" / "heat.csv")