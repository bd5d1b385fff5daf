# citygrid

Tools for modelling a city's population and a few of its services.

- **Housing** (`citygrid.housing`): a `City` made of `Sector`s, `Street`s and `House`s,
  with a `FamilyTree` of `Citizen`s for each house. `City.render_hierarchy()` returns the
  sector/street/house structure as indented text; `FamilyTree.render()` returns a family.
- **Population** (`citygrid.population`): `PopulationManager` adds sectors, streets,
  houses, families and family members, looks citizens up by CNIC (`search_citizen`,
  `citizen_info`), and reports `age_distribution()`, `gender_ratio()`,
  `occupation_breakdown()`, `sector_populations()` and `total_population()`.
  `load_population_rows(rows)` loads rows of
  `CNIC, Name, Gender, Age, Sector, Street, HouseNo, Occupation`, creating missing
  sectors, streets and houses; each citizen becomes the head of an empty house, and
  citizens of occupied houses are skipped. `load_sample_data(manager)` fills a manager
  with five sectors, five houses and eight citizens.
- **Heatmaps** (`citygrid.heatmap`): from a mapping (or pairs) of sector name to
  population, `sector_heatmap` and `color_heatmap` render ANSI-coloured tables,
  `heatmap_legend` explains the star symbols, `density_analysis` returns the most and
  least populated sectors, the average and a count per `DensityLevel`, and
  `export_heatmap(populations, path)` writes a CSV with columns
  `Sector,Population,DensityLevel,DensityPercentage`.
- **Railway** (`citygrid.railway`, `citygrid.station`): `RailwayManager` keeps
  `RailwayStation`s indexed by id, name and code, finds the `nearest_station` to a
  coordinate, and gives straight-line (haversine) `rail_distance`s and direct
  `station_path`s. `load_stations(rows)` reads rows of
  `StationID, Name, Code, City, Coordinates` where coordinates look like `"33.684, 73.025"`.
- **Entities** (`citygrid.entities`): `Product` and `School` records with `describe()`.

## Install

```
pip install .
```

## Interactive menu

```
citygrid-population
citygrid-population --sample
citygrid-population --csv population.csv
```

starts the population and housing menu on standard input: add sectors, streets,
houses, families and members, search citizens, and print reports. `--sample` loads the
sample data first; `--csv FILE` loads a population CSV whose first row is a header.
Choose `0` (or end the input) to leave.

## Example

```python
from citygrid.population import PopulationManager, load_sample_data
from citygrid.heatmap import density_analysis, export_heatmap, sector_heatmap

manager = PopulationManager()
load_sample_data(manager)

print(manager.total_population())          # 8
print(manager.age_distribution())
print(manager.citizen_info("61101-1111111-1"))

populations = manager.sector_populations()
print(sector_heatmap(populations))
print(density_analysis(populations))
export_heatmap(populations, "heatmap.csv")
```

```python
from citygrid.railway import RailwayManager
from citygrid.station import RailwayStation

rail = RailwayManager()
rail.add_station(RailwayStation("RLY01", "Central", "CTR", "Islamabad", "RLY01", 33.70, 73.05))
rail.add_station(RailwayStation("RLY02", "Junction", "JCT", "Rawalpindi", "RLY02", 33.60, 73.04))
print(rail.nearest_station(33.68, 73.05).name)
print(rail.rail_distance("RLY01", "RLY02"))
```

## What it does not do

- Everything is kept in memory. Population data can be loaded from CSV rows and heatmaps
  exported to CSV, but nothing else is saved between runs.
- Railway stations are not connected to a road or bus network: routes between stations
  are direct, and distances are straight lines.
- There is no command for the railway, heatmap or entity modules; use them from Python.

## Tests

```
pip install .[test]
pytest
```