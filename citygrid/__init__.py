"""City housing and population, density heatmaps, railway stations, products and schools."""

__version__ = "0.1.0"