"""Flood consequence modelling: hazard events, results, receptor interfaces, crop functions, infrastructure and economic impacts."""

__version__ = "0.1.0"