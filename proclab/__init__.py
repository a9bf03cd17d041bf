"""Procedural generation toolkit: Voronoi diagrams, mazes and biomes."""

__version__ = "0.1.0"