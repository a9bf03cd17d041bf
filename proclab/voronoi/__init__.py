"""Voronoi diagrams built with Fortune's sweep-line algorithm, clipped to a box."""