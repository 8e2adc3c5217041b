"""Region label anchor engine.

Derives one representative point per named group of polygon regions,
suitable for placing a text label on a map. Area and centroid are computed
in a spherical Mercator plane, the largest part across the whole group wins,
and the anchor is projected back to longitude/latitude.
"""

__version__ = "0.1.0"
