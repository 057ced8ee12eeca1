"""pathorder - Greedy print ordering for one toolpath layer.

pathorder decides in which order the closed contours (perimeters, skin
islands) and the infill lines of a single layer are printed, and where each
of them starts, so that non-printing travel stays short.

Example:
    $ pathorder layer.json --output order.json

This prints the contour order with each contour's seam vertex, then the line
order with each line's entry endpoint, and writes both to order.json.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
