"""Layer file I/O for pathorder.

This module reads JSON layer descriptions into validated settings and
geometry, runs both optimizers over them, and writes the resulting tours.

Key functions:
- read_layer: Load and validate a layer file
- optimize_layer: Order a layer's contours and lines
- write_result: Save the tours as JSON
"""

from pathorder.io.layer import (
    LayerResult,
    LayerSpec,
    optimize_layer,
    order_to_dict,
    read_layer,
    result_to_dict,
    write_result,
)

__all__ = [
    "LayerResult",
    "LayerSpec",
    "optimize_layer",
    "order_to_dict",
    "read_layer",
    "result_to_dict",
    "write_result",
]
