"""Per-model centroids used to centre coordinates before rendering."""

import logging
from typing import Tuple

import numpy as np

from ..config import ORIGIN
from ..domain.models.complex import Complex

logger = logging.getLogger(__name__)


def mean_point_per_model(
    structure: Complex, empty_model_centroid: Tuple[float, float, float] = ORIGIN
) -> np.ndarray:
    """
    Compute the arithmetic mean of all atom coordinates of every model.

    Args:
        structure: Parsed complex
        empty_model_centroid: Point reported for a model without atoms

    Returns:
        Array of shape (model_count, 3); row ``k`` is the centroid of model
        slot ``k`` (a file without MODEL records has a single slot)
    """
    sums = np.zeros((structure.model_count, 3), dtype=np.float64)
    counts = np.zeros(structure.model_count, dtype=np.int64)

    for polymer in structure.polymers:
        slot = Complex.model_slot(polymer.model_number)
        coords = polymer.get_coordinates()
        sums[slot] += coords.sum(axis=0)
        counts[slot] += len(coords)

    centroids = np.tile(np.asarray(empty_model_centroid, dtype=np.float64), (len(sums), 1))
    populated = counts > 0
    centroids[populated] = sums[populated] / counts[populated, None]

    if not populated.all():
        logger.debug("%d model(s) without atoms", int((~populated).sum()))
    return centroids
