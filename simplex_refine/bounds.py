import numpy as np


def project_to_bounds(x, lower_bounds, upper_bounds) -> np.ndarray:
    """Clamps each component of ``x`` into ``[lower_bounds[i], upper_bounds[i]]``."""
    return np.clip(np.asarray(x, dtype=float), lower_bounds, upper_bounds)
