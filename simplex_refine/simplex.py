"""
Nelder-Mead simplex minimisation.

This is the ``nmsimplex2`` flavour of the method: vertex values are cached, the
worst vertex is moved along the line through the centroid of the remaining
vertices, and the convergence size is the root-mean-square distance of the
vertices from their centroid.
"""
import logging

import numpy as np
from scipy.optimize import OptimizeResult

from simplex_refine.exceptions import OutOfMemory

logger = logging.getLogger(__name__)

CONVERGED = 0
MAX_ITERATIONS = 1
FAILED = 2

_MESSAGES = {
    CONVERGED: "Simplex size is below the tolerance.",
    MAX_ITERATIONS: "Maximum number of iterations has been reached.",
    FAILED: "The simplex could not be updated with finite objective values.",
}

REFLECTION = -1.0
EXPANSION = -2.0
CONTRACTION = 0.5


class SimplexFailure(Exception):
    """The simplex cannot make progress (non-finite objective values)."""


def _allocate(shape) -> np.ndarray:
    return np.empty(shape, dtype=float)


class SimplexState:
    """
    Working storage of one simplex search.

    Use it as a context manager: every array is released when the block exits,
    whether the search finished, stopped early or raised.
    """

    def __init__(self, n: int):
        self.n = int(n)
        self.vertices = None
        self.values = None
        self.center = None
        self.trial = None
        self.step = None
        try:
            self.vertices = _allocate((self.n + 1, self.n))
            self.values = _allocate(self.n + 1)
            self.center = _allocate(self.n)
            self.trial = _allocate(self.n)
            self.step = _allocate(self.n)
        except MemoryError as e:
            self.release()
            raise OutOfMemory(f"could not allocate the search state for {self.n} dimensions") from e

    def release(self):
        self.vertices = None
        self.values = None
        self.center = None
        self.trial = None
        self.step = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False

    def initialize(self, objective, x0, step_size):
        """Builds the simplex ``x0``, ``x0 + step_i * e_i`` and evaluates every vertex."""
        self.step[:] = step_size
        self.vertices[:] = x0
        self.vertices[1:] += np.diag(self.step)
        for i in range(self.n + 1):
            self.values[i] = objective(self.vertices[i])
            if not np.isfinite(self.values[i]):
                raise SimplexFailure(f"non-finite objective value at initial vertex {i}")
        self.update_center()

    def update_center(self):
        np.mean(self.vertices, axis=0, out=self.center)

    def size(self) -> float:
        return float(np.sqrt(np.mean(np.sum((self.vertices - self.center) ** 2, axis=1))))

    def best_index(self) -> int:
        # argmin returns the first of equal values
        return int(np.argmin(self.values))

    def _corner_move(self, objective, coeff: float, corner: int) -> float:
        # centroid of every vertex except ``corner``
        others = (self.center * (self.n + 1) - self.vertices[corner]) / self.n
        self.trial[:] = others + coeff * (self.vertices[corner] - others)
        return objective(self.trial)

    def _replace(self, corner: int, value: float):
        self.vertices[corner] = self.trial
        self.values[corner] = value
        self.update_center()

    def _shrink_towards(self, objective, best: int):
        for i in range(self.n + 1):
            if i == best:
                continue
            self.vertices[i] = 0.5 * (self.vertices[i] + self.vertices[best])
            val = objective(self.vertices[i])
            if not np.isfinite(val):
                # the vertex can never be picked as the best one
                self.values[i] = np.inf
                self.update_center()
                raise SimplexFailure(f"non-finite objective value while shrinking vertex {i}")
            self.values[i] = val
        self.update_center()

    def iterate(self, objective):
        """Performs one Nelder-Mead step."""
        order = np.argsort(self.values, kind="stable")
        lo, s_hi, hi = order[0], order[-2], order[-1]

        val = self._corner_move(objective, REFLECTION, hi)
        if np.isfinite(val) and val < self.values[lo]:
            reflected = self.trial.copy()
            val2 = self._corner_move(objective, EXPANSION, hi)
            if np.isfinite(val2) and val2 < self.values[lo]:
                self._replace(hi, val2)
            else:
                self.trial[:] = reflected
                self._replace(hi, val)
        elif not np.isfinite(val) or val > self.values[s_hi]:
            if np.isfinite(val) and val <= self.values[hi]:
                self._replace(hi, val)
            val2 = self._corner_move(objective, CONTRACTION, hi)
            if np.isfinite(val2) and val2 <= self.values[hi]:
                self._replace(hi, val2)
            else:
                self._shrink_towards(objective, lo)
        else:
            self._replace(hi, val)


def minimize_simplex(objective: callable, x0, step_size, max_iter: int, tol: float) -> OptimizeResult:
    """
    Minimises ``objective`` with the Nelder-Mead simplex method.

    Args:
        objective (callable): Maps an n-dimensional vector to a float.
        x0 (np.ndarray): Starting point.
        step_size (float | np.ndarray): Initial step along each coordinate axis.
        max_iter (int): Iteration budget. At least one iteration is always performed.
        tol (float): The search stops once the simplex size drops below this value.

    Returns:
        OptimizeResult: ``x`` and ``fun`` of the best vertex, plus ``nit``, ``nfev``,
        ``size``, ``status``, ``success``, ``message`` and ``history`` (best value after
        each iteration).
    """
    x0 = np.array(x0, dtype=float).ravel()
    n = x0.size
    nfev = 0

    def counted(v):
        nonlocal nfev
        nfev += 1
        return float(objective(v))

    history = []
    nit = 0
    size = float("nan")
    with SimplexState(n) as state:
        try:
            state.initialize(counted, x0, step_size)
        except SimplexFailure as e:
            logger.warning(f"Simplex initialisation failed: {e}. Returning the starting point.")
            return OptimizeResult(x=x0, fun=float(state.values[0]), nit=0, nfev=nfev, size=size, status=FAILED,
                                  success=False, message=_MESSAGES[FAILED], history=history)

        while True:
            nit += 1
            try:
                state.iterate(counted)
            except SimplexFailure as e:
                logger.warning(f"Simplex search stopped early at iteration {nit}: {e}")
                status = FAILED
                break
            size = state.size()
            history.append(float(np.min(state.values)))
            if size < tol:
                status = CONVERGED
                break
            if nit >= max_iter:
                status = MAX_ITERATIONS
                break

        best = state.best_index()
        x = state.vertices[best].copy()
        fun = float(state.values[best])

    logger.debug(f"Simplex search finished after {nit} iterations and {nfev} evaluations "
                 f"(size {size:.3e}, best {fun:.6e})")
    return OptimizeResult(x=x, fun=fun, nit=nit, nfev=nfev, size=size, status=status,
                          success=status == CONVERGED, message=_MESSAGES[status], history=history)
