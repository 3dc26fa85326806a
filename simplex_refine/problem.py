import numpy as np

from simplex_refine.exceptions import InvalidProblem


class BaseProblem:
    """
    Box-bounded optimisation problem.

    The decision vector is split into a continuous prefix and an integer suffix
    of length ``integer_dimension``. Subclasses implement ``_objfun``, which maps a
    decision vector to a fitness vector of length ``objective_dimension``.
    Lower fitness is better.
    """

    def __init__(self, lower_bounds, upper_bounds, integer_dimension: int = 0,
                 objective_dimension: int = 1, constraint_dimension: int = 0):
        """
        Args:
            lower_bounds (list[float]): Lower bound of each dimension.
            upper_bounds (list[float]): Upper bound of each dimension.
            integer_dimension (int): Size of the integer suffix of the decision vector.
            objective_dimension (int): Number of objectives.
            constraint_dimension (int): Number of constraints.
        """
        self._lower_bounds = np.array(lower_bounds, dtype=float).ravel()
        self._upper_bounds = np.array(upper_bounds, dtype=float).ravel()
        if self._lower_bounds.size == 0:
            raise InvalidProblem("the problem must have at least one dimension")
        if self._lower_bounds.shape != self._upper_bounds.shape:
            raise InvalidProblem(
                f"lower and upper bounds have different sizes "
                f"({self._lower_bounds.size} vs {self._upper_bounds.size})")
        if np.any(self._lower_bounds > self._upper_bounds):
            raise InvalidProblem("lower bounds must not be greater than upper bounds")
        if not 0 <= integer_dimension <= self._lower_bounds.size:
            raise InvalidProblem(
                f"integer dimension {integer_dimension} is outside [0, {self._lower_bounds.size}]")
        if objective_dimension < 1:
            raise InvalidProblem("the problem must have at least one objective")
        if constraint_dimension < 0:
            raise InvalidProblem("constraint dimension must be non-negative")
        self._integer_dimension = int(integer_dimension)
        self._objective_dimension = int(objective_dimension)
        self._constraint_dimension = int(constraint_dimension)
        self._lower_bounds.setflags(write=False)
        self._upper_bounds.setflags(write=False)

    def dimension(self) -> int:
        return self._lower_bounds.size

    def integer_dimension(self) -> int:
        return self._integer_dimension

    def objective_dimension(self) -> int:
        return self._objective_dimension

    def constraint_dimension(self) -> int:
        return self._constraint_dimension

    def lower_bounds(self) -> np.ndarray:
        return self._lower_bounds

    def upper_bounds(self) -> np.ndarray:
        return self._upper_bounds

    def evaluate(self, x) -> np.ndarray:
        """
        Computes the fitness vector of a decision vector.

        Args:
            x (np.ndarray): Decision vector of length ``dimension()``.

        Returns:
            np.ndarray: Fitness vector of length ``objective_dimension()``.
        """
        x = np.asarray(x, dtype=float)
        if x.shape != (self.dimension(),):
            raise InvalidProblem(
                f"decision vector has shape {x.shape}, expected ({self.dimension()},)")
        f = np.atleast_1d(np.asarray(self._objfun(x), dtype=float))
        if f.shape != (self._objective_dimension,):
            raise InvalidProblem(
                f"objective returned {f.size} values, expected {self._objective_dimension}")
        return f

    def compare_fitness(self, f1, f2) -> bool:
        """True if ``f1`` is strictly better than ``f2``."""
        f1 = np.asarray(f1, dtype=float)
        f2 = np.asarray(f2, dtype=float)
        if self._objective_dimension == 1:
            return bool(f1[0] < f2[0])
        # Pareto dominance
        return bool(np.all(f1 <= f2) and np.any(f1 < f2))

    def _objfun(self, x):
        raise NotImplementedError

    def __repr__(self):
        return (f"{type(self).__name__}(dimension={self.dimension()}, "
                f"integer_dimension={self._integer_dimension}, "
                f"objective_dimension={self._objective_dimension}, "
                f"constraint_dimension={self._constraint_dimension})")


class FunctionProblem(BaseProblem):
    """Problem defined by a plain callable, e.g. ``lambda x: np.sum(x ** 2)``."""

    def __init__(self, objective_function: callable, lower_bounds, upper_bounds,
                 integer_dimension: int = 0, objective_dimension: int = 1,
                 constraint_dimension: int = 0):
        super().__init__(lower_bounds, upper_bounds, integer_dimension=integer_dimension,
                         objective_dimension=objective_dimension,
                         constraint_dimension=constraint_dimension)
        self.objective_function = objective_function

    def _objfun(self, x):
        return self.objective_function(x)
