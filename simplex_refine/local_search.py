import logging
from dataclasses import dataclass

import numpy as np

from simplex_refine.algorithm import BaseAlgorithm
from simplex_refine.bounds import project_to_bounds
from simplex_refine.exceptions import InvalidConfiguration, UnsupportedProblem
from simplex_refine.objective import ObjectiveAdapter
from simplex_refine.population import Population
from simplex_refine.simplex import minimize_simplex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocalSearchParams:
    """Configuration parameters for the Nelder-Mead local search"""
    max_iter: int = 100
    tol: float = 1e-6
    step_size: float = 1.0

    def __post_init__(self):
        try:
            max_iter = int(self.max_iter)
        except (TypeError, ValueError, OverflowError) as e:
            raise InvalidConfiguration(f"max_iter must be an integer, got {self.max_iter!r}") from e
        if max_iter < 0:
            raise InvalidConfiguration("max_iter must be a non-negative number")
        if not self.tol > 0:
            raise InvalidConfiguration("tolerance must be a positive number")
        if not self.step_size > 0:
            raise InvalidConfiguration("initial step size must be a positive number")
        object.__setattr__(self, "max_iter", max_iter)
        object.__setattr__(self, "tol", float(self.tol))
        object.__setattr__(self, "step_size", float(self.step_size))


class NelderMeadLocalSearch(BaseAlgorithm):
    """
    Refines the best individual of a population with a Nelder-Mead simplex search.

    Only the continuous part of the decision vector is searched, the integer part of
    the best individual is kept as it is. The result is clamped into the problem
    bounds once the search is over.
    """

    name = "Nelder-Mead local search"

    def __init__(self, max_iter: int = 100, tol: float = 1e-6, step_size: float = 1.0):
        """
        Initializes the local search.

        Args:
            max_iter (int): Maximum number of simplex iterations.
            tol (float): Simplex size below which the search is considered converged.
            step_size (float): Initial step of the simplex along each dimension.
        """
        self.params = LocalSearchParams(max_iter=max_iter, tol=tol, step_size=step_size)

    @property
    def max_iter(self) -> int:
        return self.params.max_iter

    @property
    def tol(self) -> float:
        return self.params.tol

    @property
    def step_size(self) -> float:
        return self.params.step_size

    def human_readable_extra(self) -> str:
        return (f"\tmax_iter:\t{self.max_iter}\n"
                f"\ttolerance:\t{self.tol}\n"
                f"\tstep size:\t{self.step_size}\n")

    def refine(self, population: Population):
        """
        Optimises the best individual of the population in place.

        Args:
            population (Population): Population to refine.

        Returns:
            Optional[OptimizeResult]: The simplex search result, None for an empty population.
        """
        if population.is_empty():
            return None
        problem = population.problem
        if problem.objective_dimension() != 1:
            raise UnsupportedProblem("this algorithm does not support multi-objective optimisation")
        if problem.constraint_dimension():
            raise UnsupportedProblem("this algorithm does not support constrained optimisation")
        cont_size = problem.dimension() - problem.integer_dimension()
        if not cont_size:
            raise UnsupportedProblem("the problem has no continuous part")

        best_idx = population.best_index()
        x = np.array(population.decision_vector_of(best_idx), dtype=float)
        objective = ObjectiveAdapter(problem, x, cont_size)

        result = minimize_simplex(objective, x[:cont_size], self.step_size, self.max_iter, self.tol)

        new_x = x.copy()
        new_x[:cont_size] = project_to_bounds(result.x, problem.lower_bounds()[:cont_size],
                                              problem.upper_bounds()[:cont_size])
        if not np.array_equal(new_x[:cont_size], result.x):
            logger.info(f"Search result for individual {best_idx} was clamped into the bounds")
        population.replace_decision_vector(best_idx, new_x)

        fitness = population.fitness_of(best_idx)[0]
        logger.info(f"Nelder-Mead refined individual {best_idx}: fitness {fitness:.6e} "
                    f"after {result.nit} iterations, {result.nfev} evaluations ({result.message})")
        return result
