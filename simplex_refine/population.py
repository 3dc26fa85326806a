import logging
from dataclasses import dataclass

import numpy as np

from simplex_refine.exceptions import InvalidIndex, InvalidProblem
from simplex_refine.problem import BaseProblem

logger = logging.getLogger(__name__)


@dataclass
class Individual:
    """A decision vector together with its fitness vector."""
    cur_x: np.ndarray
    cur_f: np.ndarray


class Population:
    """
    Set of individuals attached to a problem.

    Individuals are only changed through ``push_back`` and ``replace_decision_vector``,
    both of which recompute the fitness.
    """

    def __init__(self, problem: BaseProblem, size: int = 0, seed=None):
        """
        Args:
            problem (BaseProblem): Problem the individuals belong to.
            size (int): Number of random individuals to create.
            seed (Optional[int]): Seed of the random generator used for initialisation.
        """
        self.problem = problem
        self.individuals: list[Individual] = []
        self.rng = np.random.default_rng(seed)
        for _ in range(int(size)):
            self.push_back(self.random_decision_vector())

    def random_decision_vector(self) -> np.ndarray:
        lb = self.problem.lower_bounds()
        ub = self.problem.upper_bounds()
        cont_size = self.problem.dimension() - self.problem.integer_dimension()
        x = np.empty(self.problem.dimension())
        x[:cont_size] = self.rng.uniform(lb[:cont_size], ub[:cont_size])
        if cont_size < x.size:
            low = np.ceil(lb[cont_size:]).astype(np.int64)
            high = np.floor(ub[cont_size:]).astype(np.int64)
            x[cont_size:] = self.rng.integers(low, high, endpoint=True)
        return x

    def _checked_vector(self, x) -> np.ndarray:
        x = np.array(x, dtype=float).ravel()
        if x.size != self.problem.dimension():
            raise InvalidProblem(
                f"decision vector has size {x.size}, expected {self.problem.dimension()}")
        return x

    def _check_index(self, index: int):
        if not 0 <= index < len(self.individuals):
            raise InvalidIndex(f"index {index} is out of range for a population of size {len(self)}")

    def push_back(self, x):
        x = self._checked_vector(x)
        self.individuals.append(Individual(cur_x=x, cur_f=self.problem.evaluate(x)))

    def is_empty(self) -> bool:
        return not self.individuals

    def __len__(self):
        return len(self.individuals)

    def individual(self, index: int) -> Individual:
        self._check_index(index)
        return self.individuals[index]

    def decision_vector_of(self, index: int) -> np.ndarray:
        return self.individual(index).cur_x.copy()

    def fitness_of(self, index: int) -> np.ndarray:
        return self.individual(index).cur_f.copy()

    def best_index(self) -> int:
        """Index of the best individual; the first one wins on ties."""
        if self.is_empty():
            raise InvalidIndex("an empty population has no best individual")
        best = 0
        for i in range(1, len(self.individuals)):
            if self.problem.compare_fitness(self.individuals[i].cur_f, self.individuals[best].cur_f):
                best = i
        return best

    def replace_decision_vector(self, index: int, x):
        """Sets the decision vector of individual ``index`` and recomputes its fitness."""
        self._check_index(index)
        x = self._checked_vector(x)
        f = self.problem.evaluate(x)
        self.individuals[index] = Individual(cur_x=x, cur_f=f)
        logger.debug(f"Replaced individual {index}, new fitness: {f}")

    def __repr__(self):
        return f"Population(size={len(self)}, problem={self.problem!r})"
