import logging
import os
from typing import Optional, Tuple, List

import matplotlib.pyplot as plt
import numpy as np

from simplex_refine import FunctionProblem, NelderMeadLocalSearch, Population
from simplex_refine.log_utils import setup_logging

folder = "logs/log_local_search"


def shifted_rosenbrock(x: np.ndarray) -> float:
    # last component is an integer offset added to the optimum value
    z = x[:-1] - 1.0
    return float(np.sum(100.0 * (z[1:] - z[:-1] ** 2) ** 2 + (1.0 - z[:-1]) ** 2) + abs(x[-1]))


def run_optimization(dim: int = 5, pop_size: int = 20, num_runs: int = 5,
                     max_iter: int = 2000, tol: float = 1e-8, step_size: float = 0.5,
                     seed: Optional[int] = None) -> Tuple[List[float], List[np.ndarray]]:
    """
    Refine the best individual of random populations several times.

    Args:
        dim: Number of continuous variables
        pop_size: Individuals per population
        num_runs: Number of independent runs
        seed: Random seed for reproducibility

    Returns:
        Tuple of (best_fitness_values, best_solutions)
    """
    base_seed = 42 if seed is None else seed
    os.makedirs(folder, exist_ok=True)
    problem = FunctionProblem(shifted_rosenbrock,
                              lower_bounds=[-5.0] * dim + [-3.0],
                              upper_bounds=[5.0] * dim + [3.0],
                              integer_dimension=1)
    algorithm = NelderMeadLocalSearch(max_iter=max_iter, tol=tol, step_size=step_size)
    logging.info(f"Using algorithm:\n{algorithm.describe()}")

    best_values = []
    best_solutions = []
    for run in range(num_runs):
        logging.info(f"Starting run {run + 1}/{num_runs}")
        pop = Population(problem, size=pop_size, seed=base_seed + run)
        best_idx = pop.best_index()
        logging.info(f"Initial best fitness: {pop.fitness_of(best_idx)[0]:.6e}")

        result = algorithm.refine(pop)

        best_values.append(pop.fitness_of(best_idx)[0])
        best_solutions.append(pop.decision_vector_of(best_idx))
        logging.info(f"Run {run + 1} completed. Best fitness: {best_values[-1]:.6e}, "
                     f"solution: {best_solutions[-1]}")

        plt.plot(range(1, len(result.history) + 1), result.history)
        plt.xlabel('Iteration')
        plt.ylabel('Best fitness')
        plt.title('Convergence Plot')
        plt.yscale('log')
        plt.tight_layout()
        plt.savefig(os.path.join(folder, f"convergence_run{run + 1}.png"))
        plt.close()

    logging.info(f"Best fitness values: {best_values}")
    logging.info(f"Mean fitness: {np.mean(best_values)}")
    logging.info(f"Std fitness: {np.std(best_values)}")
    return best_values, best_solutions


if __name__ == "__main__":
    log_filename = setup_logging(folder)
    best_values, best_solutions = run_optimization()
    print(f"Best fitness values: {best_values}")
    print(f"Mean fitness: {np.mean(best_values)}")
    print(f"Log written to {log_filename}")
