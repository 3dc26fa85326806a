import numpy as np

from simplex_refine.problem import BaseProblem


class ObjectiveAdapter:
    """
    Scalar objective over the continuous part of a decision vector.

    Keeps a private copy of the full decision vector; each call overwrites its
    continuous prefix in place, so the integer suffix stays as it was given.
    """

    def __init__(self, problem: BaseProblem, decision_vector, continuous_size: int):
        self.problem = problem
        self.x = np.array(decision_vector, dtype=float)
        self.continuous_size = int(continuous_size)
        self.nfev = 0

    def __call__(self, v) -> float:
        self.x[:self.continuous_size] = v
        self.nfev += 1
        return float(self.problem.evaluate(self.x)[0])
