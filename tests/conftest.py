"""
Pytest fixtures shared by the simplex_refine tests.
"""

import numpy as np
import pytest

from simplex_refine import FunctionProblem, Population


def shifted_quadratic(x):
    return (x[0] - 3.0) ** 2 + (x[1] + 1.0) ** 2


@pytest.fixture
def quadratic_problem():
    """f(x, y) = (x - 3)^2 + (y + 1)^2 on [-10, 10]^2."""
    return FunctionProblem(shifted_quadratic, [-10.0, -10.0], [10.0, 10.0])


@pytest.fixture
def small_box_problem():
    """Same objective on [-2, 2]^2, the optimum lies outside the box."""
    return FunctionProblem(shifted_quadratic, [-2.0, -2.0], [2.0, 2.0])


@pytest.fixture
def mixed_integer_problem():
    """Two continuous variables followed by two integer ones."""
    def objective(x):
        return (x[0] - 1.5) ** 2 + (x[1] - 0.5) ** 2 + x[2] ** 2 + abs(x[3])

    return FunctionProblem(objective, [-5.0, -5.0, -3.0, -3.0], [5.0, 5.0, 3.0, 3.0],
                           integer_dimension=2)


@pytest.fixture
def population_at_origin(quadratic_problem):
    """Population whose best individual sits at (0, 0)."""
    pop = Population(quadratic_problem)
    pop.push_back([8.0, 8.0])
    pop.push_back([0.0, 0.0])
    pop.push_back([-9.0, 7.0])
    return pop


def snapshot(pop):
    return [(ind.cur_x.copy(), ind.cur_f.copy()) for ind in pop.individuals]


def assert_unchanged(pop, before):
    assert len(pop) == len(before)
    for ind, (x, f) in zip(pop.individuals, before):
        np.testing.assert_array_equal(ind.cur_x, x)
        np.testing.assert_array_equal(ind.cur_f, f)
