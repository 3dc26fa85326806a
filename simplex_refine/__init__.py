from simplex_refine.algorithm import BaseAlgorithm
from simplex_refine.bounds import project_to_bounds
from simplex_refine.exceptions import (
    InvalidConfiguration,
    InvalidIndex,
    InvalidProblem,
    OutOfMemory,
    SimplexRefineError,
    UnsupportedProblem,
)
from simplex_refine.local_search import LocalSearchParams, NelderMeadLocalSearch
from simplex_refine.objective import ObjectiveAdapter
from simplex_refine.population import Individual, Population
from simplex_refine.problem import BaseProblem, FunctionProblem
from simplex_refine.simplex import minimize_simplex

__all__ = [
    "BaseAlgorithm",
    "BaseProblem",
    "FunctionProblem",
    "Individual",
    "InvalidConfiguration",
    "InvalidIndex",
    "InvalidProblem",
    "LocalSearchParams",
    "NelderMeadLocalSearch",
    "ObjectiveAdapter",
    "OutOfMemory",
    "Population",
    "SimplexRefineError",
    "UnsupportedProblem",
    "minimize_simplex",
    "project_to_bounds",
]
