import copy

from simplex_refine.population import Population


class BaseAlgorithm:
    """
    Common interface of the algorithms that can be plugged into an island.

    Subclasses implement ``refine`` and usually ``human_readable_extra``.
    """

    name = "Base algorithm"

    def refine(self, population: Population):
        raise NotImplementedError

    def clone(self):
        """Returns an independent copy with the same configuration."""
        return copy.deepcopy(self)

    def human_readable_extra(self) -> str:
        return ""

    def describe(self) -> str:
        return f"Algorithm name: {self.name}\n{self.human_readable_extra()}"

    def __str__(self):
        return self.describe()
