from saltsim.genetic.gene import Gene, Calculate, MUTATION_RATE, crossover
from saltsim.genetic.lookup import Lookup, LookupFilter, LookupSide, LookupStatistic

__all__ = [
    "Gene", "Calculate", "MUTATION_RATE", "crossover",
    "Lookup", "LookupFilter", "LookupSide", "LookupStatistic",
]
