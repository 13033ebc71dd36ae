from .gather import gather
from .race import race, RacePolicy

__all__ = (
    # Policies
    "RacePolicy",
    # Gather
    "gather",
    # Race
    "race",
)
