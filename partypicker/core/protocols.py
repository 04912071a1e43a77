"""
Protocol definitions for the injected capabilities.

These protocols define the interfaces that collaborators must follow.
Using Protocol allows duck typing while still providing type checking support.
"""
from typing import Protocol, Any, Dict, List, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """
    Source of uniform draws used by the picker and the simulator.

    Implementations:
    - random.Random (default): seedable Mersenne Twister
    - Test doubles returning scripted draws
    """

    def random(self) -> float:
        """
        Draw the next value.

        Returns:
            Float uniformly distributed in [0, 1)
        """
        ...


@runtime_checkable
class TrackSource(Protocol):
    """
    One attempt in a track loading chain.

    Implementations:
    - JsonFileSource: JSON document on disk (bundled or configured)
    - StaticSource: hard-coded fallback records
    """

    name: str

    def __call__(self) -> List[Dict[str, Any]]:
        """
        Fetch raw track records.

        Returns:
            List of raw records, each with at least a name

        Raises:
            DataLoadFailure if the source cannot be read or parsed
        """
        ...
