from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MAX_ENERGY = 100


@dataclass
class Participant:
    """The slice of a player character that movement cares about.

    Stats, inventory and class data belong to other systems; only energy is
    consulted and spent here.
    """

    name: str = "Adventurer"
    max_energy: int = DEFAULT_MAX_ENERGY
    energy: int = DEFAULT_MAX_ENERGY

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            self.name = "Adventurer"
        self.max_energy = max(1, int(self.max_energy))
        self.set_energy(self.energy)

    def set_energy(self, value: int) -> int:
        self.energy = max(0, min(int(value), self.max_energy))
        return self.energy

    def spend_energy(self, amount: int) -> int:
        return self.set_energy(self.energy - amount)
