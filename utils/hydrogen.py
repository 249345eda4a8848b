"""Energy needed to produce and compress hydrogen for a fuel-cell vehicle.

Kept apart from :mod:`utils.environment` because its constants are less
settled: the historical dataset defined the compressor and cell efficiencies
twice. The defaults follow the last assignment (0.95 and 0.54). Pass a
dataset built with ``dataset_from_mapping`` to evaluate other choices.

Cylinders divide by the compressor efficiency and low pressure by the cell
efficiency. The historical reference figures used the opposite pairing, so
they reproduce only with the two first-assigned factors swapped.
Zero efficiencies yield ``inf`` rather than raising.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Optional

from utils.dataset import EnvironmentDataset
from utils.environment import ieee_divide


@dataclass(frozen=True)
class HydrogenChainResult:
    """Each stage of the chain for one nominal energy figure."""

    nominal_energy: float
    energy_h2_cylinders: float
    energy_h2_low_pressure: float
    energy_consumed: float
    hydrogen_mass: float
    liters_required: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


class HydrogenChain:
    def __init__(self, dataset: EnvironmentDataset) -> None:
        self.dataset = dataset

    def energy_h2_cylinders(self, nominal_energy: float) -> float:
        """Energy stored in high-pressure cylinders after compressor losses."""

        return ieee_divide(nominal_energy, self.dataset.compresor_eficiency_factor)

    def energy_h2_low_pressure(self, energy_h2_cylinders: float) -> float:
        """Low-pressure hydrogen energy needed upstream of the fuel cell."""

        return ieee_divide(energy_h2_cylinders, self.dataset.cell_fuel_eficiency_factor)

    def energy_consumed(self, energy_h2_low_pressure: float) -> float:
        """Electrical energy drawn by electrolysis."""

        return ieee_divide(energy_h2_low_pressure, self.dataset.electrolysis_eficiency_factor)

    def hydrogen_mass(self, energy: float) -> float:
        """Hydrogen mass (kg) holding ``energy`` at the dataset energy density."""

        return ieee_divide(energy, self.dataset.hydrogen_energy_density)

    def liters_required(self, hydrogen_mass: float) -> float:
        """Liters of water split to obtain ``hydrogen_mass``."""

        return hydrogen_mass * self.dataset.water_h2_weight

    def run(self, nominal_energy: Optional[float] = None) -> HydrogenChainResult:
        """Evaluate every stage; ``nominal_energy`` defaults to the dataset value.

        Mass is derived from the low-pressure energy, not the electrolysis
        draw, since that is the hydrogen actually delivered to the vehicle.
        """

        nominal = self.dataset.nominal_energy if nominal_energy is None else nominal_energy
        cylinders = self.energy_h2_cylinders(nominal)
        low_pressure = self.energy_h2_low_pressure(cylinders)
        mass = self.hydrogen_mass(low_pressure)
        return HydrogenChainResult(
            nominal_energy=nominal,
            energy_h2_cylinders=cylinders,
            energy_h2_low_pressure=low_pressure,
            energy_consumed=self.energy_consumed(low_pressure),
            hydrogen_mass=mass,
            liters_required=self.liters_required(mass),
        )


__all__ = ["HydrogenChain", "HydrogenChainResult"]
