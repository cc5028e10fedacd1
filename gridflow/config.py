"""Configuration defaults for lattice construction and maze generation."""

from dataclasses import dataclass


@dataclass
class LatticeConfig:
    """Defaults used by lattice builders and the command line."""

    # Lattice size used when none is given
    rows: int = 26
    cols: int = 60

    # Cost of entering an unweighted cell
    default_weight: int = 1

    # Largest weight expressible as a single digit in ASCII maps
    max_weight: int = 9

    # Probability that a random maze walls a given cell
    wall_density: float = 0.3

    def clamp_density(self, density: float) -> float:
        """Clamp a wall density into the closed interval [0, 1]."""
        return max(0.0, min(float(density), 1.0))


# Global configuration instance
LATTICE_CONFIG = LatticeConfig()
