"""Engine configuration.

The board size and gravity timings are fixed for a normal game, but they are
collected here so tests and alternative front-ends can build smaller sessions.
"""

from __future__ import annotations

from dataclasses import dataclass


# Dimensions of the standard Tetris board.
WIDTH = 10
HEIGHT = 20

# Gravity interval in frames per row.  Every line-clear event lowers it by one
# until ``MIN_SPEED`` is reached.
INITIAL_SPEED = 15
MIN_SPEED = 5

# Smallest board on which every shape fits in its spawn orientation.  The I
# piece spans four columns and the other shapes span two rows.
MIN_WIDTH = 4
MIN_HEIGHT = 2


class ConfigError(ValueError):
    """Raised when an :class:`EngineConfig` holds unusable values."""


@dataclass(frozen=True)
class EngineConfig:
    """Static parameters of a game session."""

    width: int = WIDTH
    height: int = HEIGHT
    initial_speed: int = INITIAL_SPEED
    min_speed: int = MIN_SPEED

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(
                f"Board dimensions must be positive, got {self.width}x{self.height}"
            )
        if self.width < MIN_WIDTH or self.height < MIN_HEIGHT:
            raise ConfigError(
                f"Board {self.width}x{self.height} cannot hold a spawned piece; "
                f"need at least {MIN_WIDTH}x{MIN_HEIGHT}"
            )
        if self.min_speed < 1:
            raise ConfigError(f"min_speed must be at least 1, got {self.min_speed}")
        if self.initial_speed < self.min_speed:
            raise ConfigError(
                f"initial_speed ({self.initial_speed}) must not be below "
                f"min_speed ({self.min_speed})"
            )

    @property
    def spawn_x(self) -> int:
        """Column of the pivot for freshly spawned pieces."""

        return self.width // 2
