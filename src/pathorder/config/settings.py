"""Configuration settings for pathorder."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from pathorder.domain.point import Point


class SeamType(str, Enum):
    """Policy for choosing the start vertex (z-seam) of a contour."""

    SHORTEST = "shortest"
    BACK = "back"
    USER_SPECIFIED = "user_specified"
    SHARPEST_CORNER = "sharpest_corner"
    RANDOM = "random"


class CornerPreference(str, Enum):
    """Which corners should attract the seam.

    Convex and concave assume counter-clockwise contours (outer walls); on
    clockwise contours (holes) the two swap.
    """

    NONE = "none"
    CONVEX = "convex"
    CONCAVE = "concave"
    ANY = "any"
    WEIGHTED = "weighted"


class ZSeamConfig(BaseModel):
    """Criteria that define where each contour starts printing.

    Immutable once constructed; the same instance may be shared by any number
    of optimizers.
    """

    model_config = ConfigDict(frozen=True)

    type: SeamType = Field(
        default=SeamType.SHORTEST,
        description="Seam placement policy",
    )
    position: tuple[int, int] = Field(
        default=(0, 0),
        description="Anchor position used by the back and user_specified policies",
    )
    corner_pref: CornerPreference = Field(
        default=CornerPreference.NONE,
        description="Corner preference used to break near-ties",
    )
    corner_shift: int = Field(
        default=10000,
        ge=0,
        description="Upper bound on the corner pull under the shortest policy",
    )
    random_seed: int = Field(
        default=0,
        description="Seed for the random policy",
    )

    @property
    def anchor(self) -> Point:
        """Anchor position as a Point."""
        return Point(*self.position)

    @property
    def depends_on_position(self) -> bool:
        """True when the seam vertex depends on where the tour currently is."""
        if self.type == SeamType.SHORTEST:
            return True
        return self.type == SeamType.SHARPEST_CORNER and self.corner_pref == CornerPreference.NONE


class LineOrderConfig(BaseModel):
    """Scoring parameters for the line order optimizer."""

    model_config = ConfigDict(frozen=True)

    angle_weight: float = Field(
        default=100.0,
        ge=0.0,
        description="Travel distance a perfect 90 degree turn is worth",
    )
    detour_factor: float = Field(
        default=2.0,
        gt=1.0,
        description="Multiplier applied to travel that has to leave the combing boundary",
    )
    detour_offset: float = Field(
        default=0.0,
        ge=0.0,
        description="Constant added to travel that has to leave the combing boundary",
    )
    search_radius: int | None = Field(
        default=None,
        gt=0,
        description="Initial spatial index search radius (None = index cell size)",
    )


class GridConfig(BaseModel):
    """Spatial index settings."""

    cell_size: int = Field(
        default=2000,
        gt=0,
        description="Edge length of a grid cell in machine units",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class PathOrderSettings(BaseModel):
    """Main application settings."""

    seam: ZSeamConfig = Field(default_factory=ZSeamConfig)
    line_order: LineOrderConfig = Field(default_factory=LineOrderConfig)
    grid: GridConfig = Field(default_factory=GridConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PathOrderSettings:
    """Get default application settings."""
    return PathOrderSettings()
