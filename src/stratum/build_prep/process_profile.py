from dataclasses import dataclass
from typing import Optional, Union

from ..default_config import DEFAULTS
from ..errors import ConfigError


def _require_positive(name: str, value: float) -> None:
    # "not >" also rejects NaN
    if not value > 0:
        raise ConfigError(f"{name} must be positive, got {value}")


def _require_non_negative(name: str, value: float) -> None:
    if not value >= 0:
        raise ConfigError(f"{name} must be non-negative, got {value}")


def _require_range(name: str, value: float, low: float, high: float) -> None:
    if not low <= value <= high:
        raise ConfigError(f"{name} must be within [{low}, {high}], got {value}")


@dataclass
class LCDProfile:
    """
    Mask-projection (LCD / MSLA) machine and process settings.

    The pixel pitch is the LED diameter, 2 * led_radius (mm per pixel).
    """
    cols: int
    rows: int
    led_radius: float
    layer_height: float
    padding_percentage: float = DEFAULTS["LCD_PADDING_PERCENTAGE"]

    # Exposure
    exposure_time: float = DEFAULTS["LCD_EXPOSURE_TIME"]                 # s
    bottom_exposure_time: float = DEFAULTS["LCD_BOTTOM_EXPOSURE_TIME"]   # s
    bottom_layer_count: int = DEFAULTS["LCD_BOTTOM_LAYER_COUNT"]
    intensity: int = DEFAULTS["LCD_INTENSITY"]                           # 0..255

    # Motion
    final_lift_mm: float = DEFAULTS["LCD_FINAL_LIFT_MM"]
    z_feed_rate: float = DEFAULTS["LCD_Z_FEED_RATE"]                     # mm/min

    png_dir: str = DEFAULTS["LCD_PNG_DIR"]

    @property
    def pixel_pitch(self) -> float:
        return 2.0 * self.led_radius

    @property
    def build_width(self) -> float:
        return self.cols * self.pixel_pitch

    @property
    def build_height(self) -> float:
        return self.rows * self.pixel_pitch

    def exposure_for(self, exposed_index: int) -> float:
        """Exposure of the n-th exposed layer (bottom layers burn longer)."""
        if exposed_index < self.bottom_layer_count:
            return self.bottom_exposure_time
        return self.exposure_time

    def validate(self) -> None:
        """Raise ConfigError on the first violated precondition."""
        if int(self.cols) != self.cols or int(self.rows) != self.rows:
            raise ConfigError(f"pixel grid must be integral, got {self.cols}x{self.rows}")
        _require_positive("cols", self.cols)
        _require_positive("rows", self.rows)
        _require_positive("led_radius", self.led_radius)
        _require_positive("layer_height", self.layer_height)
        _require_range("padding_percentage", self.padding_percentage, 0.0, 100.0)
        _require_non_negative("exposure_time", self.exposure_time)
        _require_non_negative("bottom_exposure_time", self.bottom_exposure_time)
        _require_non_negative("bottom_layer_count", self.bottom_layer_count)
        _require_range("intensity", self.intensity, 0, 255)
        _require_non_negative("final_lift_mm", self.final_lift_mm)
        _require_positive("z_feed_rate", self.z_feed_rate)
        if not str(self.png_dir):
            raise ConfigError("png_dir must not be empty")


@dataclass
class SLAProfile:
    """
    Vector-laser (SLA) machine and process settings.

    ``hatch_pitch`` defaults to the spot diameter so adjacent fill lines touch.
    """
    spot_radius: float
    layer_height: float
    laser_power_percentage: float = DEFAULTS["SLA_LASER_POWER_PERCENTAGE"]
    laser_max_power: int = DEFAULTS["SLA_LASER_MAX_POWER"]
    dwell: float = DEFAULTS["SLA_DWELL"]                       # s
    final_lift_mm: float = DEFAULTS["SLA_FINAL_LIFT_MM"]

    # Feed rates, mm/min
    feed_rate: float = DEFAULTS["SLA_FEED_RATE"]
    travel_feed_rate: float = DEFAULTS["SLA_TRAVEL_FEED_RATE"]
    z_feed_rate: float = DEFAULTS["SLA_Z_FEED_RATE"]

    hatch_pitch: Optional[float] = None
    beam_compensation: bool = DEFAULTS["SLA_BEAM_COMPENSATION"]

    @property
    def effective_hatch_pitch(self) -> float:
        if self.hatch_pitch is not None:
            return self.hatch_pitch
        return 2.0 * self.spot_radius

    @property
    def laser_s_value(self) -> int:
        """Laser power on the controller's S scale."""
        return int(round(self.laser_power_percentage / 100.0 * self.laser_max_power))

    def validate(self) -> None:
        """Raise ConfigError on the first violated precondition."""
        _require_non_negative("spot_radius", self.spot_radius)
        _require_positive("layer_height", self.layer_height)
        _require_range("laser_power_percentage", self.laser_power_percentage, 0.0, 100.0)
        _require_positive("laser_max_power", self.laser_max_power)
        _require_non_negative("dwell", self.dwell)
        _require_non_negative("final_lift_mm", self.final_lift_mm)
        _require_positive("feed_rate", self.feed_rate)
        _require_positive("travel_feed_rate", self.travel_feed_rate)
        _require_positive("z_feed_rate", self.z_feed_rate)
        _require_positive("hatch pitch", self.effective_hatch_pitch)


PrintProfile = Union[LCDProfile, SLAProfile]


def validate_profile(profile: PrintProfile) -> None:
    """Validate any profile variant; unknown types are a ConfigError."""
    if not isinstance(profile, (LCDProfile, SLAProfile)):
        raise ConfigError(f"unsupported print profile type: {type(profile).__name__}")
    profile.validate()
