from typing import Any, Dict
CONFIG_VERSION = "1.0.0"
DEFAULTS: Dict[str, Any] = {
    # Geometry tolerances
    "POINT_EPS": 1e-6,               # 2D point coincidence, per axis (mm)
    "Z_EPS": 1e-9,                   # coplanar edge / zero-extent threshold
    "SCALE_EPS": 1e-9,               # |factor - 1| below this is a no-op
    "CLIPPER_SCALE": 10000.0,        # 1 unit = 0.0001 mm for pyclipper

    # LCD / MSLA profile defaults
    "LCD_PADDING_PERCENTAGE": 10.0,  # margin kept free on each side (%)
    "LCD_EXPOSURE_TIME": 2.5,        # s
    "LCD_BOTTOM_EXPOSURE_TIME": 30.0,  # s
    "LCD_BOTTOM_LAYER_COUNT": 3,
    "LCD_INTENSITY": 255,            # 0..255
    "LCD_FINAL_LIFT_MM": 50.0,
    "LCD_PNG_DIR": "layers",
    "LCD_Z_FEED_RATE": 150.0,        # mm/min

    # SLA profile defaults
    "SLA_LASER_POWER_PERCENTAGE": 50.0,
    "SLA_LASER_MAX_POWER": 255,      # S value at 100 %
    "SLA_DWELL": 0.0,                # s, after each Z move
    "SLA_FINAL_LIFT_MM": 50.0,
    "SLA_FEED_RATE": 1200.0,         # mm/min, exposing moves
    "SLA_TRAVEL_FEED_RATE": 6000.0,  # mm/min, rapid moves
    "SLA_Z_FEED_RATE": 150.0,        # mm/min
    "SLA_BEAM_COMPENSATION": False,

    # Mask artifacts
    "MASK_NAME_WIDTH": 5,            # zero padding of mask file names
    "MASK_SUFFIX": ".png",
}
