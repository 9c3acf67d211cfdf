from ..default_config import DEFAULTS

# ===== Tolerances =====
POINT_EPS = DEFAULTS["POINT_EPS"]    # 2D endpoints closer than this on both axes are one point
Z_EPS = DEFAULTS["Z_EPS"]            # |dz| below this: edge treated as coplanar
SCALE_EPS = DEFAULTS["SCALE_EPS"]    # scale factors within this of 1.0 leave the mesh untouched

# ===== pyclipper integer grid =====
CLIPPER_SCALE = DEFAULTS["CLIPPER_SCALE"]
INV_CLIPPER_SCALE = 1.0 / CLIPPER_SCALE
