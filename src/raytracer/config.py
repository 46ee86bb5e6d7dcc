# config.py
"""
Configuration settings for the ray tracer
"""
from typing import Any, Dict

# Lower bound of the ray parameter for scene queries; keeps a scattered ray
# from re-hitting the surface it starts on.
T_MIN = 0.001

# Rendering settings
RENDER_SETTINGS = {
    'aspect_ratio': 16.0 / 9.0,
    'output_path': 'render.png',
    'sky_horizon_color': (1.0, 1.0, 1.0),
    'sky_zenith_color': (0.5, 0.7, 1.0),
    'log_format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
}

# Quality presets: samples per pixel, bounce limit and target image width
QUALITY_LEVELS = {
    "interactive": {"samples": 5, "max_depth": 10, "image_width": 160},
    "balanced": {"samples": 50, "max_depth": 25, "image_width": 400},
    "high_quality": {"samples": 100, "max_depth": 50, "image_width": 800},
}

# Window settings for the real-time viewer
DISPLAY_SETTINGS = {
    'upscale': 5,
    'caption': 'Ray Tracer',
}

def get_quality(name: str) -> Dict[str, Any]:
    """Return a copy of the named quality preset."""
    try:
        return dict(QUALITY_LEVELS[name])
    except KeyError:
        raise KeyError(
            f"Unknown quality level {name!r}; expected one of {sorted(QUALITY_LEVELS)}"
        ) from None
