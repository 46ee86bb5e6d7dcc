# renderer/tone_mapping.py
from enum import Enum
import numpy as np

class Gamma(Enum):
    """Display encoding applied to linear colors before quantization."""
    GAMMA2 = 2

def gamma2_to_rgba8(linear):
    """
    Encode linear RGB colors with a square-root gamma into 8-bit RGBA.

    Accepts any array whose last axis holds the three channels. Channels are
    truncated and saturated to 0..255 (NaN maps to 0) and alpha is fully opaque.
    """
    linear = np.asarray(linear, dtype=np.float64)
    encoded = np.sqrt(np.maximum(linear, 0.0)) * 255.0
    encoded = np.nan_to_num(encoded, nan=0.0, posinf=255.0)
    channels = np.clip(np.floor(encoded), 0, 255).astype(np.uint8)
    alpha = np.full(linear.shape[:-1] + (1,), 255, dtype=np.uint8)
    return np.concatenate([channels, alpha], axis=-1)

def encode_pixels(linear, gamma: Gamma = Gamma.GAMMA2):
    if gamma is Gamma.GAMMA2:
        return gamma2_to_rgba8(linear)
    raise ValueError(f"Unsupported gamma mode: {gamma!r}")
