"""Rate functions mapping animation progress in [0, 1] to eased progress."""

__all__ = [
    "linear",
    "smooth",
    "ease_in_quad",
    "ease_out_quad",
    "ease_in_out_quad",
    "ease_in_cubic",
    "ease_out_cubic",
    "ease_in_out_cubic",
]


def linear(t: float) -> float:
    """Constant-speed progress: the input progress as a float."""
    return float(t)


def smooth(t: float) -> float:
    """Smoothstep-like curve with zero first and second derivatives at the ends."""
    s = 1.0 - t
    return t * t * t * (10.0 * s * s + 5.0 * s * t + t * t)


def ease_in_quad(t: float) -> float:
    return t * t


def ease_out_quad(t: float) -> float:
    return t * (2.0 - t)


def ease_in_out_quad(t: float) -> float:
    if t < 0.5:
        return 2.0 * t * t
    return 1.0 - 2.0 * (t - 1.0) * (t - 1.0)


def ease_in_cubic(t: float) -> float:
    return t * t * t


def ease_out_cubic(t: float) -> float:
    return t * (t - 1.0) * (t - 1.0) + 1.0


def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4.0 * t * t * t
    return 1.0 - 4.0 * (t - 1.0) * (t - 1.0) * (t - 1.0)