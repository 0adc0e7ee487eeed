from .num_utils import round_half_up, clamp_value, wrap_hue, nth_root, MAX_ROOT_ITERATIONS

__all__ = ["round_half_up", "clamp_value", "wrap_hue", "nth_root", "MAX_ROOT_ITERATIONS"]
