from .linear import mix, average, flatten_alpha, trunc_alpha, default_background
from .spectral import spectral_mix, reflectance, kubelka_munk
from .spectral_data import SPECTRAL_BASIS, SpectralBasis, build_spectral_basis

__all__ = [
    "mix", "average", "flatten_alpha", "trunc_alpha", "default_background",
    "spectral_mix", "reflectance", "kubelka_munk",
    "SPECTRAL_BASIS", "SpectralBasis", "build_spectral_basis",
]
