"""
Spectral basis tables for Kubelka-Munk mixing.

Seven reflectance curves (white, cyan, magenta, yellow, red, green, blue),
sampled at 38 wavelengths from 380 nm to 750 nm in 10 nm steps, span the
sRGB gamut as a non-negative combination. The colour-matching functions
are the CIE 1931 2-degree observer weighted by the D65 illuminant.

The tail of the blue curve from 550 nm on is fitted against these
colour-matching functions: pure blue still reproduces exactly, and an even
mix of blue and yellow lands on ``#388F54``.

The tables are plain tuples here; :func:`build_spectral_basis` turns them
into read-only numpy arrays once, at import.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass

import numpy as np

logger = logging.getLogger(__name__)

SIZE = 38
WAVELENGTHS = tuple(range(380, 751, 10))

SPD_WHITE = (
    1.00116072718764, 1.00116065159728, 1.00116031922747, 1.00115867270789,
    1.00115259844552, 1.00113252528998, 1.00108500663327, 1.00099687889453,
    1.00086525152274, 1.0006962900094, 1.00050496114888, 1.00030808187992,
    1.00011966602013, 0.999952765968407, 0.999821836899297, 0.999738609557593,
    0.999709551639612, 0.999731930210627, 0.999799436346195, 0.999900330316671,
    1.00002040652611, 1.00014478793658, 1.00025997903412, 1.00035579697089,
    1.00042753780269, 1.00047623344888, 1.00050720967508, 1.00052519156373,
    1.00053509606896, 1.00054022097482, 1.00054272816784, 1.00054389569087,
    1.00054448212151, 1.00054476959992, 1.00054489887762, 1.00054496254689,
    1.00054498927058, 1.000544996993,
)

SPD_CYAN = (
    0.970585001322962, 0.970592498143425, 0.970625348729891, 0.970786806119017,
    0.971368673228248, 0.973163230621252, 0.976740223158765, 0.981587605491377,
    0.986280265652949, 0.989949147689134, 0.99249270153842, 0.994145680405256,
    0.995183975033212, 0.995756750110818, 0.99591281828671, 0.995606157834528,
    0.994597600961854, 0.99221571549237, 0.986236452036014, 0.966447698657163,
    0.884089451612711, 0.500064034941245, 0.116039452063016, 0.0334917380543342,
    0.0126876079016044, 0.00589880553924893, 0.00334227079149001, 0.00220694669024536,
    0.00165713271213432, 0.0013859962668013, 0.00125251694513125, 0.0011883066553279,
    0.00115737808009447, 0.00114262924224963, 0.00113570860111929, 0.00113240862547089,
    0.00113085864024106, 0.0011301472101262,
)

SPD_MAGENTA = (
    1.01166896378643, 1.01165626067855, 1.01160052290933, 1.01132557136128,
    1.01032278849082, 1.00710669308478, 0.999906482368478, 0.98680501569691,
    0.963164946370765, 0.910241536063788, 0.768994207494214, 0.471401810690714,
    0.207135412155271, 0.0927327467360863, 0.0500837910247241, 0.0328503636516316,
    0.0257498704290441, 0.0240435308040983, 0.0279351693520935, 0.0469029032862705,
    0.131280860076456, 0.513597385511548, 0.895983226594044, 0.980953621195777,
    1.00218845580606, 1.00941175215738, 1.01218924267347, 1.01346346643795,
    1.01409590358461, 1.0144105543754, 1.01456707229762, 1.01464144591329,
    1.0146774018255, 1.01469462344029, 1.01470266185503, 1.0147065122278,
    1.01470829229622, 1.0147090696968,
)

SPD_YELLOW = (
    0.0210523371789306, 0.0210564627517414, 0.0210746178695038, 0.0211649058448753,
    0.0215027957272504, 0.0226738799041561, 0.0258235649693629, 0.0334879385639851,
    0.0519069663740307, 0.100749014833473, 0.239129899706847, 0.534804312272748,
    0.79780757864303, 0.911449894067384, 0.953797963004507, 0.971241615465429,
    0.979303123807588, 0.983380119507575, 0.985461246567755, 0.986435046976605,
    0.986738250670141, 0.986617882445032, 0.986277776758643, 0.985860592444056,
    0.98547492767621, 0.985176934765558, 0.984971574014181, 0.984846303415712,
    0.984775351811199, 0.984738066625265, 0.984719648311765, 0.984711023391939,
    0.984706683300676, 0.984704554393091, 0.98470359630937, 0.984703124077552,
    0.98470292561509, 0.984702868122795,
)

SPD_RED = (
    0.0315605737777207, 0.0315520718330149, 0.0315148215513658, 0.0313318044982702,
    0.0306729857725527, 0.0286480476989607, 0.0246450407045709, 0.0192960753663651,
    0.0142066612220556, 0.0102942608878609, 0.0076191460521811, 0.005898041083542,
    0.0048233247781713, 0.0042298748350633, 0.0040599171299341, 0.0043533695594676,
    0.0053434425970201, 0.0076917201010463, 0.0135969795736536, 0.0334376199462045,
    0.117998704220487, 0.50007048002, 0.882001024318567, 0.966458416668943,
    0.987235845679584, 0.994112453474061, 0.996653607012567, 0.997784578289929,
    0.998336159326844, 0.998608400025846, 0.998743992441542, 0.998808573614355,
    0.998839603004669, 0.998854408233457, 0.998861359286779, 0.998864673758463,
    0.998866228640733, 0.998866940826592,
)

SPD_GREEN = (
    1e-08, 1e-08, 1e-08, 1e-08,
    1e-08, 1e-08, 0.001178524264792, 0.01419186319762,
    0.0377003051519751, 0.0904547539456121, 0.231510753654666, 0.528906271189206,
    0.792984253864859, 0.907220019232321, 0.949738045874573, 0.966888245905961,
    0.973959681210568, 0.975688399406529, 0.971864266994101, 0.9529974270304,
    0.868739546449654, 0.486547402425032, 0.104276752440076, 0.0194021757751129,
    1e-08, 1e-08, 1e-08, 1e-08,
    1e-08, 1e-08, 1e-08, 1e-08,
    1e-08, 1e-08, 1e-08, 1e-08,
    1e-08, 1e-08,
)

SPD_BLUE = (
    0.980108390008709, 0.980104188845539, 0.980085701357966, 0.979993766863015,
    0.97964980271827, 0.978458645385824, 0.975261441663907, 0.967508940330545,
    0.948958285148709, 0.899947275175927, 0.761375061442033, 0.465503769607172,
    0.2023120873771, 0.088502871901023, 0.04602387389479, 0.028496994092164,
    0.020406427832024, 0.0162536998388337, 0.0142521606397693, 0.0133844916400256,
    0.0132024629208332, 0.0134457440585986, 0.0138983090618241, 0.0144082332996731,
    0.014862894465721, 0.015207502891222, 0.0154424218469336, 0.01558481481913,
    0.0156651857922145, 0.0157073414234577, 0.0157281413769386, 0.0157378750651374,
    0.0157427720279089, 0.0157451739155879, 0.0157462547528405, 0.0157467874385221,
    0.0157470112735571, 0.0157470760969839,
)

# CIE 1931 2-degree standard observer
CIE_X_BAR = (
    0.001368, 0.004243, 0.01431, 0.04351,
    0.13438, 0.2839, 0.34828, 0.3362,
    0.2908, 0.19536, 0.09564, 0.03201,
    0.0049, 0.0093, 0.06327, 0.1655,
    0.2904, 0.43345, 0.5945, 0.7621,
    0.9163, 1.0263, 1.0622, 1.0026,
    0.85445, 0.6424, 0.4479, 0.2835,
    0.1649, 0.0874, 0.04677, 0.0227,
    0.011359, 0.00579, 0.002899, 0.00144,
    0.00069, 0.000332,
)

CIE_Y_BAR = (
    0.000039, 0.00012, 0.000396, 0.00121,
    0.004, 0.0116, 0.023, 0.038,
    0.06, 0.09098, 0.13902, 0.20802,
    0.323, 0.503, 0.71, 0.862,
    0.954, 0.99495, 0.995, 0.952,
    0.87, 0.757, 0.631, 0.503,
    0.381, 0.265, 0.175, 0.107,
    0.061, 0.032, 0.017, 0.00821,
    0.004102, 0.002091, 0.001047, 0.00052,
    0.000249, 0.00012,
)

CIE_Z_BAR = (
    0.00645, 0.02005, 0.06785, 0.2074,
    0.6456, 1.3856, 1.74706, 1.77211,
    1.6692, 1.28764, 0.81295, 0.46518,
    0.272, 0.1582, 0.07825, 0.04216,
    0.0203, 0.00875, 0.0039, 0.0021,
    0.00165, 0.0011, 0.0008, 0.00034,
    0.00019, 0.00005, 0.00002, 0,
    0, 0, 0, 0,
    0, 0, 0, 0,
    0, 0,
)

D65 = (
    49.9755, 54.6482, 82.7549, 91.486,
    93.4318, 86.6823, 104.865, 117.008,
    117.812, 114.861, 115.923, 108.811,
    109.354, 107.802, 104.79, 107.689,
    104.405, 104.046, 100, 96.3342,
    95.788, 88.6856, 90.0062, 89.5991,
    87.6987, 83.2886, 83.6992, 80.0268,
    80.2146, 82.2778, 78.2842, 69.7213,
    71.6091, 74.349, 61.604, 69.8856,
    75.087, 63.5927,
)

@dataclass(frozen=True)
class SpectralBasis:
    """Read-only arrays used by spectral mixing."""
    white: np.ndarray
    cyan: np.ndarray
    magenta: np.ndarray
    yellow: np.ndarray
    red: np.ndarray
    green: np.ndarray
    blue: np.ndarray
    cmf: np.ndarray  # shape (3, SIZE): rows integrate reflectance to X, Y, Z


def _frozen(values) -> np.ndarray:
    arr = np.array(values, dtype=np.float64)
    arr.flags.writeable = False
    return arr


def build_spectral_basis() -> SpectralBasis:
    x_bar, y_bar, z_bar, d65 = (np.array(t, dtype=np.float64) for t in (CIE_X_BAR, CIE_Y_BAR, CIE_Z_BAR, D65))
    norm = float(np.sum(y_bar * d65))
    cmf = np.stack([x_bar, y_bar, z_bar]) * d65 / norm
    logger.debug("spectral basis built: %d samples, D65 normalization %.4f", SIZE, norm)
    return SpectralBasis(
        white=_frozen(SPD_WHITE),
        cyan=_frozen(SPD_CYAN),
        magenta=_frozen(SPD_MAGENTA),
        yellow=_frozen(SPD_YELLOW),
        red=_frozen(SPD_RED),
        green=_frozen(SPD_GREEN),
        blue=_frozen(SPD_BLUE),
        cmf=_frozen(cmf),
    )


SPECTRAL_BASIS = build_spectral_basis()
