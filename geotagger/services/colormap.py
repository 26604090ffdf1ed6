# geotagger/services/colormap.py
import math

from ..core.errors import DegenerateRangeError
from ..schemas.raster import ColorScheme

RGB = tuple[int, int, int]

def _channel(x: float) -> int:
    # redondeo "half-up" y recorte a 0..255
    return max(0, min(255, int(math.floor(x + 0.5))))

def normalize(value: float, vmin: float, vmax: float) -> float:
    if not vmax > vmin:
        raise DegenerateRangeError(vmin, vmax)
    t = (value - vmin) / (vmax - vmin)
    return min(1.0, max(0.0, t))

def _vegetation(t: float) -> RGB:
    # rojo (pobre) -> amarillo -> verde (excelente)
    if t < 0.3:
        return _channel(220 - t * 200), _channel(50 + t * 150), 50
    if t < 0.6:
        return _channel(160 - (t - 0.3) * 300), 200, 50
    return 50, _channel(200 - (t - 0.6) * 100), _channel(50 + (t - 0.6) * 150)

def _moisture(t: float) -> RGB:
    # blanco (seco) -> azul (húmedo)
    return _channel(255 - t * 200), _channel(255 - t * 100), 255

def _temperature(t: float) -> RGB:
    # azul (frío) -> rojo (cálido), dos tramos con inflexión en 0.5
    if t < 0.5:
        return _channel(100 + t * 310), _channel(100 + t * 200), 255
    return 255, _channel(255 - (t - 0.5) * 400), _channel(255 - (t - 0.5) * 510)

_GRADIENTS = {
    ColorScheme.VEGETATION: _vegetation,
    ColorScheme.MOISTURE: _moisture,
    ColorScheme.TEMPERATURE: _temperature,
}

def gradient_for(scheme: ColorScheme | str):
    return _GRADIENTS[ColorScheme(scheme)]

def color_for(value: float, vmin: float, vmax: float, scheme: ColorScheme | str) -> RGB:
    """
    Map ``value`` in ``[vmin, vmax]`` to an RGB triple for ``scheme``.

    Raises DegenerateRangeError when ``vmax <= vmin``; values outside the
    range are clamped to its ends.
    """
    return gradient_for(scheme)(normalize(value, vmin, vmax))

def to_css(rgb: RGB) -> str:
    return f"rgb({rgb[0]}, {rgb[1]}, {rgb[2]})"
