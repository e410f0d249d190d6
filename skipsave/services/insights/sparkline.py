from decimal import Decimal
from typing import Sequence, Union
from xml.sax.saxutils import escape

DEFAULT_COLOR = "hsl(18, 72%, 42%)"
PADDING = 10  # vertical, top and bottom

Number = Union[int, float, Decimal]


def sparkline_points(data: Sequence[Number], width: float, height: float) -> list[tuple[float, float]]:
    values = [float(v) for v in data]
    top = max(values + [0.0])
    bottom = min(values + [0.0])
    span = (top - bottom) or 1.0
    steps = (len(values) - 1) or 1

    return [
        (index / steps * width, height - (value - bottom) / span * (height - 2 * PADDING) - PADDING)
        for index, value in enumerate(values)
    ]


def _smooth_segments(points: list[tuple[float, float]]) -> str:
    # each segment bends through the midpoint, then lands on the point
    parts = []
    for (px, py), (x, y) in zip(points, points[1:]):
        mid_x, mid_y = (px + x) / 2, (py + y) / 2
        parts.append(f"Q {px:.2f} {py:.2f} {mid_x:.2f} {mid_y:.2f}")
        parts.append(f"Q {x:.2f} {y:.2f} {x:.2f} {y:.2f}")
    return " ".join(parts)


def line_path(points: list[tuple[float, float]]) -> str:
    x0, y0 = points[0]
    return f"M {x0:.2f} {y0:.2f} {_smooth_segments(points)}".strip()


def area_path(points: list[tuple[float, float]], height: float) -> str:
    x0, y0 = points[0]
    x_last = points[-1][0]
    body = _smooth_segments(points)
    return f"M {x0:.2f} {height:.2f} L {x0:.2f} {y0:.2f} {body} L {x_last:.2f} {height:.2f} Z".replace("  ", " ")


def render_sparkline(data: Sequence[Number], width: int = 300, height: int = 80, color: str = DEFAULT_COLOR) -> str:
    """Render a smoothed area+line chart as an SVG document.

    An empty series yields a placeholder message instead of an empty chart.
    """
    color = escape(color, {'"': "&quot;"})
    header = (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">'
    )

    if not data:
        return (
            f"{header}"
            f'<text x="{width / 2:g}" y="{height / 2:g}" text-anchor="middle" dominant-baseline="middle" '
            f'font-family="sans-serif" font-size="14" fill="#888">No data yet</text>'
            f"</svg>"
        )

    points = sparkline_points(data, width, height)
    return (
        f"{header}"
        f'<defs><linearGradient id="sparkline-fill" x1="0" y1="0" x2="0" y2="1">'
        f'<stop offset="0" stop-color="{color}" stop-opacity="0.3"/>'
        f'<stop offset="1" stop-color="{color}" stop-opacity="0"/>'
        f"</linearGradient></defs>"
        f'<path d="{area_path(points, height)}" fill="url(#sparkline-fill)" stroke="none"/>'
        f'<path d="{line_path(points)}" fill="none" stroke="{color}" stroke-width="2" '
        f'stroke-linecap="round" stroke-linejoin="round"/>'
        f"</svg>"
    )
