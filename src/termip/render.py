"""Turn the current session state into one complete frame."""

from dataclasses import dataclass
from typing import Tuple

from termip.canvas import Canvas, Line, WorldMap
from termip.models import Failure, Pending, SessionState, Success

MAP_TITLE = "Ip Location"
DETAILS_TITLE = "Details"

MAP_COLOR = "red"
OVERLAY_COLOR = "green"
X_BOUNDS = (-180.0, 180.0)
Y_BOUNDS = (-90.0, 90.0)

FETCHING_NOTICE = "  Fetching details"
ERROR_NOTICE = "  Error while fetching details"

# (label, LookupResult attribute), in display order
DETAIL_FIELDS = (
    ("IP Address", "query"),
    ("Latitude", "lat"),
    ("Longitude", "lon"),
    ("Country", "country"),
    ("Country Code", "country_code"),
    ("Region", "region"),
    ("Region Name", "region_name"),
    ("City", "city"),
    ("Zip", "zip_code"),
    ("Time zone", "timezone"),
    ("Organisation", "org"),
    ("ISP", "isp"),
)

Layer = Tuple[object, ...]


@dataclass(frozen=True)
class Frame:
    """Everything on screen: map layers (bottom first) and detail panel lines."""

    map_layers: Tuple[Layer, ...]
    details: Tuple[str, ...]


def map_layers(state: SessionState) -> Tuple[Layer, ...]:
    """World outline, plus a crosshair on the result once there is one."""
    base = (WorldMap(color=MAP_COLOR),)
    if not isinstance(state, Success):
        return (base,)

    lat, lon = state.result.lat, state.result.lon
    crosshair = (
        Line(X_BOUNDS[0], lat, X_BOUNDS[1], lat, OVERLAY_COLOR),
        Line(lon, Y_BOUNDS[1], lon, Y_BOUNDS[0], OVERLAY_COLOR),
    )
    return (base, crosshair)


def detail_lines(state: SessionState) -> Tuple[str, ...]:
    if isinstance(state, Pending):
        return ("", FETCHING_NOTICE)
    if isinstance(state, Failure):
        return ("", ERROR_NOTICE)

    lines = []
    for label, attr in DETAIL_FIELDS:
        lines.append("")
        lines.append(f"  {label}: {getattr(state.result, attr)}")
    return tuple(lines)


def render(state: SessionState) -> Frame:
    return Frame(map_layers=map_layers(state), details=detail_lines(state))


def rasterize(layers: Tuple[Layer, ...], width: int, height: int) -> Canvas:
    """Draw *layers* onto a fresh canvas of the given size in cells."""
    canvas = Canvas(width, height, x_bounds=X_BOUNDS, y_bounds=Y_BOUNDS)
    for index, layer in enumerate(layers):
        if index:
            canvas.layer()
        for shape in layer:
            canvas.draw(shape)
    return canvas
