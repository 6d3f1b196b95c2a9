"""Deterministic colors for names, derived from a 32-bit FNV-1a hash."""

from __future__ import annotations

COLOR_NAMES: tuple[str, ...] = (
    "maroon", "green", "olive", "navy", "purple", "teal", "silver", "gray",
    "red", "lime", "yellow", "blue", "fuchsia", "aqua", "white", "aliceblue",
    "antiquewhite", "aquamarine", "azure", "beige", "bisque", "blanchedalmond",
    "blueviolet", "brown", "burlywood", "cadetblue", "chartreuse", "chocolate",
    "coral", "cornflowerblue", "cornsilk", "crimson", "darkblue", "darkcyan",
    "darkgoldenrod", "darkgray", "darkgreen", "darkkhaki", "darkmagenta",
    "darkolivegreen", "darkorange", "darkorchid", "darkred", "darksalmon",
    "darkseagreen", "darkslateblue", "darkslategray", "darkturquoise",
    "darkviolet", "deeppink", "deepskyblue", "dimgray", "dodgerblue",
    "firebrick", "floralwhite", "forestgreen", "gainsboro", "ghostwhite",
    "gold", "goldenrod", "greenyellow", "honeydew", "hotpink", "indianred",
    "indigo", "ivory", "khaki", "lavender", "lavenderblush", "lawngreen",
    "lemonchiffon", "lightblue", "lightcoral", "lightcyan",
    "lightgoldenrodyellow", "lightgray", "lightgreen", "lightpink",
    "lightsalmon", "lightseagreen", "lightskyblue", "lightslategray",
    "lightsteelblue", "lightyellow", "limegreen", "linen", "mediumaquamarine",
    "mediumblue", "mediumorchid", "mediumpurple", "mediumseagreen",
    "mediumslateblue", "mediumspringgreen", "mediumturquoise",
    "mediumvioletred", "midnightblue", "mintcream", "mistyrose", "moccasin",
    "navajowhite", "oldlace", "olivedrab", "orange", "orangered", "orchid",
    "palegoldenrod", "palegreen", "paleturquoise", "palevioletred",
    "papayawhip", "peachpuff", "peru", "pink", "plum", "powderblue",
    "rebeccapurple", "rosybrown", "royalblue", "saddlebrown", "salmon",
    "sandybrown", "seagreen", "seashell", "sienna", "skyblue", "slateblue",
    "slategray", "snow", "springgreen", "steelblue", "tan", "thistle",
    "tomato", "turquoise", "violet", "wheat", "whitesmoke", "yellowgreen",
    "grey", "dimgrey", "darkgrey", "darkslategrey", "lightgrey",
    "lightslategrey", "slategrey",
)

_SPECIAL = {"-->": "green", "<--": "red", "---": "yellow"}

_FNV32_OFFSET = 0x811C9DC5
_FNV32_PRIME = 0x01000193


def _fnv1a_32(data: bytes) -> int:
    h = _FNV32_OFFSET
    for byte in data:
        h ^= byte
        h = (h * _FNV32_PRIME) & 0xFFFFFFFF
    return h


def get_hash_color_name(s: str) -> str:
    """Return a color name for ``s`` chosen by its FNV-1a hash.

    The arrows ``-->``, ``<--`` and ``---`` map to green, red and yellow.
    """
    special = _SPECIAL.get(s)
    if special is not None:
        return special
    return COLOR_NAMES[_fnv1a_32(s.encode("utf-8")) % len(COLOR_NAMES)]


def get_hash_color(val: object) -> str:
    """Return the hash color for a string value, or red for anything else."""
    if isinstance(val, str):
        return get_hash_color_name(val)
    return "red"


def add_color(s: str, color: str) -> str:
    """Wrap ``s`` in color tags, resetting to white afterwards."""
    return f"[{color}]{s}[white]"