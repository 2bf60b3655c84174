RGBA = tuple[int, int, int, int]


def rgb(r: int, g: int, b: int) -> RGBA:
    """Opaque RGBA from an RGB triple."""
    return (r, g, b, 255)


def to_hex(color: RGBA) -> str:
    """'#RRGGBB' for Tk widgets; alpha is dropped."""
    r, g, b = color[:3]
    return f"#{r:02X}{g:02X}{b:02X}"


def is_valid_color(value) -> bool:
    """True for a list/tuple of exactly four ints in 0..255."""
    if not isinstance(value, (list, tuple)) or len(value) != 4:
        return False
    return all(
        isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255
        for c in value
    )
