"""Theme colors and color utilities for the UI."""


class ThemeColors:
    """Light theme palette for the typing test screens."""

    BG_TOP = "#e0f7fa"
    BG_BOTTOM = "#80deea"

    PRIMARY = "#00838f"
    PRIMARY_LIGHT = "#4fb3bf"
    PRIMARY_DARK = "#005662"

    CORAL = "#ff8a65"

    CARD_BG = "rgba(255, 255, 255, 0.85)"
    CARD_BORDER = "rgba(255, 255, 255, 0.6)"

    TEXT_PRIMARY = "#1a3a3a"
    TEXT_SECONDARY = "#4a6572"
    TEXT_MUTED = "#78909c"

    # word marks on the active line
    WORD_CORRECT = "#2e7d32"
    WORD_INCORRECT = "#c62828"
    WORD_INCORRECT_BG = "#ffebee"
    ACTIVE_LINE_BG = "#e0f7fa"


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b."""
    a = a.strip()
    b = b.strip()
    if not (a.startswith("#") and b.startswith("#") and len(a) == 7 and len(b) == 7):
        return a
    try:
        ar, ag, ab = int(a[1:3], 16), int(a[3:5], 16), int(a[5:7], 16)
        br, bg, bb = int(b[1:3], 16), int(b[3:5], 16), int(b[5:7], 16)
    except ValueError:
        return a
    t = max(0.0, min(1.0, float(t)))
    r = int(ar + (br - ar) * t)
    g = int(ag + (bg - ag) * t)
    bl = int(ab + (bb - ab) * t)
    return f"#{r:02X}{g:02X}{bl:02X}"


def time_left_color(time_left: int, duration: int) -> str:
    """Countdown label color: primary while plenty of time remains, coral near zero."""
    if duration <= 0:
        return ThemeColors.PRIMARY
    elapsed_fraction = 1.0 - max(0, min(time_left, duration)) / duration
    return blend_hex(ThemeColors.PRIMARY, ThemeColors.CORAL, elapsed_fraction)
