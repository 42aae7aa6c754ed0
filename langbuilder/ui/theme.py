"""Color theme and styling for the TUI."""

# Urwid palette for the application
# Format: (name, foreground, background)

PALETTE = [
    # UI elements
    ("header", "light blue,bold", "black"),
    ("footer", "dark gray", "black"),
    ("section_title", "light blue", ""),

    # Input
    ("edit", "white", "dark gray"),
    ("edit_focus", "white,bold", "dark blue"),
    ("edit_disabled", "dark gray", "black"),

    # Buttons
    ("button", "white", "dark gray"),
    ("button_focus", "white,bold", "dark blue"),
    ("button_disabled", "dark gray", "black"),
    ("delete", "light red", ""),
    ("delete_focus", "white,bold", "dark red"),

    # List items
    ("word", "white,bold", ""),
    ("translation", "light gray", ""),
    ("word_type", "dark gray", ""),
    ("empty", "dark gray", ""),

    # Status/info
    ("busy", "light blue", ""),
    ("error", "light red", "dark red"),
]


def button_attrs(enabled: bool, danger: bool = False) -> tuple[str, str]:
    """Normal and focus attribute names for a button."""
    if not enabled:
        return "button_disabled", "button_disabled"
    if danger:
        return "delete", "delete_focus"
    return "button", "button_focus"


def edit_attrs(enabled: bool) -> tuple[str, str]:
    """Normal and focus attribute names for an edit field."""
    if not enabled:
        return "edit_disabled", "edit_disabled"
    return "edit", "edit_focus"
