"""
UI theme definitions for GlossaryTree.

Based on Monkeytype's Serika Dark color scheme.
All UI components should reference these constants instead of hardcoding values.

Color philosophy:
- Search matches use the accent color, context-only group headers are dimmed
- The selected word is shown inverted (accent background)
- "+N more…" markers use the faint color and are not clickable

Font philosophy:
- Segoe UI for general text
- Hierarchical sizing for visual importance
"""

from typing import Final

# ===== COLOR SCHEME =====
COLORS: Final[dict[str, str]] = {
    # === BACKGROUNDS ===
    "bg": "#323437",  # Main window background (soft dark gray)
    "bg_secondary": "#2C2E31",  # Search box, tag chips, status bar

    # === TEXT COLORS ===
    "text_main": "#D1D0C5",  # Primary text (light gray/beige)
    "text_header": "#E2B714",  # Definition heading
    "text_accent": "#E2B714",  # Search matches, links, active elements
    "text_faint": "#646669",  # Markers, dimmed headers, status messages

    # === TREE NODES ===
    "node_hover": "#3C3E42",  # Hover background for clickable nodes
    "node_active_bg": "#E2B714",  # Selected word background
    "node_active_fg": "#323437",  # Selected word text

    # === UI ELEMENTS ===
    "error": "#CA4754",  # Load error message
    "separator": "#646669",  # Vertical divider between tree and definition
    "tag_bg": "#2C2E31",  # Tag chip background
}

# ===== FONT DEFINITIONS =====
FONTS: Final[dict[str, tuple]] = {
    # === TREE ===
    "node": ("Segoe UI", 11),  # Default tree nodes
    "node_root": ("Segoe UI", 11, "bold"),  # Level 0 nodes and search group headers
    "node_more": ("Segoe UI", 9, "italic"),  # "+N more…" markers

    # === DEFINITION PANEL ===
    "header": ("Segoe UI", 18, "bold"),  # Selected word heading
    "definition": ("Segoe UI", 11),  # Definition text
    "tag": ("Segoe UI", 9),  # Tag chips
    "link": ("Segoe UI", 10, "underline"),  # Parent link

    # === UI CONTROLS ===
    "search": ("Segoe UI", 12),  # Search entry
    "message": ("Segoe UI", 11, "italic"),  # Loading / error / empty states
    "ui": ("Segoe UI", 9),  # Status bar
}

# ===== LAYOUT =====
INDENT_PX: Final[int] = 18  # Horizontal indent per tree level
