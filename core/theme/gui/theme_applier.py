"""
core/theme/gui/theme_applier.py
===============================

Maps a :class:`ThemePalette` onto ttk styles (``clam`` base theme).

Views never hard-code colours; they use the style names below and the
applier reconfigures them whenever the theme changes.
"""
from __future__ import annotations

import logging
import tkinter as tk
from tkinter import ttk

from core.theme.theme_service import ThemePalette

logger = logging.getLogger(__name__)

# Style names used across the views
NAV_BUTTON = "Nav.TButton"
NAV_BUTTON_ACTIVE = "NavActive.TButton"
SIDEBAR_BUTTON = "Sidebar.TButton"
SIDEBAR_BUTTON_ACTIVE = "SidebarActive.TButton"
LANG_BUTTON_ACTIVE = "LangActive.TButton"
HEADER_FRAME = "Header.TFrame"
HEADER_LABEL = "Header.TLabel"
TITLE_LABEL = "Title.TLabel"
HERO_LABEL = "Hero.TLabel"
MUTED_LABEL = "Muted.TLabel"
ERROR_LABEL = "Error.TLabel"
DOT_LABEL = "Dot.TLabel"
STATUS_LABEL = "Status.TLabel"
CARD_FRAME = "Card.TFrame"


def apply_palette(root: tk.Misc, palette: ThemePalette) -> ttk.Style:
    style = ttk.Style(root)
    try:
        style.theme_use("clam")
    except tk.TclError as exc:
        logger.warning("ttk theme 'clam' unavailable: %s", exc)

    style.configure(".", background=palette.background, foreground=palette.foreground,
                    fieldbackground=palette.surface, bordercolor=palette.border)
    style.configure("TFrame", background=palette.background)
    style.configure("TLabel", background=palette.background, foreground=palette.foreground)
    style.configure("TButton", background=palette.surface, foreground=palette.foreground,
                    bordercolor=palette.border, padding=(10, 4))
    style.map("TButton", background=[("active", palette.border), ("disabled", palette.background)],
              foreground=[("disabled", palette.muted)])
    style.configure("TEntry", fieldbackground=palette.surface, foreground=palette.foreground)
    style.configure("TCombobox", fieldbackground=palette.surface, foreground=palette.foreground)
    style.configure("TLabelframe", background=palette.background, bordercolor=palette.border)
    style.configure("TLabelframe.Label", background=palette.background, foreground=palette.foreground)
    style.configure("Treeview", background=palette.surface, fieldbackground=palette.surface,
                    foreground=palette.foreground)
    style.configure("Treeview.Heading", background=palette.header, foreground=palette.foreground)
    style.configure("Horizontal.TProgressbar", background=palette.accent, troughcolor=palette.surface)

    # header
    style.configure(HEADER_FRAME, background=palette.header)
    style.configure(HEADER_LABEL, background=palette.header, foreground=palette.foreground,
                    font=("Segoe UI", 14, "bold"))
    style.configure(NAV_BUTTON, background=palette.header, foreground=palette.foreground,
                    borderwidth=0)
    style.configure(NAV_BUTTON_ACTIVE, background=palette.accent,
                    foreground=palette.accent_foreground, borderwidth=0)
    style.configure(DOT_LABEL, background=palette.header, foreground=palette.dot,
                    font=("Segoe UI", 10, "bold"))
    style.configure(STATUS_LABEL, background=palette.header, foreground=palette.muted)

    # content
    style.configure(SIDEBAR_BUTTON, background=palette.surface, foreground=palette.foreground,
                    anchor="w", padding=(14, 8))
    style.configure(SIDEBAR_BUTTON_ACTIVE, background=palette.accent,
                    foreground=palette.accent_foreground, anchor="w", padding=(14, 8))
    style.configure(LANG_BUTTON_ACTIVE, background=palette.accent,
                    foreground=palette.accent_foreground)
    style.configure(TITLE_LABEL, font=("Segoe UI", 18, "bold"))
    style.configure(HERO_LABEL, font=("Segoe UI", 36, "bold"))
    style.configure(MUTED_LABEL, foreground=palette.muted)
    style.configure(ERROR_LABEL, foreground=palette.error, font=("Segoe UI", 14, "bold"))
    style.configure(CARD_FRAME, background=palette.surface)

    if isinstance(root, (tk.Tk, tk.Toplevel)):
        root.configure(background=palette.background)
    for widget_class in CLASSIC_WIDGET_CLASSES:
        for option, value in classic_widget_options(widget_class, palette).items():
            root.option_add(f"*{widget_class}.{option}", value)
    recolor_classic_widgets(root, palette)
    logger.debug("Applied %s palette", palette.name)
    return style


# ---- classic Tk widgets (not covered by ttk styles) ----
CLASSIC_WIDGET_CLASSES = ("Text", "Listbox")


def classic_widget_options(widget_class: str, palette: ThemePalette) -> dict:
    options = {
        "background": palette.surface,
        "foreground": palette.foreground,
        "selectBackground": palette.accent,
        "selectForeground": palette.accent_foreground,
        "highlightBackground": palette.border,
    }
    if widget_class == "Text":
        options["insertBackground"] = palette.foreground
    return options


def recolor_classic_widgets(widget, palette: ThemePalette) -> int:
    """Recolour every Text/Listbox below *widget*; returns how many were changed."""
    count = 0
    widget_class = widget.winfo_class()
    if widget_class in CLASSIC_WIDGET_CLASSES:
        options = {k.lower(): v for k, v in classic_widget_options(widget_class, palette).items()}
        try:
            widget.configure(**options)
            count += 1
        except tk.TclError as exc:
            logger.debug("Could not recolour %s: %s", widget, exc)
    for child in widget.winfo_children():
        count += recolor_classic_widgets(child, palette)
    return count
