"""Status line, file filter and menu matching tools for tiling window manager desktops."""

__version__ = "1.0.0"