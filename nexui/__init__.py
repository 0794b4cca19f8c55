"""Retained-mode widget toolkit for game menus: containers, controls, dialogs and animated controllers."""

__version__ = "0.1.0"