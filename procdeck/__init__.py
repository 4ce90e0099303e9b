"""Key handling, input modes, overlays, toasts and attach key translation for a terminal process dashboard."""

__version__ = "0.1.0"