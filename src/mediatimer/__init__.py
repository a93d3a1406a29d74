"""MediaTimer: weekly schedule editor for the kiosk media player wizard"""

__version__ = "0.1.0"
