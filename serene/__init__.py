"""Search desktop applications and home-directory files, then launch or open them."""

__version__ = "0.1.0"