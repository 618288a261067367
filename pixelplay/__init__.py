"""Small pygame demos and the window-free game logic behind them."""

__version__ = "0.1.0"