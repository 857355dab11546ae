"""Small command-line programs and the functions behind them."""

__version__ = "0.1.0"