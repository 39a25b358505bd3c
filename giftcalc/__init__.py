"""gift-calc: suggest a gift amount from a base value and two scores.

A base value is perturbed by a bounded random variation, skewed up or down
by a friend score and a nice score. Low nice scores and --max/--min
override the random draw entirely.

Usage:
    gift-calc                          # Built-in defaults (70 SEK, +/-20%)
    gift-calc -b 100 -f 8              # Base 100, good friend
    gcalc --name "Alice" -c USD --max  # Short alias, fixed maximum

Library:
    >>> from giftcalc import parse_arguments, compute_final_amount, format_output
    >>> config = parse_arguments(["-b", "100", "--max"])
    >>> format_output(compute_final_amount(config.to_parameters()), config.currency)
    '120 SEK'
"""

from giftcalc.calculator import compute_final_amount, compute_randomized_amount
from giftcalc.formatting import format_output
from giftcalc.models import CalculationParameters, Command, ParsedConfig
from giftcalc.parser import ArgumentError, parse_arguments

__version__ = "1.3.2"

__all__ = [
    "ArgumentError",
    "CalculationParameters",
    "Command",
    "ParsedConfig",
    "compute_final_amount",
    "compute_randomized_amount",
    "format_output",
    "parse_arguments",
    "__version__",
]
