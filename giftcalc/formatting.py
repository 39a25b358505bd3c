"""Text output for gift-calc: result lines, help screen, bias labels.

Nothing here rounds or localises numbers; amounts arrive already rounded
from the calculator and are rendered in their shortest form.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from giftcalc.models import (
    DEFAULT_BASE_VALUE,
    DEFAULT_CURRENCY,
    DEFAULT_DECIMALS,
    DEFAULT_SCORE,
    DEFAULT_VARIATION,
    CalculationParameters,
    ParsedConfig,
)

# Beyond this magnitude integral floats are shown in exponent form.
_PLAIN_INTEGER_LIMIT = 1e21


def format_number(value: float) -> str:
    """Render a number without a trailing '.0' for integral values.

    120.0 -> '120', -0.0 -> '0', 42.5 -> '42.5'.
    """
    if isinstance(value, float) and value.is_integer() and abs(value) < _PLAIN_INTEGER_LIMIT:
        return str(int(value))
    return repr(value)


def format_output(amount: float, currency: str, recipient_name: Optional[str] = None) -> str:
    """Build the result line, e.g. '42.5 USD for Alice'."""
    output = f"{format_number(amount)} {currency}"
    if recipient_name:
        output += f" for {recipient_name}"
    return output


# ---------------------------------------------------------------------------
# Bias labels and explanations
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BiasLevel:
    """Short label for how a score skews the amount."""

    text: str
    css_class: str


_NICE_REDUCTION_LABELS = {1: "-90%", 2: "-80%", 3: "-70%"}
_NICE_FIXED_PERCENT = {1: "10%", 2: "20%", 3: "30%"}


def bias_level(score: float, nice: bool = False) -> BiasLevel:
    """Classify a friend or nice score.

    Nice scores 0-3 get their fixed-reduction labels; everything else is
    bucketed as lower (<4), neutral (4-6), higher (6-8) or much higher.
    """
    if nice and score == 0:
        return BiasLevel("No Gift", "bias-none")
    if nice and score in _NICE_REDUCTION_LABELS:
        return BiasLevel(_NICE_REDUCTION_LABELS[score], "bias-negative")
    if score < 4:
        return BiasLevel("Lower", "bias-negative")
    if score <= 6:
        return BiasLevel("Neutral", "bias-neutral")
    if score <= 8:
        return BiasLevel("Higher", "bias-positive")
    return BiasLevel("Much Higher", "bias-very-positive")


def explain(params: CalculationParameters) -> str:
    """One-line description of which calculation rule applies."""
    if params.nice_score == 0:
        return "No gift for assholes!"
    if params.nice_score in _NICE_FIXED_PERCENT:
        pct = _NICE_FIXED_PERCENT[params.nice_score]
        return f"Fixed at {pct} of base value due to low nice score"
    if params.use_maximum:
        return "Maximum amount: base value + 20%"
    if params.use_minimum:
        return "Minimum amount: base value - 20%"

    if params.friend_score < 4:
        friend_level = "lower"
    elif params.friend_score <= 6:
        friend_level = "neutral"
    else:
        friend_level = "higher"
    nice_level = "neutral" if params.nice_score <= 6 else "higher"
    return f"Random calculation with {friend_level} friend bias and {nice_level} nice bias"


def build_command(config: ParsedConfig, program: str = "gift-calc") -> str:
    """Shortest command line that reproduces ``config``'s calculation.

    Only values that differ from the built-in defaults are emitted.
    """
    parts = [program]
    if config.base_value != DEFAULT_BASE_VALUE:
        parts.append(f"-b {format_number(config.base_value)}")
    if config.variation != DEFAULT_VARIATION:
        parts.append(f"-v {format_number(config.variation)}")
    if config.friend_score != DEFAULT_SCORE:
        parts.append(f"-f {format_number(config.friend_score)}")
    if config.nice_score != DEFAULT_SCORE:
        parts.append(f"-n {format_number(config.nice_score)}")
    if config.currency != DEFAULT_CURRENCY:
        parts.append(f"-c {config.currency}")
    if config.decimals != DEFAULT_DECIMALS:
        parts.append(f"-d {config.decimals}")
    if config.recipient_name:
        parts.append(f'--name "{config.recipient_name}"')
    if config.use_maximum:
        parts.append("--max")
    if config.use_minimum:
        parts.append("--min")
    return " ".join(parts)


# ---------------------------------------------------------------------------
# Help
# ---------------------------------------------------------------------------

HELP_TEXT = """\
Gift Calculator - CLI Tool

DESCRIPTION:
  A CLI tool that suggests a gift amount based on a base value with
  configurable random variation, friend score, and nice score influences.

USAGE:
  gift-calc [options]
  gift-calc init-config
  gift-calc update-config
  gift-calc log
  gcalc [options]              # Short alias

COMMANDS:
  init-config                 Setup configuration file with default values
  update-config               Update existing configuration file
  log                         Open gift calculation log file

OPTIONS:
  -b, --basevalue <number>    Set the base value for gift calculation (default: 70)
  -v, --variation <percent>   Set variation percentage (0-100, default: 20)
  -f, --friend-score <1-10>   Friend score affecting gift amount bias (default: 5)
                              Higher scores increase chance of higher amounts
  -n, --nice-score <0-10>     Nice score affecting gift amount bias (default: 5)
                              0=no gift, 1-3=fixed reductions, 4-10=bias amounts
  -c, --currency <code>       Currency code to display (default: SEK)
  -d, --decimals <0-10>       Number of decimal places (default: 2)
  --name <name>               Name of gift recipient to include in output
  --max                       Set amount to maximum (baseValue + 20%)
  --min                       Set amount to minimum (baseValue - 20%)
  --asshole                   Set nice score to 0 (no gift)
  --dickhead                  Set nice score to 0 (no gift)
  --no-log                    Disable logging of the calculation
  -cp, --copy                 Copy amount (without currency) to clipboard
  -h, --help                  Show this help message
  --version                   Show version information

ENVIRONMENT:
  GIFT_CALC_BASE_VALUE, GIFT_CALC_VARIATION, GIFT_CALC_CURRENCY and
  GIFT_CALC_DECIMALS override the built-in defaults. GIFT_CALC_SEED makes
  results reproducible. GIFT_CALC_LOG_LEVEL sets the log level.
  Command line options override environment defaults.

EXAMPLES:
  gift-calc                             # Use built-in defaults
  gift-calc -b 100                      # Base value of 100
  gcalc -b 100 -v 30 -d 0               # Base 100, 30% variation, no decimals
  gift-calc --name "Alice" -c USD       # Gift for Alice in USD currency
  gcalc -b 50 -f 9 --name "Bob"         # Gift for Bob
  gift-calc -f 8 -n 9                   # High friend and nice scores
  gift-calc -n 0 -b 100                 # No gift (nice score 0)
  gift-calc --asshole --name "Kevin"    # No gift for asshole Kevin
  gift-calc -n 2 -b 100                 # Mean person (20 SEK from base 100)
  gift-calc -b 100 --max                # Set to maximum amount (120)
  gcalc -b 100 --min                    # Set to minimum amount (80)

FRIEND SCORE GUIDE:
  1-3: Acquaintance (bias toward lower amounts)
  4-6: Regular friend (neutral)
  7-8: Good friend (bias toward higher amounts)
  9-10: Best friend/family (strong bias toward higher amounts)

NICE SCORE GUIDE:
  0: Asshole (amount = 0)
  1: Terrible person (10% of base value)
  2: Very mean person (20% of base value)
  3: Mean person (30% of base value)
  4-6: Average niceness (neutral bias)
  7-8: Nice person (bias toward higher amounts)
  9-10: Very nice person (strong bias toward higher amounts)
"""


def get_help_text() -> str:
    return HELP_TEXT
