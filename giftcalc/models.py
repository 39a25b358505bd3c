"""Data models for gift-calc.

Command enum, CalculationParameters and ParsedConfig: the typed records that
flow from the parser into the calculator and out to the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Command(str, Enum):
    """Special commands recognised as the first token."""

    INIT_CONFIG = "init-config"
    UPDATE_CONFIG = "update-config"
    LOG = "log"
    VERSION = "version"


# Built-in defaults used when the caller supplies none.
DEFAULT_BASE_VALUE = 70.0
DEFAULT_VARIATION = 20.0
DEFAULT_CURRENCY = "SEK"
DEFAULT_DECIMALS = 2
DEFAULT_SCORE = 5.0


@dataclass(frozen=True)
class CalculationParameters:
    """Inputs to a single amount calculation."""

    base_value: float = DEFAULT_BASE_VALUE
    variation_percent: float = DEFAULT_VARIATION
    friend_score: float = DEFAULT_SCORE
    nice_score: float = DEFAULT_SCORE
    decimal_places: int = DEFAULT_DECIMALS
    use_maximum: bool = False
    use_minimum: bool = False


@dataclass
class ParsedConfig:
    """Result of parsing a command line.

    Carries everything CalculationParameters does plus the presentation
    options (currency, recipient, clipboard, logging) and the special
    command, if any.
    """

    base_value: float = DEFAULT_BASE_VALUE
    variation: float = DEFAULT_VARIATION
    friend_score: float = DEFAULT_SCORE
    nice_score: float = DEFAULT_SCORE
    currency: str = DEFAULT_CURRENCY
    decimals: int = DEFAULT_DECIMALS
    recipient_name: Optional[str] = None
    log_to_file: bool = True
    copy_to_clipboard: bool = False
    show_help: bool = False
    use_maximum: bool = False
    use_minimum: bool = False
    command: Optional[Command] = None

    def to_parameters(self) -> CalculationParameters:
        return CalculationParameters(
            base_value=self.base_value,
            variation_percent=self.variation,
            friend_score=self.friend_score,
            nice_score=self.nice_score,
            decimal_places=self.decimals,
            use_maximum=self.use_maximum,
            use_minimum=self.use_minimum,
        )

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "base_value": self.base_value,
            "variation": self.variation,
            "friend_score": self.friend_score,
            "nice_score": self.nice_score,
            "currency": self.currency,
            "decimals": self.decimals,
            "recipient_name": self.recipient_name,
            "log_to_file": self.log_to_file,
            "copy_to_clipboard": self.copy_to_clipboard,
            "show_help": self.show_help,
            "use_maximum": self.use_maximum,
            "use_minimum": self.use_minimum,
            "command": self.command.value if self.command else None,
        }
