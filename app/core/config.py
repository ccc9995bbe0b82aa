# app/core/config.py
# -----------------------------------------------------------------------------
# Global settings (pydantic-settings v2)
# - reads the .env file and OS environment into a Settings object
# - printer profile / payback thresholds are handed to the engine as an
#   immutable SimulationConfig instead of being read as globals
# -----------------------------------------------------------------------------
from dataclasses import dataclass, field

from pydantic_settings import BaseSettings, SettingsConfigDict


@dataclass(frozen=True, slots=True)
class PrinterSpecification:
    name: str = "MO-180"
    bed_width: float = 305.0  # mm
    bed_height: float = 458.0  # mm
    print_speed: float = 6.0  # print jobs / hour
    initial_investment: float = 3_780_000  # JPY


@dataclass(frozen=True, slots=True)
class InkProfile:
    # reference consumption (cc) for an item with a 65mm short edge
    reference_edge: float = 65.0
    white: float = 0.04
    cmyk: float = 0.04
    primer: float = 0.01


@dataclass(frozen=True, slots=True)
class PaybackThresholds:
    good: float = 12.0  # months
    average: float = 24.0
    warning: float = 60.0  # gauge ceiling


@dataclass(frozen=True, slots=True)
class SimulationConfig:
    printer: PrinterSpecification = field(default_factory=PrinterSpecification)
    ink: InkProfile = field(default_factory=InkProfile)
    payback: PaybackThresholds = field(default_factory=PaybackThresholds)
    min_edge: float = 10.0
    max_monthly_sales_volume: int = 1000


class Settings(BaseSettings):
    # logging
    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"

    # printer
    PRINTER_NAME: str = "MO-180"
    PRINTER_BED_WIDTH_MM: float = 305.0
    PRINTER_BED_HEIGHT_MM: float = 458.0
    PRINT_SPEED_PER_HOUR: float = 6.0
    DEFAULT_INITIAL_INVESTMENT: float = 3_780_000

    # ink reference model
    INK_REFERENCE_EDGE_MM: float = 65.0
    INK_WHITE_CC: float = 0.04
    INK_CMYK_CC: float = 0.04
    INK_PRIMER_CC: float = 0.01

    # payback tiers (months)
    PAYBACK_GOOD_MONTHS: float = 12.0
    PAYBACK_AVERAGE_MONTHS: float = 24.0
    PAYBACK_WARNING_MONTHS: float = 60.0

    # input ranges / display
    MIN_EDGE_MM: float = 10.0
    MAX_MONTHLY_SALES_VOLUME: int = 1000
    CURRENCY_SYMBOL: str = "¥"

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore"  # ignore unrelated keys in .env
    )

    def simulation_config(self) -> SimulationConfig:
        return SimulationConfig(
            printer=PrinterSpecification(
                name=self.PRINTER_NAME,
                bed_width=self.PRINTER_BED_WIDTH_MM,
                bed_height=self.PRINTER_BED_HEIGHT_MM,
                print_speed=self.PRINT_SPEED_PER_HOUR,
                initial_investment=self.DEFAULT_INITIAL_INVESTMENT,
            ),
            ink=InkProfile(
                reference_edge=self.INK_REFERENCE_EDGE_MM,
                white=self.INK_WHITE_CC,
                cmyk=self.INK_CMYK_CC,
                primer=self.INK_PRIMER_CC,
            ),
            payback=PaybackThresholds(
                good=self.PAYBACK_GOOD_MONTHS,
                average=self.PAYBACK_AVERAGE_MONTHS,
                warning=self.PAYBACK_WARNING_MONTHS,
            ),
            min_edge=self.MIN_EDGE_MM,
            max_monthly_sales_volume=self.MAX_MONTHLY_SALES_VOLUME,
        )


settings = Settings()

_DEFAULT_CONFIG = settings.simulation_config()


def default_config() -> SimulationConfig:
    return _DEFAULT_CONFIG
