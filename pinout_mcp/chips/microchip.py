"""Microchip (formerly Atmel) AVR microcontrollers."""

from ..pinout_core.models import ChipData, ChipDefinition, ChipVariant, copy_and_change_name
from .common import (
    ADC,
    EXTERNAL_CRYSTAL,
    EXTERNAL_INTERRUPT,
    PROGRAMMING_PINS,
    PULL_UP_DOWN,
    PWM_TIMER,
)

ATTINY85 = ChipDefinition(
    name="ATtiny85",
    manufacturer="Microchip",
    notes="ATtiny25, ATtiny45 and ATtiny85 share one pinout.\nPB5 is the reset pin unless RSTDISBL is programmed.",
    variants=[
        ChipVariant(
            name=["ATtiny85\nPDIP-8 / SOIC-8"],
            pins=["PB5", "PB3", "PB4", "GND", "PB0", "PB1", "PB2", "VCC"],
        ),
    ],
    data=[
        ChipData(
            pins={
                "ADC0": "PB5",
                "ADC1": "PB2",
                "ADC2": "PB4",
                "ADC3": "PB3",
            },
            **ADC,
        ),
        ChipData(
            pins={
                "OC0A": "PB0",
                "OC0B": "PB1",
                "OC1A": "PB1",
                "OC1B": "PB4",
            },
            **PWM_TIMER,
        ),
        ChipData(
            pins={
                "INT0": "PB2",
            },
            **EXTERNAL_INTERRUPT,
        ),
        ChipData(
            pins={
                "XTAL1": "PB3",
                "XTAL2": "PB4",
            },
            **EXTERNAL_CRYSTAL,
        ),
        ChipData(
            pins={
                "MOSI": "PB0",
                "MISO": "PB1",
                "SCK": "PB2",
                "RESET": "PB5",
            },
            **PROGRAMMING_PINS,
        ),
        ChipData(
            pins={
                "Pull-up": ["PB0", "PB1", "PB2", "PB3", "PB4", "PB5"],
            },
            **PULL_UP_DOWN,
        ),
    ],
)

chips = [
    ATTINY85,
    copy_and_change_name(ATTINY85, "ATtiny85", "ATtiny45"),
]
