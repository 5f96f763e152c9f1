"""
Shared function group presets for chip authors.

Each preset holds the keyword arguments of a ChipData except its pins:

    ChipData(pins={"AD0": "PA0", "AD1": ["PA1", "PB1"]}, **ADC)
"""

PULL_UP_DOWN = {
    "name": "Pins with Internal Pull-up/Pull-Down",
    "color": "#FFC869",
    "default_hidden": True,
}

MAXIMUM_CURRENT = {
    "name": "Maximum Sink/Drive Current",
    "color": "#FFC869",
    "default_hidden": True,
}

LCD = {
    "name": "LCD Pins (VDD/2 LCD Bias Voltage Generator)",
    "color": "#E5CDA2",
}

PWM11 = {
    "name": "11-bit PWM Output Pins",
    "color": "#26B9E4",
}

PWM8 = {
    "name": "8-bit PWM Output Pins",
    "color": "#26B9E4",
}

PWM_TIMER = {
    "name": "Timer PWM Output Pins",
    "color": "#67CEEC",
}

COMPARATOR = {
    "name": "Comparator Input/Output Pins",
    "color": "#BFD366",
}

EXTERNAL_INTERRUPT = {
    "name": "External Interrupt Pins",
    "color": "#FF9D07",
}

# No color: tags fall back to a white badge
PROGRAMMING_PINS = {
    "name": "Programming Pins",
}

ADC = {
    "name": "ADC Input Channel",
    "color": "#95B600",
}

TIMER_CLOCK_SOURCES = {
    "name": "Timer Clock Source Pins",
    "color": "#F4D620",
}

EXTERNAL_CRYSTAL = {
    **TIMER_CLOCK_SOURCES,
    "name": "External Crystal Pins",
}

CRYSTAL_AND_TIMER_CLOCK_SOURCES = {
    **EXTERNAL_CRYSTAL,
    "name": "External Crystal / Timer Clock Source Pins",
}
