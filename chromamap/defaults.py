"""
Published default parameters of every palette method.

Hues and divergences are radians. Lightness, contrast, saturation,
brightness and warmth are fractions in [0, 1] unless noted otherwise.
Temperatures are Kelvin.
"""

import math
from typing import Final, Tuple

TWO_THIRDS_TURN: Final[float] = 2.0 / 3.0 * 2.0 * math.pi

## Brewer-like maps

BREWER_SEQUENTIAL_HUE: Final[float] = 0.0
BREWER_SEQUENTIAL_CONTRAST: Final[float] = 0.88
BREWER_SEQUENTIAL_SATURATION: Final[float] = 0.6
BREWER_SEQUENTIAL_BRIGHTNESS: Final[float] = 0.75
BREWER_SEQUENTIAL_WARMTH: Final[float] = 0.15

BREWER_DIVERGING_HUE: Final[float] = 0.0
BREWER_DIVERGING_DIVERGENCE: Final[float] = TWO_THIRDS_TURN
BREWER_DIVERGING_CONTRAST: Final[float] = 0.88
BREWER_DIVERGING_SATURATION: Final[float] = 0.6
BREWER_DIVERGING_BRIGHTNESS: Final[float] = 0.75
BREWER_DIVERGING_WARMTH: Final[float] = 0.15

BREWER_QUALITATIVE_HUE: Final[float] = 0.0
BREWER_QUALITATIVE_DIVERGENCE: Final[float] = TWO_THIRDS_TURN
BREWER_QUALITATIVE_CONTRAST: Final[float] = 0.5
BREWER_QUALITATIVE_SATURATION: Final[float] = 0.5
BREWER_QUALITATIVE_BRIGHTNESS: Final[float] = 1.0

# Discrete maps (n <= 9) use a lower contrast when none is given.
SMALL_N_LIMIT: Final[int] = 9

## Isoluminant maps

ISOLUMINANT_SEQUENTIAL_LIGHTNESS: Final[float] = 0.5
ISOLUMINANT_SEQUENTIAL_SATURATION: Final[float] = 0.5
ISOLUMINANT_SEQUENTIAL_HUE: Final[float] = 0.0

ISOLUMINANT_DIVERGING_LIGHTNESS: Final[float] = 0.5
ISOLUMINANT_DIVERGING_SATURATION: Final[float] = 0.5
ISOLUMINANT_DIVERGING_HUE: Final[float] = 0.0
ISOLUMINANT_DIVERGING_DIVERGENCE: Final[float] = TWO_THIRDS_TURN

ISOLUMINANT_QUALITATIVE_LIGHTNESS: Final[float] = 0.5
ISOLUMINANT_QUALITATIVE_SATURATION: Final[float] = 0.5
ISOLUMINANT_QUALITATIVE_HUE: Final[float] = 0.0
ISOLUMINANT_QUALITATIVE_DIVERGENCE: Final[float] = TWO_THIRDS_TURN

## CubeHelix (Green 2011)

CUBEHELIX_HUE: Final[float] = 1.0 / 12.0 * 2.0 * math.pi
CUBEHELIX_ROTATIONS: Final[float] = -1.5
CUBEHELIX_SATURATION: Final[float] = 1.2
CUBEHELIX_GAMMA: Final[float] = 1.0

## Moreland diverging maps (sRGB byte triples)

MORELAND_COLOR0: Final[Tuple[int, int, int]] = (180, 4, 38)
MORELAND_COLOR1: Final[Tuple[int, int, int]] = (59, 76, 192)

## McNames

MCNAMES_PERIODS: Final[float] = 2.0

## Perceptually linear (PL) and perceptually uniform (PU) maps

SEQUENTIAL_LIGHTNESS_LIGHTNESS_RANGE: Final[float] = 0.95
SEQUENTIAL_LIGHTNESS_SATURATION_RANGE: Final[float] = 0.95
SEQUENTIAL_LIGHTNESS_SATURATION: Final[float] = 0.45
SEQUENTIAL_LIGHTNESS_HUE: Final[float] = 0.0

SEQUENTIAL_SATURATION_SATURATION_RANGE: Final[float] = 0.95
SEQUENTIAL_SATURATION_LIGHTNESS: Final[float] = 0.5
SEQUENTIAL_SATURATION_SATURATION: Final[float] = 0.45
SEQUENTIAL_SATURATION_HUE: Final[float] = 0.0

SEQUENTIAL_RAINBOW_LIGHTNESS_RANGE: Final[float] = 0.75
SEQUENTIAL_RAINBOW_SATURATION_RANGE: Final[float] = 0.75
SEQUENTIAL_RAINBOW_HUE: Final[float] = 0.0
SEQUENTIAL_RAINBOW_ROTATIONS: Final[float] = -1.5
SEQUENTIAL_RAINBOW_SATURATION: Final[float] = 0.45

SEQUENTIAL_BLACK_BODY_TEMPERATURE: Final[float] = 250.0
SEQUENTIAL_BLACK_BODY_TEMPERATURE_RANGE: Final[float] = 6250.0
SEQUENTIAL_BLACK_BODY_LIGHTNESS_RANGE: Final[float] = 0.95
SEQUENTIAL_BLACK_BODY_SATURATION_RANGE: Final[float] = 0.95
SEQUENTIAL_BLACK_BODY_SATURATION: Final[float] = 0.45

SEQUENTIAL_MULTI_HUE_LIGHTNESS_RANGE: Final[float] = 0.95
SEQUENTIAL_MULTI_HUE_SATURATION_RANGE: Final[float] = 0.95
SEQUENTIAL_MULTI_HUE_SATURATION: Final[float] = 0.45
# Blue-violet through cyan to yellow; hues are used as given, unwrapped.
SEQUENTIAL_MULTI_HUE_HUES: Final[Tuple[float, ...]] = (4.5, 3.0, 1.5)
SEQUENTIAL_MULTI_HUE_POSITIONS: Final[Tuple[float, ...]] = (0.0, 0.5, 1.0)

DIVERGING_LIGHTNESS_LIGHTNESS_RANGE: Final[float] = 0.7
DIVERGING_LIGHTNESS_SATURATION_RANGE: Final[float] = 0.95
DIVERGING_LIGHTNESS_SATURATION: Final[float] = 0.45
DIVERGING_LIGHTNESS_HUE: Final[float] = 0.0
DIVERGING_LIGHTNESS_DIVERGENCE: Final[float] = TWO_THIRDS_TURN

DIVERGING_SATURATION_SATURATION_RANGE: Final[float] = 0.95
DIVERGING_SATURATION_LIGHTNESS: Final[float] = 0.5
DIVERGING_SATURATION_SATURATION: Final[float] = 0.45
DIVERGING_SATURATION_HUE: Final[float] = 0.0
DIVERGING_SATURATION_DIVERGENCE: Final[float] = TWO_THIRDS_TURN

QUALITATIVE_HUE_HUE: Final[float] = 0.0
QUALITATIVE_HUE_DIVERGENCE: Final[float] = TWO_THIRDS_TURN
QUALITATIVE_HUE_LIGHTNESS: Final[float] = 0.55
QUALITATIVE_HUE_SATURATION: Final[float] = 0.22

## Black-body integration

BLACK_BODY_REFERENCE_TEMPERATURE: Final[float] = 6500.0
BLACK_BODY_REFERENCE_Y: Final[float] = 10.0
