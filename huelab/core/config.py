#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huelab/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Max size for pure conversion memoization
LRU_CACHE_SIZE = 1024

# Relative Luminance Coefficients (Source: ITU-R BT.709 / Rec. 709)
LUMA_R = 0.2126                    # Red component contribution to relative luminance
LUMA_G = 0.7152                    # Green component contribution to relative luminance
LUMA_B = 0.0722                    # Blue component contribution to relative luminance

# WCAG Contrast Thresholds (Source: https://www.w3.org/TR/WCAG21/#contrast-minimum)
WCAG_AA_LARGE = 3.0                # Minimum contrast for large text (Level AA)
WCAG_AA_NORMAL = 4.5               # Minimum contrast for normal text (Level AA)
WCAG_AAA_LARGE = 4.5               # Enhanced contrast for large text (Level AAA)
WCAG_AAA_NORMAL = 7.0              # Enhanced contrast for normal text (Level AAA)
WCAG_LUMINANCE_OFFSET = 0.05       # Flare offset in the (L + 0.05) contrast formula
WCAG_LINEAR_TH = 0.03928           # WCAG 2.x threshold for the linear channel segment
WCAG_LINEAR_SLOPE = 12.92          # WCAG 2.x divisor for the linear channel segment

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255.0                    # 8-bit color depth limit
HUE_MAX = 360.0                    # Full circle degrees
HSL_HUE_MOD = 6.0                  # Hue sector divisor for HSL/HSB
PERCENT = 100.0                    # Scale of saturation, lightness, brightness and CMYK
HEX_NIBBLE_MAX = 15.0              # Largest single hex digit (alpha of 4-digit hex)

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB
LINEAR_TO_SRGB_TH = 0.0031308      # Threshold for switching from linear to sRGB space

# XYZ D65 Reference White (Source: ASTM E308-01 / CIE D65)
D65_X = 95.047                     # X coordinate for D65 illuminant (2-degree observer)
D65_Y = 100.0                      # Y coordinate (Luminance) for D65 illuminant
D65_Z = 108.883                    # Z coordinate for D65 illuminant
XYZ_SCALING = 100.0                # XYZ values are reported on the 0..100 scale

# sRGB to XYZ Matrix (Source: sRGB D65)
M_SRGB_XYZ_X = (0.4124564, 0.3575761, 0.1804375)  # Coefficients for X coordinate calculation
M_SRGB_XYZ_Y = (0.2126729, 0.7151522, 0.0721750)  # Coefficients for Y (Luminance) calculation
M_SRGB_XYZ_Z = (0.0193339, 0.1191920, 0.9503041)  # Coefficients for Z coordinate calculation

# XYZ to sRGB Matrix (Source: sRGB D65 inverse)
M_XYZ_SRGB_R = (3.2404542, -1.5371385, -0.4985314)  # Coefficients for linear Red component calculation
M_XYZ_SRGB_G = (-0.9692660, 1.8760108, 0.0415560)   # Coefficients for linear Green component calculation
M_XYZ_SRGB_B = (0.0556434, -0.2040259, 1.0572252)   # Coefficients for linear Blue component calculation

# CIELAB Constants (Source: CIE 15:2004)
LAB_E = 0.008856                   # Threshold for switching between linear and power functions
LAB_K = 7.787                      # Slope of the linear segment for low luminance values
LAB_OFFSET = 16.0 / 116.0          # Constant offset for normalization in XYZ to Lab conversion
LAB_POW = 1.0 / 3.0                # Cube root exponent of the non-linear segment
LAB_L_MULT = 116.0                 # Multiplier for Lightness (L*) calculation
LAB_L_SUB = 16.0                   # Subtraction constant for Lightness (L*) calculation
LAB_A_MULT = 500.0                 # Multiplier for 'a*' (green-red) channel calculation
LAB_B_MULT = 200.0                 # Multiplier for 'b*' (blue-yellow) channel calculation

# Output precision of derived tristimulus values
XYZ_DECIMALS = 3                   # Decimal places kept on XYZ coordinates
LAB_DECIMALS = 2                   # Decimal places kept on L*, a*, b*
ALPHA_DECIMALS = 4                 # Decimal places kept on mixed alpha

# Accepted input ranges (validated at parse time only)
LAB_L_RANGE = (0.0, 100.0)         # L* bounds
LAB_AB_RANGE = (-128.0, 128.0)     # a* and b* bounds

# ==========================================
# Color Harmony
# ==========================================

HARMONY_COMPLEMENT = 180.0         # Rotation to the opposite hue
HARMONY_TRIAD = (120.0, 240.0)     # Rotations of the triadic partners
HARMONY_SQUARE = (90.0, 180.0, 270.0)             # Rotations of the square partners
HARMONY_SPLIT_OFFSET = 30.0        # Spread around the complement in split-complementary
HARMONY_DOUBLE = (0.0, 60.0, 180.0, 240.0)        # Rotations of the double-complementary set
ANALOGOUS_COUNT = 3                # Default number of analogous colors (base included)
ANALOGOUS_ANGLE = 30.0             # Default spacing between analogous colors

HARMONY_TYPES = [
    'complementary',
    'analogous',
    'triadic',
    'tetradic',
    'square',
    'split-complementary',
    'double-complementary',
]

# ==========================================
# Accessibility Search
# ==========================================

DEFAULT_TARGET_CONTRAST = 4.5      # Target ratio of find_accessible_color (WCAG AA normal text)
DARK_BACKGROUND_LUMINANCE = 0.5    # Backgrounds brighter than this get darker foregrounds
LIGHTNESS_STEP = 1                 # Unit step of the lightness scan
PAIR_LIGHTNESS_GRID = (5, 15, 25, 35, 45, 55, 65, 75, 85, 95)
PAIR_MIN_LIGHTNESS_GAP = 30        # Minimum lightness distance of a suggested pair
PAIR_DEFAULT_COUNT = 5             # Number of suggested pairs
REPORT_GRAY = (128, 128, 128)      # Mid gray reference of the contrast report

RECOMMEND_EXCELLENT = "Excellent contrast! Passes all WCAG standards."
RECOMMEND_GOOD = "Good contrast. Passes WCAG AA for all text sizes."
RECOMMEND_LARGE_ONLY = "Adequate contrast for large text only (18pt+ or 14pt+ bold)."
RECOMMEND_AAA_LARGE = "Passes AAA for large text, but fails AA for normal text."
RECOMMEND_POOR = "Poor contrast. Does not meet WCAG standards."

# ==========================================
# Color Vision Deficiency
# ==========================================

# Simulation Matrices applied to linear RGB (Source: Machado et al., 2009 / Viénot et al., 1999)
CB_MATRICES = {
    "protanopia": (
        (0.567, 0.433, 0.0),        # Red-blind (L-cone missing)
        (0.558, 0.442, 0.0),
        (0.0, 0.242, 0.758),
    ),
    "protanomaly": (
        (0.817, 0.183, 0.0),        # Red-weak (L-cone shifted)
        (0.333, 0.667, 0.0),
        (0.0, 0.125, 0.875),
    ),
    "deuteranopia": (
        (0.625, 0.375, 0.0),        # Green-blind (M-cone missing)
        (0.7, 0.3, 0.0),
        (0.0, 0.3, 0.7),
    ),
    "deuteranomaly": (
        (0.8, 0.2, 0.0),            # Green-weak (M-cone shifted)
        (0.258, 0.742, 0.0),
        (0.0, 0.142, 0.858),
    ),
    "tritanopia": (
        (0.95, 0.05, 0.0),          # Blue-blind (S-cone missing)
        (0.0, 0.433, 0.567),
        (0.0, 0.475, 0.525),
    ),
    "tritanomaly": (
        (0.967, 0.033, 0.0),        # Blue-weak (S-cone shifted)
        (0.0, 0.733, 0.267),
        (0.0, 0.183, 0.817),
    ),
    "achromatopsia": (
        (0.299, 0.587, 0.114),      # Total color blindness (luma only)
        (0.299, 0.587, 0.114),
        (0.299, 0.587, 0.114),
    ),
    "achromatomaly": (
        (0.618, 0.32, 0.062),       # Partial color blindness
        (0.163, 0.775, 0.062),
        (0.163, 0.32, 0.516),
    ),
}

CB_DEFAULT_THRESHOLD = 10.0        # Euclidean RGB distance for "distinguishable"
CB_PALETTE_THRESHOLD = 30.0        # Stricter distance for generated palette entries
CB_PALETTE_COUNT = 5               # Default palette size
CB_PALETTE_ATTEMPTS = 100          # Random candidates tried per palette slot
CB_PALETTE_SATURATION = (40, 100)  # Saturation range of random candidates
CB_PALETTE_LIGHTNESS = (25, 75)    # Lightness range of random candidates
CB_HUE_SHIFTS = (0, 30, -30, 60, -60, 90, -90, 120, -120, 150, -150, 180)
CB_LIGHTNESS_SHIFTS = (0, 10, -10, 20, -20)
CB_DEFAULT_TYPES = ("protanopia", "deuteranopia", "tritanopia")

# ==========================================
# Mixing
# ==========================================

BLEND_MODES = ['normal', 'multiply', 'screen', 'overlay']
OVERLAY_MIDPOINT = 128             # Base channel value where overlay switches from multiply to screen

# ==========================================
# Result Cache
# ==========================================

CACHE_MAX_SIZE = 100               # Default entry bound
CACHE_TTL = 300.0                  # Default time-to-live in seconds
CONVERSION_CACHE_MAX_SIZE = 200    # Entry bound of the shared conversion cache
CONVERSION_CACHE_TTL = 600.0       # Time-to-live of the shared conversion cache
CACHE_GROW_HIT_RATE = 0.8          # Hit rate above which a nearly full cache grows
CACHE_GROW_FILL = 0.9              # Fill ratio counted as nearly full
CACHE_GROW_FACTOR = 1.5            # Growth multiplier
CACHE_GROW_LIMIT = 3               # Max size never exceeds initial size times this
CACHE_SHRINK_HIT_RATE = 0.7        # Hit rate below which a churning cache shrinks
CACHE_SHRINK_EVICTIONS = 50        # Evictions counted as churning
CACHE_SHRINK_FACTOR = 0.8          # Shrink multiplier

# ==========================================
# CLI UI & Data Structures
# ==========================================

# Formats produced by convert when no targets are requested
DEFAULT_TARGET_FORMATS = [
    'hex',
    'rgb',
    'rgba',
    'hsl',
    'hsla',
    'hsb',
    'cmyk',
    'lab',
    'xyz',
]

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
