"""User-facing messages and advisory templates.

This module centralizes all user-facing text to improve maintainability
and enable future internationalization (i18n) support.
"""

# Advisory Templates (fixed order: pricing, pairing, capacity, seasonal)
ADVISORY_PRICING = (
    "AI concierge estimate: {symbol}{estimate} (±10%) including crew, fuel, "
    "and Tel Aviv arrival concierge."
)
ADVISORY_PAIRING = "{style_label} pairs beautifully with {scenic_highlight}"
ADVISORY_CAPACITY_EXCEEDED = (
    "The selected vessel comfortably sleeps {capacity}. Consider a tandem charter "
    "or contacting us for a superyacht upgrade."
)
ADVISORY_CAPACITY_OK = (
    "The {vessel_class} is ideal for parties up to {capacity}, keeping service "
    "intimate and personalized."
)
ADVISORY_PEAK_SEASON = (
    "Peak Mediterranean light between April and July invites sunset receptions "
    "and waterfront arrivals into Tel Aviv Port."
)
ADVISORY_OFF_PEAK = (
    "Off-peak sailings unlock calmer marinas and boutique hotel partnerships "
    "along the coast."
)

# Fallbacks for unresolved references
FALLBACK_STYLE_LABEL = "Voyage"
FALLBACK_SCENIC_HIGHLIGHT = "the Mediterranean horizon"

# Status Messages
STATUS_NO_ADVISORIES = "Select a departure port and vessel to unlock tailored insights."
STATUS_NO_VESSEL_OPTIONS = "Select a departure port"

# Error Messages
ERROR_INVALID_SAIL_DATE = "Sail date must be an ISO calendar date (YYYY-MM-DD)."
ERROR_REFERENCE_DATA_INVALID = "Reference data file is invalid"
