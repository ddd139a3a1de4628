"""Shared decoding and reference data settings.

This module centralizes the wire constants used by the tolerant decoders and
the location of the currency reference table so the rest of the package can
stay free of literals.
"""

from __future__ import annotations

import os
from pathlib import Path

# Fixed timestamp layout emitted by exchange APIs ("2025-06-15 14:30:00")
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"

# Raw JSON values shorter than this are treated as absent by the scalar
# decoders: no value is produced and no error is raised.
MIN_RAW_LENGTH = 7

# Environment variable pointing at an alternative reference data file
REFERENCE_DATA_ENV = "LAAKHAY_TRADE_REFERENCE_DATA"

# Name of the reference data file bundled with the currency package
REFERENCE_DATA_FILE = "currencies.yml"


def get_reference_data_path() -> Path | None:
    """Get the reference data override path, if any.

    Returns:
        Path from ``LAAKHAY_TRADE_REFERENCE_DATA`` or None to use the bundled file
    """
    value = os.environ.get(REFERENCE_DATA_ENV, "").strip()
    if not value:
        return None
    return Path(value).expanduser()
