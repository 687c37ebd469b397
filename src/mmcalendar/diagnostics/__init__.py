"""Diagnostics package.

Optional numpy-backed checks of the watat rule across many years.
Install with:
  pip install "mmcalendar[diagnostics]"
"""

__all__ = ["watat_cycles"]
