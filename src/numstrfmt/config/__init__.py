# topmark:header:start
#
#   project      : NumStrFmt
#   file         : __init__.py
#   file_relpath : src/numstrfmt/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration layer for NumStrFmt.

Included modules:

- ``model``
  The immutable `FormatConfig` snapshot and its mutable builder
  `MutableFormatConfig` (defaults, TOML layers, CLI overrides, diagnostics).

- ``io``
  TOML loading, typed value getters, rendering and config file discovery.

- ``keys``
  Section and key names of the TOML layout.

- ``logging``
  `NumStrLogger`, the ``TRACE`` level and colored log setup.

Nothing is imported here: ``logging`` is used by every other package, and
importing ``model`` eagerly would load those packages while they initialize.
"""

from __future__ import annotations
