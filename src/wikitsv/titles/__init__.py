"""Title-column cleanup and title-based row ordering.

Submodules:
  clean  -- whitespace stripping, title italicizing, checkbox canonicalization
  sort   -- sort-key extraction from title markup and the stable row sort
"""
