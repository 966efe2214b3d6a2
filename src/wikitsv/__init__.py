"""Conversion between TSV files and wikitext tables, plus title cleaning and sorting.

Submodules:
  schema   -- Table Pydantic model and FileType enum
  text     -- strip/split helpers shared by the readers
  tsv      -- TSV reader and writer
  wiki     -- wikitext table parser and writer
  titles   -- title-column cleanup and title-based sorting
  loaders  -- file loading entry point
  config   -- environment-driven settings
  errors   -- exception hierarchy
  cli      -- tsv2wiki / tsvsort / wiki2tsv commands
"""
