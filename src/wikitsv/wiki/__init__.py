"""Wikitext table reading and writing.

Submodules:
  patterns     -- markup prefixes and cell delimiters
  classifiers  -- line classification predicates
  parser       -- line-oriented state machine producing a Table
  writer       -- Table to wikitext rendering
"""
