"""Table model, format handlers, and the conversion driver.

Submodules:
  schema     -- Table Pydantic model
  patterns   -- compiled regex patterns and constants for the markdown grammar
  markdown   -- markdown pipe-table parsing and aligned rendering
  delimited  -- CSV parsing and rendering via the stdlib csv codec
  pipeline   -- Direction enum and the convert() entry point
"""
