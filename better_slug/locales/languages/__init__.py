"""Static per-language lookup tables.

Each module holds data only: character maps, word overrides and stop words.
Modules are consumed through `better_slug.locales`, never directly by the pipeline.
"""
