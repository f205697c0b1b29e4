"""
Recipe catalog ingestion.

Responsibilities:
- Read a raw recipe export (for example a Supabase table dump).
- Normalize it into the canonical catalog columns.
- Persist the catalog CSV used by the CSV recipe store.
"""
