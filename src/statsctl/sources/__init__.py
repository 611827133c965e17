"""Data sources producing RawTables for the engine."""
