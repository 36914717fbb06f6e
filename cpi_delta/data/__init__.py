"""
Data ingestion module.

Handles loading the CPI resource into the canonical series and defines the
immutable values passed between the loader, the rebaser and the calculator.
"""
