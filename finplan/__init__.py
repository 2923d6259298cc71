"""Financial planning backend: patrimony projections, sensitivity tables and ledger reports."""

__version__ = "0.1.0"
