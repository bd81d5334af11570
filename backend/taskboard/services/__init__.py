"""Services Layer: one module per resource, each a normalize -> validate -> persist pipeline.

Invariants:
    - Validation always completes before a transaction is opened
    - Multi-table writes run inside Database.transaction(); single-table writes do not
    - Services take a QueryExecutor / Database handle explicitly; there is no global pool access
"""
