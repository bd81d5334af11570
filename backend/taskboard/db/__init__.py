"""Schema Infrastructure: SQLAlchemy Base and the store-side id default.

Invariants:
    - Table shape is declared once, in models/, against db.base.Base
    - Row ids are generated by the store, never by the application
"""
