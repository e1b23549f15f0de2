"""
Core curve engine: integer primitives, domain models, curve math and contracts.

Everything here is pure and independent of any host runtime (no I/O,
no persistence, no clocks).
"""
