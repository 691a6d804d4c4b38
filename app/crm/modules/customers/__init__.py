"""
Customers module (read-only JSON API).

Scope:
- Customer list with search, sort and pagination (orders stripped)
- Per-customer order detail (orders, items and custom sizes intact)
- Records are generated mock data held in memory for the process lifetime
"""
