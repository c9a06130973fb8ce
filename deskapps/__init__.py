"""Small console desk applications: banking, bus seats, a dice game, inventories, attendance and appointments."""

__version__ = "0.1.0"