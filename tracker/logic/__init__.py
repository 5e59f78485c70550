"""Core rule helpers used by the entry store.

Subpackages:
- names: normalization, duplicate lookup and suggestion filtering
- reporting: totals, expiring-soon snapshots and display formatting
"""
__all__ = ["names", "reporting"]
