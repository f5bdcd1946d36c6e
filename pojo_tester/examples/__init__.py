"""
Demonstration data objects.

- Employee: standard data object, every setter has a matching getter
- Imbalance: read-only id, a protected getter, an 'is' getter
- Invalid: a setter that alters the value it stores (simulated bug)
"""

from .employee import Employee
from .imbalance import Imbalance
from .invalid import Invalid

__all__ = ["Employee", "Imbalance", "Invalid"]
