"""
Analysis layer: derived quantities for reporting and checks.

IMPORTANT: This is NOT seen by the simulator. One-way derivation only.

- monkey_business: the headline number of a run
- inspections_per_round / inspection_shares: how work is spread out
- check_modulus_soundness / check_item_conservation: run invariants
"""

from monkeysim.analysis.business import (
    monkey_business,
    inspections_per_round,
    inspection_shares,
    check_modulus_soundness,
    check_item_conservation,
)

__all__ = [
    "monkey_business",
    "inspections_per_round",
    "inspection_shares",
    "check_modulus_soundness",
    "check_item_conservation",
]
