"""
Utility functions module.

Shared numeric helpers used by the sizing calculators.

Rounding Semantics:
- Displayed figures round half away from zero on the positive side
  (``round_half_up(0.125, 2) == 0.13``), not banker's rounding
- Lot breakdowns truncate toward zero instead of rounding
- Missing or unparseable prices are treated as zero
"""
