"""Wage Ledger package.

Attendance-to-wage reconciliation core, organized by feature modules
(attendance, ledger, payroll, recalculation) over immutable snapshots
supplied by an external data layer.
"""

__version__ = "0.1.0"
