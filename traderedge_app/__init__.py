"""
TraderEdge App - Position Sizing and P&L Engine

Risk-based position sizing for prop-firm traders. Turns trade signals and a
trader's questionnaire risk profile into lot sizes, projected profit and loss,
and reward:risk checks across forex, futures and crypto instruments.
"""

__version__ = "0.1.0"
__author__ = "TraderEdge Team"
