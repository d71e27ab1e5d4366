"""
Trade data models and normalization.

Defines the immutable signal, risk profile and calculation result records,
and turns raw signal payloads with historical field aliases into signals.
"""
