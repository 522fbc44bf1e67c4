"""
Prediction models and contracts module.

Immutable data structures for prediction modes, trends and results.
"""
