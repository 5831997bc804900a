"""
Test suite for neuroflow model persistence.

Validates the save/load contract (hook ordering, write boundary, error
kinds), JSON export, the model registry, configuration and the reference
FeedForward model.
"""
