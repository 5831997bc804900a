"""
Registry of model types that can be loaded by name.
"""

from .registry import register_model, get_model, list_models, resolve_model_type, unregister_model

__all__ = ["register_model", "get_model", "list_models", "resolve_model_type", "unregister_model"]
