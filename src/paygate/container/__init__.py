"""Dependency Injection Container.

Manages bindings and dependency resolution.
"""

from .container import Binding, BindingResolutionError, Container

__all__ = ["Binding", "BindingResolutionError", "Container"]
