"""Service container: resolves abstract contracts to concrete implementations."""

import inspect
import logging
import typing
from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar('T')

# A concrete is either a class to construct or a factory taking the container.
Concrete = Union[type, Callable[["Container"], Any]]


class BindingResolutionError(LookupError):
    """Raised when the container cannot build the requested abstract."""


@dataclass
class Binding:
    """A rule telling the container how to satisfy an abstract.

    Attributes:
        abstract: The key consumers ask for
        concrete: Class to construct, or factory called with the container
        shared: Whether the first built instance is reused
    """
    abstract: Any
    concrete: Concrete
    shared: bool = False


def _name(abstract: Any) -> str:
    return getattr(abstract, "__qualname__", repr(abstract))


class Container:
    """Dependency injection container.

    Bindings map an abstract (usually an ABC) to a concrete class or a
    factory. Classes are built by resolving their constructor's annotated
    parameters from the container.

    Usage:
        container = Container()
        container.bind(PaymentGatewayInterface, PaymobPaymentService)

        gateway = container.make(PaymentGatewayInterface)
    """

    def __init__(self):
        self._bindings: dict[Any, Binding] = {}
        self._instances: dict[Any, Any] = {}
        self._building: list[Any] = []

    def bind(self, abstract: Any, concrete: Optional[Concrete] = None, shared: bool = False) -> None:
        """Register a binding. Each ``make()`` builds a fresh instance unless shared."""
        if concrete is None:
            concrete = abstract
        self._instances.pop(abstract, None)
        self._bindings[abstract] = Binding(abstract=abstract, concrete=concrete, shared=shared)
        logger.debug(
            f"Bound {_name(abstract)} -> {_name(concrete)}"
            + (" (shared)" if shared else "")
        )

    def singleton(self, abstract: Any, concrete: Optional[Concrete] = None) -> None:
        """Register a shared binding, built once on first ``make()``."""
        self.bind(abstract, concrete, shared=True)

    def instance(self, abstract: Any, obj: T) -> T:
        """Register an already-built object as the shared instance."""
        self._bindings.pop(abstract, None)
        self._instances[abstract] = obj
        logger.debug(f"Registered instance for {_name(abstract)}")
        return obj

    def bound(self, abstract: Any) -> bool:
        """Return True if the abstract has a binding or instance."""
        return abstract in self._bindings or abstract in self._instances

    def get_binding(self, abstract: Any) -> Optional[Binding]:
        return self._bindings.get(abstract)

    def forget(self, abstract: Any) -> None:
        """Drop the binding and any cached instance for an abstract."""
        self._bindings.pop(abstract, None)
        self._instances.pop(abstract, None)

    def flush(self) -> None:
        """Remove every binding and cached instance."""
        self._bindings.clear()
        self._instances.clear()

    def make(self, abstract: Any) -> Any:
        """Resolve an abstract to an instance.

        Raises:
            BindingResolutionError: If the abstract is unbound and cannot be
                built directly, or a circular dependency is detected
        """
        if abstract in self._instances:
            return self._instances[abstract]

        if abstract in self._building:
            chain = " -> ".join(_name(a) for a in self._building + [abstract])
            raise BindingResolutionError(f"Circular dependency detected: {chain}")

        binding = self._bindings.get(abstract)
        concrete = binding.concrete if binding else abstract

        self._building.append(abstract)
        try:
            obj = self._build(concrete)
        finally:
            self._building.pop()

        if binding and binding.shared:
            self._instances[abstract] = obj

        logger.debug(f"Resolved {_name(abstract)} -> {type(obj).__qualname__}")
        return obj

    def _build(self, concrete: Concrete) -> Any:
        if not inspect.isclass(concrete):
            if callable(concrete):
                return concrete(self)
            raise BindingResolutionError(f"Target {concrete!r} is not buildable")

        if inspect.isabstract(concrete):
            raise BindingResolutionError(
                f"Target {_name(concrete)} is abstract and has no binding"
            )

        return concrete(**self._resolve_dependencies(concrete))

    def _resolve_dependencies(self, cls: type) -> dict[str, Any]:
        """Resolve constructor arguments from their type annotations.

        Bound annotations are resolved from the container. Unbound
        parameters with defaults keep their default. Other class-typed
        parameters are built recursively; primitives cannot be.
        """
        init = cls.__init__
        if init is object.__init__:
            return {}

        try:
            hints = typing.get_type_hints(init)
        except (NameError, TypeError):
            hints = {}

        kwargs = {}
        for param in list(inspect.signature(init).parameters.values())[1:]:
            if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
                continue

            annotation = hints.get(param.name)
            if annotation is not None and self.bound(annotation):
                kwargs[param.name] = self.make(annotation)
            elif param.default is not param.empty:
                continue
            elif inspect.isclass(annotation) and annotation.__module__ != "builtins":
                kwargs[param.name] = self.make(annotation)
            else:
                raise BindingResolutionError(
                    f"Unresolvable dependency '{param.name}' in {_name(cls)}"
                )

        return kwargs
