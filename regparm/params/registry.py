"""
Parameter Registry.

Central storage for generic control parameter definitions. This module
provides the ParamRegistry class which is the single source of truth for the
names, types and defaults of every generic parameter.

Usage
-----
The global REGISTRY instance is populated by importing the definitions module.
Once populated, definitions can be queried by name or by category:

    from regparm.params import REGISTRY

    # Get a specific parameter
    param = REGISTRY.all_params.get('leaf_address_size')

    # Get parameters of one parameter file section
    sv_params = REGISTRY.get_params_by_category(Category.SYSTEMVERILOG_OUT)

The registry is populated once at import time and frozen. Parameter *values*
are not stored here; see regparm.context.ExtParameters.
"""

from typing import Dict, List, Mapping
from types import MappingProxyType
from collections import defaultdict

from .schema import ParamDef, Category


class RegistryFrozenError(RuntimeError):
    """Raised when attempting to modify a frozen registry."""


class ParamRegistry:
    """
    Central registry for generic control parameters.

    Attributes:
        _params: Dictionary mapping parameter names to ParamDef instances,
            in registration order.
        _by_category: Dictionary mapping categories to lists of parameter names.
        _frozen: Whether the registry has been frozen (immutable).
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._params: Dict[str, ParamDef] = {}
        self._by_category: Dict[Category, List[str]] = defaultdict(list)
        self._frozen: bool = False
        self._params_proxy: Mapping[str, ParamDef] = None

    def freeze(self) -> None:
        """
        Freeze the registry, preventing further modifications.

        After calling this method:
        - register() will raise RegistryFrozenError
        - all_params returns a read-only view (MappingProxyType)

        This method is idempotent (safe to call multiple times).
        """
        if not self._frozen:
            self._frozen = True
            self._params_proxy = MappingProxyType(self._params)

    @property
    def is_frozen(self) -> bool:
        """Return True if the registry has been frozen."""
        return self._frozen

    def register(self, param: ParamDef) -> None:
        """
        Register a parameter definition.

        Args:
            param: The parameter definition to register.

        Raises:
            RegistryFrozenError: If the registry has been frozen.
            ValueError: If a parameter with the same name is already registered.
        """
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register '{param.name}': registry is frozen. "
                "All parameters must be registered during module initialization."
            )

        if param.name in self._params:
            raise ValueError(f"Duplicate parameter '{param.name}'")

        self._params[param.name] = param
        self._by_category[param.category].append(param.name)

    def __contains__(self, name: str) -> bool:
        return name in self._params

    def __len__(self) -> int:
        return len(self._params)

    @property
    def all_params(self) -> Mapping[str, ParamDef]:
        """
        Get all registered parameters.

        Returns:
            Mapping of parameter names to their definitions.
            If the registry is frozen, returns a read-only view.
        """
        if self._frozen and self._params_proxy is not None:
            return self._params_proxy
        return self._params

    def get_params_by_category(self, category: Category) -> Dict[str, ParamDef]:
        """
        Get the parameters of one parameter file section, in registration order.
        """
        return {name: self._params[name] for name in self._by_category.get(category, [])}

    def get_all_categories(self) -> List[Category]:
        """Return the categories that have at least one parameter."""
        return [c for c in Category if self._by_category.get(c)]


# Global registry instance - populated when definitions module is imported
REGISTRY = ParamRegistry()
