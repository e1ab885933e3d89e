"""
Control Parameter Schema Package.

Import Order
------------
1. REGISTRY is imported first (empty at this point)
2. Schema classes (ParamDef, ParamType, Category) for type definitions
3. definitions module is imported LAST to populate and freeze REGISTRY

After initialization, REGISTRY.is_frozen is True and any attempt to
register new parameters will raise RegistryFrozenError.
"""

from .registry import REGISTRY, RegistryFrozenError
from .schema import ParamDef, ParamType, Category, ParamValidationError

# IMPORTANT: This import populates REGISTRY with all parameter definitions
# and freezes it. It must come after REGISTRY is imported and must not be removed.
from . import definitions  # noqa: F401  pylint: disable=unused-import

__all__ = ['REGISTRY', 'RegistryFrozenError', 'ParamDef', 'ParamType', 'Category', 'ParamValidationError']
