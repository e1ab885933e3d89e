"""
Control parameters for the register description compiler.

    from regparm import ExtParameters, load_parameters

    ctx = ExtParameters()
    load_parameters(ctx, ["chip.parms"])
"""

from .context     import ExtParameters
from .diagnostics import Diagnostics
from .loader      import load_parameters, read_parameters, load_parameters_from_text
from .state       import RegParmConfig

__all__ = ['ExtParameters', 'Diagnostics', 'load_parameters', 'read_parameters',
           'load_parameters_from_text', 'RegParmConfig']
