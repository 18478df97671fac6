"""
pyiapwsvisc
===================================

---------------------------------------------------------
IAPWS Water & Steam Viscosity with Analytic Derivatives
---------------------------------------------------------

Dynamic viscosity of water and steam as a function of temperature (K) and density (kg/m3),
using the IAPWS reduced variable formulation, together with its analytic partial derivatives
with respect to temperature and density. Intended for material property evaluation inside
simulators that need viscosity sensitivities at every evaluation point.

Note: Functions live in separate submodules, requiring seperate imports, eg;

    from pyiapwsvisc import viscosity
    mu = viscosity.viscosity(T=298.15, rho=998)

Includes;

- Viscosity (Pa.s), dVisc/dT (Pa.s/K) and dVisc/dRho (Pa.s.m3/kg) for single values or arrays
- Optional input domain checking
- A material property class with derivative selection by state variable
- Tabulation of viscosity and derivatives over temperature / density grids, with Excel export


"""

submodules = [
    'classes',
    'constants',
    'shared_fns',
    'tables',
    'validate',
    'viscosity'
]

__all__ = submodules

import importlib

def __dir__():
    return __all__


def __getattr__(name):
    if name in submodules:
        return importlib.import_module(f'pyiapwsvisc.{name}')
    else:
        try:
            return globals()[name]
        except KeyError:
            raise AttributeError(
                f"Module 'pyiapwsvisc' has no attribute '{name}'"
            )
