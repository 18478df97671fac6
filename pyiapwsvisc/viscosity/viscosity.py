#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
    pyiapwsvisc - IAPWS Water & Steam Viscosity with Analytic Derivatives
              Copyright (C) 2022, Mark Burgoyne

    Viscosity formulation ported from WaterViscosityIAPWS.cpp of OpenGeoSys,
              Copyright (c) 2012-2017, OpenGeoSys Community (http://www.opengeosys.org)
              Distributed under a Modified BSD License, see http://www.opengeosys.org/project/license

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    The GNU General Public License can be found in the LICENSE directory,
    and at  <https://www.gnu.org/licenses/>.

          Contact author at mark.w.burgoyne@gmail.com
"""

# IAPWS viscosity of water and steam, with analytic derivatives.
#
#     mu(Tbar, rhobar) = mu0(Tbar) * mu1(Tbar, rhobar) * MU_REF
#
#     mu0 = 100 * sqrt(Tbar) / sum_i( Hi / Tbar^i )                                 Dilute gas term
#     mu1 = exp( rhobar * sum_i( (1/Tbar - 1)^i * sum_j( Hij * (rhobar - 1)^j ) ) )  Residual term
#
# with Tbar = T / T_REF and rhobar = rho / RHO_REF.
#
# Reference:
#     Huber, M.L. et al. (2009). "New International Formulation for the Viscosity
#     of H2O." J. Phys. Chem. Ref. Data, 38(2), 101-125. (IAPWS R12-08, without
#     the critical enhancement term)
#
# Units: T in K, rho in kg/m3, viscosity in Pa.s

import numpy as np
import numpy.typing as npt

from pyiapwsvisc.constants import T_REF, RHO_REF, MU_REF, N_T_SERIES, N_RHO_SERIES, H_I, H_IJ
from pyiapwsvisc.classes import prop_var
from pyiapwsvisc.shared_fns import broadcast_inputs, process_output
from pyiapwsvisc.validate import validate_methods


class OutOfDomainError(ValueError):
    """Raised when domain checking is requested and temperature or density is not finite and positive."""


def check_state_domain(T: np.ndarray, rho: np.ndarray) -> None:
    """ Raises OutOfDomainError if any temperature or density is <= 0 or non-finite """
    for name, x in (("Temperature", T), ("Density", rho)):
        with np.errstate(invalid='ignore'):
            bad = ~np.isfinite(x) | (x <= 0)
        if np.any(bad):
            raise OutOfDomainError(f"{name} must be finite and positive. Got {x[bad]}")


def reduced_state(T, rho):
    """
    Reduced (dimensionless) temperature and density.

    Returns:
        (Tbar, rhobar)
    """
    return np.asarray(T, dtype=float) / T_REF, np.asarray(rho, dtype=float) / RHO_REF


# =============================================================================
# Dilute gas term, mu0
# =============================================================================

def mu0_factor(barT):
    """ sum_i( Hi / Tbar^i ), i = 0..3 """
    sum_val = 0.
    barT_i = 1.
    for h in H_I:
        sum_val = sum_val + h / barT_i
        barT_i = barT_i * barT
    return sum_val


def dmu0_factor_dT(barT):
    """ Derivative of mu0_factor with respect to Tbar """
    dsum_val = 0.
    barT_i = barT * barT
    for i in range(1, len(H_I)):
        dsum_val = dsum_val - i * (H_I[i] / barT_i)
        barT_i = barT_i * barT
    return dsum_val


def bar_mu0(barT):
    return 100. * np.sqrt(barT) / mu0_factor(barT)


def dbar_mu0_dT(barT):
    # Quotient rule on 100 * Tbar^0.5 / f0
    f0 = mu0_factor(barT)
    sqrt_barT = np.sqrt(barT)
    return 50. / (f0 * sqrt_barT) - 100. * sqrt_barT * dmu0_factor_dT(barT) / (f0 * f0)


# =============================================================================
# Residual term, mu1
# =============================================================================

def series_factor_T(barT) -> np.ndarray:
    """
    Powers of (1/Tbar - 1), k = 0..5.

    Returns:
        array of shape (6,) + shape(Tbar), first row always 1
    """
    barT = np.asarray(barT, dtype=float)
    series = np.empty((N_T_SERIES,) + barT.shape)
    series[0] = 1.
    barT_fac = 1. / barT - 1.
    for i in range(1, N_T_SERIES):
        series[i] = series[i - 1] * barT_fac
    return series


def series_factor_rho(bar_rho) -> np.ndarray:
    """
    Powers of (rhobar - 1), k = 0..6.

    Returns:
        array of shape (7,) + shape(rhobar), first row always 1
    """
    bar_rho = np.asarray(bar_rho, dtype=float)
    series = np.empty((N_RHO_SERIES,) + bar_rho.shape)
    series[0] = 1.
    for i in range(1, N_RHO_SERIES):
        series[i] = series[i - 1] * (bar_rho - 1.)
    return series


def _hij_row_sums(series_rho):
    # sum_j( Hij * (rhobar - 1)^j ) for each row i
    rows = []
    for i in range(N_T_SERIES):
        sum_val_j = 0.
        for j in range(N_RHO_SERIES):
            sum_val_j = sum_val_j + H_IJ[i, j] * series_rho[j]
        rows.append(sum_val_j)
    return rows


def mu1_factor(series_T, series_rho):
    """ sum_i( (1/Tbar - 1)^i * sum_j( Hij * (rhobar - 1)^j ) ) """
    sum_val = 0.
    for i, sum_val_j in enumerate(_hij_row_sums(series_rho)):
        sum_val = sum_val + series_T[i] * sum_val_j
    return sum_val


def dmu1_factor_dT(barT, series_T, series_rho):
    """ Partial derivative of mu1_factor with respect to Tbar. d(1/Tbar - 1)/dTbar = -1/Tbar^2 """
    dsum_val = 0.
    rows = _hij_row_sums(series_rho)
    for i in range(1, N_T_SERIES):
        dsum_val = dsum_val - i * series_T[i - 1] * rows[i] / (barT * barT)
    return dsum_val


def dmu1_factor_drho(series_T, series_rho):
    """ Partial derivative of mu1_factor with respect to rhobar """
    dsum_val = 0.
    for i in range(N_T_SERIES):
        sum_val_j = 0.
        for j in range(1, N_RHO_SERIES):
            sum_val_j = sum_val_j + j * H_IJ[i, j] * series_rho[j - 1]
        dsum_val = dsum_val + series_T[i] * sum_val_j
    return dsum_val


# =============================================================================
# Combined reduced viscosity and derivatives
# =============================================================================

def bar_mu(barT, bar_rho):
    """ Reduced viscosity, mu / MU_REF """
    f1 = mu1_factor(series_factor_T(barT), series_factor_rho(bar_rho))
    return bar_mu0(barT) * np.exp(bar_rho * f1)


def dbar_mu_dT(barT, bar_rho):
    """ d(mu/MU_REF)/dTbar at constant rhobar. Product rule on mu0 * mu1 """
    series_T = series_factor_T(barT)
    series_rho = series_factor_rho(bar_rho)

    mu1 = np.exp(bar_rho * mu1_factor(series_T, series_rho))
    dbar_mu1_dT = bar_rho * mu1 * dmu1_factor_dT(barT, series_T, series_rho)

    return dbar_mu0_dT(barT) * mu1 + dbar_mu1_dT * bar_mu0(barT)


def dbar_mu_drho(barT, bar_rho):
    """ d(mu/MU_REF)/drhobar at constant Tbar """
    series_T = series_factor_T(barT)
    series_rho = series_factor_rho(bar_rho)

    f1 = mu1_factor(series_T, series_rho)
    return bar_mu0(barT) * np.exp(bar_rho * f1) * (f1 + bar_rho * dmu1_factor_drho(series_T, series_rho))


# =============================================================================
# Public evaluators
# =============================================================================

def viscosity(T: npt.ArrayLike, rho: npt.ArrayLike, check_domain: bool = False) -> np.ndarray:
    """ Returns dynamic viscosity of water / steam (Pa.s). Returning either single float, or numpy array depending upon
        whether single values or lists/arrays have been specified.
        T: Temperature (deg K). Takes a single float, list or Numpy array
        rho: Density (kg/m3). Takes a single float, list or Numpy array. Broadcast against T
        check_domain: If True, raises OutOfDomainError for any T or rho <= 0 or non-finite.
                      Otherwise non-physical inputs propagate to inf / nan results. Defaults to False
    """
    T, rho, is_list = broadcast_inputs(T, rho)
    if check_domain:
        check_state_domain(T, rho)
    with np.errstate(all='ignore'):
        barT, bar_rho = reduced_state(T, rho)
        mu = bar_mu(barT, bar_rho) * MU_REF
    return process_output(mu, is_list)


def d_viscosity_dT(T: npt.ArrayLike, rho: npt.ArrayLike, check_domain: bool = False) -> np.ndarray:
    """ Returns partial derivative of viscosity with respect to temperature at constant density (Pa.s/K)
        T: Temperature (deg K)
        rho: Density (kg/m3)
        check_domain: If True, raises OutOfDomainError for any T or rho <= 0 or non-finite. Defaults to False
    """
    T, rho, is_list = broadcast_inputs(T, rho)
    if check_domain:
        check_state_domain(T, rho)
    with np.errstate(all='ignore'):
        barT, bar_rho = reduced_state(T, rho)
        dmu_dT = MU_REF * dbar_mu_dT(barT, bar_rho) / T_REF
    return process_output(dmu_dT, is_list)


def d_viscosity_dRho(T: npt.ArrayLike, rho: npt.ArrayLike, check_domain: bool = False) -> np.ndarray:
    """ Returns partial derivative of viscosity with respect to density at constant temperature (Pa.s.m3/kg)
        T: Temperature (deg K)
        rho: Density (kg/m3)
        check_domain: If True, raises OutOfDomainError for any T or rho <= 0 or non-finite. Defaults to False
    """
    T, rho, is_list = broadcast_inputs(T, rho)
    if check_domain:
        check_state_domain(T, rho)
    with np.errstate(all='ignore'):
        barT, bar_rho = reduced_state(T, rho)
        dmu_drho = MU_REF * dbar_mu_drho(barT, bar_rho) / RHO_REF
    return process_output(dmu_drho, is_list)


def viscosity_and_derivatives(T: npt.ArrayLike, rho: npt.ArrayLike, check_domain: bool = False) -> tuple:
    """ Returns tuple of (viscosity (Pa.s), dVisc/dT (Pa.s/K), dVisc/dRho (Pa.s.m3/kg))
        Each member is identical to the result of the corresponding single evaluator
    """
    return (
        viscosity(T, rho, check_domain),
        d_viscosity_dT(T, rho, check_domain),
        d_viscosity_dRho(T, rho, check_domain),
    )


class WaterViscosityIAPWS:
    """
    Water viscosity as a material property of temperature and density.

    value(T, rho) returns viscosity (Pa.s)
    dvalue(T, rho, var) returns the partial derivative with respect to var, a prop_var
    Enum member or its name ('T', 'RHO' or 'P'). Viscosity depends on pressure only
    through density, so the pressure derivative at given density is zero.
    """
    name = "IAPWS water viscosity"

    def __init__(self, check_domain: bool = False):
        self.check_domain = check_domain

    def value(self, T: npt.ArrayLike, rho: npt.ArrayLike):
        return viscosity(T, rho, self.check_domain)

    def dvalue(self, T: npt.ArrayLike, rho: npt.ArrayLike, var=prop_var.T):
        var = validate_methods(["propvar"], [var])
        if var == prop_var.T:
            return d_viscosity_dT(T, rho, self.check_domain)
        if var == prop_var.RHO:
            return d_viscosity_dRho(T, rho, self.check_domain)
        if var == prop_var.P:
            T, rho, is_list = broadcast_inputs(T, rho)
            if self.check_domain:
                check_state_domain(T, rho)
            return process_output(np.zeros(T.shape), is_list)
        raise ValueError(f"Unknown propvar: {var}")

    def __repr__(self):
        return f"{self.__class__.__name__}(check_domain={self.check_domain})"
