#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
    pyiapwsvisc - IAPWS Water & Steam Viscosity with Analytic Derivatives
              Copyright (C) 2022, Mark Burgoyne

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

import numpy as np

# Reference constants (IAPWS). Fixed by the standard, not configurable
T_REF = 647.096  # Reference temperature (K)
RHO_REF = 322.0  # Reference density (kg/m3)
MU_REF = 1.0e-6  # Reference viscosity (Pa.s)

N_T_SERIES = 6  # Number of (1/Tbar - 1) power terms
N_RHO_SERIES = 7  # Number of (rhobar - 1) power terms

# Dilute gas coefficients, Hi
H_I = np.array([1.67752, 2.20462, 0.6366564, -0.241605])

# Residual coefficients, Hij. Row i for (1/Tbar - 1)^i, column j for (rhobar - 1)^j
H_IJ = np.array([
    [ 0.520094,   0.222531, -0.281378, 0.161913, -0.0325372, 0,           0],
    [ 0.0850895,  0.999115, -0.906851, 0.257399,  0,         0,           0],
    [-1.08374,    1.88797,  -0.772479, 0,         0,         0,           0],
    [-0.289555,   1.26613,  -0.489837, 0,         0.0698452, 0,          -0.00435673],
    [ 0,          0,        -0.25704,  0,         0,         0.00872102,  0],
    [ 0,          0.120573,  0,        0,         0,         0,          -0.000593264],
], dtype=float)

H_I.flags.writeable = False
H_IJ.flags.writeable = False
