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

from enum import Enum

class prop_var(Enum):  # State variable a property derivative is taken with respect to
    T = 0
    RHO = 1
    P = 2

class_dic = {
    "propvar": prop_var,
}
