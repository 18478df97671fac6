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
import numpy.typing as npt
from typing import Tuple

def convert_to_numpy(input_data: npt.ArrayLike) -> Tuple[np.ndarray, bool]:
    """ Returns (float array of at least one dimension, is_list)
        is_list records whether the caller passed a list, tuple or array rather than a single value
    """
    is_list = np.ndim(input_data) > 0
    return np.atleast_1d(np.asarray(input_data, dtype=float)), is_list

def process_output(input_data: np.ndarray, is_list: bool):
    # Collapse back to a single float if a single value was supplied
    if is_list:
        return input_data
    return float(input_data.flat[0])

def broadcast_inputs(x: npt.ArrayLike, y: npt.ArrayLike) -> Tuple[np.ndarray, np.ndarray, bool]:
    """ Broadcasts two inputs against each other. Returns (x, y, is_list) """
    x, x_list = convert_to_numpy(x)
    y, y_list = convert_to_numpy(y)
    x, y = np.broadcast_arrays(x, y)
    return x, y, x_list or y_list
