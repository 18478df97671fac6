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

import pandas as pd
from tabulate import tabulate

from pyiapwsvisc.shared_fns import convert_to_numpy
from pyiapwsvisc.viscosity import viscosity_and_derivatives

TABLE_COLUMNS = [
    "T (K)",
    "Rho (kg/m3)",
    "Visc (Pa.s)",
    "dVisc/dT (Pa.s/K)",
    "dVisc/dRho (Pa.s.m3/kg)",
]

def viscosity_table(
    temps: npt.ArrayLike,
    rhos: npt.ArrayLike,
    export: bool = False,
    filename: str = "viscosity",
) -> pd.DataFrame:
    """ Returns Pandas table of viscosity and its temperature & density derivatives
        for every combination of temperature and density, temperature varying slowest
        temps: Temperatures (deg K). Single float, list or 1D Numpy array
        rhos: Densities (kg/m3). Single float, list or 1D Numpy array
        export: Boolean flag that controls whether to write the table to '<filename>.xlsx'
                and a plain text '<filename>.txt' file. Default is False
        filename: Base name (with optional path) of exported files. Default is 'viscosity'
    """
    temps, _ = convert_to_numpy(temps)
    rhos, _ = convert_to_numpy(rhos)
    tt, rr = np.meshgrid(temps.ravel(), rhos.ravel(), indexing="ij")
    tt = tt.ravel()
    rr = rr.ravel()

    visc, dvisc_dt, dvisc_drho = viscosity_and_derivatives(tt, rr)

    df = pd.DataFrame()
    df["T (K)"] = tt
    df["Rho (kg/m3)"] = rr
    df["Visc (Pa.s)"] = visc
    df["dVisc/dT (Pa.s/K)"] = dvisc_dt
    df["dVisc/dRho (Pa.s.m3/kg)"] = dvisc_drho

    if export:
        df.to_excel(f"{filename}.xlsx", index=False, engine="openpyxl")
        fileout = tabulate(df, TABLE_COLUMNS, showindex=False, floatfmt=".8g")
        with open(f"{filename}.txt", "w") as text_file:
            text_file.write(fileout)
    return df

def print_table(df: pd.DataFrame) -> None:
    print(tabulate(df, headers="keys", showindex=False, floatfmt=".8g"))
