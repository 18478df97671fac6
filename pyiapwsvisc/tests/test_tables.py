#!/usr/bin/env python3
"""
Validation tests for tables module.
"""

import sys
import os
import tempfile
import io
import contextlib
import numpy as np
import pandas as pd

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
import pyiapwsvisc.tables as tables
import pyiapwsvisc.viscosity as visc

def test_table_columns_and_size():
    """One row per temperature / density pair"""
    df = tables.viscosity_table([300, 400, 500], [1, 500, 1000])
    assert isinstance(df, pd.DataFrame)
    assert list(df.columns) == tables.TABLE_COLUMNS
    assert len(df) == 9

def test_table_temperature_varies_slowest():
    df = tables.viscosity_table([300, 400], [10, 20, 30])
    assert list(df['T (K)']) == [300, 300, 300, 400, 400, 400]
    assert list(df['Rho (kg/m3)']) == [10, 20, 30, 10, 20, 30]

def test_table_values_match_evaluators():
    df = tables.viscosity_table([320.0, 610.0], [2.0, 880.0])
    for _, row in df.iterrows():
        T, rho = row['T (K)'], row['Rho (kg/m3)']
        mu = visc.viscosity(T, rho)
        dmu_dT = visc.d_viscosity_dT(T, rho)
        dmu_drho = visc.d_viscosity_dRho(T, rho)
        assert abs(row['Visc (Pa.s)'] - mu) <= 1e-14 * mu
        assert abs(row['dVisc/dT (Pa.s/K)'] - dmu_dT) <= 1e-14 * abs(dmu_dT)
        assert abs(row['dVisc/dRho (Pa.s.m3/kg)'] - dmu_drho) <= 1e-14 * abs(dmu_drho)

def test_table_single_values():
    df = tables.viscosity_table(298.15, 998.0)
    assert len(df) == 1
    assert abs(df['Visc (Pa.s)'].iloc[0] - 889.7e-6) / 889.7e-6 < 0.01

def test_table_export():
    """Export writes an Excel workbook and a plain text table"""
    with tempfile.TemporaryDirectory() as tmpdir:
        base = os.path.join(tmpdir, 'visc')
        df = tables.viscosity_table(np.array([300.0, 350.0]), [990.0], export=True, filename=base)
        assert os.path.exists(base + '.xlsx')
        assert os.path.exists(base + '.txt')
        with open(base + '.txt') as f:
            text = f.read()
        assert 'dVisc/dRho (Pa.s.m3/kg)' in text
        assert len(text.strip().splitlines()) == len(df) + 2  # Header and separator lines
        df_back = pd.read_excel(base + '.xlsx', engine='openpyxl')
        assert list(df_back.columns) == tables.TABLE_COLUMNS
        assert len(df_back) == 2


def test_print_table():
    df = tables.viscosity_table([300.0, 400.0], 950.0)
    buf = io.StringIO()
    with contextlib.redirect_stdout(buf):
        tables.print_table(df)
    out = buf.getvalue()
    assert "Visc (Pa.s)" in out
    assert len(out.strip().splitlines()) == 4


if __name__ == '__main__':
    print("=" * 70)
    print("TABLES MODULE VALIDATION TESTS")
    print("=" * 70)

    tests = [v for k, v in globals().items() if k.startswith('test_')]
    passed = 0
    failed = 0

    for test in tests:
        try:
            test()
            passed += 1
            print(f"  PASS: {test.__name__}")
        except Exception as e:
            failed += 1
            print(f"  FAIL: {test.__name__}: {e}")

    print(f"\n{'=' * 70}")
    print(f"Results: {passed} passed, {failed} failed out of {passed + failed}")
    print("=" * 70)
    sys.exit(1 if failed > 0 else 0)
