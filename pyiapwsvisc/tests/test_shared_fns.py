#!/usr/bin/env python3
"""
Validation tests for input handling and selector validation.
"""

import sys
import os
import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
from pyiapwsvisc.shared_fns import convert_to_numpy, process_output, broadcast_inputs
from pyiapwsvisc.validate import validate_methods
from pyiapwsvisc.classes import prop_var, class_dic

def test_convert_scalar():
    arr, is_list = convert_to_numpy(300)
    assert arr.shape == (1,)
    assert arr.dtype == float
    assert not is_list

def test_convert_list():
    arr, is_list = convert_to_numpy([300, 400])
    assert arr.shape == (2,)
    assert is_list

def test_convert_single_element_list_stays_list():
    _, is_list = convert_to_numpy([300])
    assert is_list

def test_process_output():
    assert process_output(np.array([2.5]), False) == 2.5
    assert isinstance(process_output(np.array([2.5]), False), float)
    out = process_output(np.array([1.0, 2.0]), True)
    assert isinstance(out, np.ndarray)

def test_broadcast_inputs():
    x, y, is_list = broadcast_inputs(300.0, [1.0, 2.0, 3.0])
    assert x.shape == (3,) and y.shape == (3,)
    assert is_list
    _, _, is_list = broadcast_inputs(300.0, 1.0)
    assert not is_list

def test_broadcast_mismatch_raises():
    try:
        broadcast_inputs([1.0, 2.0], [1.0, 2.0, 3.0])
        assert False, "Should have raised ValueError for mismatched shapes"
    except ValueError:
        pass

def test_validate_string():
    assert validate_methods(['propvar'], ['rho']) == prop_var.RHO
    assert validate_methods(['propvar'], ['T']) == prop_var.T

def test_validate_enum_passthrough():
    assert validate_methods(['propvar'], [prop_var.P]) == prop_var.P

def test_validate_multiple():
    out = validate_methods(['propvar', 'propvar'], ['t', prop_var.RHO])
    assert out == [prop_var.T, prop_var.RHO]

def test_validate_unknown():
    try:
        validate_methods(['propvar'], ['volume'])
        assert False, "Should have raised ValueError"
    except ValueError as e:
        assert 'propvar' in str(e)

def test_class_dic():
    assert class_dic['propvar'] is prop_var

def test_package_lazy_submodules():
    """Top level package loads submodules on attribute access"""
    import pyiapwsvisc
    assert "viscosity" in dir(pyiapwsvisc)
    mu = pyiapwsvisc.viscosity.viscosity(298.15, 998.0)
    assert 0.00088 < mu < 0.0009, f"mu = {mu} Pa.s"
    try:
        pyiapwsvisc.not_a_module
        assert False, "Should have raised AttributeError"
    except AttributeError:
        pass


if __name__ == '__main__':
    print("=" * 70)
    print("SHARED FUNCTIONS VALIDATION TESTS")
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
