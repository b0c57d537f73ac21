#!/usr/bin/env python3
"""
Verification script for Cython acceleration of moment statistics.

This script verifies that:
1. Cython modules can be imported (or fallback works)
2. Published reference values are reproduced
3. Degenerate inputs give undefined (None) results
4. Cython and Python backends agree

Run with: python verify_cython_implementation.py
"""

import sys
import numpy as np
from pathlib import Path

# Add parent directory to path if needed
sys.path.insert(0, str(Path(__file__).parent))

print("=" * 70)
print("MOMENT STATISTICS VERIFICATION")
print("=" * 70)

# Test 1: Import Cython modules
print("\n[1/4] Testing Cython module imports...")
try:
    import moments_cython as cy
    from moments_python import data_moments as py
    print(f"    ✓ Modules imported successfully")
    print(f"    ✓ CYTHON_AVAILABLE = {cy.CYTHON_AVAILABLE}")
    if cy.CYTHON_AVAILABLE:
        print(f"    ✓ Using Cython-accelerated central moment")
    else:
        print(f"    ✓ Using Python fallback (Cython not compiled)")
except Exception as e:
    print(f"    ✗ Import failed: {e}")
    sys.exit(1)

# Test 2: Reference values
print("\n[2/4] Testing reference values...")
try:
    references = [
        ('skewness_sample', [4, 2.1, 8, 21, 1], 1.6994131524),
        ('skewness_population', [4, 2.1, 8, 21, 1], 1.1400009992),
        ('kurtosis_population', [1, 12, 19.5, -5, 3, 8], 2.0460654088343166),
    ]
    for name, values, expected in references:
        result = getattr(cy, name)(values)
        assert abs(result - expected) < 1e-9, f"{name} = {result}, expected {expected}"
        print(f"    ✓ {name}: {result:.10f}")
except Exception as e:
    print(f"    ✗ Reference test failed: {e}")
    sys.exit(1)

# Test 3: Degenerate inputs
print("\n[3/4] Testing degenerate inputs...")
try:
    assert cy.skewness_sample([1.0, 2.0]) is None, "skewness needs 3 values"
    assert cy.skewness_population([0.1, 0.1, 0.1]) is None, "constant skewness should be undefined"
    assert cy.kurtosis_population([]) is None, "empty kurtosis should be undefined"
    assert cy.kurtosis_population([5.0]) == 0.0, "single value kurtosis should be 0.0"
    assert cy.kurtosis_population([2.0, 2.0]) is None, "constant kurtosis should be undefined"
    print(f"    ✓ Undefined statistics return None")
except Exception as e:
    print(f"    ✗ Degenerate input test failed: {e}")
    sys.exit(1)

# Test 4: Backend agreement
print("\n[4/4] Testing backend agreement...")
try:
    np.random.seed(42)
    data = np.random.standard_t(df=5, size=10000)
    for name in ['skewness_sample', 'skewness_population', 'kurtosis_population']:
        py_result = getattr(py, name)(data)
        cy_result = getattr(cy, name)(data)
        assert np.isclose(py_result, cy_result, rtol=1e-10), f"{name} differs"
        print(f"    ✓ {name}: {cy_result:.6f}")
except Exception as e:
    print(f"    ✗ Agreement test failed: {e}")
    sys.exit(1)

# All tests passed
print("\n" + "=" * 70)
print("✓ ALL VERIFICATION TESTS PASSED")
print("=" * 70)
print()
if cy.CYTHON_AVAILABLE:
    print("Status: Using Cython-accelerated central moment")
else:
    print("Status: Using Python fallback (compile Cython for speedup)")
    print("  Run: python setup.py build_ext --inplace")
print()
