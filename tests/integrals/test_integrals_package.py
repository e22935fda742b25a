import types

import pytest

from gaussform import integrals


@pytest.mark.parametrize(
    "name", ["overlap", "kinetic", "nuclear", "multipole", "coulomb"]
)
def test_evaluator_modules_are_not_shadowed(name):
    assert isinstance(getattr(integrals, name), types.ModuleType)


@pytest.mark.parametrize(
    "name", ["nuclear_attraction", "coulomb_repulsion"]
)
def test_evaluators_are_not_reexported(name):
    assert not hasattr(integrals, name)
