from .recursion import Kind, IntegralTerm, expand
from .reference import ClosedFormReference, ReferenceIntegralOracle
