from .shell import PrimitiveType, Shell
from .contracted_gto import ContractedGaussian, PrimitiveGaussian, expand_shell
