from .trajectory import Ramp, ParabolicCurve, ParabolicCurvesND
from .status import ValidationStatus, GetStatus, ClearStatus
from .utilities import epsilon, inf, FuzzyEquals, FuzzyZero
