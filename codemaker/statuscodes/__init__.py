"""Sample domain: generate a Python module from a status-code table."""

from codemaker.statuscodes.loader import load_status_codes
from codemaker.statuscodes.makers import (
    LookupFunctionMaker,
    StatusModuleMaker,
    StatusPackageMaker,
)
from codemaker.statuscodes.models import NamingConvention, StatusCode, StatusCodes

__all__ = [
    "LookupFunctionMaker",
    "NamingConvention",
    "StatusCode",
    "StatusCodes",
    "StatusModuleMaker",
    "StatusPackageMaker",
    "load_status_codes",
]
