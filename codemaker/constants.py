from typing import Final


INDENT_UNIT: Final[str] = "    "
PYTHON_EXTENSION: Final[str] = ".py"
PACKAGE_ROOT_MODULE: Final[str] = "__init__"

DEFAULT_MODULE_NAME: Final[str] = "status_codes"
DEFAULT_LOOKUP_RESULT: Final[str] = "None"

BACKUP_SUFFIX: Final[str] = ".bak"
