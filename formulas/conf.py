"""
Settings for the formulas app.

Both values can be overridden from the Django settings module:

    FORMULAS_MAX_LENGTH = 500
    FORMULAS_DEFAULT_VARIABLES = {"pi": 3.141592653589793}
"""
from typing import Dict

from django.conf import settings

DEFAULT_MAX_LENGTH = 1000


def get_max_length() -> int:
    return getattr(settings, "FORMULAS_MAX_LENGTH", DEFAULT_MAX_LENGTH)


def get_default_variables() -> Dict[str, float]:
    return dict(getattr(settings, "FORMULAS_DEFAULT_VARIABLES", {}))
