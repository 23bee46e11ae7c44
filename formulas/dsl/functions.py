import numpy as np

# name -> (ufunc, arity)
ALLOWED_FUNCTIONS = {
    "sin": (np.sin, 1),
    "cos": (np.cos, 1),
    "sqrt": (np.sqrt, 1),
    "abs": (np.abs, 1),
    "pow": (np.power, 2),
    # NaN-propagating, unlike the builtin min/max
    "min": (np.minimum, 2),
    "max": (np.maximum, 2),
}
