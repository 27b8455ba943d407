# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""
Provides compatibility utilities for different versions of scikit-learn.

It wraps the parameter-validation helpers `goensemble` relies on so that
estimators and configuration objects declare their constraints the same
way regardless of the installed scikit-learn release.

Attributes
----------
SKLEARN_VERSION : packaging.version.Version
    The installed scikit-learn version.
SKLEARN_LT_1_3 : bool
    True if the installed scikit-learn version is less than 1.3.0.
"""
import inspect
from packaging.version import parse
import sklearn
from sklearn.base import clone
from sklearn.utils._param_validation import validate_params as sklearn_validate_params
from sklearn.utils._param_validation import Interval as sklearn_Interval
from sklearn.utils._param_validation import HasMethods
from sklearn.utils._param_validation import InvalidParameterError
from sklearn.utils._param_validation import validate_parameter_constraints

SKLEARN_VERSION = parse(sklearn.__version__)

SKLEARN_LT_1_3 = SKLEARN_VERSION < parse("1.3.0")

__all__ = [
    "Interval",
    "clone",
    "validate_params",
    "validate_parameter_constraints",
    "InvalidParameterError",
    "HasMethods",
    "SKLEARN_VERSION",
    "SKLEARN_LT_1_3",
]


class Interval:
    """
    Compatibility wrapper for scikit-learn's `Interval` class to handle
    versions that do not include the `inclusive` argument.

    Parameters
    ----------
    *args : tuple
        Positional arguments passed to the `Interval` class, typically
        the expected data types and the range boundaries.

    closed : str, optional
        Defines how the interval is closed. Can be "left", "right", "both",
        or "neither".

    Examples
    --------
    >>> from numbers import Real
    >>> from goensemble.compat.sklearn import Interval
    >>> Interval(Real, 0.01, 1.0, closed="both")
    Interval(Real, 0.01, 1.0, closed='both')
    """

    def __new__(cls, *args, **kwargs):
        signature = inspect.signature(sklearn_Interval.__init__)
        if 'inclusive' not in signature.parameters:
            kwargs.pop('inclusive', None)
        return sklearn_Interval(*args, **kwargs)


def validate_params(params, *args, prefer_skip_nested_validation=True, **kwargs):
    """
    Compatibility wrapper for scikit-learn's `validate_params` decorator
    to handle versions that require the `prefer_skip_nested_validation`
    argument.

    Parameters
    ----------
    params : dict
        Maps the name of each validated parameter to the list of accepted
        constraints (types, `Interval`, ``None`` ...).

    prefer_skip_nested_validation : bool, optional
        Skip the validation of nested estimators. Default is ``True``.

    Returns
    -------
    function
        The decorator enforcing the constraints.

    Examples
    --------
    >>> from numbers import Integral
    >>> from goensemble.compat.sklearn import validate_params
    >>> @validate_params({'n_jobs': [Integral, None]})
    ... def run(n_jobs=None):
    ...     return n_jobs
    """
    if not SKLEARN_LT_1_3:
        kwargs['prefer_skip_nested_validation'] = prefer_skip_nested_validation

    return sklearn_validate_params(params, *args, **kwargs)
