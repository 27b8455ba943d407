# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""
Validation helpers shared by the `goensemble` learners: hyperparameter
constraint checking, trained-state checks and training-set checks.
"""

from ..compat.sklearn import InvalidParameterError
from ..compat.sklearn import validate_parameter_constraints
from ..exceptions import InvalidArgumentError, InvalidInputError
from ..exceptions import NotTrainedError
from ..datasets import Labeled

__all__ = [
    "get_estimator_name",
    "validate_hyperparameters",
    "check_is_trained",
    "check_labeled",
]


def get_estimator_name(estimator, /):
    """ Get the estimator name whatever it is an instanciated object or not

    :param estimator: callable or instanciated object,
        callable or instance object that has a fit method.

    :return: str,
        name of the estimator.
    """
    name = ' '
    if hasattr(estimator, '__qualname__') and hasattr(estimator, '__name__'):
        name = estimator.__name__
    elif hasattr(estimator, '__class__') and not hasattr(estimator, '__name__'):
        name = estimator.__class__.__name__
    return name


def validate_hyperparameters(constraints, params, caller_name):
    """
    Check `params` against declarative `constraints`.

    Parameters
    ----------
    constraints : dict
        Maps a parameter name to its list of accepted constraints, as used
        by scikit-learn's ``_parameter_constraints``.

    params : dict
        The parameter values, typically ``estimator.get_params(deep=False)``.

    caller_name : str
        Name used in the error message.

    Raises
    ------
    InvalidArgumentError
        On the first parameter that satisfies none of its constraints.
    """
    try:
        validate_parameter_constraints(constraints, params, caller_name)
    except InvalidParameterError as err:
        raise InvalidArgumentError(str(err)) from err


def check_is_trained(estimator, attribute="estimators_", msg=None):
    """
    Raise :class:`NotTrainedError` if ``estimator.<attribute>`` is empty.

    Parameters
    ----------
    estimator : object
        The estimator to check.

    attribute : str, default="estimators_"
        The attribute holding the trained state. It is considered trained
        when the attribute exists and is not empty (or not None).

    msg : str, optional
        Custom error message.
    """
    state = getattr(estimator, attribute, None)
    trained = state is not None and (
        not hasattr(state, "__len__") or len(state) > 0)
    if not trained:
        if msg is None:
            msg = ("This %s instance is not trained yet. Call 'train' or 'fit'"
                   " with appropriate arguments before using this estimator."
                   % get_estimator_name(estimator))
        raise NotTrainedError(msg)


def check_labeled(dataset, estimator=None):
    """
    Raise :class:`InvalidInputError` unless `dataset` is a labeled dataset.

    Returns
    -------
    Labeled
        The dataset, unchanged.
    """
    if not isinstance(dataset, Labeled):
        name = get_estimator_name(estimator) if estimator is not None else "This"
        raise InvalidInputError(
            f"{name} requires a labeled training set,"
            f" {type(dataset).__name__} given.")
    return dataset
