# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""List of `goensemble` exceptions for warning users."""

class InvalidArgumentError(ValueError):
    """
    Exception raised for malformed hyperparameters or an incompatible base
    learner.

    It is raised synchronously when an ensemble is constructed (and again
    when `train` re-validates parameters changed through ``set_params``),
    before any data is seen.
    """
    pass

class InvalidInputError(ValueError):
    """
    Exception raised when the data handed to `train` cannot be learned from,
    for instance a training set that carries no labels.

    The training state of the estimator is left exactly as it was before
    the call.
    """
    pass

class NotTrainedError(Exception):
    """
    Exception raised when an inference method (`predict`, `proba`,
    `feature_importances`) is called on an estimator that has not been
    trained yet.

    Examples
    --------
    >>> from goensemble.estimators import RandomForestClassifier
    >>> from goensemble.exceptions import NotTrainedError
    >>> forest = RandomForestClassifier()
    >>> try:
    ...     forest.feature_importances()
    ... except NotTrainedError as e:
    ...     print(e)
    This RandomForestClassifier instance is not trained yet. Call 'train' or
    'fit' with appropriate arguments before using this estimator.

    See Also
    --------
    goensemble.tools.validator.check_is_trained :
        Function raising this exception for an empty ensemble.
    """
    pass

class DatasetError(Exception):
    """
    Exception raised for inconsistencies in the dataset provided.

    This exception is raised when samples and labels have mismatching
    lengths, when samples are not two-dimensional, or when resampling
    weights are not one non-negative value per row.
    """
    pass

class EstimatorError(Exception):
    """
    Exception raised when a learner breaks its contract, e.g. a member
    predicting a class that was never seen during training or a base
    learner asked for probabilities it cannot estimate.
    """
    pass
