# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""
The learner contract every `goensemble` estimator satisfies.

Ensembles only ever talk to their base learner through this interface, so
any conforming learner (tree, stump, wrapped scikit-learn model ...) can be
plugged in without the ensemble knowing its internals.
"""

from __future__ import annotations

from abc import ABCMeta, abstractmethod
from enum import Enum

from ..compat.sklearn import clone

__all__ = [
    "EstimatorType",
    "Learner",
    "Probabilistic",
    "RanksFeatures",
    "MetaEstimator",
]


class EstimatorType(Enum):
    """Kinds of estimators, used to check a base learner is compatible."""

    CLASSIFIER = "classifier"
    REGRESSOR = "regressor"
    CLUSTERER = "clusterer"
    ANOMALY_DETECTOR = "anomaly_detector"

    def __str__(self):
        return self.value


class Learner(metaclass=ABCMeta):
    """
    Base class of trainable estimators.

    A learner is trained in place with :meth:`train` and then makes one
    prediction per row of a dataset with :meth:`predict`. Training mutates
    only the learner's own state; :meth:`clone` gives an untrained copy
    sharing the same hyperparameters, which is how ensembles obtain fresh
    members.

    Subclasses implement :meth:`type`, :meth:`train`, :meth:`predict` and
    :meth:`trained`.
    """

    @abstractmethod
    def type(self) -> EstimatorType:
        """Return the kind of estimator this is."""

    @abstractmethod
    def train(self, dataset):
        """
        Fit the learner to a labeled dataset.

        Raises
        ------
        InvalidInputError
            If the dataset carries no labels.
        """

    @abstractmethod
    def predict(self, dataset):
        """
        Return one predicted label per row of `dataset`.

        Raises
        ------
        NotTrainedError
            If called before :meth:`train`.
        """

    @abstractmethod
    def trained(self) -> bool:
        """Return whether the learner has been trained."""

    def clone(self):
        """Return an untrained copy sharing this learner's hyperparameters."""
        return clone(self)


class Probabilistic(metaclass=ABCMeta):
    """Learners able to estimate a probability for every known class."""

    @abstractmethod
    def proba(self, dataset):
        """
        Return the class probabilities of every row of `dataset`.

        Returns
        -------
        pandas.DataFrame of shape (n_rows, n_classes)
            One column per class label, each row summing to one.
        """


class RanksFeatures(metaclass=ABCMeta):
    """Learners able to report how much each feature contributed."""

    @abstractmethod
    def feature_importances(self) -> dict:
        """Return a mapping of feature column to importance."""


class MetaEstimator(metaclass=ABCMeta):
    """
    Marker for estimators composed of other estimators (ensembles).

    Boosting is defined over atomic learners only and refuses a meta
    estimator as its base.
    """
