# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""
Estimators of the `goensemble` package: the bagging and boosting
ensembles, and the weak learners they are built from.
"""

from ._base import EstimatorType, Learner, Probabilistic, RanksFeatures
from ._base import MetaEstimator
from .base import DecisionStumpClassifier
from .boosting import AdaBoostClassifier
from .ensemble import RandomForestClassifier
from .tree import ClassificationTree, ExtraTreeClassifier, SklearnClassifier

__all__ = [
    "EstimatorType",
    "Learner",
    "Probabilistic",
    "RanksFeatures",
    "MetaEstimator",
    "DecisionStumpClassifier",
    "ClassificationTree",
    "ExtraTreeClassifier",
    "SklearnClassifier",
    "AdaBoostClassifier",
    "RandomForestClassifier",
]
