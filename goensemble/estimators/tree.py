# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""
`tree` module adapts scikit-learn classifiers, decision trees first, to the
`goensemble` learner contract so they can serve as ensemble members.
"""

from __future__ import annotations

from abc import abstractmethod

import pandas as pd
from sklearn.base import is_classifier
from sklearn.tree import DecisionTreeClassifier
from sklearn.tree import ExtraTreeClassifier as SklearnExtraTreeClassifier

from ._base import EstimatorType, Learner, Probabilistic, RanksFeatures
from .base import StandardEstimator
from ..compat.sklearn import clone
from ..datasets import as_dataset
from ..exceptions import EstimatorError
from ..tools.validator import check_is_trained, check_labeled
from ..tools.validator import get_estimator_name

__all__ = ["SklearnClassifier", "ClassificationTree", "ExtraTreeClassifier"]


class _SklearnLearner(StandardEstimator, Learner, Probabilistic, RanksFeatures):
    """
    Base adapter training a fresh scikit-learn classifier on every call to
    :meth:`train`. Subclasses build that classifier in `_make_estimator`.
    """

    @abstractmethod
    def _make_estimator(self):
        """Return the unfitted scikit-learn estimator to train."""

    def type(self):
        return EstimatorType.CLASSIFIER

    def trained(self):
        return getattr(self, "estimator_", None) is not None

    def train(self, dataset):
        """
        Fit a new scikit-learn estimator on the samples and labels.

        Raises
        ------
        InvalidInputError
            If `dataset` is not labeled.
        """
        check_labeled(dataset, self)
        estimator = self._make_estimator()
        estimator.fit(dataset.samples, dataset.labels)
        self.estimator_ = estimator
        self.feature_keys_ = [
            dataset.column_key(j) for j in range(dataset.num_columns)]

    def _check_trained(self):
        if not self.trained():
            check_is_trained(self, "estimator_")

    def predict(self, dataset):
        self._check_trained()
        return self.estimator_.predict(as_dataset(dataset).samples)

    def proba(self, dataset):
        """
        Return the probability of every class the estimator was trained on.

        Raises
        ------
        EstimatorError
            If the wrapped estimator has no ``predict_proba``.
        """
        self._check_trained()
        if not hasattr(self.estimator_, "predict_proba"):
            raise EstimatorError(
                f"{get_estimator_name(self.estimator_)} cannot estimate"
                " class probabilities.")
        proba = self.estimator_.predict_proba(as_dataset(dataset).samples)
        return pd.DataFrame(proba, columns=list(self.estimator_.classes_))

    def feature_importances(self):
        """
        Return the impurity-based importance of every feature.

        Raises
        ------
        EstimatorError
            If the wrapped estimator exposes no ``feature_importances_``.
        """
        self._check_trained()
        importances = getattr(self.estimator_, "feature_importances_", None)
        if importances is None:
            raise EstimatorError(
                f"{get_estimator_name(self.estimator_)} does not rank"
                " features.")
        return {key: float(value)
                for key, value in zip(self.feature_keys_, importances)}


class SklearnClassifier(_SklearnLearner):
    """
    Adapt any scikit-learn classifier to the learner contract.

    The wrapped estimator is cloned before every training so the adapter
    never mutates it.

    Parameters
    ----------
    estimator : scikit-learn estimator
        An unfitted estimator implementing ``fit`` and ``predict``.

    Examples
    --------
    >>> from sklearn.linear_model import LogisticRegression
    >>> from goensemble.estimators import SklearnClassifier
    >>> learner = SklearnClassifier(LogisticRegression())
    >>> learner.type()
    <EstimatorType.CLASSIFIER: 'classifier'>
    """

    def __init__(self, estimator):
        self.estimator = estimator
        self.estimator_ = None

    def type(self):
        if is_classifier(self.estimator):
            return EstimatorType.CLASSIFIER
        return EstimatorType.REGRESSOR

    def _make_estimator(self):
        return clone(self.estimator)


class ClassificationTree(_SklearnLearner):
    """
    Decision tree classifier adapted from
    :class:`sklearn.tree.DecisionTreeClassifier`.

    Parameters
    ----------
    max_depth : int or None, default=None
        The maximum depth of the tree. ``max_depth=1`` gives a decision
        stump, the default weak learner of :class:`AdaBoostClassifier`.

    criterion : {"gini", "entropy", "log_loss"}, default="gini"
        The function to measure the quality of a split.

    min_samples_split : int or float, default=2
        The minimum number of samples required to split an internal node.

    min_samples_leaf : int or float, default=1
        The minimum number of samples required to be at a leaf node.

    max_features : int, float, {"sqrt", "log2"} or None, default=None
        The number of features to consider when looking for the best split.

    random_state : int, RandomState instance or None, default=None
        Controls the randomness of the tree. Ensembles reseed it for every
        member they train.
    """

    def __init__(
        self,
        max_depth=None,
        criterion="gini",
        min_samples_split=2,
        min_samples_leaf=1,
        max_features=None,
        random_state=None,
    ):
        self.max_depth = max_depth
        self.criterion = criterion
        self.min_samples_split = min_samples_split
        self.min_samples_leaf = min_samples_leaf
        self.max_features = max_features
        self.random_state = random_state
        self.estimator_ = None

    def _make_estimator(self):
        return DecisionTreeClassifier(
            max_depth=self.max_depth,
            criterion=self.criterion,
            min_samples_split=self.min_samples_split,
            min_samples_leaf=self.min_samples_leaf,
            max_features=self.max_features,
            random_state=self.random_state,
        )


class ExtraTreeClassifier(ClassificationTree):
    """
    Extremely randomized tree classifier adapted from
    :class:`sklearn.tree.ExtraTreeClassifier`. Split thresholds are drawn at
    random, which makes the members of a forest more diverse.

    Parameters
    ----------
    max_depth : int or None, default=None
        The maximum depth of the tree.

    criterion : {"gini", "entropy", "log_loss"}, default="gini"
        The function to measure the quality of a split.

    min_samples_split : int or float, default=2
        The minimum number of samples required to split an internal node.

    min_samples_leaf : int or float, default=1
        The minimum number of samples required to be at a leaf node.

    max_features : int, float, {"sqrt", "log2"} or None, default="sqrt"
        The number of features to consider when looking for the best split.

    random_state : int, RandomState instance or None, default=None
        Controls the randomness of the tree.
    """

    def __init__(
        self,
        max_depth=None,
        criterion="gini",
        min_samples_split=2,
        min_samples_leaf=1,
        max_features="sqrt",
        random_state=None,
    ):
        super().__init__(
            max_depth=max_depth,
            criterion=criterion,
            min_samples_split=min_samples_split,
            min_samples_leaf=min_samples_leaf,
            max_features=max_features,
            random_state=random_state,
        )

    def _make_estimator(self):
        return SklearnExtraTreeClassifier(
            max_depth=self.max_depth,
            criterion=self.criterion,
            min_samples_split=self.min_samples_split,
            min_samples_leaf=self.min_samples_leaf,
            max_features=self.max_features,
            random_state=self.random_state,
        )
