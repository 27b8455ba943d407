# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
from __future__ import annotations

from abc import abstractmethod
from numbers import Integral, Real

import numpy as np
from sklearn.base import BaseEstimator, ClassifierMixin

from ._base import EstimatorType, Learner, MetaEstimator, RanksFeatures
from .util import average_importances
from .._goenslog import goenslog
from ..compat.sklearn import Interval, HasMethods
from ..datasets import as_dataset
from ..exceptions import EstimatorError, InvalidArgumentError
from ..tools.validator import check_is_trained, validate_hyperparameters

logger = goenslog.get_goensemble_logger(__name__)


class BaseEnsemble(Learner, MetaEstimator, ClassifierMixin, BaseEstimator):
    """
    BaseEnsemble

    The `BaseEnsemble` class serves as the abstract base of the ensemble
    classifiers. It owns what bagging and boosting share: the declarative
    hyperparameter constraints and their single validation pass, the
    resolution of the base learner, the fitted state (class set and
    ensemble) and its reset, the spawning of seeded members and the
    scikit-learn ``fit`` entry point.

    Parameters
    ----------
    estimator : Learner, default=None
        The base learner cloned for every member. If `None`, the default
        base learner defined by the subclass is used.

    n_estimators : int, default=100
        The number of members to train.

    subsample : float, default=1.0
        Ratio of the training set size drawn (with replacement) to train
        each member. Must lie in ``[0.01, 1]``.

    random_state : int, RandomState instance or None, default=None
        Controls the bootstrap draws and the seeds given to members.

    verbose : int, default=0
        Controls the verbosity when fitting. ``verbose > 0`` shows a
        progress bar over the training rounds.

    Attributes
    ----------
    classes_ : ndarray
        The sorted class labels, as scikit-learn expects them.

    outcomes_ : list
        The class labels captured at the start of training, in order of
        first appearance. Score and probability tables follow this order
        and ties go to the class listed first.

    estimators_ : list of Learner
        The trained members, in training order.

    Notes
    -----
    All fitted state is created empty at construction, populated by a
    single `train` call, and replaced (never extended) by a later call.
    """

    _parameter_constraints: dict = {
        "estimator": [HasMethods(["train", "predict", "type", "clone"]), None],
        "n_estimators": [Interval(Integral, 1, None, closed="left")],
        "subsample": [Interval(Real, 0.01, 1.0, closed="both")],
        "random_state": ["random_state"],
        "verbose": ["verbose"],
    }

    @abstractmethod
    def __init__(
        self,
        estimator=None,
        n_estimators=100,
        subsample=1.0,
        random_state=None,
        verbose=0,
    ):
        self.estimator = estimator
        self.n_estimators = n_estimators
        self.subsample = subsample
        self.random_state = random_state
        self.verbose = verbose

    @abstractmethod
    def _default_estimator(self):
        """Return the base learner used when `estimator` is None."""

    def _check_base_learner(self, base, error=InvalidArgumentError):
        """Raise `error` if `base` cannot be ensembled."""

    def _validate_hyperparameters(self, learner_error=InvalidArgumentError):
        """
        Validate every hyperparameter and the base learner in one pass.

        Parameters
        ----------
        learner_error : type, default=InvalidArgumentError
            The exception raised for an incompatible base learner.

        Returns
        -------
        Learner
            The resolved base learner.

        Raises
        ------
        InvalidArgumentError
            On the first violated constraint.
        learner_error
            If the base learner cannot be ensembled.
        """
        validate_hyperparameters(
            self._parameter_constraints,
            self.get_params(deep=False),
            self.__class__.__name__,
        )
        base = self._base_learner()
        self._check_base_learner(base, learner_error)
        return base

    def _base_learner(self):
        if self.estimator is None:
            return self._default_estimator()
        return self.estimator

    def _reset(self):
        self.classes_ = np.empty(0)
        self.outcomes_ = []
        self.estimators_ = []

    def _capture_classes(self, dataset):
        self.outcomes_ = dataset.possible_outcomes()
        self.classes_ = np.unique(dataset.labels)

    def _subset_size(self, n_rows):
        # half-up rounding, at least one row
        return max(1, int(np.floor(self.subsample * n_rows + 0.5)))

    @staticmethod
    def _spawn(base, seed):
        """Return an untrained clone of `base`, reseeded when it has a seed."""
        member = base.clone()
        if hasattr(member, "get_params") and "random_state" in (
                member.get_params(deep=False)):
            member.set_params(random_state=int(seed))
        return member

    def _log_params(self):
        logger.info(
            "Learner initialized w/ %s",
            ", ".join(f"{k}={v!r}" for k, v in
                      self.get_params(deep=False).items()),
        )

    def type(self):
        return EstimatorType.CLASSIFIER

    def trained(self):
        return len(getattr(self, "estimators_", [])) > 0

    def __sklearn_is_fitted__(self):
        return self.trained()

    def fit(self, X, y=None):
        """
        Train the ensemble on `X` and `y`.

        Parameters
        ----------
        X : array-like of shape (n_samples, n_features) or Labeled
            The training samples, or a labeled dataset (then `y` is None).

        y : array-like of shape (n_samples,), default=None
            The class labels.

        Returns
        -------
        self : object
            Returns self.
        """
        self.train(as_dataset(X, y))
        return self

    def feature_importances(self):
        """
        Return the importance of every feature averaged over the ensemble.

        Each member's importances are summed per feature and every sum is
        divided by the ensemble size, so a feature only some members report
        counts as zero for the others.

        Returns
        -------
        dict
            Mapping of feature column to importance.

        Raises
        ------
        NotTrainedError
            If the ensemble has not been trained.
        EstimatorError
            If the members cannot rank features.
        """
        check_is_trained(self)
        if not isinstance(self.estimators_[0], RanksFeatures):
            raise EstimatorError(
                f"{self.estimators_[0].__class__.__name__} base learner"
                " does not rank features.")
        return average_importances(self.estimators_)
