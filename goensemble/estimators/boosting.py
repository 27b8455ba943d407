# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""
`boosting` module provides the multi-class adaptive boosting (SAMME)
classifier: weak learners are trained one after the other on weighted
bootstrap subsets, each round focusing on the samples the previous members
got wrong.
"""

from __future__ import annotations
from numbers import Real

import numpy as np
from tqdm import tqdm
from sklearn.utils import check_random_state

from ._base import EstimatorType, MetaEstimator, RanksFeatures
from ._ensemble import BaseEnsemble
from .tree import ClassificationTree
from .util import argmax, influence_votes
from .._goenslog import goenslog
from ..compat.sklearn import Interval
from ..datasets import as_dataset
from ..exceptions import InvalidArgumentError, InvalidInputError
from ..tools.validator import check_is_trained, check_labeled

logger = goenslog.get_goensemble_logger(__name__)

__all__ = ["AdaBoostClassifier"]


class AdaBoostClassifier(BaseEnsemble, RanksFeatures):
    r"""
    Adaptive Boosting classifier using the multi-class SAMME algorithm.

    Each round draws a bootstrap subset of the training set where a sample
    is drawn with a probability equal to its current weight, trains a fresh
    clone of the weak learner on it and measures the weighted error of that
    learner on the *full* training set:

    .. math::
        \epsilon_m = \frac{\sum_{i: h_m(x_i) \neq y_i} w_i}{\sum_i w_i}

    The member's influence (its voting weight) is

    .. math::
        \alpha_m = \eta \left( \ln \frac{1 - \epsilon_m}{\epsilon_m}
                   + \ln (K - 1) \right)

    where :math:`\eta` is the learning rate `eta0` and :math:`K` the number
    of classes. The :math:`\ln (K - 1)` term is the SAMME correction; it
    vanishes for two classes, giving the binary AdaBoost weight. The weights
    of the misclassified samples are then multiplied by
    :math:`\exp(\alpha_m)` and all weights renormalized to sum to one.

    Training stops early when a member's weighted error falls below `tol`;
    that member is kept. A prediction is the class collecting the largest
    sum of influences over the members that voted for it.

    Parameters
    ----------
    estimator : Learner, default=None
        The weak learner cloned every round. It must be a classifier and
        not itself an ensemble. If `None`, a depth-one
        :class:`ClassificationTree` (a decision stump) is used.

    n_estimators : int, default=100
        The maximum number of rounds.

    eta0 : float, default=1.0
        Learning rate shrinking the influence of every member. Must be
        non-negative.

    subsample : float, default=0.8
        Ratio of the training set size drawn each round, in ``[0.01, 1]``.

    tol : float, default=1e-4
        Weighted error below which training stops early, in ``[0, 1]``.

    random_state : int, RandomState instance or None, default=None
        Controls the weighted bootstrap draws and the seeds given to the
        members.

    verbose : int, default=0
        Controls the verbosity when fitting.

    Attributes
    ----------
    classes_ : ndarray
        The sorted class labels seen during training.

    outcomes_ : list
        The class labels in order of first appearance; ties between
        classes go to the earliest one.

    estimators_ : list of Learner
        The trained members.

    weights_ : ndarray of shape (n_samples,)
        The sample weights after the last completed reweighting.

    influences_ : list of float
        The influence of every member.

    steps_ : list of float
        The weighted error of every round.

    Examples
    --------
    >>> from sklearn.datasets import make_classification
    >>> from goensemble.datasets import Labeled
    >>> from goensemble.estimators import AdaBoostClassifier
    >>> X, y = make_classification(n_samples=200, n_classes=3,
    ...                            n_informative=4, random_state=0)
    >>> booster = AdaBoostClassifier(n_estimators=50, random_state=0)
    >>> booster.train(Labeled(X, y))
    >>> len(booster.influences()) <= 50
    True

    Notes
    -----
    Rounds are inherently sequential: the sampling distribution of a round
    depends on the reweighting of the previous one, so no parallelism
    across rounds is attempted.

    References
    ----------
    .. [1] J. Zhu, H. Zou, S. Rosset, T. Hastie. "Multi-class AdaBoost."
           Statistics and its Interface 2 (2009): 349-360.
    .. [2] Y. Freund, R. Schapire. "A Decision-Theoretic Generalization of
           On-Line Learning and an Application to Boosting." Journal of
           Computer and System Sciences 55 (1997): 119-139.
    """

    # floor of the weighted error (and of its complement) in the influence
    EPSILON = 1e-8

    _parameter_constraints: dict = {
        **BaseEnsemble._parameter_constraints,
        "eta0": [Interval(Real, 0, None, closed="left")],
        "tol": [Interval(Real, 0, 1, closed="both")],
    }

    def __init__(
        self,
        estimator=None,
        n_estimators=100,
        eta0=1.0,
        subsample=0.8,
        tol=1e-4,
        random_state=None,
        verbose=0,
    ):
        super().__init__(
            estimator=estimator,
            n_estimators=n_estimators,
            subsample=subsample,
            random_state=random_state,
            verbose=verbose,
        )
        self.eta0 = eta0
        self.tol = tol

        self._validate_hyperparameters()
        self._reset()

    def _default_estimator(self):
        return ClassificationTree(max_depth=1)

    def _check_base_learner(self, base, error=InvalidArgumentError):
        if isinstance(base, MetaEstimator):
            raise error(
                f"{self.__class__.__name__} does not accept a meta estimator"
                f" ({base.__class__.__name__}) as its weak learner.")
        if base.type() != EstimatorType.CLASSIFIER:
            raise error(
                f"{self.__class__.__name__} requires a classifier as its"
                f" weak learner, {base.__class__.__name__} is a"
                f" {base.type()}.")

    def _reset(self):
        super()._reset()
        self.weights_ = np.empty(0)
        self.influences_ = []
        self.steps_ = []

    def _influence(self, loss, k):
        """Return the SAMME influence of a member with weighted error `loss`."""
        ratio = max(1.0 - loss, self.EPSILON) / max(loss, self.EPSILON)
        return float(self.eta0 * (np.log(ratio) + np.log(max(k - 1, 1))))

    def train(self, dataset):
        """
        Boost the weak learner on `dataset`.

        Parameters
        ----------
        dataset : Labeled
            The training set.

        Raises
        ------
        InvalidInputError
            If `dataset` is not labeled, or if `estimator` was replaced by an
            ensemble or a non-classifier since construction. The previous
            fitted state is left untouched.
        InvalidArgumentError
            If a hyperparameter was set to an invalid value.
        """
        check_labeled(dataset, self)
        base = self._validate_hyperparameters(learner_error=InvalidInputError)

        self._log_params()
        self._reset()

        self._capture_classes(dataset)

        labels = dataset.labels
        n = dataset.num_rows
        k = len(self.outcomes_)
        size = self._subset_size(n)
        rng = check_random_state(self.random_state)

        weights = np.full(n, 1.0 / n)
        self.weights_ = weights

        if self.verbose:
            progress_bar = tqdm(total=self.n_estimators, ascii=True, ncols=100,
                                desc=f'Fitting {self.__class__.__name__}')

        for epoch in range(1, self.n_estimators + 1):
            member = self._spawn(base, rng.randint(np.iinfo(np.int32).max))
            subset = dataset.random_weighted_subset_with_replacement(
                size, weights, random_state=rng)
            member.train(subset)

            missed = np.asarray(member.predict(dataset)) != labels

            # weights stay normalized, their total is positive and finite
            loss = float(weights[missed].sum() / weights.sum())
            influence = self._influence(loss, k)

            self.estimators_.append(member)
            self.steps_.append(loss)
            self.influences_.append(influence)

            logger.info("Epoch %d complete, loss=%s", epoch, loss)

            if self.verbose:
                progress_bar.update(1)

            if loss < self.tol:
                logger.info("Loss %s below tolerance %s, stopping early"
                            " at epoch %d", loss, self.tol, epoch)
                break

            # two phases: scale into a new buffer, then normalize
            updated = weights.copy()
            with np.errstate(over="ignore"):
                updated[missed] *= np.exp(influence)

            total = updated.sum()
            if not np.isfinite(total) or total <= 0:
                logger.warning("Sample weights collapsed at epoch %d,"
                               " stopping early", epoch)
                break

            weights = updated / total
            self.weights_ = weights

        if self.verbose:
            progress_bar.close()

        logger.info("Training complete")

    def predict(self, dataset):
        """
        Predict the class with the largest sum of member influences.

        Ties go to the class seen first in the training labels.

        Parameters
        ----------
        dataset : Dataset or array-like of shape (n_samples, n_features)
            The samples to predict.

        Returns
        -------
        ndarray of shape (n_samples,)
            The predicted labels.

        Raises
        ------
        NotTrainedError
            If the ensemble has not been trained.
        """
        check_is_trained(self)
        dataset = as_dataset(dataset)

        scores = influence_votes(
            [member.predict(dataset) for member in self.estimators_],
            self.influences_,
            self.outcomes_,
            dataset.num_rows,
        )
        return argmax(scores, self.outcomes_)

    def weights(self):
        """Return a copy of the sample weights of the last round."""
        return np.array(self.weights_, copy=True)

    def influences(self):
        """Return a copy of the influence of every member."""
        return list(self.influences_)

    def steps(self):
        """Return a copy of the weighted error of every round."""
        return list(self.steps_)
