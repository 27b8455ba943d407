# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>

"""
`ensemble` implements bootstrap aggregation (bagging) of decision trees:
members are trained independently on bootstrap subsets of the training set
and their class probabilities are averaged.
"""

from __future__ import annotations
from numbers import Integral

import numpy as np
from joblib import Parallel, delayed
from sklearn.utils import check_random_state
from tqdm import tqdm

from ._base import Probabilistic, RanksFeatures
from ._ensemble import BaseEnsemble
from .base import DecisionStumpClassifier
from .tree import ClassificationTree, ExtraTreeClassifier
from .util import argmax, average_probabilities, class_index
from .._goenslog import goenslog
from ..config import get_config
from ..datasets import as_dataset
from ..exceptions import InvalidArgumentError
from ..tools.validator import check_is_trained, check_labeled

logger = goenslog.get_goensemble_logger(__name__)

__all__ = ["RandomForestClassifier"]


def _train_member(base, dataset, size, seed):
    """Train one reseeded clone of `base` on a bootstrap draw of `dataset`."""
    member = BaseEnsemble._spawn(base, seed)
    subset = dataset.random_subset_with_replacement(
        size, random_state=np.random.RandomState(seed))
    member.train(subset)
    return member


class RandomForestClassifier(BaseEnsemble, Probabilistic, RanksFeatures):
    """
    Random Forest classifier.

    An ensemble of decision trees, each trained on a random subset of the
    training data drawn uniformly with replacement. A prediction is the
    class with the highest probability once the probabilities of every tree
    are averaged:

    .. math::
        P(c \\mid x) = \\frac{1}{M} \\sum_{m=1}^{M} P_m(c \\mid x)

    where :math:`M` is the number of trees and :math:`P_m(c \\mid x)` the
    probability tree :math:`m` assigns to class :math:`c` (zero for a class
    absent from its bootstrap subset).

    Members are independent of each other, so they are trained in parallel
    when `n_jobs` allows it; the ensemble does not depend on the number of
    workers.

    Parameters
    ----------
    estimator : ClassificationTree, ExtraTreeClassifier or \
            DecisionStumpClassifier, default=None
        The tree cloned for every member. If `None`, an unconstrained
        :class:`ClassificationTree` is used.

    n_estimators : int, default=100
        The number of trees in the forest.

    subsample : float, default=0.1
        Ratio of the training set size drawn to train each tree, in
        ``[0.01, 1]``.

    n_jobs : int, default=None
        The number of jobs to train the trees in parallel. `None` falls back
        to the package configuration (sequential by default), ``-1`` uses
        all processors.

    random_state : int, RandomState instance or None, default=None
        Controls the bootstrap draws and the seeds given to the trees.

    verbose : int, default=0
        Controls the verbosity when fitting.

    Attributes
    ----------
    classes_ : ndarray
        The sorted class labels seen during training; the column order of
        :meth:`predict_proba`.

    outcomes_ : list
        The class labels in order of first appearance; the column order of
        :meth:`proba`.

    estimators_ : list of Learner
        The trained trees.

    Examples
    --------
    >>> from sklearn.datasets import load_iris
    >>> from goensemble.datasets import Labeled
    >>> from goensemble.estimators import RandomForestClassifier
    >>> X, y = load_iris(return_X_y=True)
    >>> dataset = Labeled(X, y)
    >>> forest = RandomForestClassifier(n_estimators=50, subsample=0.5,
    ...                                 random_state=42)
    >>> forest.train(dataset)
    >>> forest.proba(dataset).shape
    (150, 3)

    See Also
    --------
    AdaBoostClassifier : Sequential ensemble re-weighting hard samples.

    References
    ----------
    .. [1] L. Breiman. "Random Forests." Machine Learning 45 (2001): 5-32.
    .. [2] P. Geurts, D. Ernst, L. Wehenkel. "Extremely Randomized Trees."
           Machine Learning 63 (2006): 3-42.
    """

    AVAILABLE_ESTIMATORS = (
        ClassificationTree,
        ExtraTreeClassifier,
        DecisionStumpClassifier,
    )

    _parameter_constraints: dict = {
        **BaseEnsemble._parameter_constraints,
        "n_jobs": [Integral, None],
    }

    def __init__(
        self,
        estimator=None,
        n_estimators=100,
        subsample=0.1,
        n_jobs=None,
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
        self.n_jobs = n_jobs

        self._validate_hyperparameters()
        self._reset()

    def _default_estimator(self):
        return ClassificationTree()

    def _check_base_learner(self, base, error=InvalidArgumentError):
        if not isinstance(base, self.AVAILABLE_ESTIMATORS):
            raise error(
                f"Base estimator {base.__class__.__name__} is not compatible"
                " with this ensemble. Use one of "
                f"{[cls.__name__ for cls in self.AVAILABLE_ESTIMATORS]}."
            )

    def train(self, dataset):
        """
        Train the forest on bootstrap subsets of `dataset`.

        Every one of the `n_estimators` rounds draws
        ``round(subsample * n_rows)`` rows uniformly with replacement and
        trains a fresh clone of the base tree on them. All rounds always
        run.

        Parameters
        ----------
        dataset : Labeled
            The training set.

        Raises
        ------
        InvalidInputError
            If `dataset` is not labeled. The forest is left untouched.
        InvalidArgumentError
            If a hyperparameter was set to an invalid value.
        """
        check_labeled(dataset, self)
        base = self._validate_hyperparameters()

        self._log_params()
        self._reset()

        self._capture_classes(dataset)

        size = self._subset_size(dataset.num_rows)
        rng = check_random_state(self.random_state)
        seeds = rng.randint(np.iinfo(np.int32).max, size=self.n_estimators)

        n_jobs = self.n_jobs if self.n_jobs is not None else get_config()["n_jobs"]

        # members come back in round order as they complete
        members = Parallel(n_jobs=n_jobs, return_as="generator")(
            delayed(_train_member)(base, dataset, size, seed)
            for seed in seeds
        )
        if self.verbose:
            members = tqdm(members, total=self.n_estimators, ascii=True,
                           ncols=100, desc=f'Fitting {self.__class__.__name__}')

        self.estimators_ = list(members)

        logger.info("Training complete, %d trees grown on %d samples each",
                    len(self.estimators_), size)

    def proba(self, dataset):
        """
        Estimate the probability of every class for every row.

        Parameters
        ----------
        dataset : Dataset or array-like of shape (n_samples, n_features)
            The samples to predict.

        Returns
        -------
        pandas.DataFrame of shape (n_samples, n_classes)
            The mean of the trees' probabilities, columns in `outcomes_`
            order. Every row sums to one.

        Raises
        ------
        NotTrainedError
            If the forest has not been trained.
        """
        check_is_trained(self)
        dataset = as_dataset(dataset)

        return average_probabilities(
            [tree.proba(dataset) for tree in self.estimators_],
            self.outcomes_,
            dataset.num_rows,
        )

    def predict(self, dataset):
        """
        Predict the class with the highest averaged probability.

        Returns
        -------
        ndarray of shape (n_samples,)
            The predicted labels.
        """
        probabilities = self.proba(dataset)
        return argmax(probabilities.to_numpy(), self.outcomes_)

    def predict_proba(self, X):
        """
        Return :meth:`proba` as an array, columns in sorted `classes_`
        order.

        Returns
        -------
        ndarray of shape (n_samples, n_classes)
        """
        index = class_index(self.outcomes_)
        order = [index[outcome] for outcome in self.classes_]
        # positional take, bool labels would act as a mask under .loc
        return self.proba(X).to_numpy()[:, order]
