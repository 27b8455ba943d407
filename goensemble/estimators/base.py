# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>

import inspect
from collections import defaultdict
from numbers import Integral

import numpy as np
import pandas as pd
from tqdm import tqdm

from ._base import EstimatorType, Learner, Probabilistic, RanksFeatures
from ..compat.sklearn import Interval
from ..datasets import as_dataset
from ..tools.validator import check_is_trained, check_labeled
from ..tools.validator import validate_hyperparameters, get_estimator_name


__all__ = ["StandardEstimator", "DecisionStumpClassifier"]

class StandardEstimator:
    """Base class for all classes in goensemble for parameters retrievals

    Notes
    -----
    All class defined should specify all the parameters that can be set
    at the class level in their ``__init__`` as explicit keyword
    arguments (no ``*args`` or ``**kwargs``).
    """

    @classmethod
    def _get_param_names(cls):
        """Get parameter names for the estimator"""
        init = getattr(cls.__init__, "deprecated_original", cls.__init__)
        if init is object.__init__:
            # No explicit constructor to introspect
            return []

        init_signature = inspect.signature(init)
        parameters = [
            p
            for p in init_signature.parameters.values()
            if p.name != "self" and p.kind != p.VAR_KEYWORD
        ]
        for p in parameters:
            if p.kind == p.VAR_POSITIONAL:
                raise RuntimeError(
                    "goensemble classes should always "
                    "specify their parameters in the signature"
                    " of their __init__ (no varargs)."
                    " %s with constructor %s doesn't "
                    " follow this convention." % (cls, init_signature)
                )
        return sorted([p.name for p in parameters])

    def get_params(self, deep=True):
        """
        Get parameters for this estimator.

        Parameters
        ----------
        deep : bool, default=True
            If True, will return the parameters for this class and
            contained sub-objects.

        Returns
        -------
        params : dict
            Parameter names mapped to their values.
        """
        out = dict()
        for key in self._get_param_names():
            value = getattr(self, key)
            if deep and hasattr(value, "get_params") and not isinstance(
                    value, type):
                deep_items = value.get_params().items()
                out.update((key + "__" + k, val) for k, val in deep_items)
            out[key] = value
        return out

    def set_params(self, **params):
        """Set the parameters of this estimator.

        Nested parameters take the form ``<component>__<parameter>``.

        Parameters
        ----------
        **params : dict
            Estimator parameters.

        Returns
        -------
        self : estimator instance
            Estimator instance.
        """
        if not params:
            return self
        valid_params = self.get_params(deep=True)

        nested_params = defaultdict(dict)  # grouped by prefix
        for key, value in params.items():
            key, delim, sub_key = key.partition("__")
            if key not in valid_params:
                local_valid_params = self._get_param_names()
                raise ValueError(
                    f"Invalid parameter {key!r} for estimator {self}. "
                    f"Valid parameters are: {local_valid_params!r}."
                )

            if delim:
                nested_params[key][sub_key] = value
            else:
                setattr(self, key, value)
                valid_params[key] = value

        for key, sub_params in nested_params.items():
            valid_params[key].set_params(**sub_params)

        return self

    def __repr__(self):
        params = ", ".join(
            f"{k}={v!r}" for k, v in self.get_params(deep=False).items())
        return f"{self.__class__.__name__}({params})"


class DecisionStumpClassifier(
        StandardEstimator, Learner, Probabilistic, RanksFeatures):
    r"""
    A decision stump classifier: a single-level decision tree that splits
    the samples in two groups on one feature threshold and predicts the
    majority class of each group.

    The split retained is the one making the fewest training mistakes,

    .. math::
        error = n - \max_c n_{left}(c) - \max_c n_{right}(c)

    where :math:`n_{left}(c)` and :math:`n_{right}(c)` count the samples of
    class :math:`c` on each side of the threshold. Any number of classes is
    supported. When no split leaves at least `min_samples_leaf` samples on
    both sides, the stump predicts the overall majority class.

    Parameters
    ----------
    min_samples_leaf : int, default=1
        The minimum number of samples required on each side of the split.

    verbose : int, default=False
        Controls the verbosity when fitting.

    Attributes
    ----------
    classes_ : ndarray
        The class labels seen during training (sorted).

    split_feature_ : int or None
        The index of the feature used for the split, None for a constant
        stump.

    split_value_ : float or None
        The threshold value used for the split at `split_feature_`.

    left_proba_, right_proba_ : ndarray of shape (n_classes,)
        Class frequencies of the training samples on each side of the split.

    Examples
    --------
    >>> from goensemble.datasets import Labeled
    >>> from goensemble.estimators import DecisionStumpClassifier
    >>> ds = Labeled([[0.], [1.], [2.], [3.]], ['a', 'a', 'b', 'b'])
    >>> stump = DecisionStumpClassifier()
    >>> stump.train(ds)
    >>> stump.predict(ds)
    array(['a', 'a', 'b', 'b'], dtype='<U1')
    """

    _parameter_constraints: dict = {
        "min_samples_leaf": [Interval(Integral, 1, None, closed="left")],
        "verbose": ["verbose"],
    }

    def __init__(self, min_samples_leaf=1, verbose=False):
        self.min_samples_leaf = min_samples_leaf
        self.verbose = verbose
        self.classes_ = None
        self.split_feature_ = None
        self.split_value_ = None

    def type(self):
        return EstimatorType.CLASSIFIER

    def trained(self):
        return self.classes_ is not None

    def train(self, dataset):
        """
        Find the feature and threshold making the fewest training mistakes.

        Parameters
        ----------
        dataset : Labeled
            The training set.

        Raises
        ------
        InvalidInputError
            If `dataset` is not labeled.
        """
        check_labeled(dataset, self)
        validate_hyperparameters(
            self._parameter_constraints, self.get_params(deep=False),
            get_estimator_name(self))

        X = np.asarray(dataset.samples, dtype=float)
        classes, y = np.unique(dataset.labels, return_inverse=True)
        n_samples, n_features = X.shape
        k = len(classes)

        overall = np.bincount(y, minlength=k)
        best = (None, None, overall, overall)
        min_error = n_samples - overall.max()

        features = range(n_features)
        if self.verbose:
            features = tqdm(features, ascii=True, ncols=100,
                            desc=f'Fitting {self.__class__.__name__}')

        for feature in features:
            for threshold in np.unique(X[:, feature]):
                left_mask = X[:, feature] <= threshold
                n_left = int(left_mask.sum())
                if (n_left < self.min_samples_leaf
                        or n_samples - n_left < self.min_samples_leaf):
                    continue

                left_counts = np.bincount(y[left_mask], minlength=k)
                right_counts = overall - left_counts
                error = n_samples - left_counts.max() - right_counts.max()

                if error < min_error:
                    min_error = error
                    best = (feature, threshold, left_counts, right_counts)

        feature, threshold, left_counts, right_counts = best
        self.classes_ = classes
        self.split_feature_ = feature
        self.split_value_ = threshold
        self.left_proba_ = left_counts / left_counts.sum()
        self.right_proba_ = right_counts / right_counts.sum()
        self.feature_keys_ = [dataset.column_key(j) for j in range(n_features)]

    def _left_mask(self, dataset):
        X = np.asarray(as_dataset(dataset).samples, dtype=float)
        if self.split_feature_ is None:
            return np.ones(X.shape[0], dtype=bool)
        return X[:, self.split_feature_] <= self.split_value_

    def predict(self, dataset):
        """Return the majority class of the side each row falls on."""
        check_is_trained(self, "classes_")
        left_mask = self._left_mask(dataset)
        left_class = self.classes_[np.argmax(self.left_proba_)]
        right_class = self.classes_[np.argmax(self.right_proba_)]
        return np.where(left_mask, left_class, right_class)

    def proba(self, dataset):
        """Return the class frequencies of the side each row falls on."""
        check_is_trained(self, "classes_")
        left_mask = self._left_mask(dataset)
        proba = np.where(left_mask[:, None], self.left_proba_,
                         self.right_proba_)
        return pd.DataFrame(proba, columns=list(self.classes_))

    def feature_importances(self):
        """Return ``{split_feature: 1.0}``, empty for a constant stump."""
        check_is_trained(self, "classes_")
        if self.split_feature_ is None:
            return {}
        return {self.feature_keys_[self.split_feature_]: 1.0}
