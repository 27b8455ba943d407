# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""
Dataset containers consumed by the `goensemble` learners.

A dataset is a two-dimensional table of samples (one row per sample, one
column per feature). :class:`Labeled` datasets carry a parallel vector of
class labels and are the only kind a learner can be trained on. Both kinds
expose the bootstrap primitives the ensembles draw their training subsets
with.
"""

from __future__ import annotations

from abc import ABCMeta
from typing import List, Optional, Sequence

import numpy as np
import pandas as pd
from sklearn.utils import check_random_state

from ..exceptions import DatasetError

__all__ = ["Dataset", "Labeled", "Unlabeled", "as_dataset"]


class Dataset(metaclass=ABCMeta):
    """
    Base class for row-major sample tables.

    Parameters
    ----------
    samples : array-like or pandas.DataFrame of shape (n_samples, n_features)
        The samples. When a DataFrame is given its columns become the
        feature names.

    feature_names : sequence of str, optional
        Names of the feature columns. Must match the number of columns.

    Raises
    ------
    DatasetError
        If the samples are not a non-empty two-dimensional table, or if
        the number of feature names does not match the number of columns.
    """

    def __init__(self, samples, feature_names: Optional[Sequence] = None):
        if isinstance(samples, pd.DataFrame):
            if feature_names is None:
                feature_names = [str(c) for c in samples.columns]
            samples = samples.to_numpy()

        samples = np.asarray(samples)
        if samples.ndim != 2:
            raise DatasetError(
                "Samples must be a two-dimensional table, got an array"
                f" with {samples.ndim} dimension(s)."
            )
        if samples.shape[0] == 0:
            raise DatasetError("Samples must hold at least one row.")
        if feature_names is not None:
            feature_names = list(feature_names)
            if len(feature_names) != samples.shape[1]:
                raise DatasetError(
                    f"Expected {samples.shape[1]} feature names,"
                    f" got {len(feature_names)}."
                )

        self._samples = samples
        self._feature_names = feature_names

    @property
    def samples(self) -> np.ndarray:
        return self._samples

    @property
    def feature_names(self) -> Optional[List]:
        return self._feature_names

    @property
    def num_rows(self) -> int:
        return self._samples.shape[0]

    @property
    def num_columns(self) -> int:
        return self._samples.shape[1]

    def __len__(self):
        return self.num_rows

    def column_key(self, column: int):
        """Return the feature name of `column`, or its index when unnamed."""
        if self._feature_names is None:
            return column
        return self._feature_names[column]

    def _take(self, indices: np.ndarray) -> "Dataset":
        return Unlabeled(self._samples[indices], self._feature_names)

    def random_subset_with_replacement(self, n: int, random_state=None):
        """
        Draw `n` rows uniformly at random with replacement.

        Parameters
        ----------
        n : int
            Size of the subset.

        random_state : int, RandomState instance or None
            Controls the draw.

        Returns
        -------
        Dataset
            A dataset of the same kind holding the drawn rows.
        """
        n = self._check_subset_size(n)
        rng = check_random_state(random_state)
        indices = rng.randint(0, self.num_rows, size=n)
        return self._take(indices)

    def random_weighted_subset_with_replacement(
            self, n: int, weights, random_state=None):
        """
        Draw `n` rows with replacement, each row being drawn with a
        probability proportional to its weight.

        Parameters
        ----------
        n : int
            Size of the subset.

        weights : array-like of shape (n_samples,)
            Non-negative relative draw weight of each row. They do not have
            to sum to one.

        random_state : int, RandomState instance or None
            Controls the draw.

        Returns
        -------
        Dataset
            A dataset of the same kind holding the drawn rows.

        Raises
        ------
        DatasetError
            If there is not exactly one finite non-negative weight per row or
            the weights sum to zero.
        """
        n = self._check_subset_size(n)
        weights = np.asarray(weights, dtype=float)
        if weights.shape != (self.num_rows,):
            raise DatasetError(
                f"Expected one weight per row ({self.num_rows}),"
                f" got weights of shape {weights.shape}."
            )
        if not np.all(np.isfinite(weights)) or np.any(weights < 0):
            raise DatasetError("Weights must be finite and non-negative.")

        total = weights.sum()
        if total <= 0:
            raise DatasetError("Weights must have a positive sum.")

        rng = check_random_state(random_state)
        indices = rng.choice(self.num_rows, size=n, replace=True,
                             p=weights / total)
        return self._take(indices)

    def _check_subset_size(self, n) -> int:
        n = int(n)
        if n < 1:
            raise DatasetError(f"Subset size must be at least 1, {n} given.")
        return n

    def __repr__(self):
        return (f"{self.__class__.__name__}(num_rows={self.num_rows},"
                f" num_columns={self.num_columns})")


class Unlabeled(Dataset):
    """A dataset of samples without labels, used for inference."""


class Labeled(Dataset):
    """
    A dataset whose samples carry a class label each.

    Parameters
    ----------
    samples : array-like or pandas.DataFrame of shape (n_samples, n_features)
        The samples.

    labels : array-like of shape (n_samples,)
        The label of every sample.

    feature_names : sequence of str, optional
        Names of the feature columns.

    Examples
    --------
    >>> from goensemble.datasets import Labeled
    >>> ds = Labeled([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]], ['b', 'a', 'b'])
    >>> ds.possible_outcomes()
    ['b', 'a']
    >>> len(ds.random_subset_with_replacement(5, random_state=0))
    5
    """

    def __init__(self, samples, labels, feature_names=None):
        super().__init__(samples, feature_names)
        labels = np.asarray(labels)
        if labels.ndim != 1:
            labels = labels.ravel()
        if labels.shape[0] != self.num_rows:
            raise DatasetError(
                f"Number of labels ({labels.shape[0]}) must match the number"
                f" of rows ({self.num_rows})."
            )
        self._labels = labels

    @classmethod
    def from_frame(cls, frame: pd.DataFrame, target: str) -> "Labeled":
        """
        Build a labeled dataset from a DataFrame and its target column.

        Raises
        ------
        DatasetError
            If `target` is not a column of `frame`.
        """
        if target not in frame.columns:
            raise DatasetError(f"Target column {target!r} not found in frame.")
        return cls(frame.drop(columns=[target]), frame[target].to_numpy())

    @property
    def labels(self) -> np.ndarray:
        return self._labels

    def possible_outcomes(self) -> list:
        """Return the distinct labels in order of first appearance."""
        _, first_seen = np.unique(self._labels, return_index=True)
        return [self._labels[i] for i in np.sort(first_seen)]

    def _take(self, indices):
        return Labeled(self._samples[indices], self._labels[indices],
                       self._feature_names)

    def __repr__(self):
        return (f"Labeled(num_rows={self.num_rows},"
                f" num_columns={self.num_columns},"
                f" num_classes={len(self.possible_outcomes())})")


def as_dataset(X, y=None) -> Dataset:
    """
    Coerce array-likes into a dataset.

    Datasets are passed through unchanged (`y` must then be None). Otherwise
    a :class:`Labeled` dataset is built when `y` is given and an
    :class:`Unlabeled` one when it is not.

    Examples
    --------
    >>> from goensemble.datasets import as_dataset
    >>> as_dataset([[0.0], [1.0]], [0, 1])
    Labeled(num_rows=2, num_columns=1, num_classes=2)
    """
    if isinstance(X, Dataset):
        if y is not None:
            raise DatasetError(
                "Labels cannot be given alongside a Dataset instance.")
        return X
    if y is None:
        return Unlabeled(X)
    return Labeled(X, y)
