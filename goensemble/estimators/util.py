# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""
Aggregation of ensemble members' outputs.

Scores are accumulated in dense ``(n_rows, n_classes)`` tables whose columns
follow the class set captured when the ensemble was trained; members'
labels are mapped to those canonical column indices before being added.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

import numpy as np
import pandas as pd

from ..exceptions import EstimatorError

__all__ = [
    "class_index",
    "argmax",
    "average_probabilities",
    "influence_votes",
    "average_importances",
]


def class_index(classes: Sequence) -> Dict:
    """Map every class label to its column in a score table."""
    return {label: i for i, label in enumerate(classes)}


def _columns_of(labels: Iterable, index: Dict) -> np.ndarray:
    try:
        return np.fromiter((index[label] for label in labels), dtype=np.intp)
    except KeyError as err:
        raise EstimatorError(
            f"Ensemble member produced the unknown class {err.args[0]!r};"
            f" known classes are {list(index)}.") from err


def argmax(scores: np.ndarray, classes: Sequence) -> np.ndarray:
    """
    Return the class with the highest score of every row.

    Ties go to the class enumerated first in `classes`.

    Parameters
    ----------
    scores : ndarray of shape (n_rows, n_classes)
        Accumulated scores, columns in `classes` order.

    classes : sequence
        The class labels.

    Returns
    -------
    ndarray of shape (n_rows,)
        The winning label of every row.
    """
    labels = np.asarray(list(classes))
    return labels[np.argmax(scores, axis=1)]


def average_probabilities(
        distributions: List[pd.DataFrame], classes: Sequence,
        n_rows: int) -> pd.DataFrame:
    """
    Average the per-class probability estimates of ensemble members.

    Every known class starts at zero for every row. A member's columns are
    added to the matching class columns, so classes a member never saw count
    as zero for it. The sums are divided by the number of members.

    Parameters
    ----------
    distributions : list of pandas.DataFrame
        The output of every member's ``proba``.

    classes : sequence
        The class labels known to the ensemble.

    n_rows : int
        The number of rows of the dataset the members predicted.

    Returns
    -------
    pandas.DataFrame of shape (n_rows, n_classes)
        Arithmetic mean of the members' probabilities.

    Examples
    --------
    >>> import pandas as pd
    >>> from goensemble.estimators.util import average_probabilities
    >>> a = pd.DataFrame({'x': [1.0], 'y': [0.0]})
    >>> b = pd.DataFrame({'y': [1.0]})
    >>> average_probabilities([a, b], ['x', 'y'], 1)
         x    y
    0  0.5  0.5
    """
    index = class_index(classes)
    probabilities = np.zeros((n_rows, len(index)))

    for joint in distributions:
        columns = _columns_of(joint.columns, index)
        probabilities[:, columns] += joint.to_numpy(dtype=float)

    probabilities /= len(distributions)

    return pd.DataFrame(probabilities, columns=list(classes))


def influence_votes(
        predictions: List[np.ndarray], influences: Sequence[float],
        classes: Sequence, n_rows: int) -> np.ndarray:
    """
    Accumulate influence-weighted votes.

    Each member adds its influence to the score of the class it predicted
    for a row; the result holds raw scores, not probabilities.

    Parameters
    ----------
    predictions : list of ndarray of shape (n_rows,)
        The labels predicted by every member.

    influences : sequence of float
        The influence of every member, in the same order.

    classes : sequence
        The class labels known to the ensemble.

    n_rows : int
        The number of rows predicted.

    Returns
    -------
    ndarray of shape (n_rows, n_classes)
        The accumulated score table.
    """
    index = class_index(classes)
    scores = np.zeros((n_rows, len(index)))
    rows = np.arange(n_rows)

    for labels, influence in zip(predictions, influences):
        scores[rows, _columns_of(labels, index)] += influence

    return scores


def average_importances(members: Iterable) -> dict:
    """
    Average the feature importances reported by ensemble members.

    Only the features a member reports are accumulated, and every sum is
    divided by the full number of members: a feature missing from some
    members counts as zero importance for them.

    Parameters
    ----------
    members : iterable of RanksFeatures
        Trained learners exposing ``feature_importances()``.

    Returns
    -------
    dict
        Mapping of feature column to averaged importance.
    """
    importances = {}
    k = 0

    for member in members:
        k += 1
        for column, value in member.feature_importances().items():
            importances[column] = importances.get(column, 0.0) + value

    return {column: value / k for column, value in importances.items()}
