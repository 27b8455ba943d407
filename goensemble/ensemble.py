# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>

"""
Provides the ensemble classifiers of `goensemble`, importable directly from
the package without navigating through the `estimators` subpackage.

The available ensembles include:
- `RandomForestClassifier`: bootstrap aggregation of decision trees trained
  independently (and in parallel) and combined by averaging their class
  probabilities.
- `AdaBoostClassifier`: multi-class adaptive boosting (SAMME) of weak
  learners trained one after the other on re-weighted bootstrap subsets and
  combined by influence-weighted voting.

Examples
--------
    >>> from sklearn.datasets import load_iris
    >>> from sklearn.model_selection import train_test_split
    >>> from goensemble.ensemble import RandomForestClassifier, AdaBoostClassifier
    >>> X, y = load_iris(return_X_y=True)
    >>> X_train, X_test, y_train, y_test = train_test_split(
    ...     X, y, test_size=0.3, random_state=42
    ... )
    >>> forest = RandomForestClassifier(n_estimators=50, subsample=0.5,
    ...                                 random_state=42).fit(X_train, y_train)
    >>> booster = AdaBoostClassifier(n_estimators=50,
    ...                              random_state=42).fit(X_train, y_train)
    >>> forest.score(X_test, y_test) > 0.8
    True

References
----------
* Breiman, L. (1996). Bagging predictors. Machine Learning, 24(2), 123-140.
* Zhu, J., Zou, H., Rosset, S., Hastie, T. (2009). Multi-class AdaBoost.
  Statistics and its Interface, 2, 349-360.
"""

from goensemble.estimators.boosting import AdaBoostClassifier
from goensemble.estimators.ensemble import RandomForestClassifier

__all__ = ["RandomForestClassifier", "AdaBoostClassifier"]
