# -*- coding: utf-8 -*-
# License: BSD-3-Clause
# Author: L. Kouadio <etanoyau@gmail.com>

"""
goensemble: Ensemble Meta-Learning
==================================

:code:`goensemble` combines many weak learners into a strong classifier
with two complementary strategies: multi-class adaptive boosting (SAMME)
and bootstrap aggregation of decision trees (Random Forest). Estimators
follow the scikit-learn API and accept either plain arrays or the package
dataset containers.
"""
import warnings

# Define the version
try:
    from ._version import version as __version__
except ImportError:
    __version__ = "0.1.0"

# Dependency check
_required_dependencies = [
    "numpy",
    "pandas",
    "sklearn",
    "joblib",
    "tqdm",
    "yaml",
]

_missing_dependencies = []
for _package in _required_dependencies:
    try:
        __import__(_package)
    except ImportError as e:
        _missing_dependencies.append(f"{_package}: {str(e)}")

if _missing_dependencies:
    warnings.warn(
        "Some dependencies are missing. goensemble may not function"
        " correctly:\n" + "\n".join(_missing_dependencies), ImportWarning)

# Setup logging configuration
from ._util import initialize_logging
initialize_logging()

from . import config
from .datasets import Labeled, Unlabeled, as_dataset
from .estimators import AdaBoostClassifier, RandomForestClassifier
from .estimators import ClassificationTree, ExtraTreeClassifier
from .estimators import DecisionStumpClassifier, SklearnClassifier

__all__ = [
    "__version__",
    "config",
    "initialize_logging",
    "Labeled",
    "Unlabeled",
    "as_dataset",
    "AdaBoostClassifier",
    "RandomForestClassifier",
    "ClassificationTree",
    "ExtraTreeClassifier",
    "DecisionStumpClassifier",
    "SklearnClassifier",
]

# Append the version information to the module's docstring
__doc__ += f"\nVersion: {__version__}\n"
