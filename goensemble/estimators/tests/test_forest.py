# -*- coding: utf-8 -*-
"""
test_forest.py
"""
import pytest
import numpy as np
from sklearn.datasets import load_iris, make_classification
from sklearn.linear_model import LogisticRegression
from sklearn.metrics import log_loss, roc_auc_score
from sklearn.model_selection import train_test_split

from goensemble.datasets import Labeled, Unlabeled
from goensemble.estimators import ClassificationTree, DecisionStumpClassifier
from goensemble.estimators import ExtraTreeClassifier, RandomForestClassifier
from goensemble.estimators import SklearnClassifier
from goensemble.exceptions import InvalidArgumentError, InvalidInputError
from goensemble.exceptions import NotTrainedError


@pytest.fixture
def iris():
    X, y = load_iris(return_X_y=True)
    return Labeled(X, y, feature_names=['sl', 'sw', 'pl', 'pw'])

@pytest.fixture
def classification_data():
    X, y = make_classification(n_samples=200, n_features=6, n_informative=3,
                               n_redundant=0, n_classes=3, random_state=42)
    X_train, X_test, y_train, y_test = train_test_split(
        X, y, test_size=0.25, random_state=42)
    return X_train, X_test, y_train, y_test

@pytest.mark.parametrize("params", [
    {"subsample": 1.5},
    {"subsample": 0.0},
    {"n_estimators": 0},
    {"n_estimators": 2.5},
    {"n_jobs": "all"},
    {"estimator": "tree"},
    {"estimator": SklearnClassifier(LogisticRegression())},
])
def test_invalid_hyperparameters(params):
    with pytest.raises(InvalidArgumentError):
        RandomForestClassifier(**params)

def test_invalid_hyperparameters_set_after_construction(iris):
    forest = RandomForestClassifier(n_estimators=3)
    forest.set_params(subsample=2.0)
    with pytest.raises(InvalidArgumentError):
        forest.train(iris)
    assert not forest.trained()

def test_defaults():
    forest = RandomForestClassifier()
    assert forest.n_estimators == 100
    assert forest.subsample == 0.1
    assert forest.n_jobs is None
    assert forest.estimators_ == []
    assert isinstance(forest._base_learner(), ClassificationTree)

@pytest.mark.parametrize("estimator", [
    ClassificationTree(max_depth=3),
    ExtraTreeClassifier(),
    DecisionStumpClassifier(),
])
def test_ensemble_size(iris, estimator):
    forest = RandomForestClassifier(estimator=estimator, n_estimators=7,
                                    subsample=0.5, random_state=0)
    forest.train(iris)
    assert len(forest.estimators_) == 7
    assert list(forest.classes_) == [0, 1, 2]

def test_members_are_fresh_clones(iris):
    base = ClassificationTree(max_depth=2)
    forest = RandomForestClassifier(estimator=base, n_estimators=3,
                                    subsample=0.5, random_state=0)
    forest.train(iris)
    assert not base.trained()
    assert all(member is not base for member in forest.estimators_)
    assert len({member.random_state for member in forest.estimators_}) == 3

def test_proba_rows_sum_to_one(iris):
    forest = RandomForestClassifier(n_estimators=10, subsample=0.2,
                                    random_state=1)
    forest.train(iris)
    proba = forest.proba(iris)
    assert list(proba.columns) == forest.outcomes_
    assert proba.shape == (150, 3)
    np.testing.assert_allclose(proba.sum(axis=1), 1.0)
    assert proba.to_numpy().min() >= 0.0

def test_single_member_proba_equals_member_proba(iris):
    forest = RandomForestClassifier(n_estimators=1, subsample=1.0,
                                    random_state=0)
    forest.train(iris)
    member = forest.estimators_[0].proba(iris).reindex(
        columns=forest.outcomes_, fill_value=0.0)
    np.testing.assert_array_equal(forest.proba(iris).to_numpy(),
                                  member.to_numpy())

def test_predict_is_idempotent(iris):
    forest = RandomForestClassifier(n_estimators=10, subsample=0.3,
                                    random_state=2)
    forest.train(iris)
    np.testing.assert_array_equal(forest.predict(iris), forest.predict(iris))

def test_predict_is_argmax_of_proba(iris):
    forest = RandomForestClassifier(n_estimators=10, subsample=0.3,
                                    random_state=2)
    forest.train(iris)
    proba = forest.proba(iris).to_numpy()
    expected = np.asarray(forest.outcomes_)[np.argmax(proba, axis=1)]
    np.testing.assert_array_equal(forest.predict(iris), expected)

def test_retrain_replaces_ensemble(iris):
    forest = RandomForestClassifier(n_estimators=4, subsample=0.5,
                                    random_state=0)
    forest.train(iris)
    first = list(forest.estimators_)
    two_classes = Labeled(iris.samples[50:], iris.labels[50:])
    forest.train(two_classes)
    assert len(forest.estimators_) == 4
    assert not any(m in first for m in forest.estimators_)
    assert list(forest.classes_) == [1, 2]

def test_training_is_reproducible(iris):
    a = RandomForestClassifier(n_estimators=5, subsample=0.3, random_state=7)
    b = RandomForestClassifier(n_estimators=5, subsample=0.3, random_state=7)
    a.train(iris)
    b.train(iris)
    np.testing.assert_array_equal(a.proba(iris).to_numpy(),
                                  b.proba(iris).to_numpy())

def test_parallel_training_matches_sequential(iris):
    sequential = RandomForestClassifier(n_estimators=6, subsample=0.3,
                                        n_jobs=1, random_state=11)
    parallel = RandomForestClassifier(n_estimators=6, subsample=0.3,
                                      n_jobs=2, random_state=11)
    sequential.train(iris)
    parallel.train(iris)
    np.testing.assert_array_equal(sequential.proba(iris).to_numpy(),
                                  parallel.proba(iris).to_numpy())

def test_not_trained(iris):
    forest = RandomForestClassifier()
    with pytest.raises(NotTrainedError):
        forest.feature_importances()
    with pytest.raises(NotTrainedError):
        forest.predict(iris)
    with pytest.raises(NotTrainedError):
        forest.proba(iris)

def test_unlabeled_training_set_keeps_previous_state(iris):
    forest = RandomForestClassifier(n_estimators=3, subsample=0.5,
                                    random_state=0)
    forest.train(iris)
    before = list(forest.estimators_)
    with pytest.raises(InvalidInputError):
        forest.train(Unlabeled(iris.samples))
    assert forest.estimators_ == before

def test_feature_importances(iris):
    forest = RandomForestClassifier(n_estimators=10, subsample=0.5,
                                    random_state=0)
    forest.train(iris)
    importances = forest.feature_importances()
    assert set(importances) <= {'sl', 'sw', 'pl', 'pw'}
    assert all(value >= 0 for value in importances.values())
    # petal measurements carry the iris classes
    assert importances['pl'] + importances['pw'] > 0.5

def test_stump_forest_importances_divide_by_ensemble_size(iris):
    forest = RandomForestClassifier(estimator=DecisionStumpClassifier(),
                                    n_estimators=5, subsample=0.5,
                                    random_state=0)
    forest.train(iris)
    assert sum(forest.feature_importances().values()) == pytest.approx(1.0)

def test_sklearn_api(classification_data):
    X_train, X_test, y_train, y_test = classification_data
    forest = RandomForestClassifier(n_estimators=25, subsample=0.5,
                                    random_state=42)
    assert forest.fit(X_train, y_train) is forest
    assert forest.predict(X_test).shape == y_test.shape
    assert forest.predict_proba(X_test).shape == (50, 3)
    assert forest.score(X_test, y_test) > 0.6

def test_verbose_training(iris):
    forest = RandomForestClassifier(n_estimators=3, subsample=0.5,
                                    random_state=0, verbose=1)
    forest.train(iris)
    assert len(forest.estimators_) == 3

def test_parallel_verbose_training(iris):
    forest = RandomForestClassifier(n_estimators=4, subsample=0.5, n_jobs=2,
                                    random_state=0, verbose=1)
    forest.train(iris)
    assert len(forest.estimators_) == 4
    assert all(member.trained() for member in forest.estimators_)

def test_predict_proba_follows_sorted_classes(iris):
    # labels listed last class first, so first-seen order is [2, 1, 0]
    reversed_iris = Labeled(iris.samples[::-1], iris.labels[::-1])
    forest = RandomForestClassifier(n_estimators=10, subsample=0.5,
                                    random_state=0)
    forest.train(reversed_iris)
    assert forest.outcomes_ == [2, 1, 0]
    np.testing.assert_array_equal(forest.classes_, [0, 1, 2])

    proba = forest.proba(reversed_iris)
    predict_proba = forest.predict_proba(reversed_iris)
    for j, label in enumerate(forest.classes_):
        np.testing.assert_array_equal(predict_proba[:, j],
                                      proba[label].to_numpy())

    y = reversed_iris.labels
    assert roc_auc_score(y, predict_proba, multi_class="ovr") > 0.9
    assert log_loss(y, predict_proba) < log_loss(y, predict_proba[:, ::-1])
