# -*- coding: utf-8 -*-
"""
test_datasets.py
"""
import pytest
import numpy as np
import pandas as pd

from goensemble.datasets import Dataset, Labeled, Unlabeled, as_dataset
from goensemble.exceptions import DatasetError


@pytest.fixture
def labeled():
    samples = np.arange(20, dtype=float).reshape(10, 2)
    labels = np.array(['b', 'a', 'b', 'c', 'a', 'b', 'c', 'a', 'b', 'a'])
    return Labeled(samples, labels, feature_names=['x1', 'x2'])

def test_labeled_shape(labeled):
    assert labeled.num_rows == 10
    assert labeled.num_columns == 2
    assert len(labeled) == 10
    assert labeled.feature_names == ['x1', 'x2']

def test_possible_outcomes_first_seen_order(labeled):
    assert labeled.possible_outcomes() == ['b', 'a', 'c']

def test_labels_length_mismatch():
    with pytest.raises(DatasetError):
        Labeled(np.zeros((3, 2)), [0, 1])

def test_one_dimensional_samples_rejected():
    with pytest.raises(DatasetError):
        Unlabeled(np.zeros(5))

def test_empty_samples_rejected():
    with pytest.raises(DatasetError):
        Unlabeled(np.empty((0, 2)))
    with pytest.raises(DatasetError):
        Labeled(np.empty((0, 2)), [])
    with pytest.raises(DatasetError):
        Labeled.from_frame(pd.DataFrame({"f1": [], "target": []}), "target")

def test_feature_names_mismatch():
    with pytest.raises(DatasetError):
        Unlabeled(np.zeros((3, 2)), feature_names=['a'])

def test_column_key_falls_back_to_index():
    ds = Unlabeled(np.zeros((2, 3)))
    assert ds.column_key(2) == 2
    named = Unlabeled(pd.DataFrame({'u': [1, 2], 'v': [3, 4]}))
    assert named.column_key(1) == 'v'

def test_from_frame():
    frame = pd.DataFrame({'f1': [0.1, 0.2, 0.3], 'f2': [1, 2, 3],
                          'target': ['y', 'n', 'y']})
    ds = Labeled.from_frame(frame, 'target')
    assert ds.feature_names == ['f1', 'f2']
    assert ds.num_columns == 2
    assert list(ds.labels) == ['y', 'n', 'y']

def test_from_frame_missing_target():
    frame = pd.DataFrame({'f1': [0.1, 0.2]})
    with pytest.raises(DatasetError):
        Labeled.from_frame(frame, 'target')

def test_random_subset_keeps_rows_and_labels_aligned(labeled):
    subset = labeled.random_subset_with_replacement(25, random_state=0)
    assert isinstance(subset, Labeled)
    assert subset.num_rows == 25
    assert subset.feature_names == ['x1', 'x2']
    # each sample row is unique in the source, so its label is recoverable
    lookup = {tuple(row): label
              for row, label in zip(labeled.samples, labeled.labels)}
    for row, label in zip(subset.samples, subset.labels):
        assert lookup[tuple(row)] == label

def test_random_subset_is_reproducible(labeled):
    a = labeled.random_subset_with_replacement(8, random_state=42)
    b = labeled.random_subset_with_replacement(8, random_state=42)
    np.testing.assert_array_equal(a.samples, b.samples)

def test_unlabeled_subset_stays_unlabeled():
    ds = Unlabeled(np.arange(6).reshape(3, 2))
    subset = ds.random_subset_with_replacement(4, random_state=1)
    assert isinstance(subset, Unlabeled)
    assert subset.num_rows == 4

def test_weighted_subset_follows_weights(labeled):
    weights = np.zeros(10)
    weights[3] = 5.0  # unnormalized on purpose
    subset = labeled.random_weighted_subset_with_replacement(
        12, weights, random_state=0)
    assert subset.num_rows == 12
    assert set(subset.labels) == {'c'}
    assert np.all(subset.samples == labeled.samples[3])

@pytest.mark.parametrize("weights", [
    np.ones(9),
    -np.ones(10),
    np.zeros(10),
    np.r_[np.nan, np.ones(9)],
])
def test_weighted_subset_rejects_bad_weights(labeled, weights):
    with pytest.raises(DatasetError):
        labeled.random_weighted_subset_with_replacement(5, weights)

def test_subset_size_must_be_positive(labeled):
    with pytest.raises(DatasetError):
        labeled.random_subset_with_replacement(0)

def test_as_dataset():
    X = [[0.0, 1.0], [1.0, 0.0]]
    assert isinstance(as_dataset(X), Unlabeled)
    ds = as_dataset(X, [1, 0])
    assert isinstance(ds, Labeled)
    assert as_dataset(ds) is ds
    assert isinstance(ds, Dataset)

def test_as_dataset_rejects_labels_with_dataset(labeled):
    with pytest.raises(DatasetError):
        as_dataset(labeled, labeled.labels)
