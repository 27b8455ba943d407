# -*- coding: utf-8 -*-
"""
Dataset containers and bootstrap resampling primitives.
"""

from .base import Dataset, Labeled, Unlabeled, as_dataset

__all__ = ["Dataset", "Labeled", "Unlabeled", "as_dataset"]
