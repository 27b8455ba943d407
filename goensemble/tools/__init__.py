# -*- coding: utf-8 -*-
"""
Validation utilities shared across the `goensemble` package.
"""
