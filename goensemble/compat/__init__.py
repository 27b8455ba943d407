# -*- coding: utf-8 -*-
"""
Compatibility layers for third-party libraries.
"""
