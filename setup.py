#!/usr/bin/env python

"""
    layoutgrid
    ==========

    layoutgrid places items in grids and sizes grid tracks.

"""

from setuptools import setup

setup()
