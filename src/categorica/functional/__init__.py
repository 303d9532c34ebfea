"""Functional primitives for Categorica.

This module provides the functor, natural-transformation and monoid helpers
that operate on the containers in :mod:`categorica.core`. Utilities are
stateless and side-effect-free so they can be composed freely and checked
against their algebraic laws.
"""
