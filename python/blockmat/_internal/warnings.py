"""Warnings emitted by blockmat.

Partitioning and block multiplication never fail on a slow configuration;
they warn instead. Filter on `BlockmatWarning` to silence all of them.

This module is imported by the matrix core, so it must not import blockmat.
"""


class BlockmatWarning(UserWarning):
    """Base category for every warning blockmat emits."""


class BlockmatPerformanceWarning(BlockmatWarning):
    """A request that works but is needlessly slow, such as 1x1 blocks on a large matrix."""
