from __future__ import annotations


class BKTreeError(Exception):
    """Base class for errors raised by metric_bktree."""


class InvalidItemError(BKTreeError, ValueError):
    """An item that cannot be stored (e.g. None) was passed to the tree."""


class TraversalStateError(BKTreeError, RuntimeError):
    """Iterator removal was requested without a current item."""


class UnknownMetricError(BKTreeError, KeyError):
    pass


class ConfigError(BKTreeError, ValueError):
    pass
