"""Custom discreet-only exceptions.
"""


class ImproperlyConfigured(Exception):
    '''The given configuration is incomplete or otherwise not usable.'''
    pass


class DataInvalid(Exception):
    '''
    The data looks structurally invalid (negative counts, arrays of the
    wrong dimensionality, etc).
    '''
    pass


class InvalidMethod(ImproperlyConfigured, ValueError):
    """An entropy estimator was requested that does not exist.
    """
    pass


class LengthMismatch(DataInvalid, ValueError):
    """Two samples that must be paired observation-by-observation have
    different lengths.
    """
    pass


class SuspiciousDataWarning(UserWarning):
    """The data is usable, but is has a structure or type that is
    suspicious, and may cause bad behavior down the road.
    """
    pass
