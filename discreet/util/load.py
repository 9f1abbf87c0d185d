import os
import logging

import numpy as np

from .. import exception

logger = logging.getLogger(__name__)


def load_observations(filename, delimiter=None, dtype=str):
    """Load a table of discrete observations from disk.

    Parameters
    ----------
    filename : file path
        A `.npy` file, or a text file with one observation per line and
        one variable per column.
    delimiter : str, default=None
        Column separator for text files. None splits on whitespace.
    dtype : type, default=str
        Type that text fields are parsed into. With `str`, labels are
        taken verbatim.

    Returns
    -------
    data : np.ndarray, shape=(n_observations, n_features)
    """

    if os.path.splitext(filename)[1] == '.npy':
        data = np.load(filename, allow_pickle=False)
    else:
        data = np.loadtxt(filename, delimiter=delimiter, dtype=dtype,
                          ndmin=2)

    if data.ndim == 1:
        data = data[:, None]

    if data.ndim != 2:
        raise exception.DataInvalid(
            "Expected a 2D table of observations in %s, but got an array "
            "with shape %s." % (filename, data.shape))

    logger.debug("Loaded %s observations of %s features from %s",
                 data.shape[0], data.shape[1], filename)

    return data


def save_array(filename, arr, fmt='%.10g'):
    """Write `arr` as `.npy` or, for any other extension, as text.
    """

    if os.path.splitext(filename)[1] == '.npy':
        np.save(filename, arr)
    else:
        np.savetxt(filename, arr, fmt=fmt)
